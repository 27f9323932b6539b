"""Base strategy interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from orm_enums import global_config, utils

if TYPE_CHECKING:
    from orm_enums import custom_types as t


class Strategy(ABC):
    """Strategy that produces an enumeration for one alias."""

    def __init__(self, alias: str, model: type) -> None:
        """Initialize Strategy.

        Args:
            alias: Enumeration alias this strategy serves
            model: Model class the enumeration is attached to
        """
        super().__init__()
        self._alias = alias
        self._model = model

    @property
    def alias(self) -> str:
        """Enumeration alias this strategy serves."""
        return self._alias

    @property
    def model(self) -> type:
        """Model class the enumeration is attached to."""
        return self._model

    def normalize(self, config: t.AliasConfig) -> t.AliasConfig:
        """Fill in defaults of an alias configuration.

        Args:
            config: Alias configuration, not modified

        Returns:
            Normalized copy of config
        """
        config = dict(config)
        if not config.get("prefix"):
            config["prefix"] = utils.generate_prefix(self._alias)
        if not config.get("field"):
            config["field"] = utils.camel_to_snake(self._alias)
        if not config.get("error_message"):
            config["error_message"] = global_config.get(
                global_config.ConfigKey.ERROR_MESSAGE,
            )
        config["allow_none"] = bool(config.get("allow_none", False))
        return config

    def key(self, value: object) -> object:
        """Convert a field value to the key type of the enumeration.

        Args:
            value: Hashable field value

        Returns:
            Key to look up in the enumeration
        """
        return value

    @abstractmethod
    def enum(
        self,
        config: t.AliasConfig,
        s: t.Executor | None = None,
    ) -> t.EnumMap:  # pragma: no cover
        """Get enumeration.

        Args:
            config: Normalized alias configuration
            s: SQL session or connection for strategies that read the database

        Returns:
            Dictionary {key: label}
        """
        msg = f"Method not implemented for {self.__class__}"
        raise NotImplementedError(msg)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} alias={self._alias}>"
