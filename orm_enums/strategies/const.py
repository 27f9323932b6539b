"""Const strategy, enumeration read from class constants."""

from __future__ import annotations

from collections.abc import Hashable
from typing import TYPE_CHECKING

from typing_extensions import override

from orm_enums import exceptions as exc
from orm_enums import utils
from orm_enums.strategies.base import Strategy

if TYPE_CHECKING:
    from orm_enums import custom_types as t


class ConstStrategy(Strategy):
    """Enumeration declared as upper case class constants.

    PRIORITY_LOW = 1 with prefix PRIORITY is the entry {1: "Low"}
    """

    @override
    def normalize(self, config: t.AliasConfig) -> t.AliasConfig:
        config = super().normalize(config)
        config["prefix"] = config["prefix"].upper()
        source = config.get("source") or self._model
        if not isinstance(source, type):
            msg = f"Constant source for {self._alias} must be a class: {source!r}"
            raise exc.EnumConfigError(msg)
        config["source"] = source
        return config

    @override
    def enum(
        self,
        config: t.AliasConfig,
        s: t.Executor | None = None,  # noqa: ARG002
    ) -> t.EnumMap:
        prefix = f"{config['prefix']}_"

        # Walk base classes first so subclasses override but keep position
        constants: dict[str, object] = {}
        for cls in reversed(config["source"].__mro__):
            for name, value in vars(cls).items():
                if not name.startswith(prefix) or not name.isupper():
                    continue
                if callable(value) or isinstance(value, property | classmethod):
                    continue
                constants[name] = value

        result: t.EnumMap = {}
        for name, value in constants.items():
            if not isinstance(value, Hashable):
                msg = f"Constant {name} is not a valid enumeration key: {value!r}"
                raise exc.EnumConfigError(msg)
            result[value] = utils.humanize(name[len(prefix) :])
        return result
