"""Enumeration behavior attaching named enumerations to a model."""

from __future__ import annotations

import enum
import logging
from collections.abc import Hashable, Mapping
from typing import TYPE_CHECKING

import sqlalchemy

from orm_enums import exceptions as exc
from orm_enums import global_config, strategies, utils
from orm_enums.strategies import Strategy

if TYPE_CHECKING:
    from orm_enums import custom_types as t
    from orm_enums.rules import RulesChecker

logger = logging.getLogger(__name__)


class EnumBehavior:
    """Enumerations of one model class.

    Each alias names an enumeration produced by a strategy. Strategies:
        lookup: EnumLookup rows sharing a prefix
        const: Upper case class constants sharing a prefix
        enum: Members of an enum.Enum

    Configuration is a mapping {alias: config} where config has:
        class_name: Strategy name, class, or instance, default strategy if None
        prefix: Key prefix, default to the upper cased singular alias
        field: Model attribute persisting the key, default to the underscored alias
        error_message: Message when validation fails
        source: Class holding constants or the enum.Enum
        allow_none: True will pass validation when field is None

    Example:
        {
            "priority": {"class_name": "const", "prefix": "PRIORITY"},
            "status": {"class_name": "enum", "source": Status},
            "colors": "COLOR",
        }
    """

    def __init__(
        self,
        model: type,
        config: t.RawConfigs | None = None,
        *,
        default_strategy: str | None = None,
    ) -> None:
        """Initialize EnumBehavior.

        Normalizes configuration and resolves every strategy

        Args:
            model: Model class the enumerations are attached to
            config: Enumerations configuration, see class docstring
            default_strategy: Strategy used when an alias omits class_name,
                None will use global config

        Raises:
            EnumConfigError if configuration is invalid
            UnknownStrategyError if a strategy does not exist
        """
        self._model = model
        self._default_strategy = default_strategy or global_config.get(
            global_config.ConfigKey.DEFAULT_STRATEGY,
        )

        # Dictionary {alias: strategy}, one instance per alias
        self._strategies: dict[str, Strategy] = {}
        self._config: t.AliasConfigs = {}
        # Dictionary {rule name: predicate}
        self._validators: dict[str, t.Predicate] = {}

        self._normalize_config(config or {})
        for alias in self._config:
            self._validators[self.rule_name(alias)] = self._make_validator(alias)

    @property
    def model(self) -> type:
        """Model class the enumerations are attached to."""
        return self._model

    @property
    def aliases(self) -> tuple[str, ...]:
        """Configured aliases in order."""
        return tuple(self._config)

    @property
    def validators(self) -> Mapping[str, t.Predicate]:
        """Validation predicates, dict{rule name: predicate}."""
        return dict(self._validators)

    @staticmethod
    def rule_name(alias: str) -> str:
        """Get name of validation rule for an alias.

        Args:
            alias: Enumeration alias

        Returns:
            is_valid_{alias in snake_case}
        """
        return f"is_valid_{utils.camel_to_snake(alias)}"

    def strategy(self, alias: str, class_name: str | type | Strategy) -> Strategy:
        """Get the strategy of an alias, creating it on first use.

        Args:
            alias: Enumeration alias
            class_name: Strategy name from the class map, Strategy subclass, or
                Strategy instance; ignored once alias has a strategy

        Returns:
            Strategy for alias

        Raises:
            UnknownStrategyError if class_name does not resolve to a Strategy
            EnumConfigError if class_name is a Strategy of another alias
        """
        strategy = self._strategies.get(alias)
        if strategy is not None:
            return strategy

        if isinstance(class_name, Strategy):
            if class_name.alias != alias:
                msg = f"Strategy of {class_name.alias} cannot serve {alias}"
                raise exc.EnumConfigError(msg)
            strategy = class_name
        elif isinstance(class_name, type) and issubclass(class_name, Strategy):
            strategy = class_name(alias, self._model)
        elif isinstance(class_name, str):
            strategy = strategies.get_strategy_class(class_name)(alias, self._model)
        else:
            raise exc.UnknownStrategyError(class_name)

        self._strategies[alias] = strategy
        logger.debug(
            "Resolved %s.%s to %s",
            self._model.__name__,
            alias,
            strategy.__class__.__name__,
        )
        return strategy

    def _normalize_config(self, raw: t.RawConfigs) -> None:
        """Normalize configuration and initialize the strategies.

        Args:
            raw: Enumerations configuration

        Raises:
            EnumConfigError if configuration is invalid
        """
        if isinstance(raw, str):
            msg = f"Enumerations of {self._model.__name__} must be a collection: {raw}"
            raise exc.EnumConfigError(msg)

        if isinstance(raw, Mapping):
            items = list(raw.items())
        else:
            items = [(alias, None) for alias in raw]

        for alias, config in items:
            if not isinstance(alias, str) or not alias:
                msg = f"Enumeration alias must be a non-empty string: {alias!r}"
                raise exc.EnumConfigError(msg)
            if alias in self._config:
                logger.warning(
                    "Enumeration %s of %s is defined more than once",
                    alias,
                    self._model.__name__,
                )
                continue

            if config is None:
                config = {}
            elif isinstance(config, str):
                config = {"prefix": config.upper()}
            elif isinstance(config, Mapping):
                config = dict(config)
            else:
                msg = f"Configuration of enumeration {alias} is invalid: {config!r}"
                raise exc.EnumConfigError(msg)

            if not config.get("class_name"):
                config["class_name"] = self._default_strategy

            strategy = self.strategy(alias, config["class_name"])
            self._config[alias] = strategy.normalize(config)

    def config(self, alias: str | None = None) -> t.AliasConfig | t.AliasConfigs:
        """Get normalized configuration.

        Args:
            alias: Enumeration alias, None for every alias

        Returns:
            Copy of config for alias or dict{alias: config}

        Raises:
            UnknownEnumError if alias is not configured
        """
        if alias is None:
            return {k: dict(v) for k, v in self._config.items()}
        config = self._config.get(alias)
        if config is None:
            raise exc.UnknownEnumError(alias, self._model)
        return dict(config)

    def enum(self, alias: str, s: t.Executor | None = None) -> t.EnumMap:
        """Get the enumeration of an alias.

        Args:
            alias: Enumeration alias
            s: SQL session or connection, required for lookup strategies

        Returns:
            Dictionary {key: label}

        Raises:
            UnknownEnumError if alias is not configured
        """
        config = self._config.get(alias)
        if config is None:
            raise exc.UnknownEnumError(alias, self._model)
        return self.strategy(alias, config["class_name"]).enum(config, s)

    def _make_validator(self, alias: str) -> t.Predicate:
        """Create the validation predicate of an alias.

        Args:
            alias: Enumeration alias

        Returns:
            Callable(entity, s=None) returning True if the field is a valid key
        """
        config = self._config[alias]
        field: str = config["field"]
        allow_none: bool = config["allow_none"]

        def is_valid(entity: object, s: t.Executor | None = None) -> bool:
            value = getattr(entity, field, None)
            if value is None:
                return allow_none
            if isinstance(value, enum.Enum):
                value = value.value
            if not isinstance(value, Hashable):
                return False
            if s is None:
                state = sqlalchemy.inspect(entity, raiseerr=False)
                s = None if state is None else state.session
            strategy = self.strategy(alias, config["class_name"])
            return strategy.key(value) in self.enum(alias, s)

        is_valid.__name__ = self.rule_name(alias)
        return is_valid

    def validator(self, name: str) -> t.Predicate:
        """Get a validation predicate by rule name.

        Args:
            name: Rule name, see rule_name

        Returns:
            Callable(entity, s=None) returning True if the field is a valid key

        Raises:
            UnknownEnumError if no alias matches name
        """
        predicate = self._validators.get(name)
        if predicate is None:
            raise exc.UnknownEnumError(name, self._model)
        return predicate

    def build_rules(self, rules: RulesChecker) -> RulesChecker:
        """Add a validation rule for every alias.

        Args:
            rules: RulesChecker to add to

        Returns:
            rules
        """
        for alias, config in self._config.items():
            name = self.rule_name(alias)
            rules.add(
                self._validators[name],
                name,
                error_field=config["field"],
                message=config["error_message"],
            )
        return rules
