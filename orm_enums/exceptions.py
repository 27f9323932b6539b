"""Derived exceptions for orm_enums."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError, UnboundExecutionError

if TYPE_CHECKING:
    from orm_enums import custom_types as t

__all__ = [
    "IntegrityError",
    "UnboundExecutionError",
    "EnumConfigError",
    "UnknownStrategyError",
    "UnknownEnumError",
    "RuleViolationError",
]


class EnumConfigError(Exception):
    """Error when an enumeration is configured incorrectly."""


class UnknownStrategyError(Exception):
    """Error when a strategy identifier does not match any strategy."""

    def __init__(self, strategy: object) -> None:
        """Initialize UnknownStrategyError.

        Args:
            strategy: Identifier that failed to resolve
        """
        msg = f"Class not found for strategy ({strategy})"
        super().__init__(msg)


class UnknownEnumError(Exception):
    """Error when an enumeration alias was never configured."""

    def __init__(self, alias: str, model: type | None = None) -> None:
        """Initialize UnknownEnumError.

        Args:
            alias: Alias that was looked up
            model: Model class the alias was looked up on
        """
        if model is None:
            msg = f"Unknown enumeration {alias}"
        else:
            msg = f"Unknown enumeration {alias} on {model.__name__}"
        super().__init__(msg)
        self.alias = alias


class RuleViolationError(Exception):
    """Error when an entity fails its enumeration rules."""

    def __init__(self, entity: object, errors: t.DictStrings) -> None:
        """Initialize RuleViolationError.

        Args:
            entity: Entity that failed
            errors: Dictionary {error field: [messages]}
        """
        details = "; ".join(
            f"{field}: {', '.join(messages)}" for field, messages in errors.items()
        )
        msg = f"{entity.__class__.__name__} failed validation: {details}"
        super().__init__(msg)
        self.entity = entity
        self.errors = errors
