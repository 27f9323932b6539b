"""Enumeration strategies."""

from __future__ import annotations

from orm_enums import exceptions as exc
from orm_enums.strategies.base import Strategy
from orm_enums.strategies.const import ConstStrategy
from orm_enums.strategies.enum_ import EnumStrategy
from orm_enums.strategies.lookup import LookupStrategy

__all__ = [
    "CLASS_MAP",
    "ConstStrategy",
    "EnumStrategy",
    "LookupStrategy",
    "Strategy",
    "get_strategy_class",
]

CLASS_MAP: dict[str, type[Strategy]] = {
    "lookup": LookupStrategy,
    "const": ConstStrategy,
    "enum": EnumStrategy,
}


def get_strategy_class(name: str) -> type[Strategy]:
    """Get a strategy class from its short name.

    Args:
        name: Short name of strategy, case insensitive

    Returns:
        Strategy class

    Raises:
        UnknownStrategyError if name does not match any strategy
    """
    try:
        return CLASS_MAP[name.lower().strip()]
    except KeyError as e:
        raise exc.UnknownStrategyError(name) from e
