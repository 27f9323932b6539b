"""Named enumerations for SQLAlchemy models.

Attach enumerations read from a lookup table, class constants, or native enums
to a model and validate fields against them on save.
"""

from __future__ import annotations

from orm_enums import exceptions
from orm_enums.behavior import EnumBehavior
from orm_enums.mixin import EnumMixin
from orm_enums.models import Base, BaseEnum, EnumLookup, metadata_create_all, SQLEnum
from orm_enums.rules import Rule, RulesChecker
from orm_enums.strategies import (
    CLASS_MAP,
    ConstStrategy,
    EnumStrategy,
    get_strategy_class,
    LookupStrategy,
    Strategy,
)
from orm_enums.version import __version__

__all__ = [
    "Base",
    "BaseEnum",
    "CLASS_MAP",
    "ConstStrategy",
    "EnumBehavior",
    "EnumLookup",
    "EnumMixin",
    "EnumStrategy",
    "LookupStrategy",
    "Rule",
    "RulesChecker",
    "SQLEnum",
    "Strategy",
    "__version__",
    "exceptions",
    "get_strategy_class",
    "metadata_create_all",
]
