"""Defines for custom types.

Adds custom types to typing
"""
from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from typing import Any, Union

import sqlalchemy
from sqlalchemy import orm

_ = Iterator, Mapping, Sequence

Strings = list[str]

DictStrings = dict[str, Strings]

# Enumeration, mapping of stored key to display label
EnumMap = dict[Any, str]

# Normalized configuration of one alias
AliasConfig = dict[str, Any]
AliasConfigs = dict[str, AliasConfig]

# Raw configuration as written on a model
RawConfigs = Union[Mapping[str, Union[str, AliasConfig, None]], Sequence[str]]

# Anything that can execute a SELECT
Executor = Union[orm.Session, sqlalchemy.Connection]

Predicate = Callable[..., bool]

ORMInt = orm.Mapped[int]
ORMIntOpt = orm.Mapped[int | None]
ORMStr = orm.Mapped[str]
ORMStrOpt = orm.Mapped[str | None]
