"""Lookup strategy, enumeration read from the EnumLookup table."""

from __future__ import annotations

from typing import TYPE_CHECKING

import sqlalchemy
from sqlalchemy import orm
from typing_extensions import override

from orm_enums import exceptions as exc
from orm_enums.models import EnumLookup
from orm_enums.strategies.base import Strategy

if TYPE_CHECKING:
    from orm_enums import custom_types as t


class LookupStrategy(Strategy):
    """Enumeration stored as EnumLookup rows sharing a prefix."""

    @override
    def normalize(self, config: t.AliasConfig) -> t.AliasConfig:
        config = super().normalize(config)
        config["prefix"] = config["prefix"].upper()
        return config

    @override
    def key(self, value: object) -> object:
        # Lookup values are stored as text
        return str(value)

    @override
    def enum(
        self,
        config: t.AliasConfig,
        s: t.Executor | None = None,
    ) -> t.EnumMap:
        if s is None:
            msg = f"Lookup enumeration {self._alias} requires a session"
            raise exc.UnboundExecutionError(msg)
        query = (
            sqlalchemy.select(EnumLookup.value, EnumLookup.label)
            .where(EnumLookup.prefix == config["prefix"])
            .order_by(
                EnumLookup.position.is_(None),
                EnumLookup.position,
                EnumLookup.value,
            )
        )
        if isinstance(s, orm.Session):
            # Reading must not flush the entity being validated
            with s.no_autoflush:
                return dict(s.execute(query).all())
        return dict(s.execute(query).all())
