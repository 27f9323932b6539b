"""Enumeration lookup model for storing a table-backed enumeration."""

from __future__ import annotations

import sqlalchemy
from sqlalchemy import orm

from orm_enums import custom_types as t
from orm_enums.models.base import Base


class EnumLookup(Base):
    """Enumeration lookup model for storing one entry of an enumeration.

    Entries sharing a prefix make up one enumeration.

    Attributes:
        prefix: Key prefix of the enumeration this entry belongs to
        value: Key persisted into a model's field
        label: Display label
        position: Sort position within the enumeration, None sorts by value
    """

    prefix: t.ORMStr = orm.mapped_column(index=True)
    value: t.ORMStr
    label: t.ORMStr
    position: t.ORMIntOpt

    __table_args__ = (sqlalchemy.UniqueConstraint("prefix", "value"),)

    @orm.validates("prefix")
    def validate_prefix(self, _: str, field: str) -> str:
        """Validates prefix is stored upper case.

        Args:
            field: Updated value

        Returns:
            field in upper case
        """
        return field.strip().upper()

    @classmethod
    def add_all(
        cls,
        s: orm.Session,
        prefix: str,
        entries: t.Mapping[str, str],
    ) -> list[EnumLookup]:
        """Add every entry of an enumeration.

        Positions follow the order of entries

        Args:
            s: SQL session to use
            prefix: Key prefix of the enumeration
            entries: Dictionary {value: label}

        Returns:
            List of created EnumLookups
        """
        lookups = [
            cls(prefix=prefix, value=str(value), label=label, position=i)
            for i, (value, label) in enumerate(entries.items())
        ]
        s.add_all(lookups)
        return lookups
