"""Database models."""

from __future__ import annotations

from typing import TYPE_CHECKING

from orm_enums.models.base import Base, BaseEnum, SQLEnum
from orm_enums.models.lookup import EnumLookup

if TYPE_CHECKING:
    from sqlalchemy import orm

__all__ = [
    "Base",
    "BaseEnum",
    "EnumLookup",
    "SQLEnum",
    "metadata_create_all",
]

_MODELS: list[type[Base]] = [
    EnumLookup,
]


def metadata_create_all(s: orm.Session) -> None:
    """Create all tables for orm_enums models.

    Creates tables then commits

    Args:
        s: Session to create tables for
    """
    Base.metadata.create_all(s.get_bind(), [m.__table__ for m in _MODELS])  # type: ignore[attr-defined]
    s.commit()
