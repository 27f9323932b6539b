"""Base ORM model."""

from __future__ import annotations

import enum

from sqlalchemy import orm, types
from typing_extensions import override

from orm_enums import custom_types as t
from orm_enums import utils


class Base(orm.DeclarativeBase):
    """Base ORM model.

    Attributes:
        id_: Primary key identifier, unique
    """

    @orm.declared_attr  # type: ignore[attr-defined]
    @override
    def __tablename__(self) -> str:
        return utils.camel_to_snake(self.__name__)

    id_: t.ORMInt = orm.mapped_column(primary_key=True, autoincrement=True)

    @override
    def __repr__(self) -> str:
        try:
            return f"<{self.__class__.__name__} id={self.id_}>"
        except orm.exc.DetachedInstanceError:
            return f"<{self.__class__.__name__} id=Detached Instance>"


class BaseEnum(enum.Enum):
    """Enum class with a parser."""

    @classmethod
    def _missing_(cls, value: object) -> BaseEnum | None:
        if isinstance(value, str):
            s = value.upper().strip().replace("-", "_").replace(" ", "_")
            if s in cls._member_names_:
                return cls[s]
            return cls._lut().get(s.lower())
        return super()._missing_(value)

    @classmethod
    def _lut(cls) -> t.Mapping[str, BaseEnum]:
        """Look up table, mapping of strings to matching Enums.

        Returns:
            Dictionary {alternate names for enums: Enum}
        """
        return {}

    @property
    def pretty(self) -> str:
        """Prettify enum value."""
        return utils.humanize(self.name)


class SQLEnum(types.TypeDecorator):
    """SQL type for enumeration, stores as integer."""

    impl = types.SmallInteger

    cache_ok = True

    def __init__(self, enum_type: type[enum.Enum], *args, **kwargs) -> None:
        """Initialize SQLEnum.

        Args:
            enum_type: Enum class stored in column
            args: Passed to TypeDecorator
            kwargs: Passed to TypeDecorator
        """
        super().__init__(*args, **kwargs)
        self.enum_type = enum_type

    @override
    def process_bind_param(self, value: enum.Enum | int | None, *_) -> int | None:
        """Receive a bound parameter value to be converted.

        Args:
            value: Python side value to convert

        Returns:
            SQL side representation of value
        """
        if value is None:
            return None
        if isinstance(value, enum.Enum):
            return value.value
        return value

    @override
    def process_result_value(self, value: int | None, *_) -> enum.Enum | None:
        """Receive a result-row column value to be converted.

        Args:
            value: SQL side value to convert

        Returns:
            Python side representation of value
        """
        if value is None:
            return None
        return self.enum_type(value)
