"""Declarative mixin attaching enumerations to a model."""

from __future__ import annotations

from typing import ClassVar, TYPE_CHECKING

import sqlalchemy
from sqlalchemy import event

from orm_enums import exceptions as exc
from orm_enums.behavior import EnumBehavior
from orm_enums.rules import RulesChecker

if TYPE_CHECKING:
    from sqlalchemy import orm

    from orm_enums import custom_types as t


class EnumMixin:
    """Declarative mixin attaching enumerations to a model.

    Place before the declarative base:
        class Ticket(EnumMixin, Base):
            __enums__ = {"priority": {"class_name": "const"}}

            PRIORITY_LOW = 1
            PRIORITY_HIGH = 2

            priority: ORMInt

    Every alias validates its field before insert and update.
    A subclass defining __enums__ replaces the enumerations of its parent.

    Attributes:
        __enums__: Enumerations configuration, see EnumBehavior
        __enum_default_strategy__: Strategy used when an alias omits class_name
    """

    __enums__: ClassVar[t.RawConfigs]
    __enum_default_strategy__: ClassVar[str | None] = None

    __enum_behavior__: ClassVar[EnumBehavior | None] = None
    __enum_rules__: ClassVar[RulesChecker | None] = None

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)

        if "__enums__" in cls.__dict__:
            behavior = EnumBehavior(
                cls,
                cls.__enums__,
                default_strategy=cls.__enum_default_strategy__,
            )
            cls.__enum_behavior__ = behavior
            cls.__enum_rules__ = behavior.build_rules(RulesChecker())

        rules = cls.__enum_rules__
        if rules is None or sqlalchemy.inspect(cls, raiseerr=False) is None:
            # Not mapped or nothing to check
            return

        def check_enum_rules(
            mapper: orm.Mapper,  # noqa: ARG001
            connection: sqlalchemy.Connection,
            target: EnumMixin,
        ) -> None:
            """Handle event before insert or update of a model.

            Args:
                mapper: Unused
                connection: Connection flushing the model
                target: Model being flushed

            Raises:
                RuleViolationError if any enumeration field is invalid
            """
            rules.check_or_raise(target, connection)

        event.listen(cls, "before_insert", check_enum_rules)
        event.listen(cls, "before_update", check_enum_rules)

    @classmethod
    def enum_behavior(cls) -> EnumBehavior:
        """Get the EnumBehavior of model.

        Returns:
            EnumBehavior

        Raises:
            EnumConfigError if model has no enumerations
        """
        if cls.__enum_behavior__ is None:
            msg = f"{cls.__name__} does not define __enums__"
            raise exc.EnumConfigError(msg)
        return cls.__enum_behavior__

    @classmethod
    def enum_rules(cls) -> RulesChecker:
        """Get the RulesChecker of model.

        Returns:
            RulesChecker with a rule for every alias
        """
        if cls.__enum_rules__ is None:
            return RulesChecker()
        return cls.__enum_rules__

    @classmethod
    def enum(cls, alias: str, s: t.Executor | None = None) -> t.EnumMap:
        """Get the enumeration of an alias.

        Args:
            alias: Enumeration alias
            s: SQL session or connection, required for lookup strategies

        Returns:
            Dictionary {key: label}

        Raises:
            UnknownEnumError if alias is not configured
        """
        if cls.__enum_behavior__ is None:
            raise exc.UnknownEnumError(alias, cls)
        return cls.__enum_behavior__.enum(alias, s)

    def enum_errors(self, s: t.Executor | None = None) -> t.DictStrings:
        """Check enumeration fields without flushing.

        Args:
            s: SQL session or connection, None will use the session of self

        Returns:
            Dictionary {error field: [messages]}, empty if valid
        """
        return self.enum_rules().check(self, s)
