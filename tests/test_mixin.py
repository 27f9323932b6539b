from __future__ import annotations

import pytest
from sqlalchemy import orm

from orm_enums import custom_types as t
from orm_enums import exceptions as exc
from orm_enums.behavior import EnumBehavior
from orm_enums.mixin import EnumMixin
from orm_enums.models import Base, BaseEnum, EnumLookup, SQLEnum


class Status(BaseEnum):
    OPEN = 1
    CLOSED = 2


class Issue(EnumMixin, Base):
    __enums__ = {
        "priority": {"class_name": "const", "error_message": "Unknown priority"},
        "status": {"class_name": "enum", "source": Status},
        "category": {"class_name": "lookup", "allow_none": True},
    }

    PRIORITY_LOW = 1
    PRIORITY_HIGH = 2

    priority: t.ORMInt
    status: orm.Mapped[Status] = orm.mapped_column(SQLEnum(Status))
    category: t.ORMStrOpt


class Vehicle(EnumMixin, Base):
    __enums__ = {"wheels": {"class_name": "const"}}

    WHEEL_TWO = 2
    WHEEL_FOUR = 4

    wheels: t.ORMInt
    kind: t.ORMStr

    __mapper_args__ = {  # noqa: RUF012
        "polymorphic_on": "kind",
        "polymorphic_identity": "vehicle",
    }


class Truck(Vehicle):
    # Single table inheritance
    __tablename__ = None  # type: ignore[assignment]

    __mapper_args__ = {"polymorphic_identity": "truck"}  # noqa: RUF012


class Task(EnumMixin, Base):
    __enums__ = {"levels": {"class_name": "lookup"}}  # noqa: RUF012

    levels: t.ORMInt


class Plain(EnumMixin, Base):
    name: t.ORMStrOpt


@pytest.fixture
def categories(session: orm.Session) -> list[EnumLookup]:
    lookups = EnumLookup.add_all(session, "category", {"bug": "Bug", "docs": "Docs"})
    session.commit()
    return lookups


def test_behavior() -> None:
    behavior = Issue.enum_behavior()
    assert isinstance(behavior, EnumBehavior)
    assert behavior.model is Issue
    assert behavior.aliases == ("priority", "status", "category")
    # Built once per model
    assert Issue.enum_behavior() is behavior

    rules = Issue.enum_rules()
    assert Issue.enum_rules() is rules
    assert [rule.name for rule in rules] == [
        "is_valid_priority",
        "is_valid_status",
        "is_valid_category",
    ]


def test_enum() -> None:
    assert Issue.enum("priority") == {1: "Low", 2: "High"}
    assert Issue.enum("status") == {1: "Open", 2: "Closed"}

    with pytest.raises(exc.UnknownEnumError, match="fake on Issue"):
        Issue.enum("fake")

    with pytest.raises(exc.UnboundExecutionError):
        Issue.enum("category")


@pytest.mark.usefixtures("categories")
def test_enum_lookup(session: orm.Session) -> None:
    assert Issue.enum("category", session) == {"bug": "Bug", "docs": "Docs"}


def test_insert_valid(session: orm.Session) -> None:
    issue = Issue(priority=1, status=Status.OPEN)
    session.add(issue)
    session.commit()
    assert issue.id_ is not None
    assert issue.category is None


def test_insert_invalid(session: orm.Session) -> None:
    issue = Issue(priority=3, status=Status.OPEN)
    session.add(issue)
    with pytest.raises(exc.RuleViolationError) as excinfo:
        session.commit()
    session.rollback()

    assert excinfo.value.entity is issue
    assert excinfo.value.errors == {"priority": ["Unknown priority"]}
    assert session.query(Issue).count() == 0


def test_update_invalid(session: orm.Session) -> None:
    issue = Issue(priority=2, status=Status.CLOSED)
    session.add(issue)
    session.commit()

    issue.priority = 5
    with pytest.raises(exc.RuleViolationError):
        session.commit()
    session.rollback()

    assert issue.priority == 2


@pytest.mark.usefixtures("categories")
def test_insert_lookup(session: orm.Session) -> None:
    issue = Issue(priority=1, status=Status.OPEN, category="bug")
    session.add(issue)
    session.commit()

    issue.category = "question"
    with pytest.raises(exc.RuleViolationError) as excinfo:
        session.commit()
    session.rollback()
    assert excinfo.value.errors == {"category": ["The provided value is invalid"]}


def test_insert_lookup_integer(session: orm.Session) -> None:
    EnumLookup.add_all(session, "level", {1: "Low", 2: "High"})
    session.commit()
    assert Task.enum("levels", session) == {"1": "Low", "2": "High"}

    task = Task(levels=1)
    session.add(task)
    session.commit()
    assert task.id_ is not None

    task.levels = 3
    with pytest.raises(exc.RuleViolationError) as excinfo:
        session.commit()
    session.rollback()
    assert excinfo.value.errors == {"levels": ["The provided value is invalid"]}
    assert task.levels == 1


@pytest.mark.usefixtures("categories")
def test_enum_errors(session: orm.Session) -> None:
    issue = Issue(priority=3, status=Status.OPEN)
    assert issue.enum_errors() == {"priority": ["Unknown priority"]}

    issue.priority = 1
    assert issue.enum_errors() == {}

    # Transient needs a session for lookups
    issue.category = "docs"
    with pytest.raises(exc.UnboundExecutionError):
        issue.enum_errors()
    assert issue.enum_errors(session) == {}

    # Pending uses its own session
    session.add(issue)
    issue.category = "question"
    assert issue.enum_errors() == {"category": ["The provided value is invalid"]}
    session.rollback()


def test_inheritance(session: orm.Session) -> None:
    assert Truck.enum_behavior() is Vehicle.enum_behavior()
    assert Truck.enum("wheels") == {2: "Two", 4: "Four"}

    session.add_all([Vehicle(wheels=2), Truck(wheels=4)])
    session.commit()

    session.add(Truck(wheels=3))
    with pytest.raises(exc.RuleViolationError, match="Truck failed validation"):
        session.commit()
    session.rollback()

    assert session.query(Vehicle).count() == 2


def test_no_enums(session: orm.Session) -> None:
    with pytest.raises(exc.EnumConfigError, match="Plain does not define"):
        Plain.enum_behavior()
    with pytest.raises(exc.UnknownEnumError):
        Plain.enum("priority")
    assert len(Plain.enum_rules()) == 0

    plain = Plain(name="plain")
    assert plain.enum_errors() == {}
    session.add(plain)
    session.commit()


def test_config_error_at_definition() -> None:
    with pytest.raises(exc.UnknownStrategyError):

        class Bad(EnumMixin):
            __enums__ = {"priority": {"class_name": "fake"}}  # noqa: RUF012

    with pytest.raises(exc.EnumConfigError):

        class AlsoBad(EnumMixin):
            __enums__ = {"status": {"class_name": "enum"}}  # noqa: RUF012


def test_unmapped_model() -> None:
    class Constants(EnumMixin):
        __enums__ = ["level"]  # noqa: RUF012
        __enum_default_strategy__ = "const"

        LEVEL_ONE = 1

    assert Constants.enum("level") == {1: "One"}
    assert [rule.name for rule in Constants.enum_rules()] == ["is_valid_level"]
