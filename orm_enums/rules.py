"""Rules checker for validating entities before they are saved."""

from __future__ import annotations

import logging
from typing import NamedTuple, TYPE_CHECKING

from orm_enums import exceptions as exc

if TYPE_CHECKING:
    from orm_enums import custom_types as t

logger = logging.getLogger(__name__)


class Rule(NamedTuple):
    """Named predicate and where to report its failure.

    Attributes:
        name: Unique name of rule
        predicate: Callable(entity, s) returning True when entity passes
        error_field: Field the error is reported on
        message: Error message when entity fails
    """

    name: str
    predicate: t.Predicate
    error_field: str
    message: str


class RulesChecker:
    """Ordered collection of rules to check an entity against."""

    def __init__(self) -> None:
        """Initialize RulesChecker."""
        self._rules: dict[str, Rule] = {}

    def add(
        self,
        predicate: t.Predicate,
        name: str,
        *,
        error_field: str,
        message: str,
    ) -> Rule:
        """Add a rule.

        Args:
            predicate: Callable(entity, s) returning True when entity passes
            name: Unique name of rule
            error_field: Field the error is reported on
            message: Error message when entity fails

        Returns:
            Added Rule

        Raises:
            EnumConfigError if name is already in use
        """
        if name in self._rules:
            msg = f"Rule {name} is already defined"
            raise exc.EnumConfigError(msg)
        rule = Rule(name, predicate, error_field, message)
        self._rules[name] = rule
        logger.debug("Added rule %s on %s", name, error_field)
        return rule

    def __contains__(self, name: str) -> bool:
        return name in self._rules

    def __getitem__(self, name: str) -> Rule:
        return self._rules[name]

    def __iter__(self) -> t.Iterator[Rule]:
        return iter(self._rules.values())

    def __len__(self) -> int:
        return len(self._rules)

    def check(
        self,
        entity: object,
        s: t.Executor | None = None,
    ) -> t.DictStrings:
        """Check an entity against every rule.

        Args:
            entity: Entity to check
            s: SQL session or connection passed to each predicate

        Returns:
            Dictionary {error field: [messages]} of failed rules, empty if passed
        """
        errors: t.DictStrings = {}
        for rule in self._rules.values():
            if not rule.predicate(entity, s):
                errors.setdefault(rule.error_field, []).append(rule.message)
        return errors

    def check_or_raise(self, entity: object, s: t.Executor | None = None) -> None:
        """Check an entity against every rule, raising on failure.

        Args:
            entity: Entity to check
            s: SQL session or connection passed to each predicate

        Raises:
            RuleViolationError if any rule fails
        """
        errors = self.check(entity, s)
        if errors:
            raise exc.RuleViolationError(entity, errors)
