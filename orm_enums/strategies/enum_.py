"""Enum strategy, enumeration read from a native enum.Enum."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from typing_extensions import override

from orm_enums import exceptions as exc
from orm_enums import utils
from orm_enums.strategies.base import Strategy

if TYPE_CHECKING:
    from orm_enums import custom_types as t


class EnumStrategy(Strategy):
    """Enumeration declared as an enum.Enum subclass.

    Keys are member values, labels are member.pretty when defined
    """

    @override
    def normalize(self, config: t.AliasConfig) -> t.AliasConfig:
        config = super().normalize(config)
        source = config.get("source")
        if not isinstance(source, type) or not issubclass(source, enum.Enum):
            msg = f"Enum source for {self._alias} must be an Enum class: {source!r}"
            raise exc.EnumConfigError(msg)
        return config

    @override
    def enum(
        self,
        config: t.AliasConfig,
        s: t.Executor | None = None,  # noqa: ARG002
    ) -> t.EnumMap:
        source: type[enum.Enum] = config["source"]
        return {
            member.value: getattr(member, "pretty", None) or utils.humanize(member.name)
            for member in source
        }
