"""Miscellaneous functions for naming conventions."""

from __future__ import annotations

import re

_REGEX_CC_SC_0 = re.compile(r"(.)([A-Z][a-z]+)")
_REGEX_CC_SC_1 = re.compile(r"([a-z0-9])([A-Z])")

_REGEX_NON_WORD = re.compile(r"[^a-zA-Z0-9]+")

# Suffixes that are already singular
_SINGULAR_ENDINGS = ("ss", "us", "is")
_SIBILANT_ENDINGS = ("sses", "uses", "shes", "ches", "xes", "zes")


def camel_to_snake(s: str) -> str:
    """Transform CamelCase to snake_case."""
    s = _REGEX_CC_SC_0.sub(r"\1_\2", s)  # _ at the start of Words
    return _REGEX_CC_SC_1.sub(r"\1_\2", s).lower()  # _ at then end of Words


def snake_to_camel(s: str) -> str:
    """Transform snake_case (or any separated words) to CamelCase."""
    return "".join(word.capitalize() for word in _REGEX_NON_WORD.split(s) if word)


def singularize(word: str) -> str:
    """Get the singular form of an English plural.

    Only handles regular plurals, irregular words are returned unchanged

    Args:
        word: Word to singularize

    Returns:
        Singular form of word
    """
    lower = word.lower()
    if lower.endswith("ies") and len(word) > len("ies"):
        return word[:-3] + ("Y" if word[-1].isupper() else "y")
    if lower.endswith(_SIBILANT_ENDINGS):
        return word[:-2]
    if lower.endswith("s") and not lower.endswith(_SINGULAR_ENDINGS):
        return word[:-1]
    return word


def humanize(s: str) -> str:
    """Transform an identifier into a label.

    VERY_HIGH => Very High
    veryHigh => Very High

    Args:
        s: Identifier to transform

    Returns:
        Human readable label
    """
    words = camel_to_snake(s).split("_")
    return " ".join(word.capitalize() for word in words if word)


def generate_prefix(alias: str) -> str:
    """Generate the default key prefix for an alias.

    Args:
        alias: Enumeration alias

    Returns:
        Upper case, underscored, singular form of alias
    """
    words = camel_to_snake(alias).split("_")
    words[-1] = singularize(words[-1])
    return "_".join(words).upper()
