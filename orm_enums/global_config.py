"""Global configuration shared by every model."""

from __future__ import annotations

import configparser
from pathlib import Path
from typing import overload

from orm_enums.models.base import BaseEnum

_PATH = Path("~/.orm_enums/config.ini").expanduser()

_SECTION = "orm_enums"


class ConfigKey(BaseEnum):
    """Global configuration keys."""

    DEFAULT_STRATEGY = "default-strategy"
    ERROR_MESSAGE = "error-message"


_DEFAULTS: dict[ConfigKey, str] = {
    ConfigKey.DEFAULT_STRATEGY: "lookup",
    ConfigKey.ERROR_MESSAGE: "The provided value is invalid",
}

_CACHE: dict[ConfigKey, str] = {}


@overload
def get() -> dict[ConfigKey, str]: ...


@overload
def get(key: ConfigKey | str) -> str: ...


def get(key: ConfigKey | str | None = None) -> dict[ConfigKey, str] | str:
    """Get global configuration.

    Reads the config file once, subsequent calls use the cache

    Args:
        key: Key to get, None for all keys

    Returns:
        Dictionary of all configuration or value of key
    """
    if not _CACHE:
        config = configparser.ConfigParser()
        config.read(_PATH, encoding="utf-8")
        section = config[_SECTION] if config.has_section(_SECTION) else {}
        for k, default in _DEFAULTS.items():
            _CACHE[k] = section.get(k.value, default)

    if key is None:
        return dict(_CACHE)
    return _CACHE[ConfigKey(key)]
