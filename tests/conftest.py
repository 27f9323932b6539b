from __future__ import annotations

import random
import string
from typing import TYPE_CHECKING

import pytest
import sqlalchemy
from sqlalchemy import orm, pool

from orm_enums import global_config, models

if TYPE_CHECKING:
    from collections.abc import Generator
    from pathlib import Path


class RandomString:

    @classmethod
    def __call__(cls, length: int = 20) -> str:
        return "".join(random.choice(string.ascii_letters) for _ in range(length))


@pytest.fixture(scope="session")
def rand_str_generator() -> RandomString:
    """Returns a random string generator.

    Returns:
        RandomString
    """
    return RandomString()


@pytest.fixture
def rand_str(rand_str_generator: RandomString) -> str:
    """Returns a random string.

    Returns:
        Random string with 20 characters
    """
    return rand_str_generator()


@pytest.fixture
def session(tmp_path: Path) -> Generator[orm.Session]:
    """Create SQL session with every table created.

    Returns:
        Session generator
    """
    # NullPool so timing isn't an issue
    engine = sqlalchemy.create_engine(
        f"sqlite:///{tmp_path / 'enums.db'}",
        poolclass=pool.NullPool,
    )
    models.Base.metadata.create_all(engine)
    s = orm.Session(bind=engine)
    yield s
    s.close()
    engine.dispose()


@pytest.fixture(autouse=True)
def clear_config_cache(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Clear global config cache and point it at a missing file."""
    monkeypatch.setattr(global_config, "_PATH", tmp_path / "config.ini")
    global_config._CACHE.clear()  # noqa: SLF001
