"""Shared fixtures for resultkit tests."""

from __future__ import annotations

from typing import Callable, Iterator

import pytest

from resultkit import Failure, Result, Success
from resultkit.config import clear_settings_cache
from resultkit.observability import reset_logging


def try_parse_int(number: str) -> Result[int, str]:
    try:
        return Success(int(number))
    except ValueError:
        return Failure(f"'{number}' is not a number")


@pytest.fixture
def parse_int() -> Callable[[str], Result[int, str]]:
    """Parse-or-fail mapping used across traversal tests."""
    return try_parse_int


@pytest.fixture(autouse=True)
def _isolated_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep settings and logging configuration from leaking between tests."""
    for var in ("RESULTKIT_DEBUG", "RESULTKIT_LOG_LEVEL", "RESULTKIT_LOG_FORMAT", "RESULTKIT_LOG_COLORS"):
        monkeypatch.delenv(var, raising=False)
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()
