"""Pytest configuration and shared fixtures for result-extensions tests."""

from __future__ import annotations

from collections.abc import Iterator

import msgspec
import pytest

from result_extensions._config import reset_config
from result_extensions._logging import clear_log_hooks, reset_logging


class User(msgspec.Struct, frozen=True):
    """Sample JSON model."""

    id: int
    name: str
    tags: list[str] = []


@pytest.fixture(autouse=True)
def isolate_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test from an unconfigured package with a clean environment."""
    for var in ('RESULT_EXTENSIONS_LOG_LEVEL', 'RESULT_EXTENSIONS_JSON_STRICT', 'RESULT_EXTENSIONS_JSON_ORDER'):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    clear_log_hooks()
    reset_logging()
    yield
    reset_config()
    clear_log_hooks()
    reset_logging()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from result_extensions import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from result_extensions import Err

    return Err(ValueError('test error'))


@pytest.fixture
def user_json() -> bytes:
    """JSON document matching User."""
    return b'{"id": 1, "name": "ada", "tags": ["admin"]}'
