"""Tests for the settings loader and the logger factory.

Every test that touches the environment clears the `load_settings` cache on
both sides so later tests see a fresh, default configuration.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

import pytest
from pydantic import ValidationError

from maybekit.core.settings import (
    DEFAULT_LOG_FORMAT,
    Settings,
    get_logger,
    load_settings,
    settings,
)


@pytest.fixture(autouse=True)  # type: ignore[misc]
def _fresh_settings() -> Iterator[None]:
    load_settings.cache_clear()
    yield
    load_settings.cache_clear()


def test_module_settings_has_defaults() -> None:
    """The import-time singleton is typed and carries the documented defaults."""
    assert isinstance(settings, Settings)
    fresh = load_settings()
    assert fresh.nothing_marker == "(nothing)"
    assert fresh.log_format == DEFAULT_LOG_FORMAT


def test_environment_overrides(monkeypatch: Any) -> None:
    """Env vars win over defaults once the cache is rebuilt."""
    monkeypatch.setenv("MAYBEKIT_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("MAYBEKIT_CLI_NOTHING_MARKER", "<none>")

    s = load_settings()

    assert s.is_test
    assert s.log_level == "DEBUG"
    assert s.log_level_numeric() == logging.DEBUG
    assert s.nothing_marker == "<none>"


def test_blank_nothing_marker_is_rejected(monkeypatch: Any) -> None:
    """A whitespace-only marker would make absent results invisible."""
    monkeypatch.setenv("MAYBEKIT_CLI_NOTHING_MARKER", "   ")
    with pytest.raises(ValidationError):
        load_settings()


def test_get_logger_applies_level_and_format(monkeypatch: Any) -> None:
    """Loggers pick up LOG_LEVEL and MAYBEKIT_LOG_FORMAT; a unique name avoids reuse."""
    monkeypatch.setenv("LOG_LEVEL", "ERROR")
    monkeypatch.setenv("MAYBEKIT_LOG_FORMAT", "%(levelname)s:%(message)s")

    logger = get_logger("maybekit.tests.settings")

    assert logger.level == logging.ERROR
    assert logger.propagate is False
    assert len(logger.handlers) == 1
    formatter = logger.handlers[0].formatter
    assert formatter is not None and formatter._fmt == "%(levelname)s:%(message)s"
