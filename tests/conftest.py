"""Shared pytest fixtures for logfacade tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from logfacade.core import defaults

pytest_plugins = [
    "tests.fixtures.loggers",
]


@pytest.fixture(autouse=True)
def reset_logging_state() -> Iterator[None]:
    """Drop the default logger and context-local bindings between tests."""

    defaults._default_logger = None
    structlog.contextvars.clear_contextvars()

    yield

    defaults._default_logger = None
    structlog.contextvars.clear_contextvars()
