"""Logger-related pytest fixtures."""

from __future__ import annotations

import io
import json
from contextvars import Context
from typing import Any

import pytest

from logfacade import HandlerType, Logger, LoggerOptions, Severity, background

__all__ = ["buffer", "ctx", "json_logger", "read_json_lines"]


def read_json_lines(buf: io.StringIO) -> list[dict[str, Any]]:
    """Decode every non-empty line written to ``buf``."""

    return [json.loads(line) for line in buf.getvalue().splitlines() if line.strip()]


@pytest.fixture  # type: ignore[misc]
def buffer() -> io.StringIO:
    """In-memory output stream."""
    return io.StringIO()


@pytest.fixture  # type: ignore[misc]
def ctx() -> Context:
    """Empty call context."""
    return background()


@pytest.fixture  # type: ignore[misc]
def json_logger(buffer: io.StringIO) -> Logger:
    """JSON logger emitting every severity into ``buffer``."""
    return Logger(buffer, LoggerOptions(level=Severity.DEBUG, handler_type=HandlerType.JSON))
