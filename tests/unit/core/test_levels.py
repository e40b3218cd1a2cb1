"""Unit tests for :mod:`logfacade.core.levels`."""

from __future__ import annotations

import logging

import pytest

from logfacade.core.levels import FATAL_OFFSET, Severity, level_name, parse_level

pytestmark = pytest.mark.unit


def test_severities_are_totally_ordered() -> None:
    assert Severity.DEBUG < Severity.INFO < Severity.WARN < Severity.ERROR < Severity.FATAL


def test_native_levels_match_stdlib() -> None:
    assert Severity.DEBUG == logging.DEBUG
    assert Severity.INFO == logging.INFO
    assert Severity.WARN == logging.WARNING
    assert Severity.ERROR == logging.ERROR


def test_fatal_is_offset_above_error_and_not_a_stdlib_level() -> None:
    assert Severity.FATAL == Severity.ERROR + FATAL_OFFSET
    assert Severity.FATAL < logging.CRITICAL
    assert logging.getLevelName(int(Severity.FATAL)).startswith("Level ")


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("INFO", Severity.INFO),
        ("info", Severity.INFO),
        ("Info", Severity.INFO),
        ("WARN", Severity.WARN),
        ("warn", Severity.WARN),
        ("ERROR", Severity.ERROR),
        ("eRRoR", Severity.ERROR),
        ("DEBUG", Severity.DEBUG),
        ("debug", Severity.DEBUG),
    ],
)
def test_parse_level_recognised_names(text: str, expected: Severity) -> None:
    assert parse_level(text) is expected


@pytest.mark.parametrize(
    "text",
    ["", "bogus", "FATAL", "fatal", "WARNING", "CRITICAL", " info", "INFO ", "10", None],
)
def test_parse_level_defaults_to_info(text: str | None) -> None:
    assert parse_level(text) is Severity.INFO


@pytest.mark.parametrize(
    ("level", "expected"),
    [
        (Severity.DEBUG, "DEBUG"),
        (Severity.INFO, "INFO"),
        (Severity.WARN, "WARN"),
        (Severity.ERROR, "ERROR"),
        (Severity.FATAL, "FATAL"),
        (25, "INFO+5"),
        (41, "ERROR+1"),
        (47, "FATAL+3"),
        (5, "DEBUG-5"),
        (10, "DEBUG"),
    ],
)
def test_level_name(level: int, expected: str) -> None:
    assert level_name(level) == expected
