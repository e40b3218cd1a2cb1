"""Tests for the process-wide default logger and package-level functions."""

from __future__ import annotations

import io

import pytest

import logfacade
from logfacade import HandlerType, LoggerOptions, Severity
from logfacade.core import defaults
from tests.fixtures.loggers import read_json_lines

pytestmark = pytest.mark.unit


def test_default_logger_is_created_lazily(capsys: pytest.CaptureFixture[str]) -> None:
    assert defaults._default_logger is None

    logfacade.info(None, "hello default", port=8080)

    out = capsys.readouterr().out
    assert "message='hello default'" in out
    assert "port=8080" in out
    assert logfacade.get_default() is defaults._default_logger


def test_default_configuration() -> None:
    logger = logfacade.get_default()

    assert logger is logfacade.get_default()
    assert logfacade.get_level() is Severity.INFO
    assert logfacade.get_handler_type() is HandlerType.TEXT
    assert not isinstance(logger.get_handler(), logfacade.LevelPrefixHandler)


def test_init_default_replaces_instance() -> None:
    first = logfacade.get_default()
    buf = io.StringIO()

    second = logfacade.init_default(buf, LoggerOptions(handler_type=HandlerType.JSON))
    logfacade.warnf(None, "%d retries left", 2)

    assert second is not first
    assert logfacade.get_default() is second
    assert read_json_lines(buf)[0]["message"] == "2 retries left"


def test_package_set_output_and_level() -> None:
    buf = io.StringIO()
    logfacade.set_output(buf)
    logfacade.set_level("error")

    logfacade.debug(None, "d")
    logfacade.info(None, "i")
    logfacade.warn(None, "w")
    logfacade.error(None, "e")
    logfacade.fatal(None, "f")

    lines = buf.getvalue().splitlines()
    assert len(lines) == 2
    assert "level='ERROR'" in lines[0]
    assert "level='FATAL'" in lines[1]
    assert logfacade.get_level() is Severity.ERROR
    assert not logfacade.enabled(Severity.WARN)


def test_package_formatted_functions() -> None:
    buf = io.StringIO()
    logfacade.set_handler(buf, HandlerType.JSON)
    logfacade.set_level(Severity.DEBUG)

    logfacade.debugf(None, "a=%s", 1)
    logfacade.infof(None, "b=%s", 2)
    logfacade.warningf(None, "c=%s", 3)
    logfacade.errorf(None, "d=%s", 4)
    logfacade.fatalf(None, "e=%s", 5)
    logfacade.logf(None, 25, "f=%s", 6)
    logfacade.log(None, Severity.WARN, "g", extra=True)
    logfacade.warning(None, "h")

    records = read_json_lines(buf)
    assert [r["message"] for r in records] == ["a=1", "b=2", "c=3", "d=4", "e=5", "f=6", "g", "h"]
    assert [r["level"] for r in records] == [
        "DEBUG",
        "INFO",
        "WARN",
        "ERROR",
        "FATAL",
        "INFO+5",
        "WARN",
        "WARN",
    ]
    assert records[6]["extra"] is True


def test_package_set_custom_handler() -> None:
    buf = io.StringIO()

    logfacade.set_custom_handler(logfacade.JSONHandler(buf))
    logfacade.info(None, "custom")

    assert read_json_lines(buf)[0]["message"] == "custom"
