"""Process-wide default logger and the package-level logging functions.

The default :class:`Logger` is created on first use with
:func:`~logfacade.config.models.logging.default_options` and ``sys.stdout``.
:func:`init_default` replaces it explicitly.  Neither creation nor the
mutators below are synchronised.
"""

from __future__ import annotations

import logging
import sys
from contextvars import Context
from typing import Any, TextIO

from logfacade.config.models.logging import (
    HandlerOptions,
    HandlerType,
    LoggerOptions,
    default_options,
)

from .handlers import Handler
from .levels import Severity
from .logger import Logger

__all__ = [
    "debug",
    "debugf",
    "enabled",
    "error",
    "errorf",
    "fatal",
    "fatalf",
    "get_default",
    "get_handler_type",
    "get_level",
    "info",
    "infof",
    "init_default",
    "log",
    "logf",
    "set_custom_handler",
    "set_handler",
    "set_level",
    "set_output",
    "warn",
    "warnf",
    "warning",
    "warningf",
]

_log = logging.getLogger(__name__)

_default_logger: Logger | None = None


def init_default(
    output: TextIO | None = None,
    options: LoggerOptions | None = None,
) -> Logger:
    """(Re)create the default logger; ``output=None`` means ``sys.stdout``."""

    global _default_logger
    _default_logger = Logger(
        output if output is not None else sys.stdout,
        options if options is not None else default_options(),
    )
    _log.debug("default logger initialised: %r", _default_logger)
    return _default_logger


def get_default() -> Logger:
    """Return the default logger, creating it on first use."""

    if _default_logger is None:
        return init_default()
    return _default_logger


def set_output(output: TextIO | None) -> None:
    get_default().set_output(output)


def set_level(level: int | str) -> None:
    get_default().set_level(level)


def get_level() -> Severity | int:
    return get_default().get_level()


def get_handler_type() -> HandlerType:
    return get_default().get_handler_type()


def set_handler(
    output: TextIO | None,
    handler_type: HandlerType,
    handler_options: HandlerOptions | None = None,
) -> None:
    get_default().set_handler(output, handler_type, handler_options)


def set_custom_handler(handler: Handler) -> None:
    get_default().set_custom_handler(handler)


def enabled(level: int) -> bool:
    return get_default().enabled(level)


def log(ctx: Context | None, level: int, msg: str, /, **attrs: Any) -> None:
    get_default().log(ctx, level, msg, **attrs)


def logf(ctx: Context | None, level: int, fmt: str, /, *args: Any) -> None:
    get_default().logf(ctx, level, fmt, *args)


def debug(ctx: Context | None, msg: str, /, **attrs: Any) -> None:
    get_default().debug(ctx, msg, **attrs)


def debugf(ctx: Context | None, fmt: str, /, *args: Any) -> None:
    get_default().debugf(ctx, fmt, *args)


def info(ctx: Context | None, msg: str, /, **attrs: Any) -> None:
    get_default().info(ctx, msg, **attrs)


def infof(ctx: Context | None, fmt: str, /, *args: Any) -> None:
    get_default().infof(ctx, fmt, *args)


def warn(ctx: Context | None, msg: str, /, **attrs: Any) -> None:
    get_default().warn(ctx, msg, **attrs)


def warnf(ctx: Context | None, fmt: str, /, *args: Any) -> None:
    get_default().warnf(ctx, fmt, *args)


warning = warn
warningf = warnf


def error(ctx: Context | None, msg: str, /, **attrs: Any) -> None:
    get_default().error(ctx, msg, **attrs)


def errorf(ctx: Context | None, fmt: str, /, *args: Any) -> None:
    get_default().errorf(ctx, fmt, *args)


def fatal(ctx: Context | None, msg: str, /, **attrs: Any) -> None:
    """Log at FATAL through the default logger; does not exit."""

    get_default().fatal(ctx, msg, **attrs)


def fatalf(ctx: Context | None, fmt: str, /, *args: Any) -> None:
    get_default().fatalf(ctx, fmt, *args)
