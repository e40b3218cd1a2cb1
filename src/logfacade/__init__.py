"""Structured logging facade over structlog.

Typical use::

    import logfacade

    logfacade.info(None, "service started", port=8080)

    log = logfacade.Logger(sys.stderr, logfacade.LoggerOptions(handler_type="json"))
    ctx = logfacade.with_logger(logfacade.background(), log)
    logfacade.from_context(ctx).warnf(ctx, "retrying in %ds", 5)
"""

from __future__ import annotations

import logging

from .config.models.logging import HandlerOptions, HandlerType, LoggerOptions, default_options
from .core.context import background, context_attrs, from_context, with_logger
from .core.defaults import (
    debug,
    debugf,
    enabled,
    error,
    errorf,
    fatal,
    fatalf,
    get_default,
    get_handler_type,
    get_level,
    info,
    infof,
    init_default,
    log,
    logf,
    set_custom_handler,
    set_handler,
    set_level,
    set_output,
    warn,
    warnf,
    warning,
    warningf,
)
from .core.handlers import (
    Handler,
    JSONHandler,
    LevelPrefixHandler,
    Record,
    StructlogHandler,
    TextHandler,
)
from .core.levels import FATAL_OFFSET, Severity, level_name, parse_level
from .core.logger import Logger

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "FATAL_OFFSET",
    "Handler",
    "HandlerOptions",
    "HandlerType",
    "JSONHandler",
    "LevelPrefixHandler",
    "Logger",
    "LoggerOptions",
    "Record",
    "Severity",
    "StructlogHandler",
    "TextHandler",
    "background",
    "context_attrs",
    "debug",
    "debugf",
    "default_options",
    "enabled",
    "error",
    "errorf",
    "fatal",
    "fatalf",
    "from_context",
    "get_default",
    "get_handler_type",
    "get_level",
    "info",
    "infof",
    "init_default",
    "level_name",
    "log",
    "logf",
    "parse_level",
    "set_custom_handler",
    "set_handler",
    "set_level",
    "set_output",
    "warn",
    "warnf",
    "warning",
    "warningf",
    "with_logger",
]
