"""Leveled logger wrapping a single structlog-backed handler.

A :class:`Logger` keeps its own threshold, output, encoding and
prefix-decoration flag.  Reconfiguring it (``set_output``, ``set_level``,
``set_custom_handler``) swaps the active handler while the logger object
stays the same.  No locking is performed: callers that reconfigure a logger
while other threads log through it must synchronise themselves.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from contextvars import Context
from typing import Any, TextIO

from logfacade.config.models.logging import (
    HandlerOptions,
    HandlerType,
    LoggerOptions,
    default_options,
)

from .handlers import Handler, JSONHandler, LevelPrefixHandler, Record, TextHandler
from .levels import Severity, parse_level

__all__ = ["Logger", "build_handler", "format_message"]

_log = logging.getLogger(__name__)


def _as_level(level: int | str) -> Severity | int:
    if isinstance(level, str):
        return parse_level(level)
    try:
        return Severity(level)
    except ValueError:
        return int(level)


def build_handler(
    output: TextIO | None,
    handler_type: HandlerType,
    options: HandlerOptions,
) -> Handler:
    """Build the built-in handler for ``handler_type`` writing to ``output``."""

    kwargs: dict[str, Any] = {
        "replace_attr": options.replace_attr,
        "add_source": options.add_source,
    }
    if options.level is not None:
        kwargs["level"] = options.level
    if handler_type is HandlerType.JSON:
        return JSONHandler(output, **kwargs)
    return TextHandler(output, **kwargs)


def format_message(fmt: str, args: tuple[Any, ...]) -> tuple[str, dict[str, Any]]:
    """Render a printf-style message.

    Returns the message and the attributes to attach.  When substitution
    fails the raw format string is kept and the arguments and error are
    returned as attributes instead.
    """

    if not args:
        return fmt, {}
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return fmt % values, {}
    except (TypeError, ValueError, KeyError) as exc:
        return fmt, {"format_args": list(args), "format_error": str(exc)}


class Logger:
    """Leveled, structured logger."""

    def __init__(self, output: TextIO | None, options: LoggerOptions | None = None) -> None:
        if options is None:
            options = default_options()

        handler_options = options.handler_options
        if handler_options is None:
            handler_options = HandlerOptions(level=int(options.level))
        elif handler_options.level is None:
            handler_options = handler_options.model_copy(update={"level": int(options.level)})

        handler: Handler
        if options.custom_handler is not None:
            handler = options.custom_handler
        else:
            handler = build_handler(output, options.handler_type, handler_options)

        if options.add_level_prefix:
            handler = LevelPrefixHandler(handler)

        self._level = _as_level(options.level)
        self._add_level_prefix = options.add_level_prefix
        self._handler_type = options.handler_type
        self._handler_options = handler_options
        self._output = output
        self._handler = handler

    def __repr__(self) -> str:
        return (
            f"<Logger(level={self._level!r}, handler_type={self._handler_type.value}, "
            f"add_level_prefix={self._add_level_prefix})>"
        )

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def set_handler(
        self,
        output: TextIO | None,
        handler_type: HandlerType,
        handler_options: HandlerOptions | None = None,
    ) -> None:
        """Install a built-in handler for ``output`` and ``handler_type``."""

        handler_type = HandlerType(handler_type)
        if handler_options is None:
            handler_options = HandlerOptions(level=int(self._level))

        handler = build_handler(output, handler_type, handler_options)
        if self._add_level_prefix:
            handler = LevelPrefixHandler(handler)

        self._output = output
        self._handler_type = handler_type
        self._handler_options = handler_options
        self._handler = handler
        _log.debug("handler replaced: %r", handler)

    def set_output(self, output: TextIO | None) -> None:
        """Send subsequent records to ``output``."""

        self.set_handler(
            output,
            self._handler_type,
            self._handler_options.model_copy(update={"level": int(self._level)}),
        )

    def set_level(self, level: int | str) -> None:
        """Change the threshold; level names are parsed with :func:`parse_level`."""

        self._level = _as_level(level)
        self.set_handler(
            self._output,
            self._handler_type,
            self._handler_options.model_copy(update={"level": int(self._level)}),
        )

    def set_custom_handler(self, handler: Handler) -> None:
        """Replace the active handler, bypassing the encoding."""

        if not isinstance(handler, Handler):
            raise TypeError(f"expected a Handler, got {type(handler).__name__}")
        if self._add_level_prefix:
            handler = LevelPrefixHandler(handler)
        self._handler = handler
        _log.debug("custom handler installed: %r", handler)

    def get_level(self) -> Severity | int:
        return self._level

    def get_handler_type(self) -> HandlerType:
        return self._handler_type

    def get_handler(self) -> Handler:
        return self._handler

    def enabled(self, level: int) -> bool:
        """Return whether a record at ``level`` would be emitted."""

        return self._handler.enabled(level)

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------

    def log(self, ctx: Context | None, level: int, msg: str, /, **attrs: Any) -> None:
        """Log ``msg`` at ``level`` with ``attrs`` as structured attributes."""

        handler = self._handler
        if not handler.enabled(level):
            return
        handler.handle(ctx, Record(level=level, message=msg, attrs=attrs))

    def logf(self, ctx: Context | None, level: int, fmt: str, /, *args: Any) -> None:
        """Log a printf-style message at ``level``."""

        handler = self._handler
        if not handler.enabled(level):
            return
        message, attrs = format_message(fmt, args)
        handler.handle(ctx, Record(level=level, message=message, attrs=attrs))

    def debug(self, ctx: Context | None, msg: str, /, **attrs: Any) -> None:
        self.log(ctx, Severity.DEBUG, msg, **attrs)

    def debugf(self, ctx: Context | None, fmt: str, /, *args: Any) -> None:
        self.logf(ctx, Severity.DEBUG, fmt, *args)

    def info(self, ctx: Context | None, msg: str, /, **attrs: Any) -> None:
        self.log(ctx, Severity.INFO, msg, **attrs)

    def infof(self, ctx: Context | None, fmt: str, /, *args: Any) -> None:
        self.logf(ctx, Severity.INFO, fmt, *args)

    def warn(self, ctx: Context | None, msg: str, /, **attrs: Any) -> None:
        self.log(ctx, Severity.WARN, msg, **attrs)

    def warnf(self, ctx: Context | None, fmt: str, /, *args: Any) -> None:
        self.logf(ctx, Severity.WARN, fmt, *args)

    warning = warn
    warningf = warnf

    def error(self, ctx: Context | None, msg: str, /, **attrs: Any) -> None:
        self.log(ctx, Severity.ERROR, msg, **attrs)

    def errorf(self, ctx: Context | None, fmt: str, /, *args: Any) -> None:
        self.logf(ctx, Severity.ERROR, fmt, *args)

    def fatal(self, ctx: Context | None, msg: str, /, **attrs: Any) -> None:
        """Log at :attr:`Severity.FATAL`; the process keeps running."""

        self.log(ctx, Severity.FATAL, msg, **attrs)

    def fatalf(self, ctx: Context | None, fmt: str, /, *args: Any) -> None:
        self.logf(ctx, Severity.FATAL, fmt, *args)
