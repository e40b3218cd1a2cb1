"""Carry a :class:`~logfacade.core.logger.Logger` through a call chain.

The opaque context is a :class:`contextvars.Context`.  Contexts are
immutable mappings of context variables: deriving one copies it, so the
parent never changes and a nested association shadows an outer one.  The
logger lives under a module-private :class:`~contextvars.ContextVar`, which
cannot collide with variables created by callers.
"""

from __future__ import annotations

import contextvars
from typing import TYPE_CHECKING, Any

from structlog.contextvars import STRUCTLOG_KEY_PREFIX

if TYPE_CHECKING:
    from .logger import Logger

__all__ = [
    "background",
    "context_attrs",
    "from_context",
    "with_logger",
]

_logger_var: contextvars.ContextVar[Any] = contextvars.ContextVar("logfacade_logger")
_PREFIX_LEN = len(STRUCTLOG_KEY_PREFIX)


def background() -> contextvars.Context:
    """Return a new, empty context."""

    return contextvars.Context()


def with_logger(ctx: contextvars.Context | None, logger: Logger) -> contextvars.Context:
    """Return a copy of ``ctx`` carrying ``logger``; ``ctx`` is left untouched.

    ``None`` derives from the caller's current context.
    """

    derived = ctx.copy() if ctx is not None else contextvars.copy_context()
    derived.run(_logger_var.set, logger)
    return derived


def from_context(ctx: contextvars.Context | None) -> Logger | None:
    """Return the logger stored by :func:`with_logger`, or ``None``."""

    from .logger import Logger

    source = ctx if ctx is not None else contextvars.copy_context()
    logger = source.get(_logger_var)
    if isinstance(logger, Logger):
        return logger
    return None


def context_attrs(ctx: contextvars.Context | None) -> dict[str, Any]:
    """Return the structlog context-local bindings visible in ``ctx``.

    These are the values bound with
    :func:`structlog.contextvars.bind_contextvars`, such as request or trace
    identifiers.  Unbound variables are skipped.
    """

    source = ctx if ctx is not None else contextvars.copy_context()
    attrs: dict[str, Any] = {}
    for var, value in source.items():
        if var.name.startswith(STRUCTLOG_KEY_PREFIX) and value is not Ellipsis:
            attrs[var.name[_PREFIX_LEN:]] = value
    return attrs
