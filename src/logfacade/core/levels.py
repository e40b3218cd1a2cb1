"""Severity levels understood by the logging facade.

The numeric values of ``DEBUG`` through ``ERROR`` match the stdlib/structlog
levels so that thresholds can be compared with plain integers.  ``FATAL`` is
not one of the engine's native levels: it sits a fixed offset above
``ERROR`` and is only a label, logging at it never stops the process.
"""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Final

__all__ = [
    "FATAL_OFFSET",
    "Severity",
    "level_name",
    "parse_level",
]

FATAL_OFFSET: Final[int] = 4
"""Distance between ``ERROR`` and ``FATAL``."""


class Severity(IntEnum):
    """Ordered log-importance levels."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR
    FATAL = logging.ERROR + FATAL_OFFSET


_PARSEABLE: Final[dict[str, Severity]] = {
    "INFO": Severity.INFO,
    "WARN": Severity.WARN,
    "ERROR": Severity.ERROR,
    "DEBUG": Severity.DEBUG,
}

# Ascending, used to name levels that fall between two severities.
_BASES: Final[tuple[Severity, ...]] = tuple(sorted(Severity))


def parse_level(name: str | None) -> Severity:
    """Map a level name to a :class:`Severity`, defaulting to ``INFO``.

    Matching is case-insensitive and exact.  Only ``DEBUG``, ``INFO``,
    ``WARN`` and ``ERROR`` are recognised; anything else, ``FATAL``
    included, yields ``INFO``.
    """

    if not name:
        return Severity.INFO
    return _PARSEABLE.get(name.upper(), Severity.INFO)


def level_name(level: int) -> str:
    """Return the display name of ``level``.

    Exact severities render as their name.  Other values render relative to
    the closest severity below them (``"INFO+5"``), or relative to ``DEBUG``
    when they are lower than every severity (``"DEBUG-5"``).
    """

    base = _BASES[0]
    for candidate in _BASES:
        if level >= candidate:
            base = candidate
    delta = int(level) - int(base)
    if delta == 0:
        return base.name
    return f"{base.name}{delta:+d}"
