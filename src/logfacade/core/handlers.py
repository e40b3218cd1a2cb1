"""Record handlers backed by structlog processor chains.

A :class:`Handler` decides whether a level is enabled and turns a
:class:`Record` into output.  The built-in handlers are thin configurations
of a structlog pipeline: shared processors add the level, a UTC timestamp and
any context-local bindings, then a renderer produces one line that a
:class:`structlog.PrintLogger` writes to the output stream.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, MutableMapping, Sequence
from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Any, Final, TextIO

import structlog

from .context import context_attrs
from .levels import Severity, level_name

if TYPE_CHECKING:
    from contextvars import Context

__all__ = [
    "Handler",
    "JSONHandler",
    "LevelPrefixHandler",
    "Record",
    "ReplaceAttr",
    "ReplaceAttrProcessor",
    "StructlogHandler",
    "TextHandler",
    "keep_attr",
]

ReplaceAttr = Callable[[str, Any], tuple[str, Any] | None]
"""Hook called with every rendered ``(key, value)``; ``None`` drops the key."""

_LEVEL_KEY: Final[str] = "_logfacade_level"
_CONTEXT_KEY: Final[str] = "_logfacade_context"
_EVENT_KEY: Final[str] = "_logfacade_event"
_TEXT_KEY_ORDER: Final[Sequence[str]] = ("timestamp", "level", "message")


@dataclass(frozen=True, slots=True)
class Record:
    """A single log event on its way to a handler."""

    level: int
    message: str
    attrs: Mapping[str, Any] = field(default_factory=dict)


class Handler(ABC):
    """Destination for log records."""

    @abstractmethod
    def enabled(self, level: int) -> bool:
        """Return whether records at ``level`` would be emitted."""

    @abstractmethod
    def handle(self, ctx: Context | None, record: Record) -> None:
        """Emit ``record``; ``ctx`` supplies context-local bindings."""


def keep_attr(key: str, value: Any) -> tuple[str, Any]:
    """Identity ``replace_attr`` hook."""

    return key, value


class ReplaceAttrProcessor:
    """Apply a :data:`ReplaceAttr` hook to every key of the event dict."""

    __slots__ = ("_hook",)

    def __init__(self, hook: ReplaceAttr) -> None:
        self._hook = hook

    def __call__(
        self,
        _: Any,
        __: str,
        event_dict: MutableMapping[str, Any],
    ) -> MutableMapping[str, Any]:
        replaced: dict[str, Any] = {}
        for key, value in event_dict.items():
            result = self._hook(key, value)
            if result is None:
                continue
            new_key, new_value = result
            if not new_key:
                continue
            replaced[new_key] = new_value
        return replaced


def _merge_context_vars(
    _: Any,
    __: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    ctx = event_dict.pop(_CONTEXT_KEY, None)
    for key, value in context_attrs(ctx).items():
        event_dict.setdefault(_EVENT_KEY if key == "event" else key, value)
    return event_dict


def _add_level_name(
    _: Any,
    __: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    level = event_dict.pop(_LEVEL_KEY, Severity.INFO)
    event_dict["level"] = level_name(level)
    return event_dict


def _restore_event(
    _: Any,
    __: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    # structlog reserves "event" for the message; callers get their key back.
    if _EVENT_KEY in event_dict:
        event_dict["event"] = event_dict.pop(_EVENT_KEY)
    return event_dict


class StructlogHandler(Handler):
    """Handler rendering records with an arbitrary structlog renderer."""

    def __init__(
        self,
        output: TextIO | None,
        renderer: Any,
        *,
        level: int = Severity.INFO,
        replace_attr: ReplaceAttr | None = None,
        add_source: bool = False,
    ) -> None:
        self.output = output
        self.level = int(level)
        self._logger = structlog.wrap_logger(
            structlog.PrintLogger(file=output),
            processors=self._processors(renderer, replace_attr, add_source),
            wrapper_class=structlog.BoundLogger,
            context_class=dict,
            cache_logger_on_first_use=True,
        )

    @staticmethod
    def _processors(
        renderer: Any,
        replace_attr: ReplaceAttr | None,
        add_source: bool,
    ) -> list[Any]:
        processors: list[Any] = [
            _merge_context_vars,
            _add_level_name,
            structlog.processors.TimeStamper(fmt="iso", utc=True, key="timestamp"),
        ]
        if add_source:
            processors.append(
                structlog.processors.CallsiteParameterAdder(
                    parameters=(
                        structlog.processors.CallsiteParameter.PATHNAME,
                        structlog.processors.CallsiteParameter.LINENO,
                        structlog.processors.CallsiteParameter.FUNC_NAME,
                    ),
                    additional_ignores=["logfacade"],
                )
            )
        processors.extend(
            [
                structlog.processors.StackInfoRenderer(),
                structlog.processors.format_exc_info,
                structlog.processors.EventRenamer("message"),
                _restore_event,
            ]
        )
        if replace_attr is not None:
            processors.append(ReplaceAttrProcessor(replace_attr))
        processors.append(renderer)
        return processors

    def enabled(self, level: int) -> bool:
        return level >= self.level

    def handle(self, ctx: Context | None, record: Record) -> None:
        values = dict(record.attrs)
        if "event" in values:
            values[_EVENT_KEY] = values.pop("event")
        values[_LEVEL_KEY] = record.level
        values[_CONTEXT_KEY] = ctx
        self._logger.bind(**values).msg(record.message)

    def __repr__(self) -> str:
        return f"<{type(self).__name__}(output={self.output!r}, level={level_name(self.level)})>"


class JSONHandler(StructlogHandler):
    """One JSON object per line."""

    def __init__(
        self,
        output: TextIO | None,
        *,
        level: int = Severity.INFO,
        replace_attr: ReplaceAttr | None = None,
        add_source: bool = False,
    ) -> None:
        super().__init__(
            output,
            structlog.processors.JSONRenderer(sort_keys=True, ensure_ascii=False),
            level=level,
            replace_attr=replace_attr,
            add_source=add_source,
        )


class TextHandler(StructlogHandler):
    """Human readable ``key=value`` lines led by timestamp, level and message."""

    def __init__(
        self,
        output: TextIO | None,
        *,
        level: int = Severity.INFO,
        replace_attr: ReplaceAttr | None = None,
        add_source: bool = False,
    ) -> None:
        super().__init__(
            output,
            structlog.processors.KeyValueRenderer(
                key_order=_TEXT_KEY_ORDER,
                drop_missing=True,
            ),
            level=level,
            replace_attr=replace_attr,
            add_source=add_source,
        )


class LevelPrefixHandler(Handler):
    """Prefix every message with ``"- <LEVEL> - "`` before delegating."""

    def __init__(self, inner: Handler) -> None:
        self.inner = inner

    def enabled(self, level: int) -> bool:
        return self.inner.enabled(level)

    def handle(self, ctx: Context | None, record: Record) -> None:
        prefixed = replace(
            record,
            message=f"- {level_name(record.level)} - {record.message}",
        )
        self.inner.handle(ctx, prefixed)

    def __repr__(self) -> str:
        return f"<LevelPrefixHandler({self.inner!r})>"
