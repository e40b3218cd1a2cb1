"""Logger configuration models."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from logfacade.core.handlers import Handler, ReplaceAttr, keep_attr
from logfacade.core.levels import Severity, parse_level

__all__ = [
    "HandlerOptions",
    "HandlerType",
    "LoggerOptions",
    "default_options",
]


class HandlerType(str, Enum):
    """Output encodings of the built-in handlers."""

    JSON = "json"
    TEXT = "text"


class HandlerOptions(BaseModel):
    """Options passed through to the built-in handlers."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    level: int | None = Field(
        default=None,
        description="Handler threshold; overrides the logger level at construction.",
    )
    replace_attr: ReplaceAttr | None = Field(
        default=None,
        description="Hook rewriting or dropping every rendered attribute.",
    )
    add_source: bool = Field(
        default=False,
        description="Attach pathname, lineno and func_name of the call site.",
    )


class LoggerOptions(BaseModel):
    """Construction options for :class:`~logfacade.core.logger.Logger`."""

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    level: Severity | int = Field(
        default=Severity.INFO,
        description="Minimum level emitted by the logger.",
    )
    add_level_prefix: bool = Field(
        default=False,
        description='Prefix messages with "- <LEVEL> - ".',
    )
    handler_type: HandlerType = Field(
        default=HandlerType.TEXT,
        description="Encoding used when no custom handler is supplied.",
    )
    custom_handler: Handler | None = Field(
        default=None,
        description="Handler used as-is instead of the handler_type encoding.",
    )
    handler_options: HandlerOptions | None = Field(
        default=None,
        description="Options for the built-in handler.",
    )

    @field_validator("level", mode="before")
    @classmethod
    def _coerce_level(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_level(value)
        return value


def default_options() -> LoggerOptions:
    """Return the options used by the process-wide default logger."""

    return LoggerOptions(
        level=Severity.INFO,
        add_level_prefix=False,
        handler_type=HandlerType.TEXT,
        handler_options=HandlerOptions(level=Severity.INFO, replace_attr=keep_attr),
    )
