"""Pydantic configuration models."""

from .logging import HandlerOptions, HandlerType, LoggerOptions, default_options

__all__ = ["HandlerOptions", "HandlerType", "LoggerOptions", "default_options"]
