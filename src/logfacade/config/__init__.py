"""Configuration models for logfacade."""

from .models import HandlerOptions, HandlerType, LoggerOptions, default_options

__all__ = ["HandlerOptions", "HandlerType", "LoggerOptions", "default_options"]
