"""Public logging API for the genapi runtime.

Thin layer over Python's ``logging`` module: stdout output, JSON or plain
formatting and ``contextvars``-based context propagation.
"""

from . import fields
from .config import (
    ContextFilter,
    JsonFormatter,
    PlainFormatter,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
)
from .context import bind_context, clear_context, get_context, log_context

__all__ = [
    "ContextFilter",
    "JsonFormatter",
    "PlainFormatter",
    "bind_context",
    "clear_context",
    "configure_logging",
    "configure_logging_from_settings",
    "fields",
    "get_context",
    "get_logger",
    "log_context",
]
