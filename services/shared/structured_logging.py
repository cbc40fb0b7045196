"""
Structured Logging Utilities

Provides utilities for logging with key=value context throughout services.
"""

from __future__ import annotations

import logging
from typing import Any

# Format for handlers that want the context as a separate field
STRUCTURED_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"


def _format_context(context: dict[str, Any]) -> str:
    return " | ".join(f"{key}={value}" for key, value in context.items() if value is not None)


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that adds structured context to log messages.

    The context is prefixed to the message and is also exposed as the
    ``context`` record attribute for STRUCTURED_FORMAT.

    Usage:
        logger = get_structured_logger(__name__, channel="@comeindesign")
        logger.info("Fetched 50 message(s)")
        # -> "[channel=@comeindesign] Fetched 50 message(s)"
    """

    def __init__(self, logger: logging.Logger, **context: Any):
        """
        Initialize structured logger adapter.

        Args:
            logger: Base logger instance
            **context: Context fields to include in all log messages
        """
        super().__init__(logger, context)

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        context_str = _format_context(self.extra)
        kwargs.setdefault("extra", {})["context"] = context_str or "none"
        if context_str:
            msg = f"[{context_str}] {msg}"
        return msg, kwargs


def get_structured_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """
    Get a structured logger with context.

    Args:
        name: Logger name (typically __name__)
        **context: Context fields (e.g., channel="@comeindesign")

    Returns:
        StructuredLoggerAdapter instance
    """
    base_logger = logging.getLogger(name)
    return StructuredLoggerAdapter(base_logger, **context)


def log_with_context(logger: logging.Logger, level: int, msg: str, **context: Any) -> None:
    """
    Log a message with additional context fields.

    Convenience function for adding context to a single log message.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, logging.ERROR, etc.)
        msg: Log message
        **context: Additional context fields
    """
    context_str = _format_context(context)
    logger.log(level, f"[{context_str}] {msg}" if context_str else msg)
