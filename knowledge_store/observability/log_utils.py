"""
Structured logging helpers for store operations.

Context values become record attributes. Byte hashes and embedding vectors
are reduced to their size so a log line never carries a whole vector.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

MAX_VALUE_LENGTH = 500


def _describe(value: Any) -> str:
    if isinstance(value, (bytes, bytearray)):
        return f"{type(value).__name__}({len(value)} bytes)"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"
    return str(value)


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render a context value for a log record.

    Args:
        value: Id, count, hash, vector, or any other context value
        max_length: Longest rendering kept before truncation

    Returns:
        str: Short text form of the value
    """
    if value is None:
        return "None"
    try:
        text = _describe(value)
    except Exception as exc:
        return f"<unable to log: {type(exc).__name__}>"
    if len(text) <= max_length:
        return text
    return f"{text[:max_length]}... (truncated, {len(text)} total)"


def _context(values: dict[str, Any]) -> dict[str, str]:
    return {key: safe_log_value(value) for key, value in values.items()}


def log_with_context(logger: logging.Logger, level: int, message: str, **context) -> None:
    """Emit message at level with context attached as record attributes."""
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log a caught exception with its traceback and context.

    The record also gets error_type and error_msg attributes.
    """
    extra = _context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = str(exc)
    logger.exception(message, extra=extra)
