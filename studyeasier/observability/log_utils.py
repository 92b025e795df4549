"""
Logging utilities for safe structured logging.

Helpers for logging degraded (absorbed) failures with context values that
can never break the log call itself.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any


def safe_log_value(value: Any, max_length: int = 200) -> str:
    """
    Safely convert any value to a short string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Safe string representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, (list, tuple)):
            val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def log_degraded(
    logger: logging.Logger,
    operation: str,
    error: BaseException | str,
    **context: Any,
) -> None:
    """
    Log a failure that was absorbed so the caller can proceed offline.

    Args:
        logger: Logger instance
        operation: Operation that failed (fetch_chats, insert_asset, ...)
        error: Exception or error description
        **context: Additional key-value context (ids, counts)
    """
    if isinstance(error, BaseException):
        error_text = f"{type(error).__name__}: {safe_log_value(str(error))}"
    else:
        error_text = safe_log_value(error)
    context_text = ", ".join(f"{k}={safe_log_value(v)}" for k, v in context.items())
    logger.warning(
        f"{operation} degraded - {error_text}" + (f" [{context_text}]" if context_text else ""),
        extra={"operation": operation},
    )
