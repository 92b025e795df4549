"""
Observability module.

Provides logging configuration and safe structured-logging helpers.
"""

from studyeasier.observability.log_utils import log_degraded, safe_log_value
from studyeasier.observability.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger", "log_degraded", "safe_log_value"]
