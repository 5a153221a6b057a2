"""
Structured Logging Module

structlog-based logging shared by all tinhub-core components.
"""

from .structured import (
    # Setup
    setup_logging,
    get_logger,
    resolve_log_level,
    get_env_log_level,

    # Per-context logger
    LoggerService,
    LogLevel,

    # Logging functions
    log_event,
    log_error,
)

__all__ = [
    "setup_logging",
    "get_logger",
    "resolve_log_level",
    "get_env_log_level",
    "LoggerService",
    "LogLevel",
    "log_event",
    "log_error",
]
