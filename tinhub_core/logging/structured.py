"""
Structured Logging
==================
structlog setup plus a small per-context logger with environment-driven levels.

Usage:
    from tinhub_core.logging import setup_logging, LoggerService

    # Once at startup
    setup_logging(service_name="billing-api")

    log = LoggerService("PaymentsController")
    log.log("payment captured", payment_id="pay_123")
    log.http({"method": "POST", "path": "/payments", "status": 201})

Environment:
    LOG_LEVEL     VERBOSE | DEBUG | LOG | WARN | ERROR (overrides code settings)
    ENVIRONMENT   "production" switches to JSON output and ERROR by default
"""

import logging
import os
import sys
from enum import IntEnum
from typing import Any, Optional, Union

import structlog

from tinhub_core.config import is_production

TIMESTAMP_FORMAT = "%H:%M %d/%m/%y"


class LogLevel(IntEnum):
    """Log levels, lowest (most verbose) first."""
    VERBOSE = 5
    DEBUG = logging.DEBUG
    LOG = logging.INFO
    WARN = logging.WARNING
    ERROR = logging.ERROR


def _level_from_name(name: Optional[str]) -> Optional[LogLevel]:
    if not name:
        return None
    key = name.strip().upper()
    aliases = {"INFO": "LOG", "WARNING": "WARN"}
    key = aliases.get(key, key)
    return LogLevel.__members__.get(key)


def get_env_log_level() -> Optional[LogLevel]:
    """Level from LOG_LEVEL, or None if unset or unrecognised."""
    return _level_from_name(os.getenv("LOG_LEVEL"))


def resolve_log_level(configured: Union[LogLevel, str, None] = None) -> LogLevel:
    """
    Pick the effective level.

    LOG_LEVEL wins; production without LOG_LEVEL is ERROR; otherwise the
    configured level, falling back to VERBOSE.
    """
    env_level = get_env_log_level()
    if env_level is not None:
        return env_level
    if is_production():
        return LogLevel.ERROR
    if isinstance(configured, str):
        configured = _level_from_name(configured)
    if configured is not None:
        return LogLevel(configured)
    return LogLevel.VERBOSE


def setup_logging(
    service_name: str,
    level: Union[LogLevel, str, None] = None,
    json_output: Optional[bool] = None,
    timestamp: bool = True,
) -> None:
    """
    Configure structlog for a service.

    Args:
        service_name: Bound into every record as ``service``
        level: Minimum level (LOG_LEVEL and production override it)
        json_output: JSON lines instead of colored console output
            (default: JSON in production)
        timestamp: Prefix records with a "HH:MM DD/MM/YY" timestamp
    """
    effective = resolve_log_level(level)
    stdlib_level = max(int(effective), logging.DEBUG)
    if json_output is None:
        json_output = is_production()

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
    ]
    if timestamp:
        processors.append(structlog.processors.TimeStamper(fmt=TIMESTAMP_FORMAT))
    processors.append(structlog.processors.StackInfoRenderer())

    if json_output:
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(stdlib_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,
    )

    # Vendor libraries (boto3, aiosmtplib) log through stdlib logging
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(max(stdlib_level, logging.INFO))

    structlog.contextvars.bind_contextvars(service=service_name)

    get_logger(__name__).info(
        "Logging configured",
        service_name=service_name,
        log_level=effective.name,
        json_output=json_output,
    )


def get_logger(name: Optional[str] = None, **initial_values: Any):
    """Get a structlog logger, optionally with bound values."""
    return structlog.get_logger(name, **initial_values)


class LoggerService:
    """
    Logger bound to a context name (a class, module or request handler).

    Each instance filters on its own level, so one noisy component can be
    turned down without touching global configuration.
    """

    def __init__(self, context: str, level: Union[LogLevel, str, None] = None):
        self.context = context
        self.log_level = resolve_log_level(level)
        self._logger = structlog.get_logger(context, context=context)

    def set_log_level(self, level: Union[LogLevel, str]) -> None:
        """Change this logger's level; ignored while LOG_LEVEL is set."""
        if get_env_log_level() is not None:
            return
        if isinstance(level, str):
            parsed = _level_from_name(level)
            if parsed is None:
                raise ValueError(f"Unknown log level: {level}")
            level = parsed
        self.log_level = LogLevel(level)

    def is_enabled(self, level: LogLevel) -> bool:
        return self.log_level <= level

    def log(self, message: str, *args: Any, **kwargs: Any) -> None:
        if self.is_enabled(LogLevel.LOG):
            self._logger.info(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        if self.is_enabled(LogLevel.ERROR):
            self._logger.error(message, *args, **kwargs)

    def warn(self, message: str, *args: Any, **kwargs: Any) -> None:
        if self.is_enabled(LogLevel.WARN):
            self._logger.warning(message, *args, **kwargs)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        if self.is_enabled(LogLevel.DEBUG):
            self._logger.debug(message, *args, **kwargs)

    def verbose(self, message: str, *args: Any, **kwargs: Any) -> None:
        if self.is_enabled(LogLevel.VERBOSE):
            self._logger.debug(message, *args, verbose=True, **kwargs)

    def http(self, data: Any) -> None:
        """Log an HTTP exchange (request/response summary) as a structured record."""
        if self.is_enabled(LogLevel.LOG):
            self._logger.info("HTTP", http=data)


def log_event(event_type: str, level: str = "info", **kwargs: Any) -> None:
    """
    Log a structured event.

    Args:
        event_type: Type of event (e.g., "otp.issued", "email.sent")
        level: Log method name (debug, info, warning, error)
        **kwargs: Additional event data
    """
    logger = structlog.get_logger("events")
    method = getattr(logger, level.lower(), logger.info)
    method(event_type, event_type=event_type, **kwargs)


def log_error(error: BaseException, context: Optional[str] = None, **kwargs: Any) -> None:
    """
    Log an exception with its traceback and context.

    Args:
        error: The exception
        context: Description of what was happening
        **kwargs: Additional context
    """
    logger = structlog.get_logger("errors")
    logger.error(
        context or type(error).__name__,
        error_type=type(error).__name__,
        error_message=str(error),
        exc_info=error,
        **kwargs,
    )
