import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def clean_logging_env(monkeypatch):
    """Isolate tests from the caller's LOG_LEVEL / ENVIRONMENT and logging state."""
    for name in ("LOG_LEVEL", "ENVIRONMENT", "APP_ENV"):
        monkeypatch.delenv(name, raising=False)

    root_logger = logging.getLogger()
    handlers = root_logger.handlers[:]
    level = root_logger.level

    yield

    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
