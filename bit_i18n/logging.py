"""Structured logging for the i18n package.

The package only creates loggers; it never configures logging on import,
so the host application's structlog and stdlib setup stays in charge.
Applications without their own setup can opt in with ``configure_logging``.

Usage:
    from bit_i18n.logging import configure_logging, get_module_logger

    # Optional, once at app startup
    configure_logging()

    # In a package module
    logger = get_module_logger()
    logger.info("event_name", key="value")
"""

import inspect
import logging
import sys
from typing import Any, Optional

import structlog

from bit_i18n.configuration import get_settings


def _is_test_environment() -> bool:
    """Detect if running in a test environment.

    Returns:
        True if pytest is in sys.modules, False otherwise
    """
    return "pytest" in sys.modules


def _renderer(json_logs: bool) -> Any:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    log_level: Optional[str] = None,
    json_logs: Optional[bool] = None,
) -> Any:
    """Configure structlog and stdlib logging for an application.

    Under pytest all output is suppressed instead.

    Args:
        log_level: Level name (DEBUG, INFO, ...). Defaults to settings.LOG_LEVEL.
        json_logs: Render JSON instead of console output. Defaults to
            settings.LOG_JSON.

    Returns:
        A logger using the new configuration.
    """
    if _is_test_environment():
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.root.setLevel(logging.CRITICAL + 1)
        return structlog.stdlib.get_logger()

    settings = get_settings()
    if json_logs is None:
        json_logs = settings.LOG_JSON
    level_name = (log_level or settings.LOG_LEVEL).upper()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(json_logs),
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # basicConfig is a no-op when the root logger already has handlers
    logging.basicConfig(format="%(message)s")
    logging.root.setLevel(getattr(logging, level_name, logging.INFO))

    return structlog.stdlib.get_logger()


def get_module_logger() -> Any:
    """Get a lazy logger for the calling module.

    Binds ``component`` (last dotted part) and ``module_path`` context. The
    logger resolves the structlog configuration when it is first used, so
    configuring logging after import still applies.

    Example:
        # In bit_i18n/sources.py
        logger = get_module_logger()
        # context: {"component": "sources", "module_path": "bit_i18n.sources"}
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return structlog.get_logger(component="unknown")

    module_name = module.__name__
    return structlog.get_logger(
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
