"""Logging configuration for the Logistics package."""

import logging
import os

import structlog

# Suppress noisy library loggers
logging.getLogger("multipart").setLevel(logging.WARNING)


def configure_logging(level: str | None = None, json_output: bool | None = None) -> None:
    """Configure structlog for the process.

    Reads ``LOG_LEVEL`` (default INFO) and ``LOG_FORMAT`` (``json`` or
    ``console``) when arguments are not given.
    """
    level_name = (level or os.environ.get("LOG_LEVEL", "INFO")).upper()
    if json_output is None:
        json_output = os.environ.get("LOG_FORMAT", "console") == "json"

    logging.basicConfig(format="%(message)s", level=getattr(logging, level_name, logging.INFO))

    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str):
    return structlog.get_logger(name)
