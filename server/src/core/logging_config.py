"""
Logging configuration for the fashion template server.

Provides structured logging with different levels for development, testing, and production.
Configures formatters, handlers, and loggers for the API and the catalog client.
"""

import logging
import logging.config
import os
import sys
from typing import Dict, Any


def get_log_level() -> str:
    """Get the log level from environment variables."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


def get_logging_config() -> Dict[str, Any]:
    """
    Get the logging configuration dictionary.

    Returns a logging configuration that can be used with logging.config.dictConfig().
    Production uses JSON lines (python-json-logger) so the ``extra`` fields
    attached to catalog and decode events stay machine readable.
    """
    log_level = get_log_level()
    environment = os.getenv("ENVIRONMENT", "development").lower()

    if environment == "production":
        formatter_class = "pythonjsonlogger.jsonlogger.JsonFormatter"
        formatter_format = "%(asctime)s %(name)s %(levelname)s %(message)s"
    else:
        # Human-readable formatting for development/testing
        formatter_class = "logging.Formatter"
        formatter_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    app_logger = {
        "level": log_level,
        "handlers": ["console", "error_console"],
        "propagate": False,
    }

    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "class": formatter_class,
                "format": formatter_format,
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
            "detailed": {
                "class": formatter_class,
                "format": "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s",
                "datefmt": "%Y-%m-%d %H:%M:%S",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "level": log_level,
                "formatter": "default",
                "stream": sys.stdout,
            },
            "error_console": {
                "class": "logging.StreamHandler",
                "level": "ERROR",
                "formatter": "detailed",
                "stream": sys.stderr,
            },
        },
        "loggers": {
            # Application loggers
            "fashion": dict(app_logger),
            "fashion.api": dict(app_logger),
            "fashion.services": dict(app_logger),
            "fashion.core": dict(app_logger),
            # Third-party loggers
            "httpx": {
                "level": "WARNING",  # One INFO line per catalog request otherwise
                "handlers": ["console"],
                "propagate": False,
            },
            "uvicorn": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
            "uvicorn.access": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
            "fastapi": {
                "level": "INFO",
                "handlers": ["console"],
                "propagate": False,
            },
        },
        "root": {
            "level": log_level,
            "handlers": ["console", "error_console"],
        },
    }

    return config


def setup_logging() -> None:
    """
    Configure logging for the application.

    This should be called once at application startup, before any other
    logging occurs.
    """
    config = get_logging_config()
    logging.config.dictConfig(config)

    logger = logging.getLogger("fashion.logging")
    logger.info(
        "Logging configured",
        extra={
            "log_level": get_log_level(),
            "environment": os.getenv("ENVIRONMENT", "development"),
        },
    )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the given name.

    Args:
        name: The logger name, typically __name__ from the calling module

    Returns:
        A configured logger instance
    """
    # Ensure the logger name starts with 'fashion.' for proper hierarchy
    if not name.startswith("fashion."):
        if name.startswith("server.src."):
            # Convert server.src.services.catalog_service -> fashion.services.catalog_service
            parts = name.split(".")
            name = "fashion." + ".".join(parts[2:]) if len(parts) > 2 else "fashion"
        else:
            name = f"fashion.{name}"

    return logging.getLogger(name)
