"""
Logging configuration for structured logging.

This module configures JSON logging that works well with log aggregators.
"""

import sys

from opentelemetry import trace
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds trace context."""

    def add_fields(self, log_record, record, message_dict):
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)

        span_context = trace.get_current_span().get_span_context()
        if span_context.is_valid:
            log_record["trace_id"] = format(span_context.trace_id, "032x")
            log_record["span_id"] = format(span_context.span_id, "016x")


# Application loggers; they do not propagate to root
APP_LOGGERS = ("core", "api", "licenses", "activations")


def get_logging_config(environment: str = "development") -> dict:
    """
    Get logging configuration for the application.

    Args:
        environment: Environment name (development, production, test)

    Returns:
        Django logging configuration dictionary
    """
    log_level = "DEBUG" if environment == "development" else "INFO"
    app_loggers = {
        name: {"handlers": ["console"], "level": log_level, "propagate": False}
        for name in APP_LOGGERS
    }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": CustomJsonFormatter,
                "format": "%(asctime)s %(name)s %(levelname)s %(message)s %(pathname)s %(lineno)d",
            },
            "simple": {
                "format": "{levelname} {message}",
                "style": "{",
            },
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "json",
                "stream": sys.stdout,
            },
        },
        "root": {
            "handlers": ["console"],
            "level": "INFO",
        },
        "loggers": {
            "django": {
                "handlers": ["console"],
                "level": "INFO",
                "propagate": False,
            },
            "django.request": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
            **app_loggers,
        },
    }


def add_file_handler(config: dict, filename: str) -> dict:
    """
    Add a rotating JSON file handler to the root and application loggers.

    Args:
        config: Logging configuration from get_logging_config
        filename: Log file path

    Returns:
        The updated configuration
    """
    config["handlers"]["file"] = {
        "class": "logging.handlers.RotatingFileHandler",
        "filename": filename,
        "maxBytes": 1024 * 1024 * 10,  # 10 MB
        "backupCount": 10,
        "formatter": "json",
    }
    config["root"]["handlers"] = [*config["root"]["handlers"], "file"]
    for name in APP_LOGGERS:
        logger_config = config["loggers"][name]
        logger_config["handlers"] = [*logger_config["handlers"], "file"]
    return config
