"""
Logging configuration for structured logging.

This module configures JSON logging suitable for log aggregation.
"""

import logging
import sys

from pythonjsonlogger import jsonlogger

SERVICE_NAME = "license-server"

# Record attributes that must never reach a log line
SENSITIVE_FIELDS = ("password", "password_repeat", "token", "jwt_secret", "authorization")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter that adds service context."""

    def add_fields(self, log_record, record, message_dict):
        """Add custom fields to log record."""
        super().add_fields(log_record, record, message_dict)
        log_record["service"] = SERVICE_NAME
        log_record["level"] = record.levelname
        correlation_id = getattr(record, "correlation_id", None)
        if correlation_id:
            log_record["correlation_id"] = correlation_id


class SensitiveDataFilter(logging.Filter):
    """Redact secret-bearing extras passed to a logger."""

    def filter(self, record: logging.LogRecord) -> bool:
        for field in SENSITIVE_FIELDS:
            if field in record.__dict__:
                setattr(record, field, "[REDACTED]")
        return True


def _app_logger(log_level: str) -> dict:
    return {
        "handlers": ["console"],
        "level": log_level,
        "propagate": False,
    }


def get_logging_config(environment: str = "development", log_file: str = None) -> dict:
    """
    Get logging configuration for the application.

    Args:
        environment: Environment name (development, production, test)
        log_file: Optional path of a rotating JSON log file

    Returns:
        Django logging configuration dictionary
    """
    log_level = "DEBUG" if environment == "development" else "INFO"

    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "json",
            "filters": ["sensitive"],
            "stream": sys.stdout,
        },
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "json",
            "filters": ["sensitive"],
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
        }

    config = {
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
        "filters": {
            "sensitive": {"()": SensitiveDataFilter},
        },
        "handlers": handlers,
        "root": {
            "handlers": ["console"],
            "level": log_level,
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
            "django.db.backends": {
                "handlers": ["console"],
                "level": "WARNING",
                "propagate": False,
            },
            "core": _app_logger(log_level),
            "api": _app_logger(log_level),
            "licenses": _app_logger(log_level),
            "accounts": _app_logger(log_level),
        },
    }

    if log_file:
        for logger_config in [config["root"], *config["loggers"].values()]:
            logger_config["handlers"].append("file")

    return config
