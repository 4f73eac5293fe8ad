"""Logging setup for the matchmaking service.

Console output is always enabled; a rotating file handler is added when a
log file path is configured.
"""

import logging
from logging.config import dictConfig
from pathlib import Path
from typing import Any

_DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_DETAILED_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(funcName)s"
    " - %(lineno)d - %(message)s"
)


def build_logging_config(level: str = "INFO", log_file: str | None = None) -> dict[str, Any]:
    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "level": level,
        },
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "formatter": "detailed",
            "filename": log_file,
            "maxBytes": 10485760,  # 10MB
            "backupCount": 5,
            "level": level,
        }
    handler_names = list(handlers)
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": _DEFAULT_FORMAT},
            "detailed": {"format": _DETAILED_FORMAT},
        },
        "handlers": handlers,
        "loggers": {
            "src": {"handlers": handler_names, "level": level, "propagate": False},
            "mm.request": {"handlers": handler_names, "level": level, "propagate": False},
        },
        "root": {"handlers": handler_names, "level": level},
    }


def configure_logging(level: str = "INFO", log_file: str | None = None) -> logging.Logger:
    """Apply the dictConfig and return the application logger."""
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
    dictConfig(build_logging_config(level, log_file))
    return logging.getLogger("src")
