"""
core/logging.py

Centralized logging configuration for applications embedding the rule checker.
- Colored console logs via `colorlog`
- Optional RotatingFileHandler for file logs (1MB max, 5 backups)
- Optional separate error.log for ERROR and above
- Log level defaults to the LOG_LEVEL setting

Library modules only call `logging.getLogger(__name__)`; nothing is configured
on import. Call `init_logging()` once from the host application.
"""

import os
from logging.config import dictConfig
from typing import Any, Optional

from password_rules.core import config

LOG_FORMAT = "[%(asctime)s] %(levelname)s [%(name)s] in %(module)s: %(message)s"
LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


def build_logging_config(level: Optional[str] = None, log_dir: Optional[str] = None) -> dict[str, Any]:
    """
    Builds a `dictConfig` mapping.

    Args:
        level (Optional[str]): Root log level, defaults to settings.LOG_LEVEL
        log_dir (Optional[str]): When given, app and error log files are written there

    Returns:
        dict[str, Any]: Logging configuration suitable for `dictConfig`
    """
    handlers: dict[str, dict[str, Any]] = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "color",
        },
    }

    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        handlers["file"] = {
            "class": "logging.handlers.RotatingFileHandler",
            "filename": os.path.join(log_dir, "password_rules.log"),
            "maxBytes": 1 * 1024 * 1024,  # 1MB
            "backupCount": 5,
            "formatter": "default",
            "encoding": "utf-8",
        }
        handlers["error_file"] = {
            "class": "logging.FileHandler",
            "filename": os.path.join(log_dir, "error.log"),
            "level": "ERROR",
            "formatter": "default",
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": LOG_FORMAT},
            "color": {
                "()": "colorlog.ColoredFormatter",
                "format": "%(log_color)s" + LOG_FORMAT,
                "log_colors": LOG_COLORS,
            },
        },
        "handlers": handlers,
        "root": {
            "level": (level or config.settings.LOG_LEVEL).upper(),
            "handlers": list(handlers),
        },
    }


def init_logging(level: Optional[str] = None, log_dir: Optional[str] = None) -> None:
    """Initializes logging using `build_logging_config`."""
    dictConfig(build_logging_config(level, log_dir))
