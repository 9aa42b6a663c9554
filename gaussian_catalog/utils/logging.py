"""Logging utilities for gaussian-catalog."""

import os
import logging
import logging.config
from typing import Optional

DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FILE = "~/.gaussian-catalog/logs/gaussian-catalog.log"


# ANSI color codes for log levels
COLORS = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}


class ColoredFormatter(logging.Formatter):
    """Formatter that colours the level name."""

    def format(self, record):
        levelname = record.levelname
        if levelname in COLORS:
            record.levelname = f"{COLORS[levelname]}{levelname}{COLORS['RESET']}"

        result = super().format(record)

        # Other handlers share the record
        record.levelname = levelname
        return result


def setup_logging(log_level: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """Set up logging configuration.

    Safe to call more than once; only the first call configures anything.

    Args:
        log_level: Logging level name, defaults to GAUSSIAN_LOG_LEVEL or INFO
        log_file: Path to the log file, defaults to GAUSSIAN_LOG_FILE
    """
    if getattr(setup_logging, "configured", False):
        return

    level_name = log_level or os.environ.get("GAUSSIAN_LOG_LEVEL", DEFAULT_LOG_LEVEL)
    level = getattr(logging, level_name.upper(), logging.INFO)

    log_file = os.path.expanduser(
        log_file or os.environ.get("GAUSSIAN_LOG_FILE", DEFAULT_LOG_FILE)
    )
    os.makedirs(os.path.dirname(log_file) or ".", exist_ok=True)

    colored_format = "%(asctime)s - %(levelname)s   -   %(name)s   -   %(message)s"
    standard_format = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "colored": {"()": ColoredFormatter, "format": colored_format},
                "standard": {"format": standard_format},
            },
            # Levels live on the loggers so set_logging_level can lower them
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": "NOTSET",
                    "formatter": "colored",
                    "stream": "ext://sys.stderr",
                },
                "file": {
                    "class": "logging.FileHandler",
                    "level": "NOTSET",
                    "formatter": "standard",
                    "filename": log_file,
                    "mode": "a",
                },
            },
            "loggers": {
                "": {"handlers": ["console", "file"], "level": level},
                "gaussian_catalog": {
                    "handlers": ["console", "file"],
                    "level": level,
                    "propagate": False,
                },
            },
        }
    )

    setup_logging.configured = True
    logging.getLogger(__name__).debug(
        f"Logging configured with level {level_name}, log file {log_file}"
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the specified name.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
