"""Configuration utilities for gaussian-catalog.

Configuration is read from environment variables, optionally seeded from a
``.env`` file in the working directory.
"""

import os
import logging
from typing import Any, Dict, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URI = "sqlite:///gaussian_catalog.db"
DEFAULT_API_BASE_URL = "http://localhost:8000"


def load_dotenv_once() -> None:
    """Load environment variables from .env, at most once per process."""
    if getattr(load_dotenv_once, "loaded", False):
        return
    load_dotenv(override=False)
    load_dotenv_once.loaded = True
    logger.debug("Loaded environment variables from .env file")


def load_config() -> Dict[str, Any]:
    """Load configuration from environment variables."""
    return {
        "database_uri": os.environ.get("DATABASE_URI", DEFAULT_DATABASE_URI),
        "api_base_url": os.environ.get("API_BASE_URL", DEFAULT_API_BASE_URL),
        "api_host": os.environ.get("API_HOST", "127.0.0.1"),
        "api_port": int(os.environ.get("API_PORT", 8000)),
        "api_timeout": float(os.environ.get("API_TIMEOUT", 30)),
        "log_level": os.environ.get("GAUSSIAN_LOG_LEVEL", "INFO"),
        "log_file": os.environ.get("GAUSSIAN_LOG_FILE", None),
    }


def get_config_value(key: str, default: Optional[Any] = None) -> Any:
    """Get a configuration value from the environment.

    Args:
        key: Configuration key, e.g. ``database_uri``
        default: Default value if the key is unknown or unset

    Returns:
        Configuration value
    """
    value = load_config().get(key)
    return default if value is None else value
