"""
harview/config.py

Centralized environment variable configuration.
"""

import logging
import os
from typing import Any

from dotenv import load_dotenv

load_dotenv()


def _env_log_level(name: str, default: int) -> int:
    level = logging.getLevelName(os.getenv(name, "").strip().upper())
    return level if isinstance(level, int) else default


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Config():
    """
    Centralized configuration for environment variables.
    """

    # logging
    LOG_LEVEL: int = _env_log_level("HARVIEW_LOG_LEVEL", logging.WARNING)
    LOG_FORMAT: str = "%(asctime)s - %(name)s:%(lineno)d - %(levelname)s - %(message)s"
    LOG_DATE_FORMAT: str = "%Y-%m-%d %H:%M:%S"

    # viewer
    PRETTY_BODIES: bool = _env_bool("HARVIEW_PRETTY_BODIES", True)
    MAX_CELL_WIDTH: int = _env_int("HARVIEW_MAX_CELL_WIDTH", 60)

    @classmethod
    def as_dict(cls) -> dict[str, Any]:
        """
        Return a dictionary of all UPPERCASE class attributes and their values.
        Return:
            dict[str, Any]: A dictionary of all UPPERCASE class attributes and their values.
        """
        return {
            key: getattr(cls, key)
            for key in dir(cls)
            if key.isupper()
        }
