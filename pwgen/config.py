"""
config.py
---------
Application metadata and runtime settings.

Settings are read from the environment; a `.env` file in the working
directory is loaded first (python-dotenv), without overriding variables that
are already set.
"""

from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import find_dotenv, load_dotenv

logger = logging.getLogger(__name__)

APP_NAME = "PasswordGenerator"
APP_DESCRIPTION = "bulk generation of pseudo random passwords"
APP_VERSION = "0.1.1"
APP_AUTHOR = "Heiko Möllerke"

DEFAULT_LENGTH = 8
DEFAULT_NUMBER = 1
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    length: int = DEFAULT_LENGTH
    number: int = DEFAULT_NUMBER
    seed: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL


def parse_count(raw: Optional[str], default: int, name: str = "value") -> int:
    """Parses a non-negative integer, falling back to `default` on bad input."""
    if raw is None:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        logger.warning("Invalid %s %r, using default %d", name, raw, default)
        return default
    if value < 0:
        logger.warning("Negative %s %r, using default %d", name, raw, default)
        return default
    return value


def _parse_seed(raw: Optional[str]) -> Optional[int]:
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        logger.warning("Invalid PWGEN_SEED %r, ignoring", raw)
        return None


def load_settings(dotenv_path: Optional[str] = None) -> Settings:
    path = dotenv_path or find_dotenv(usecwd=True)
    if path:
        load_dotenv(path)
    level = os.getenv("PWGEN_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Unknown PWGEN_LOG_LEVEL %r, using %s", level, DEFAULT_LOG_LEVEL)
        level = DEFAULT_LOG_LEVEL
    return Settings(
        length=parse_count(os.getenv("PWGEN_LENGTH"), DEFAULT_LENGTH, "PWGEN_LENGTH"),
        number=parse_count(os.getenv("PWGEN_NUMBER"), DEFAULT_NUMBER, "PWGEN_NUMBER"),
        seed=_parse_seed(os.getenv("PWGEN_SEED")),
        log_level=level,
    )
