"""
Runtime settings.

Values are read from the environment after loading an optional `.env` file
from the project root, so local overrides never need to be exported by hand.

Environment variables (all optional):
- FIXED_OFFSET_INTERN: share one FixedOffset instance per offset
  (true/false, 1/0, yes/no; default: true)
- LOG_LEVEL: level for the `api` logger (default: INFO)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv

# Look for .env in the project root
env_path = Path(__file__).parent.parent / ".env"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class Settings:
    intern_offsets: bool = True
    log_level: str = "INFO"


def _read_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default

    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise RuntimeError(
        f"Invalid value for environment variable {name}: {raw!r}. "
        "Use one of: true, false, 1, 0, yes, no."
    )


def _read_log_level(name: str, default: str) -> str:
    raw = (os.getenv(name) or default).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        raise RuntimeError(
            f"Invalid value for environment variable {name}: {raw!r}. "
            "Use a standard logging level such as DEBUG, INFO or WARNING."
        )
    return raw


def load_settings() -> Settings:
    """Load settings from `.env` (if present) and the process environment."""

    # Existing environment variables win over the .env file.
    load_dotenv(dotenv_path=env_path, override=False)

    return Settings(
        intern_offsets=_read_bool("FIXED_OFFSET_INTERN", True),
        log_level=_read_log_level("LOG_LEVEL", "INFO"),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, loaded once. Call `get_settings.cache_clear()` to reload."""

    return load_settings()


__all__ = ["Settings", "get_settings", "load_settings"]
