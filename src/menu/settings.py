"""Runtime settings read from the environment (after .env is loaded)."""

import logging
import os
from dataclasses import dataclass

DEFAULT_LOG_LEVEL = "WARNING"


def _log_level(raw: str) -> str:
    """Return raw as a known logging level name, or the default for anything else."""
    level = raw.strip().upper()
    if level and isinstance(logging.getLevelName(level), int):
        return level
    return DEFAULT_LOG_LEVEL


@dataclass(frozen=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    default_region: str | None = None

    @classmethod
    def from_env(cls) -> "Settings":
        level = _log_level(os.environ.get("ADDRESSBOOK_LOG_LEVEL", ""))
        region = os.environ.get("ADDRESSBOOK_DEFAULT_REGION", "").strip().upper() or None
        return cls(log_level=level, default_region=region)
