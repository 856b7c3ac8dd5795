"""Runtime settings read from the environment."""

import logging
import os
from dataclasses import dataclass


@dataclass
class AppConfig:
    sync_interval: float = 30.0   # seconds between auto-sync ticks
    log_level: int = logging.INFO


def load_config(environ: dict[str, str] | None = None) -> AppConfig:
    """Build an AppConfig from SYNC_INTERVAL and LOG_LEVEL. Raises ValueError on bad values."""
    env = os.environ if environ is None else environ

    raw_interval = env.get("SYNC_INTERVAL", "30")
    try:
        interval = float(raw_interval)
    except ValueError:
        raise ValueError(f"SYNC_INTERVAL must be a number, got {raw_interval!r}") from None
    if interval <= 0:
        raise ValueError(f"SYNC_INTERVAL must be positive, got {raw_interval!r}")

    level_name = env.get("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown LOG_LEVEL: {level_name!r}")

    return AppConfig(sync_interval=interval, log_level=level)
