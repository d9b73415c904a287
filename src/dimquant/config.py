"""Environment-driven settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_FLOAT_PRECISION = 6


@dataclass(frozen=True, slots=True)
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    float_precision: int = DEFAULT_FLOAT_PRECISION
    units_file: Optional[Path] = None


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %d", name, raw, default)
        return default
    if value < 0:
        logger.warning("Ignoring %s=%r: must not be negative, using %d", name, raw, default)
        return default
    return value


def load_settings() -> Settings:
    """Read the ``DIMQUANT_*`` environment variables."""

    units_file = os.getenv("DIMQUANT_UNITS_FILE")
    return Settings(
        log_level=(os.getenv("DIMQUANT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        float_precision=_int_env("DIMQUANT_FLOAT_PRECISION", DEFAULT_FLOAT_PRECISION),
        units_file=Path(units_file) if units_file else None,
    )


__all__ = ["DEFAULT_FLOAT_PRECISION", "DEFAULT_LOG_LEVEL", "Settings", "load_settings"]
