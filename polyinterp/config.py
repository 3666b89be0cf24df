"""
Runtime configuration.

Values come from environment variables with hard-coded defaults:

- ``POLYINTERP_MAX_POINTS``: largest point set accepted by the validator
  (``0`` disables the cap)
- ``POLYINTERP_SIGNIFICANT_DIGITS``: digits kept when formatting results
- ``POLYINTERP_LOG_LEVEL``: level used by :func:`polyinterp.logging_config.setup_logging`
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

DEFAULT_MAX_POINTS = 10
DEFAULT_SIGNIFICANT_DIGITS = 8
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class Settings:
    max_points: int = DEFAULT_MAX_POINTS
    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS
    log_level: str = DEFAULT_LOG_LEVEL

    def __post_init__(self):
        if self.max_points < 0:
            raise ValueError("max_points must be non-negative")
        if not 1 <= self.significant_digits <= 17:
            raise ValueError("significant_digits must be between 1 and 17")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level.upper())


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def load_settings() -> Settings:
    """Build :class:`Settings` from the current environment."""
    return Settings(
        max_points=_int_from_env("POLYINTERP_MAX_POINTS", DEFAULT_MAX_POINTS),
        significant_digits=_int_from_env(
            "POLYINTERP_SIGNIFICANT_DIGITS", DEFAULT_SIGNIFICANT_DIGITS
        ),
        log_level=os.getenv("POLYINTERP_LOG_LEVEL", DEFAULT_LOG_LEVEL),
    )
