from __future__ import annotations

import logging
import os
from dataclasses import dataclass


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def log_level() -> str:
    """Return the upper-cased log level name from ONEREPMAX_LOG_LEVEL (default INFO)."""
    raw = os.environ.get("ONEREPMAX_LOG_LEVEL", "").strip()
    if not raw:
        return "INFO"
    level = raw.upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"ONEREPMAX_LOG_LEVEL must be one of {list(LOG_LEVELS)}, got {raw!r}")
    return level


def log_file() -> str | None:
    """Return the log file path, or None to log to the console only."""
    return os.environ.get("ONEREPMAX_LOG_FILE") or None


def _env_number(name: str, default: float, cast=float):
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return cast(default)
    try:
        return cast(raw.strip().replace(",", "."))
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass
class CalculatorConfig:
    decimals: int
    max_reps: int
    default_weight: float
    default_reps: int


def calculator_config() -> CalculatorConfig:
    """Return calculator defaults used by the app and scripts.

    ONEREPMAX_DECIMALS (2), ONEREPMAX_MAX_REPS (12),
    ONEREPMAX_DEFAULT_WEIGHT (100) and ONEREPMAX_DEFAULT_REPS (5) may be
    overridden from the environment or a .env file.
    """
    return CalculatorConfig(
        decimals=_env_number("ONEREPMAX_DECIMALS", 2, int),
        max_reps=_env_number("ONEREPMAX_MAX_REPS", 12, int),
        default_weight=_env_number("ONEREPMAX_DEFAULT_WEIGHT", 100.0),
        default_reps=_env_number("ONEREPMAX_DEFAULT_REPS", 5, int),
    )
