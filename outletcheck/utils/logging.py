from __future__ import annotations

import logging
import os
from typing import Optional

LOGGER_NAME = "outletcheck"
_LEVEL_ENV_VARS = ("OUTLETCHECK_LOG_LEVEL",)
_DEBUG_FLAGS = ("OUTLETCHECK_DEBUG",)


def _coerce_level(value: Optional[str], fallback: int) -> int:
    if not value:
        return fallback
    text = value.strip()
    if not text:
        return fallback
    if text.isdigit():
        try:
            return int(text)
        except ValueError:
            return fallback
    upper = text.upper()
    if hasattr(logging, upper):
        candidate = getattr(logging, upper)
        if isinstance(candidate, int):
            return candidate
    return fallback


def _env_truthy(value: Optional[str]) -> bool:
    if value is None:
        return False
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _resolve_env_level() -> Optional[int]:
    for var in _LEVEL_ENV_VARS:
        value = os.getenv(var)
        if value:
            return _coerce_level(value, logging.WARNING)
    if any(_env_truthy(os.getenv(flag)) for flag in _DEBUG_FLAGS):
        return logging.DEBUG
    return None


def configure(default_level: int | str = logging.WARNING) -> int:
    """
    Set the level of the ``outletcheck`` logger.

    The host test session owns the root logger and its handlers; only the
    package logger is touched.

    Environment overrides:
      - OUTLETCHECK_LOG_LEVEL: explicit log level
      - OUTLETCHECK_DEBUG: truthy -> DEBUG
    """
    fallback = (
        _coerce_level(default_level, logging.WARNING)
        if isinstance(default_level, str)
        else int(default_level)
    )
    env_level = _resolve_env_level()
    effective = env_level if env_level is not None else fallback
    logging.getLogger(LOGGER_NAME).setLevel(effective)
    return effective


def level_name(level: int) -> str:
    """Return logging level name for diagnostics."""
    return logging.getLevelName(level)
