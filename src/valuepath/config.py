from __future__ import annotations

import logging
import os

_DEFAULT_MAX_SEGMENTS = 1024
_DEFAULT_LOG_LEVEL = "WARNING"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ValueError(f"{name} must be >= 1, got {value}")
    return value


def _env_log_level(name: str, default: str) -> str:
    raw = (os.getenv(name) or default).strip().upper()
    if not isinstance(logging.getLevelName(raw), int):
        raise ValueError(f"{name} must be a logging level name, got {raw!r}")
    return raw


class ValuePathConfig:
    """Process-wide settings, read from the environment at import."""

    max_segments: int
    log_level: str

    def __init__(self) -> None:
        self.reload()

    def reload(self) -> None:
        """Re-read all settings from the environment."""
        self.max_segments = _env_int("VALUEPATH_MAX_SEGMENTS", _DEFAULT_MAX_SEGMENTS)
        self.log_level = _env_log_level("VALUEPATH_LOG_LEVEL", _DEFAULT_LOG_LEVEL)

    def __repr__(self) -> str:
        return (
            f"ValuePathConfig(max_segments={self.max_segments}, "
            f"log_level={self.log_level!r})"
        )


VALUEPATH_CONFIG = ValuePathConfig()


__all__ = ["VALUEPATH_CONFIG", "ValuePathConfig"]
