from collections.abc import Generator
from contextlib import contextmanager
from dataclasses import dataclass

import pytest

from .config import VALUEPATH_CONFIG, ValuePathConfig


@dataclass(frozen=True)
class _ValuePathConfigSnapshot:
    max_segments: int
    log_level: str

    @classmethod
    def capture(cls) -> "_ValuePathConfigSnapshot":
        return cls(
            max_segments=VALUEPATH_CONFIG.max_segments,
            log_level=VALUEPATH_CONFIG.log_level,
        )

    def restore(self) -> None:
        VALUEPATH_CONFIG.max_segments = self.max_segments
        VALUEPATH_CONFIG.log_level = self.log_level


@contextmanager
def valuepath_test_env(
    *, max_segments: int | None = None, log_level: str | None = None
) -> Generator[ValuePathConfig, None, None]:
    """Temporarily override ``VALUEPATH_CONFIG``; restored on exit."""
    snapshot = _ValuePathConfigSnapshot.capture()
    if max_segments is not None:
        VALUEPATH_CONFIG.max_segments = max_segments
    if log_level is not None:
        VALUEPATH_CONFIG.log_level = log_level
    try:
        yield VALUEPATH_CONFIG
    finally:
        snapshot.restore()


@pytest.fixture()
def valuepath_config() -> Generator[ValuePathConfig, None, None]:
    """Give the test a config it may mutate freely."""
    with valuepath_test_env() as config:
        yield config
