import pytest

from valuepath import VALUEPATH_CONFIG
from valuepath.config import ValuePathConfig
from valuepath.testing import valuepath_test_env


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("VALUEPATH_MAX_SEGMENTS", raising=False)
    monkeypatch.delenv("VALUEPATH_LOG_LEVEL", raising=False)

    config = ValuePathConfig()

    assert config.max_segments == 1024
    assert config.log_level == "WARNING"


def test_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VALUEPATH_MAX_SEGMENTS", "16")
    monkeypatch.setenv("VALUEPATH_LOG_LEVEL", "debug")

    config = ValuePathConfig()

    assert config.max_segments == 16
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize("raw", ["lots", "0", "-3"])
def test_rejects_bad_segment_limit(monkeypatch: pytest.MonkeyPatch, raw: str) -> None:
    monkeypatch.setenv("VALUEPATH_MAX_SEGMENTS", raw)

    with pytest.raises(ValueError, match="VALUEPATH_MAX_SEGMENTS"):
        ValuePathConfig()


def test_rejects_bad_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("VALUEPATH_LOG_LEVEL", "chatty")

    with pytest.raises(ValueError, match="VALUEPATH_LOG_LEVEL"):
        ValuePathConfig()


def test_test_env_restores_config() -> None:
    before = VALUEPATH_CONFIG.max_segments

    with valuepath_test_env(max_segments=5, log_level="DEBUG") as config:
        assert config.max_segments == 5
        assert VALUEPATH_CONFIG.log_level == "DEBUG"

    assert VALUEPATH_CONFIG.max_segments == before
