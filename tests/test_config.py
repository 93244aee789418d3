"""Tests for environment-driven settings."""

from __future__ import annotations

import pytest

from roughride.config import load_settings
from roughride.errors import ConfigError

_VARS = (
    "ROUGHRIDE_TEST_MODE",
    "ROUGHRIDE_SEGMENT_LENGTH_M",
    "ROUGHRIDE_SIM_SPEED_MPS",
    "ROUGHRIDE_DB",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults_are_test_mode():
    s = load_settings(dotenv=False)
    assert s.test_mode is True
    assert s.segment_length_m == 50.0
    assert s.sim_speed_mps == pytest.approx(5.56)
    assert s.db_path == "roughride.db"


def test_production_mode_uses_longer_segments(monkeypatch):
    monkeypatch.setenv("ROUGHRIDE_TEST_MODE", "false")
    s = load_settings(dotenv=False)
    assert s.test_mode is False
    assert s.segment_length_m == 200.0


def test_explicit_segment_length_wins(monkeypatch):
    monkeypatch.setenv("ROUGHRIDE_TEST_MODE", "0")
    monkeypatch.setenv("ROUGHRIDE_SEGMENT_LENGTH_M", "75.5")
    monkeypatch.setenv("ROUGHRIDE_DB", "/tmp/x.db")
    s = load_settings(dotenv=False)
    assert s.segment_length_m == 75.5
    assert s.db_path == "/tmp/x.db"


@pytest.mark.parametrize("value", ["abc", "-5", "0", "inf", "nan"])
def test_invalid_segment_length_raises(monkeypatch, value):
    monkeypatch.setenv("ROUGHRIDE_SEGMENT_LENGTH_M", value)
    with pytest.raises(ConfigError):
        load_settings(dotenv=False)


def test_invalid_bool_raises(monkeypatch):
    monkeypatch.setenv("ROUGHRIDE_TEST_MODE", "maybe")
    with pytest.raises(ConfigError):
        load_settings(dotenv=False)


def test_infinite_sim_speed_raises(monkeypatch):
    monkeypatch.setenv("ROUGHRIDE_SIM_SPEED_MPS", "inf")
    with pytest.raises(ConfigError, match="finite"):
        load_settings(dotenv=False)
