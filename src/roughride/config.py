"""Runtime settings read from environment variables (and a ``.env`` file)."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from roughride.errors import ConfigError

TEST_SEGMENT_LENGTH_M = 50.0
PRODUCTION_SEGMENT_LENGTH_M = 200.0

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


@dataclass(frozen=True)
class Settings:
    test_mode: bool = True
    """Shorter segments for quick field tests; recorded in every export."""

    segment_length_m: float = TEST_SEGMENT_LENGTH_M
    sim_speed_mps: float = 5.56
    db_path: str = "roughride.db"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigError(f"{name} must be a boolean, got {raw!r}")


def _env_positive_float(name: str, default: float) -> float:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from exc
    if not math.isfinite(value) or value <= 0:
        raise ConfigError(f"{name} must be a finite number > 0, got {raw!r}")
    return value


def load_settings(dotenv: bool = True) -> Settings:
    """Build :class:`Settings` from ``ROUGHRIDE_*`` environment variables.

    ``ROUGHRIDE_SEGMENT_LENGTH_M`` defaults to 50 m in test mode and 200 m
    otherwise.

    Raises:
        ConfigError: If a variable is set to an unparsable value.
    """
    if dotenv:
        load_dotenv()
    test_mode = _env_bool("ROUGHRIDE_TEST_MODE", True)
    default_length = TEST_SEGMENT_LENGTH_M if test_mode else PRODUCTION_SEGMENT_LENGTH_M
    return Settings(
        test_mode=test_mode,
        segment_length_m=_env_positive_float("ROUGHRIDE_SEGMENT_LENGTH_M", default_length),
        sim_speed_mps=_env_positive_float("ROUGHRIDE_SIM_SPEED_MPS", 5.56),
        db_path=os.environ.get("ROUGHRIDE_DB", "roughride.db"),
    )
