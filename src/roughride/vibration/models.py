"""Motion sample data model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MotionSample:
    """One accelerometer reading after vibration filtering.

    Immutable once created; owned by the motion buffer of the recording
    session.
    """

    timestamp: float
    """Event time in milliseconds (same clock as position samples)."""

    raw_magnitude: float
    """Magnitude of the gravity-inclusive acceleration vector, m/s²."""

    filtered_magnitude: float
    """Road-vibration estimate produced by the high-pass filter, m/s²."""

    x: float
    y: float
    z: float
