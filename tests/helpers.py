"""Shared builders for synthetic routes and sensor samples."""

from __future__ import annotations

from roughride.geo.distance import offset_north
from roughride.geo.models import Coordinate, PositionSample
from roughride.vibration.models import MotionSample

ORIGIN = Coordinate(latitude=19.0760, longitude=72.8777)


def north(metres: float) -> Coordinate:
    """Coordinate *metres* due north of :data:`ORIGIN`."""
    return offset_north(ORIGIN, metres)


def straight_route(*offsets_m: float) -> tuple[Coordinate, ...]:
    """Collinear route with points at the given cumulative offsets."""
    return tuple(north(m) for m in offsets_m)


def position(metres: float, timestamp: float, accuracy: float = 5.0) -> PositionSample:
    c = north(metres)
    return PositionSample(
        latitude=c.latitude, longitude=c.longitude, timestamp=timestamp, accuracy=accuracy
    )


def motion(timestamp: float, filtered: float, raw: float = 10.0) -> MotionSample:
    return MotionSample(
        timestamp=timestamp,
        raw_magnitude=raw,
        filtered_magnitude=filtered,
        x=0.0,
        y=0.0,
        z=raw,
    )
