"""Short-range distance math on latitude/longitude pairs.

Uses the equirectangular approximation: latitude difference taken directly,
longitude difference scaled by the cosine of the mean latitude, both in
radians, multiplied by the mean Earth radius.  Accurate to well under a
percent for spans of a few kilometres; do not use it for long geodesics.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from roughride.geo.models import Coordinate

EARTH_RADIUS_M = 6_371_000.0


def distance(a: Coordinate, b: Coordinate) -> float:
    """Return the planar-approximated distance between *a* and *b* in metres."""
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    x = lat2 - lat1
    y = math.radians(b.longitude - a.longitude) * math.cos((lat1 + lat2) / 2)
    return math.sqrt(x * x + y * y) * EARTH_RADIUS_M


def path_length(coords: Sequence[Coordinate]) -> float:
    """Return the length of the polyline *coords*, summed over consecutive pairs."""
    return sum(distance(coords[i - 1], coords[i]) for i in range(1, len(coords)))


def interpolate(a: Coordinate, b: Coordinate, fraction: float) -> Coordinate:
    """Linear interpolation in degrees; ``fraction`` 0 → *a*, 1 → *b*."""
    return Coordinate(
        latitude=a.latitude + (b.latitude - a.latitude) * fraction,
        longitude=a.longitude + (b.longitude - a.longitude) * fraction,
    )


def offset_north(origin: Coordinate, metres: float) -> Coordinate:
    """Return the coordinate *metres* due north of *origin* (negative = south).

    Exact inverse of :func:`distance` along a meridian, handy for building
    synthetic routes with known lengths.
    """
    return Coordinate(
        latitude=origin.latitude + math.degrees(metres / EARTH_RADIUS_M),
        longitude=origin.longitude,
    )
