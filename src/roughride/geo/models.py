"""Geographic data structures."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinate:
    """A WGS-84 coordinate in degrees.

    Distances between coordinates use a planar approximation, see
    :func:`roughride.geo.distance.distance`.
    """

    latitude: float
    """Latitude in degrees, positive north."""

    longitude: float
    """Longitude in degrees, positive east."""


@dataclass(frozen=True)
class PositionSample:
    """A single position fix delivered by the location provider."""

    latitude: float
    """Latitude in degrees."""

    longitude: float
    """Longitude in degrees."""

    timestamp: float
    """Fix time in milliseconds since the epoch (provider clock)."""

    accuracy: float = 0.0
    """Horizontal accuracy radius in metres reported by the provider."""

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(self.latitude, self.longitude)


Route = tuple[Coordinate, ...]
"""An ordered, immutable sequence of coordinates loaded from a track file."""
