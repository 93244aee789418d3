"""Coordinates, distance math and track file loading."""

from roughride.geo.distance import EARTH_RADIUS_M, distance, interpolate, path_length
from roughride.geo.gpx import load_gpx, parse_gpx
from roughride.geo.models import Coordinate, PositionSample, Route

__all__ = [
    "EARTH_RADIUS_M",
    "Coordinate",
    "PositionSample",
    "Route",
    "distance",
    "interpolate",
    "load_gpx",
    "parse_gpx",
    "path_length",
]
