"""GPX track loading — flattens track points into a :data:`Route`."""

from __future__ import annotations

import logging
from pathlib import Path

import gpxpy
import gpxpy.gpx

from roughride.errors import TrackFileError
from roughride.geo.models import Coordinate, Route

_logger = logging.getLogger(__name__)


def parse_gpx(text: str) -> Route:
    """Parse GPX XML *text* and return every track point in document order.

    Points from all tracks and track segments are concatenated.  Routes and
    waypoints are ignored.  A document without track points yields an empty
    route; the caller decides whether that is an error.

    Raises:
        TrackFileError: If *text* is not valid GPX.
    """
    try:
        gpx = gpxpy.parse(text)
    except gpxpy.gpx.GPXException as exc:
        raise TrackFileError(f"Invalid GPX document: {exc}") from exc

    coords = [
        Coordinate(latitude=float(pt.latitude), longitude=float(pt.longitude))
        for trk in gpx.tracks
        for seg in trk.segments
        for pt in seg.points
    ]
    _logger.debug("Parsed %d track points", len(coords))
    return tuple(coords)


def load_gpx(path: str | Path) -> Route:
    """Read and parse the GPX file at *path*."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise TrackFileError(f"Cannot read GPX file {str(path)!r}: {exc}") from exc
    return parse_gpx(text)
