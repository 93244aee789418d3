"""Tests for GPX track loading."""

from __future__ import annotations

import pytest

from roughride.errors import TrackFileError
from roughride.geo.gpx import load_gpx, parse_gpx
from roughride.geo.models import Coordinate

_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
  <wpt lat="1.0" lon="1.0"><name>ignored</name></wpt>
  <trk>
    <name>ride</name>
    <trkseg>
      <trkpt lat="19.0760" lon="72.8777"></trkpt>
      <trkpt lat="19.0765" lon="72.8780"></trkpt>
    </trkseg>
    <trkseg>
      <trkpt lat="19.0770" lon="72.8783"></trkpt>
    </trkseg>
  </trk>
</gpx>
"""

_EMPTY_GPX = """<?xml version="1.0" encoding="UTF-8"?>
<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">
</gpx>
"""


def test_parse_gpx_flattens_track_segments_in_order():
    route = parse_gpx(_GPX)
    assert route == (
        Coordinate(19.0760, 72.8777),
        Coordinate(19.0765, 72.8780),
        Coordinate(19.0770, 72.8783),
    )


def test_parse_gpx_returns_immutable_route():
    assert isinstance(parse_gpx(_GPX), tuple)


def test_parse_gpx_without_tracks_is_empty():
    assert parse_gpx(_EMPTY_GPX) == ()


def test_parse_gpx_malformed_raises():
    with pytest.raises(TrackFileError):
        parse_gpx("<gpx><trk><trkseg><trkpt lat=")


def test_load_gpx_reads_file(tmp_path):
    path = tmp_path / "ride.gpx"
    path.write_text(_GPX, encoding="utf-8")
    assert len(load_gpx(path)) == 3


def test_load_gpx_missing_file_raises(tmp_path):
    with pytest.raises(TrackFileError):
        load_gpx(tmp_path / "missing.gpx")
