"""Shared fixtures for web tests."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from roughride.web.app import app


@pytest.fixture
def client():
    """FastAPI test client."""
    with TestClient(app) as c:
        yield c


def make_gpx(points: list[tuple[float, float]]) -> str:
    """Build a single-track GPX document from ``(lat, lon)`` pairs."""
    trkpts = "\n".join(f'      <trkpt lat="{lat}" lon="{lon}"></trkpt>' for lat, lon in points)
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<gpx version="1.1" creator="test" xmlns="http://www.topografix.com/GPX/1/1">\n'
        "  <trk>\n    <trkseg>\n"
        f"{trkpts}\n"
        "    </trkseg>\n  </trk>\n</gpx>\n"
    )
