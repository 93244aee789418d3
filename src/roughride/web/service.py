"""RouteService — wraps track loading, segmentation and simulation for the Web API."""

from __future__ import annotations

import random

from roughride.config import Settings
from roughride.geo.distance import path_length
from roughride.geo.gpx import parse_gpx
from roughride.geo.models import Route
from roughride.reporting.colors import segment_colors
from roughride.segmentation.models import Segment
from roughride.segmentation.route import RouteSegmenter
from roughride.simulation.driver import SimulationDriver
from roughride.web.schemas import (
    CoordinateOut,
    SegmentOut,
    SegmentRouteRequest,
    SegmentsResponse,
    SimulateRequest,
    SimulateResponse,
)


def _segments_out(segments: list[Segment]) -> list[SegmentOut]:
    colors = segment_colors([s.roughness for s in segments])
    return [
        SegmentOut(
            index=idx,
            distance=seg.distance,
            roughness=seg.roughness,
            sample_count=seg.sample_count,
            color=colors[idx],
            coords=[CoordinateOut(lat=c.latitude, lng=c.longitude) for c in seg.coords],
        )
        for idx, seg in enumerate(segments)
    ]


class RouteService:
    """Stateless pipeline from GPX text to segment responses.

    Parameters
    ----------
    settings:
        Supplies default segment length and simulation speed.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def _load_route(self, gpx_text: str) -> Route:
        """Parse *gpx_text*.

        Raises
        ------
        TrackFileError
            If the GPX is malformed.
        ValueError
            If it contains no track points.
        """
        route = parse_gpx(gpx_text)
        if not route:
            raise ValueError("No route found in GPX file")
        return route

    def segment_route(self, req: SegmentRouteRequest) -> SegmentsResponse:
        route = self._load_route(req.gpx)
        length = req.segment_length_m or self._settings.segment_length_m
        segments = RouteSegmenter(length, split_edges=req.split_edges).segment(route)
        return SegmentsResponse(
            segment_length_m=length,
            total_distance=path_length(route),
            segments=_segments_out(segments),
        )

    def simulate(self, req: SimulateRequest) -> SimulateResponse:
        route = self._load_route(req.gpx)
        length = req.segment_length_m or self._settings.segment_length_m
        speed = req.speed_mps or self._settings.sim_speed_mps
        segments = RouteSegmenter(length).segment(route)
        driver = SimulationDriver(route, segments, speed_mps=speed, rng=random.Random(req.seed))
        ticks = driver.run()
        pos = driver.position
        return SimulateResponse(
            segment_length_m=length,
            total_distance=path_length(route),
            segments=_segments_out(segments),
            ticks=ticks,
            final_position=CoordinateOut(lat=pos.latitude, lng=pos.longitude),
        )
