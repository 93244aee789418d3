"""Offline route segmentation — splits a full polyline into fixed-length spans.

Boundaries are chosen greedily from the route start and never rebalanced, so
only the final segment may be shorter than the target length.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from roughride.geo.distance import distance, interpolate
from roughride.geo.models import Coordinate
from roughride.segmentation.models import Segment

_logger = logging.getLogger(__name__)

_EPS_M = 1e-6  # metres; absorbs float error when a boundary lands on a vertex


class RouteSegmenter:
    """Split a route into segments of *segment_length_m*.

    Args:
        segment_length_m: Target segment length in metres.  Must be > 0.
        split_edges: When True (default) a boundary is placed exactly at the
            target length, interpolating a new coordinate inside the edge
            that crosses it.  A route of length ``L`` then yields
            ``ceil(L / segment_length_m)`` segments.  When False the boundary
            is the first route vertex at or past the target length, so long
            edges produce long segments.
    """

    def __init__(self, segment_length_m: float, split_edges: bool = True) -> None:
        if segment_length_m <= 0:
            raise ValueError("segment_length_m must be > 0")
        self.segment_length_m = segment_length_m
        self.split_edges = split_edges

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def segment(self, route: Sequence[Coordinate]) -> list[Segment]:
        """Return the segments covering *route*, in route order.

        Coordinates are copied into each segment; consecutive segments share
        their boundary coordinate.  Fewer than 2 points yield ``[]``.
        """
        coords = list(route)
        if len(coords) < 2:
            return []
        if self.split_edges:
            segments = self._segment_split(coords)
        else:
            segments = self._segment_at_vertices(coords)
        _logger.debug(
            "Segmented %d points into %d segments of %.1fm",
            len(coords), len(segments), self.segment_length_m,
        )
        return segments

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _segment_at_vertices(self, coords: list[Coordinate]) -> list[Segment]:
        segments: list[Segment] = []
        n = len(coords)
        start = 0
        while start < n - 1:
            end = start + 1
            acc = 0.0
            while end < n:
                acc += distance(coords[end - 1], coords[end])
                if acc >= self.segment_length_m:
                    break
                end += 1
            end = min(end, n - 1)
            segments.append(_make_segment(coords[start:end + 1], start, end, acc))
            start = end
        return segments

    def _segment_split(self, coords: list[Coordinate]) -> list[Segment]:
        target = self.segment_length_m
        segments: list[Segment] = []
        current = [coords[0]]
        start_index = 0
        acc = 0.0

        for i in range(1, len(coords)):
            a, b = coords[i - 1], coords[i]
            edge = distance(a, b)
            offset = 0.0  # metres of this edge already assigned

            while acc + (edge - offset) >= target - _EPS_M:
                step = target - acc
                if offset + step >= edge - _EPS_M:
                    break  # boundary falls on vertex b
                offset += step
                point = interpolate(a, b, offset / edge)
                current.append(point)
                segments.append(_make_segment(current, start_index, i, target))
                current = [point]
                start_index = i - 1
                acc = 0.0

            acc += edge - offset
            current.append(b)
            if acc >= target - _EPS_M:
                segments.append(_make_segment(current, start_index, i, acc))
                current = [b]
                start_index = i
                acc = 0.0

        if len(current) >= 2 and acc > _EPS_M:
            segments.append(_make_segment(current, start_index, len(coords) - 1, acc))
        return segments


def _make_segment(
    coords: Sequence[Coordinate], start_index: int, end_index: int, dist: float
) -> Segment:
    span = tuple(coords)
    return Segment(
        start=span[0],
        end=span[-1],
        distance=dist,
        coords=span,
        start_index=start_index,
        end_index=end_index,
    )
