"""SimulationDriver — plays a marker along a route at constant speed.

Each tick moves the marker ``speed_mps`` metres (one tick is one simulated
second), assigns it to the nearest segment and appends one synthetic
vibration sample to that segment.  Output uses the same :class:`Segment`
model as live recording so display and export code is shared.
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Sequence

from roughride.errors import SimulationError
from roughride.geo.distance import distance, interpolate
from roughride.geo.models import Coordinate
from roughride.segmentation.models import Segment
from roughride.simulation.vibration import simulate_vibration

_logger = logging.getLogger(__name__)

DEFAULT_SPEED_MPS = 5.56  # 20 km/h


class SimulationDriver:
    """Advance a virtual position along *route* and feed *segments*.

    Parameters
    ----------
    route:
        Ordered route coordinates, at least two.
    segments:
        Segments covering the route (usually from
        :class:`~roughride.segmentation.route.RouteSegmenter`).  Mutated in
        place: vibration samples are appended during :meth:`tick`.
    speed_mps:
        Distance covered per tick, metres.
    rng:
        Random source for synthetic vibration; a fresh unseeded
        :class:`random.Random` when omitted.

    Raises
    ------
    SimulationError
        If *route* has fewer than two coordinates.
    """

    def __init__(
        self,
        route: Sequence[Coordinate],
        segments: list[Segment],
        speed_mps: float = DEFAULT_SPEED_MPS,
        rng: random.Random | None = None,
    ) -> None:
        if len(route) < 2:
            raise SimulationError("A route with at least two coordinates must be loaded")
        if speed_mps <= 0:
            raise ValueError("speed_mps must be > 0")
        self._route = tuple(route)
        self._segments = segments
        self._speed = speed_mps
        self._rng = rng or random.Random()
        self._index = 0
        self._progress = 0.0
        self._position = self._route[0]
        self._current_idx: int | None = None
        self._ticks = 0

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def position(self) -> Coordinate:
        """Current marker position."""
        return self._position

    @property
    def current_segment_index(self) -> int | None:
        """Index of the segment nearest to the marker, or None."""
        return self._current_idx

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def finished(self) -> bool:
        """True once the marker has reached the last route coordinate."""
        return self._index >= len(self._route) - 1

    def reset(self) -> None:
        """Return the marker to the start and clear all segment vibration."""
        for seg in self._segments:
            seg.clear_vibration()
        self._index = 0
        self._progress = 0.0
        self._position = self._route[0]
        self._current_idx = None
        self._ticks = 0

    def tick(self) -> bool:
        """Advance one tick.  Returns True while the route end is not yet reached.

        Calling :meth:`tick` after the end is a no-op returning False.
        """
        if self.finished:
            return False

        self._advance(self._speed)
        self._ticks += 1
        self._current_idx = self.nearest_segment(self._position)

        if self._current_idx is not None:
            seg = self._segments[self._current_idx]
            seg.add_vibration(simulate_vibration(self._rng))

        if self.finished:
            _logger.info("Simulation reached route end after %d ticks", self._ticks)
        return not self.finished

    def run(self, max_ticks: int | None = None) -> int:
        """Tick until the route end (or *max_ticks*) and return the tick count."""
        while not self.finished:
            if max_ticks is not None and self._ticks >= max_ticks:
                break
            self.tick()
        return self._ticks

    def nearest_segment(self, point: Coordinate) -> int | None:
        """Index of the segment with the vertex nearest to *point*.

        Scans every vertex of every segment; the first minimum found wins.
        """
        best_idx: int | None = None
        best_dist = math.inf
        for idx, seg in enumerate(self._segments):
            for pt in seg.coords or (seg.start,):
                d = distance(point, pt)
                if d < best_dist:
                    best_dist = d
                    best_idx = idx
        return best_idx

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _advance(self, travel: float) -> None:
        route = self._route
        while travel > 0 and self._index < len(route) - 1:
            curr = route[self._index]
            nxt = route[self._index + 1]
            edge = distance(curr, nxt)

            if self._progress + travel < edge:
                self._progress += travel
                self._position = interpolate(curr, nxt, self._progress / edge)
                travel = 0.0
            else:
                travel -= edge - self._progress
                self._index += 1
                self._progress = 0.0
                self._position = nxt
