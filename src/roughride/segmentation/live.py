"""LiveSegmentBuilder — closes segments as a position stream crosses the threshold.

Single pass and append only: a closed segment is never reopened or revised.
Motion samples are buffered independently of segment boundaries and assigned
to a segment by timestamp when it closes.
"""

from __future__ import annotations

import bisect
import logging

from roughride.geo.distance import distance
from roughride.geo.models import PositionSample
from roughride.segmentation.models import Segment
from roughride.vibration.models import MotionSample

_logger = logging.getLogger(__name__)


class LiveSegmentBuilder:
    """Incrementally build segments from position and motion samples.

    The boundary test is the distance from the open segment's start position
    to each new position.  Positions that do not cross the threshold only
    take part in the boundary test.

    The motion buffer is kept sorted by timestamp so the samples of a closing
    segment are found with two binary searches instead of a full rescan.  For
    in-order delivery the result is identical; slightly out-of-order samples
    are still assigned by their timestamp.

    Args:
        segment_length_m: Distance in metres that triggers a boundary.
    """

    def __init__(self, segment_length_m: float) -> None:
        if segment_length_m <= 0:
            raise ValueError("segment_length_m must be > 0")
        self.segment_length_m = segment_length_m
        self._position_count = 0
        self._motion: list[MotionSample] = []
        self._motion_times: list[float] = []
        self._current: Segment | None = None
        self._closed: list[Segment] = []

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def current(self) -> Segment | None:
        """The open segment, or None before the first position."""
        return self._current

    @property
    def segments(self) -> list[Segment]:
        """Closed segments in closing order (a copy of the list)."""
        return list(self._closed)

    @property
    def position_count(self) -> int:
        return self._position_count

    @property
    def motion_count(self) -> int:
        return len(self._motion)

    def add_motion(self, sample: MotionSample) -> None:
        """Buffer one filtered motion sample."""
        t = sample.timestamp
        if not self._motion_times or t >= self._motion_times[-1]:
            self._motion_times.append(t)
            self._motion.append(sample)
            return
        idx = bisect.bisect_right(self._motion_times, t)
        self._motion_times.insert(idx, t)
        self._motion.insert(idx, sample)

    def add_position(self, sample: PositionSample) -> Segment | None:
        """Feed one position sample.

        Returns:
            The segment closed by this sample, or None.
        """
        self._position_count += 1
        current = self._current
        if current is None:
            self._current = self._open(sample)
            return None

        dist = distance(current.start, sample.coordinate)
        if dist < self.segment_length_m:
            return None

        current.close(
            end=sample.coordinate,
            distance=dist,
            vibration=[s.filtered_magnitude for s in self.samples_between(
                current.start_time, sample.timestamp  # type: ignore[arg-type]
            )],
            end_time=sample.timestamp,
        )
        self._closed.append(current)
        self._current = self._open(sample)
        _logger.debug(
            "Segment %d closed: %.1fm, %d samples, roughness %.2f",
            len(self._closed), current.distance, current.sample_count, current.roughness,
        )
        return current

    def samples_between(self, start_time: float, end_time: float) -> list[MotionSample]:
        """Return buffered motion samples with ``start_time <= t <= end_time``."""
        lo = bisect.bisect_left(self._motion_times, start_time)
        hi = bisect.bisect_right(self._motion_times, end_time)
        return self._motion[lo:hi]

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _open(sample: PositionSample) -> Segment:
        return Segment(start=sample.coordinate, start_time=sample.timestamp)
