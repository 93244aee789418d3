"""Segment data structures."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

from roughride.errors import SegmentStateError
from roughride.geo.models import Coordinate
from roughride.vibration.roughness import rms


@dataclass
class Segment:
    """A bounded span of a route with its vibration samples and roughness.

    Lifecycle: created *open* with only a start coordinate; :meth:`close` sets
    the end and freezes the vibration list.  Segments produced by the offline
    segmenter are closed at creation and only collect synthetic vibration via
    :meth:`add_vibration` during simulation.
    """

    start: Coordinate
    """Where the segment begins."""

    end: Coordinate | None = None
    """Where the segment ends; ``None`` while open."""

    distance: float = 0.0
    """Travelled distance in metres."""

    vibration: list[float] = field(default_factory=list)
    """Filtered vibration magnitudes, in arrival order."""

    roughness: float = 0.0
    """RMS of :attr:`vibration`; 0 until a sample exists."""

    coords: tuple[Coordinate, ...] = ()
    """Route coordinates spanned (offline segments only)."""

    start_index: int | None = None
    """Index of the route vertex at or before :attr:`start` (offline only)."""

    end_index: int | None = None
    """Index of the route vertex at or after :attr:`end` (offline only)."""

    start_time: float | None = None
    """Timestamp of the opening position sample (live segments only)."""

    end_time: float | None = None
    """Timestamp of the closing position sample (live segments only)."""

    @property
    def is_closed(self) -> bool:
        return self.end is not None

    @property
    def sample_count(self) -> int:
        return len(self.vibration)

    def close(
        self,
        end: Coordinate,
        distance: float,
        vibration: list[float],
        end_time: float | None = None,
    ) -> None:
        """Close the segment and compute its roughness.

        Raises:
            SegmentStateError: If the segment is already closed.
        """
        if self.is_closed:
            raise SegmentStateError(f"Segment starting at {self.start} is already closed")
        self.end = end
        self.end_time = end_time
        self.distance = distance
        self.vibration = list(vibration)
        self.roughness = rms(self.vibration)

    def add_vibration(self, value: float) -> None:
        """Append one sample and recompute the roughness."""
        self.vibration.append(value)
        self.roughness = rms(self.vibration)

    def clear_vibration(self) -> None:
        self.vibration = []
        self.roughness = 0.0

    def to_record(
        self, recorded_at_ms: int, test_mode: bool = False, batch_index: int = 0
    ) -> SegmentRecord:
        """Build the persisted form of a closed segment.

        *batch_index* is the segment's position in its upload batch; it keeps
        ids unique when a ride passes the same start point twice.

        Raises:
            SegmentStateError: If the segment is still open.
        """
        if self.end is None:
            raise SegmentStateError("Only closed segments can be exported")
        return SegmentRecord(
            start_lat=self.start.latitude,
            start_lng=self.start.longitude,
            end_lat=self.end.latitude,
            end_lng=self.end.longitude,
            distance=self.distance,
            roughness=self.roughness,
            sample_count=self.sample_count,
            recorded_at_ms=recorded_at_ms,
            test_mode=test_mode,
            batch_index=batch_index,
        )


@dataclass(frozen=True)
class SegmentRecord:
    """A finalized segment as handed to a sink."""

    start_lat: float
    start_lng: float
    end_lat: float
    end_lng: float
    distance: float
    """Accumulated distance in metres."""

    roughness: float
    """RMS vibration, >= 0."""

    sample_count: int
    recorded_at_ms: int
    """Wall-clock time of the export, milliseconds since the epoch."""

    test_mode: bool = False
    batch_index: int = 0
    """Position of the record within its upload batch."""

    @property
    def doc_id(self) -> str:
        """Stable identifier: start coordinate (6 dp), export time and batch position."""
        return (
            f"{self.start_lat:.6f}_{self.start_lng:.6f}_"
            f"{self.recorded_at_ms}_{self.batch_index}"
        )

    def to_dict(self) -> dict:
        return asdict(self)
