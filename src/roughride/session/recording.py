"""RecordingSession — state machine that owns all buffers of one recording.

::

    IDLE ──start()──▶ ACQUIRING_PERMISSIONS ──permissions_resolved(ok)──▶ RECORDING
      │                      │                                              │
      └─(capability missing)─┴──────(denied / stop())──────▶ STOPPED ◀──stop()┘

Sensor events are only consumed while RECORDING.  Stopping finalizes the
closed segments and hands them to the sink; the open tail segment is dropped.
"""

from __future__ import annotations

import enum
import logging
import time
from collections.abc import Callable
from dataclasses import dataclass, field

from roughride.errors import SessionStateError, SinkError
from roughride.geo.models import PositionSample
from roughride.segmentation.live import LiveSegmentBuilder
from roughride.segmentation.models import Segment, SegmentRecord
from roughride.session.event_queue import MotionEvent, SensorEventQueue
from roughride.session.sink import NullSink, SegmentSink
from roughride.vibration.filter import VibrationFilter

_logger = logging.getLogger(__name__)


class Capability(enum.Enum):
    """Whether a platform sensor API exists, resolved once per session."""

    AVAILABLE = "available"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"


class SessionState(enum.Enum):
    IDLE = "idle"
    ACQUIRING_PERMISSIONS = "acquiring_permissions"
    RECORDING = "recording"
    STOPPED = "stopped"


@dataclass
class StopResult:
    """Outcome of :meth:`RecordingSession.stop`."""

    segments: list[Segment] = field(default_factory=list)
    records: list[SegmentRecord] = field(default_factory=list)
    uploaded: int = 0
    error: str | None = None
    """Sink failure message; the segments are still available."""

    @property
    def ok(self) -> bool:
        return self.error is None


class RecordingSession:
    """Drives one recording from permission checks to the final upload.

    Parameters
    ----------
    segment_length_m:
        Boundary distance for the live segment builder.
    sink:
        Receives the finalized records on :meth:`stop`.  Defaults to
        :class:`~roughride.session.sink.NullSink`.
    test_mode:
        Copied into every exported record.
    clock:
        Wall clock in seconds, used to stamp exported records.
    """

    def __init__(
        self,
        segment_length_m: float,
        sink: SegmentSink | None = None,
        test_mode: bool = False,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._segment_length_m = segment_length_m
        self._sink = sink if sink is not None else NullSink()
        self._test_mode = test_mode
        self._clock = clock
        self._state = SessionState.IDLE
        self._gps = Capability.UNKNOWN
        self._motion = Capability.UNKNOWN
        self._builder = LiveSegmentBuilder(segment_length_m)
        self._filter = VibrationFilter()
        self._discarded_motion = 0

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def capabilities(self) -> tuple[Capability, Capability]:
        """``(gps, motion)`` as resolved by :meth:`start`."""
        return self._gps, self._motion

    @property
    def segments(self) -> list[Segment]:
        """Closed segments so far, for rendering."""
        return self._builder.segments

    @property
    def current_segment(self) -> Segment | None:
        return self._builder.current

    @property
    def position_count(self) -> int:
        return self._builder.position_count

    @property
    def motion_count(self) -> int:
        return self._builder.motion_count

    @property
    def discarded_motion_count(self) -> int:
        return self._discarded_motion

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def start(self, gps: Capability, motion: Capability) -> SessionState:
        """Resolve sensor capabilities and begin acquiring permissions.

        A capability reported UNAVAILABLE stops the session immediately.
        UNKNOWN is treated as worth a permission request.
        """
        self._require(SessionState.IDLE, "start")
        self._gps, self._motion = gps, motion
        if Capability.UNAVAILABLE in (gps, motion):
            _logger.warning("Cannot record: gps=%s motion=%s", gps.value, motion.value)
            self._state = SessionState.STOPPED
        else:
            self._state = SessionState.ACQUIRING_PERMISSIONS
        return self._state

    def permissions_resolved(self, gps_granted: bool, motion_granted: bool) -> SessionState:
        """Enter RECORDING when both permissions were granted, else STOPPED."""
        self._require(SessionState.ACQUIRING_PERMISSIONS, "permissions_resolved")
        if gps_granted and motion_granted:
            self._builder = LiveSegmentBuilder(self._segment_length_m)
            self._filter.reset()
            self._discarded_motion = 0
            self._state = SessionState.RECORDING
            _logger.info("Recording started (segment length %.0fm)", self._segment_length_m)
        else:
            _logger.warning(
                "Permission denied: gps=%s motion=%s", gps_granted, motion_granted
            )
            self._state = SessionState.STOPPED
        return self._state

    def handle_position(self, sample: PositionSample) -> Segment | None:
        """Consume a position fix; return the segment it closed, if any."""
        if not self._accepts_events("handle_position"):
            return None
        return self._builder.add_position(sample)

    def handle_motion(self, event: MotionEvent) -> bool:
        """Consume an accelerometer reading.  Returns False if it was discarded."""
        if not self._accepts_events("handle_motion"):
            return False
        sample = self._filter.process(event.timestamp, event.x, event.y, event.z)
        if sample is None:
            self._discarded_motion += 1
            return False
        self._builder.add_motion(sample)
        return True

    def drain(self, events: SensorEventQueue) -> list[Segment]:
        """Process every queued event in delivery order.

        Returns the segments closed while draining.  Stops consuming as soon
        as the session leaves RECORDING.
        """
        closed: list[Segment] = []
        while self._state is SessionState.RECORDING:
            event = events.get_event()
            if event is None:
                break
            if isinstance(event, MotionEvent):
                self.handle_motion(event)
            else:
                seg = self.handle_position(event)
                if seg is not None:
                    closed.append(seg)
        return closed

    def stop(self) -> StopResult:
        """Stop consuming events, finalize closed segments and upload them.

        The open tail segment is discarded.  A sink failure is logged and
        reported in the result; it is never retried.  Only :class:`SinkError`
        is treated as a sink failure: any other exception raised by the sink
        propagates, leaving the session STOPPED with no result.
        """
        if self._state is SessionState.STOPPED:
            raise SessionStateError("Session is already stopped")
        was_recording = self._state is SessionState.RECORDING
        self._state = SessionState.STOPPED
        if not was_recording:
            return StopResult()

        segments = self._builder.segments
        _logger.info(
            "Recording stopped: %d positions, %d motion samples, %d segments",
            self._builder.position_count, self._builder.motion_count, len(segments),
        )
        if not segments:
            return StopResult()

        recorded_at_ms = int(self._clock() * 1000)
        records = [
            s.to_record(recorded_at_ms, self._test_mode, batch_index=i)
            for i, s in enumerate(segments)
        ]
        try:
            uploaded = self._sink.write_batch(records)
        except SinkError as exc:
            _logger.warning("Segment upload failed: %s", exc)
            return StopResult(segments=segments, records=records, error=str(exc))

        _logger.info("Uploaded %d segments", uploaded)
        return StopResult(segments=segments, records=records, uploaded=uploaded)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require(self, state: SessionState, action: str) -> None:
        if self._state is not state:
            raise SessionStateError(
                f"{action}() requires state {state.name}, session is {self._state.name}"
            )

    def _accepts_events(self, action: str) -> bool:
        if self._state is SessionState.RECORDING:
            return True
        if self._state is SessionState.STOPPED:
            # late callbacks after stop are expected; drop them
            return False
        raise SessionStateError(f"{action}() called before recording started")
