"""Recording session state machine and its sensor/sink boundaries."""

from roughride.session.event_queue import MotionEvent, SensorEventQueue
from roughride.session.recording import (
    Capability,
    RecordingSession,
    SessionState,
    StopResult,
)
from roughride.session.sink import NullSink, SegmentSink

__all__ = [
    "Capability",
    "MotionEvent",
    "NullSink",
    "RecordingSession",
    "SegmentSink",
    "SensorEventQueue",
    "SessionState",
    "StopResult",
]
