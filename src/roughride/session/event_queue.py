"""SensorEventQueue — serializes provider callbacks onto one consumer.

Location and motion providers may call back from their own threads.  They
only ever enqueue; the recording session drains the queue from a single
context so segment state is never touched concurrently.
"""

from __future__ import annotations

import queue
from dataclasses import dataclass

from roughride.geo.models import PositionSample


@dataclass(frozen=True)
class MotionEvent:
    """A raw accelerometer reading; any axis may be missing."""

    timestamp: float
    x: float | None
    y: float | None
    z: float | None


SensorEvent = PositionSample | MotionEvent


class SensorEventQueue:
    """Unbounded FIFO of sensor events, safe to fill from any thread."""

    def __init__(self) -> None:
        self._queue: queue.Queue[SensorEvent] = queue.Queue()

    def put_position(self, sample: PositionSample) -> None:
        self._queue.put_nowait(sample)

    def put_motion(self, event: MotionEvent) -> None:
        self._queue.put_nowait(event)

    def get_event(self, timeout: float = 0.0) -> SensorEvent | None:
        """Return the next event, or None if none arrives within *timeout* s."""
        try:
            if timeout <= 0:
                return self._queue.get_nowait()
            return self._queue.get(timeout=timeout)
        except queue.Empty:
            return None

    def qsize(self) -> int:
        return self._queue.qsize()
