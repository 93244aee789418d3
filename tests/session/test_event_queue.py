"""Tests for SensorEventQueue."""

from __future__ import annotations

import threading

from roughride.session.event_queue import MotionEvent, SensorEventQueue
from tests.helpers import position


def test_empty_queue_returns_none():
    q = SensorEventQueue()
    assert q.get_event() is None
    assert q.get_event(timeout=0.01) is None


def test_fifo_order():
    q = SensorEventQueue()
    p = position(0, 0)
    m = MotionEvent(1, 0.0, 0.0, 9.8)
    q.put_position(p)
    q.put_motion(m)
    assert q.get_event() is p
    assert q.get_event() is m


def test_producers_on_other_threads():
    q = SensorEventQueue()

    def produce():
        for t in range(100):
            q.put_motion(MotionEvent(t, 0.0, 0.0, 9.8))

    threads = [threading.Thread(target=produce) for _ in range(4)]
    for th in threads:
        th.start()
    for th in threads:
        th.join()

    assert q.qsize() == 400
    per_thread_seen: list[float] = []
    while (event := q.get_event()) is not None:
        per_thread_seen.append(event.timestamp)
    assert len(per_thread_seen) == 400
