"""Replay a sensor log through a recording session and store the segments.

The CSV log has a header and one event per row::

    kind,timestamp,lat,lng,accuracy,x,y,z
    position,1700000000000,19.0760,72.8777,5,,,
    motion,1700000000020,,,,0.1,0.3,9.7

Empty axis cells are treated as missing readings.

Usage:
  uv run python scripts/replay_recording.py --log ride.csv --db roughride.db
"""

from __future__ import annotations

import argparse
import csv
import logging
import sys

from roughride.config import load_settings
from roughride.geo.models import PositionSample
from roughride.reporting.formatter import format_segment_table
from roughride.session.event_queue import MotionEvent, SensorEventQueue
from roughride.session.recording import Capability, RecordingSession
from roughride.storage.segments import SegmentStorage


def _opt_float(value: str) -> float | None:
    value = value.strip()
    return float(value) if value else None


def _enqueue_log(path: str, events: SensorEventQueue) -> int:
    count = 0
    with open(path, newline="", encoding="utf-8") as fh:
        for row in csv.DictReader(fh):
            ts = float(row["timestamp"])
            if row["kind"] == "position":
                events.put_position(PositionSample(
                    latitude=float(row["lat"]),
                    longitude=float(row["lng"]),
                    timestamp=ts,
                    accuracy=_opt_float(row.get("accuracy", "")) or 0.0,
                ))
            elif row["kind"] == "motion":
                events.put_motion(MotionEvent(
                    timestamp=ts,
                    x=_opt_float(row["x"]),
                    y=_opt_float(row["y"]),
                    z=_opt_float(row["z"]),
                ))
            else:
                continue
            count += 1
    return count


def main() -> None:
    settings = load_settings()
    ap = argparse.ArgumentParser(description="Replay a sensor log into segment records")
    ap.add_argument("--log", required=True, help="CSV sensor log")
    ap.add_argument("--db", default=settings.db_path, help="SQLite database path")
    ap.add_argument("--segment-length-m", type=float, default=settings.segment_length_m)
    args = ap.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    events = SensorEventQueue()
    try:
        n = _enqueue_log(args.log, events)
    except (OSError, KeyError, ValueError) as exc:
        print(f"[!] Cannot read sensor log: {exc}", file=sys.stderr)
        sys.exit(1)
    print(f"Events    : {n}")

    storage = SegmentStorage(args.db)
    try:
        session = RecordingSession(
            args.segment_length_m, sink=storage, test_mode=settings.test_mode
        )
        session.start(Capability.AVAILABLE, Capability.AVAILABLE)
        session.permissions_resolved(True, True)
        session.drain(events)
        result = session.stop()
    finally:
        storage.close()

    print(format_segment_table(result.segments))
    if not result.segments:
        print("No road segments were recorded. Try a longer ride.")
    elif result.ok:
        print(f"[OK] {result.uploaded} segments saved to {args.db}")
    else:
        print(f"[!] Upload failed: {result.error}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
