"""Simulated ride along a GPX track — prints the segment roughness table.

Usage:
  uv run python scripts/simulate_route.py --gpx ride.gpx
  uv run python scripts/simulate_route.py --gpx ride.gpx --segment-length-m 200 --seed 7 \\
      --output roughness.md
"""

from __future__ import annotations

import argparse
import logging
import random
import sys

from roughride.config import load_settings
from roughride.errors import TrackFileError
from roughride.geo.distance import path_length
from roughride.geo.gpx import load_gpx
from roughride.reporting.formatter import format_segment_table, write_segment_table
from roughride.segmentation.route import RouteSegmenter
from roughride.simulation.driver import SimulationDriver


def main() -> None:
    settings = load_settings()
    ap = argparse.ArgumentParser(description="Simulate a ride and score road roughness")
    ap.add_argument("--gpx", required=True, help="GPX track file")
    ap.add_argument(
        "--segment-length-m",
        type=float,
        default=settings.segment_length_m,
        help="Segment length in metres",
    )
    ap.add_argument("--speed-mps", type=float, default=settings.sim_speed_mps)
    ap.add_argument("--seed", type=int, default=None, help="Random seed for vibration")
    ap.add_argument("--output", default=None, help="Optional Markdown output path")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        route = load_gpx(args.gpx)
    except TrackFileError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        sys.exit(1)
    if len(route) < 2:
        print("[!] No route found in GPX file.", file=sys.stderr)
        sys.exit(1)

    segments = RouteSegmenter(args.segment_length_m).segment(route)
    print(f"Route     : {len(route)} points, {path_length(route):.1f} m")
    print(f"Segments  : {len(segments)} x {args.segment_length_m:.0f} m")

    driver = SimulationDriver(
        route, segments, speed_mps=args.speed_mps, rng=random.Random(args.seed)
    )
    ticks = driver.run()
    print(f"Simulated : {ticks} s at {args.speed_mps:.2f} m/s\n")
    print(format_segment_table(segments))

    if args.output:
        write_segment_table(segments, args.output)
        print(f"[OK] {args.output}")


if __name__ == "__main__":
    main()
