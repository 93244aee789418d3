"""Tests for the segment table and vibration preview."""

from __future__ import annotations

import random

from roughride.reporting.formatter import (
    PREVIEW_PLACEHOLDER_SAMPLES,
    format_segment_table,
    vibration_preview,
    write_segment_table,
)
from roughride.segmentation.models import Segment
from tests.helpers import north


def make_segment(distance: float, vibration: list[float]) -> Segment:
    seg = Segment(start=north(0), end=north(distance), distance=distance)
    for v in vibration:
        seg.add_vibration(v)
    return seg


def test_table_has_header_and_one_row_per_segment():
    table = format_segment_table([make_segment(50.0, [3.0, 4.0]), make_segment(12.34, [])])
    lines = table.strip().splitlines()
    assert lines[0] == "| Segment | Distance (m) | Roughness (RMS) | Samples |"
    assert len(lines) == 4
    assert lines[2] == "| 1 | 50.0 | 3.54 | 2 |"
    assert lines[3] == "| 2 | 12.3 | - | 0 |"


def test_table_marks_current_segment():
    table = format_segment_table([make_segment(50.0, [1.0]), make_segment(50.0, [])], current=1)
    assert "| ▶ 2 |" in table


def test_write_segment_table(tmp_path):
    path = tmp_path / "report.md"
    write_segment_table([make_segment(50.0, [2.0])], path, title="Test ride")
    content = path.read_text(encoding="utf-8")
    assert content.startswith("# Test ride")
    assert "| 1 | 50.0 | 2.00 | 1 |" in content


def test_preview_returns_recorded_samples_of_next_segment():
    segments = [make_segment(50, [1.0]), make_segment(50, [2.0, 3.0])]
    samples, placeholder = vibration_preview(segments, current=0)
    assert samples == [2.0, 3.0]
    assert placeholder is False


def test_preview_without_current_shows_first_segment():
    segments = [make_segment(50, [1.5])]
    assert vibration_preview(segments, current=None) == ([1.5], False)


def test_preview_placeholder_for_untraversed_segment():
    segments = [make_segment(50, [1.0]), make_segment(50, [])]
    samples, placeholder = vibration_preview(segments, current=0, rng=random.Random(1))
    assert placeholder is True
    assert len(samples) == PREVIEW_PLACEHOLDER_SAMPLES
    assert segments[1].vibration == []


def test_preview_empty_past_last_segment():
    segments = [make_segment(50, [1.0])]
    assert vibration_preview(segments, current=0) == ([], False)
