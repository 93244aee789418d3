"""Segment table and vibration preview for display consumers."""

from __future__ import annotations

import random
from collections.abc import Sequence
from pathlib import Path

from roughride.segmentation.models import Segment
from roughride.simulation.vibration import simulate_vibration

PREVIEW_PLACEHOLDER_SAMPLES = 6


def _roughness_cell(seg: Segment) -> str:
    return f"{seg.roughness:.2f}" if seg.roughness else "-"


def format_segment_table(segments: Sequence[Segment], current: int | None = None) -> str:
    """Render *segments* as a Markdown table.

    The row of the *current* segment is marked with ``▶``.
    """
    lines = [
        "| Segment | Distance (m) | Roughness (RMS) | Samples |",
        "|---------|--------------|-----------------|---------|",
    ]
    for idx, seg in enumerate(segments):
        label = f"▶ {idx + 1}" if idx == current else str(idx + 1)
        lines.append(
            f"| {label} | {seg.distance:.1f} | {_roughness_cell(seg)} | {seg.sample_count} |"
        )
    return "\n".join(lines) + "\n"


def write_segment_table(
    segments: Sequence[Segment], path: str | Path, title: str = "Road roughness"
) -> None:
    """Write a Markdown report with a heading and the segment table to *path*."""
    content = f"# {title}\n\n{format_segment_table(segments)}"
    Path(path).write_text(content, encoding="utf-8")


def vibration_preview(
    segments: Sequence[Segment],
    current: int | None,
    rng: random.Random | None = None,
) -> tuple[list[float], bool]:
    """Vibration samples of the segment after *current*.

    Returns ``(samples, placeholder)``.  When the upcoming segment has no
    samples yet, six synthetic samples are returned with ``placeholder`` set.
    Past the last segment the list is empty.
    """
    next_idx = current + 1 if current is not None else 0
    if next_idx >= len(segments):
        return [], False
    vib = segments[next_idx].vibration
    if vib:
        return list(vib), False
    rng = rng or random.Random()
    return [simulate_vibration(rng) for _ in range(PREVIEW_PLACEHOLDER_SAMPLES)], True
