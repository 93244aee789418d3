"""Roughness → display colour classification."""

from __future__ import annotations

import math
from collections.abc import Iterable

SMOOTH_COLOR = "#3c7dc9"
MODERATE_COLOR = "#ffe066"
ROUGH_COLOR = "#d90429"
UNRECORDED_COLOR = "#8888ff"
HIGHLIGHT_COLOR = "red"

DEFAULT_RANGE = (1.0, 10.0)


def roughness_color(value: float, lo: float, hi: float) -> str:
    """Map *value* within ``[lo, hi]`` to one of three colours.

    Ratio <= 0.4 is smooth, <= 0.7 moderate, above that rough.  A zero-width
    range counts as ratio 0.
    """
    span = hi - lo
    ratio = (value - lo) / span if span > 0 else 0.0
    if ratio <= 0.4:
        return SMOOTH_COLOR
    if ratio <= 0.7:
        return MODERATE_COLOR
    return ROUGH_COLOR


def roughness_range(values: Iterable[float]) -> tuple[float, float]:
    """Return ``(min positive roughness, max roughness)`` for colour scaling.

    Falls back to :data:`DEFAULT_RANGE` bounds when no value qualifies.
    """
    vals = list(values)
    positive = [v for v in vals if v > 0]
    lo = min(positive) if positive else DEFAULT_RANGE[0]
    hi = max(vals) if vals else DEFAULT_RANGE[1]
    if not math.isfinite(hi) or hi <= 0:
        hi = DEFAULT_RANGE[1]
    return lo, hi


def segment_colors(roughness: list[float], current: int | None = None) -> list[str]:
    """Colour for every segment as drawn on the map.

    Unrecorded segments (roughness 0) get :data:`UNRECORDED_COLOR`; the
    segment at index *current* is highlighted.
    """
    lo, hi = roughness_range(roughness)
    colors: list[str] = []
    for idx, r in enumerate(roughness):
        if idx == current:
            colors.append(HIGHLIGHT_COLOR)
        elif r > 0:
            colors.append(roughness_color(r, lo, hi))
        else:
            colors.append(UNRECORDED_COLOR)
    return colors
