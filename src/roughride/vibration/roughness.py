"""Roughness aggregation — root mean square of filtered vibration."""

from __future__ import annotations

import math
from collections.abc import Iterable


def rms(values: Iterable[float]) -> float:
    """Return ``sqrt(mean(v**2))`` over *values*, or ``0.0`` when empty."""
    total = 0.0
    count = 0
    for v in values:
        total += v * v
        count += 1
    if count == 0:
        return 0.0
    return math.sqrt(total / count)
