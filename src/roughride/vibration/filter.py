"""High-pass vibration filter for accelerometer magnitudes.

The filter removes the gravity baseline, rejects phone-handling spikes and
subtracts a share of the recent moving-average deviation so that sustained
acceleration or braking is suppressed while sharp road transients pass.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from collections.abc import Sequence

from roughride.vibration.models import MotionSample

_logger = logging.getLogger(__name__)

GRAVITY_BASELINE = 9.8  # m/s², approximate
HANDLING_THRESHOLD = 15.0  # deviations above this are phone handling, not road
WINDOW_SIZE = 5
BASELINE_WEIGHT = 0.7


def magnitude(x: float, y: float, z: float) -> float:
    """Euclidean norm of an acceleration vector."""
    return math.sqrt(x * x + y * y + z * z)


def filter_vibration(raw_magnitude: float, recent_raw: Sequence[float]) -> float:
    """Return the filtered vibration for *raw_magnitude*.

    Args:
        raw_magnitude: Gravity-inclusive acceleration magnitude, m/s².
        recent_raw: Raw magnitudes of the preceding samples, oldest first.
            Only the last :data:`WINDOW_SIZE` entries are used.

    Returns:
        ``0.0`` when the deviation from gravity exceeds
        :data:`HANDLING_THRESHOLD`; the bare deviation when there is no
        history; otherwise ``max(0, deviation - 0.7 * |mean(recent) - 9.8|)``.
    """
    deviation = abs(raw_magnitude - GRAVITY_BASELINE)
    if deviation > HANDLING_THRESHOLD:
        return 0.0

    window = list(recent_raw)[-WINDOW_SIZE:]
    if not window:
        return deviation

    avg_recent = sum(window) / len(window)
    recent_deviation = abs(avg_recent - GRAVITY_BASELINE)
    return max(0.0, deviation - BASELINE_WEIGHT * recent_deviation)


class VibrationFilter:
    """Turns raw accelerometer vectors into :class:`MotionSample` objects.

    Keeps the last :data:`WINDOW_SIZE` raw magnitudes as filter history.
    Readings with a missing or non-finite axis are rejected (``None`` is
    returned) and never enter the history.
    """

    def __init__(self) -> None:
        self._recent: deque[float] = deque(maxlen=WINDOW_SIZE)

    def process(
        self,
        timestamp: float,
        x: float | None,
        y: float | None,
        z: float | None,
    ) -> MotionSample | None:
        """Filter one reading; return ``None`` for a malformed one."""
        axes = (x, y, z)
        if any(a is None or not math.isfinite(a) for a in axes):
            _logger.debug("Discarding malformed motion event at %s: %r", timestamp, axes)
            return None

        raw = magnitude(x, y, z)  # type: ignore[arg-type]
        filtered = filter_vibration(raw, self._recent)
        self._recent.append(raw)
        return MotionSample(
            timestamp=timestamp,
            raw_magnitude=raw,
            filtered_magnitude=filtered,
            x=float(x),  # type: ignore[arg-type]
            y=float(y),  # type: ignore[arg-type]
            z=float(z),  # type: ignore[arg-type]
        )

    def reset(self) -> None:
        """Forget the filter history."""
        self._recent.clear()
