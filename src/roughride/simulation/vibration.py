"""Synthetic vibration source for route playback."""

from __future__ import annotations

import random


def simulate_vibration(rng: random.Random) -> float:
    """Draw one sample from a three-band mixture.

    A third of the draws fall in ``[1, 3)`` (smooth), a third in ``[4, 6)``
    (moderate) and the rest in ``[7, 10)`` (rough).
    """
    bias = rng.random()
    if bias < 0.33:
        return rng.random() * 2 + 1
    if bias < 0.66:
        return rng.random() * 2 + 4
    return rng.random() * 3 + 7
