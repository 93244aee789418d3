"""Tests for the high-pass vibration filter."""

from __future__ import annotations

import pytest

from roughride.vibration.filter import (
    GRAVITY_BASELINE,
    VibrationFilter,
    filter_vibration,
    magnitude,
)


# ---------------------------------------------------------------------------
# filter_vibration
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("raw", [0.0, 9.8, 12.3, 5.1, 24.0])
def test_empty_history_returns_deviation(raw):
    assert filter_vibration(raw, []) == abs(raw - 9.8)


@pytest.mark.parametrize("raw", [25.0, 40.0, -5.5, -20.0])
@pytest.mark.parametrize("history", [[], [9.8], [30.0] * 5, [1.0, 2.0, 3.0]])
def test_handling_spikes_are_clamped_to_zero(raw, history):
    assert filter_vibration(raw, history) == 0.0


def test_steady_gravity_history_passes_transient_unchanged():
    assert filter_vibration(11.8, [9.8] * 5) == pytest.approx(2.0)


def test_sustained_acceleration_is_suppressed():
    # recent mean deviates by 2.0 → subtract 0.7 * 2.0
    assert filter_vibration(11.8, [11.8] * 5) == pytest.approx(0.6)


def test_result_is_never_negative():
    assert filter_vibration(10.0, [20.0] * 5) == 0.0


def test_only_last_five_samples_count():
    history = [100.0, 100.0] + [GRAVITY_BASELINE] * 5
    assert filter_vibration(11.8, history) == pytest.approx(2.0)


def test_short_history_uses_available_samples():
    # mean(9.8, 13.8) = 11.8 → recent deviation 2.0
    assert filter_vibration(12.8, [9.8, 13.8]) == pytest.approx(3.0 - 1.4)


def test_filter_does_not_mutate_history():
    history = [9.0, 10.0, 11.0]
    filter_vibration(12.0, history)
    assert history == [9.0, 10.0, 11.0]


# ---------------------------------------------------------------------------
# VibrationFilter
# ---------------------------------------------------------------------------

def test_magnitude():
    assert magnitude(3.0, 4.0, 0.0) == pytest.approx(5.0)


def test_process_builds_motion_sample():
    vf = VibrationFilter()
    sample = vf.process(1000.0, 0.0, 0.0, 12.3)
    assert sample is not None
    assert sample.timestamp == 1000.0
    assert sample.raw_magnitude == pytest.approx(12.3)
    assert sample.filtered_magnitude == pytest.approx(2.5)
    assert (sample.x, sample.y, sample.z) == (0.0, 0.0, 12.3)


def test_process_uses_previous_raw_magnitudes():
    vf = VibrationFilter()
    for t in range(5):
        vf.process(float(t), 0.0, 0.0, 11.8)
    sample = vf.process(5.0, 0.0, 0.0, 11.8)
    assert sample.filtered_magnitude == pytest.approx(0.6)


@pytest.mark.parametrize(
    "axes",
    [(None, 1.0, 9.8), (0.0, None, 9.8), (0.0, 1.0, None), (float("nan"), 0.0, 9.8)],
)
def test_malformed_reading_is_discarded(axes):
    vf = VibrationFilter()
    assert vf.process(0.0, *axes) is None
    # history untouched: next reading is filtered as if first
    sample = vf.process(1.0, 0.0, 0.0, 12.3)
    assert sample.filtered_magnitude == pytest.approx(2.5)


def test_reset_clears_history():
    vf = VibrationFilter()
    for t in range(5):
        vf.process(float(t), 0.0, 0.0, 11.8)
    vf.reset()
    assert vf.process(9.0, 0.0, 0.0, 11.8).filtered_magnitude == pytest.approx(2.0)
