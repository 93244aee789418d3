"""Accelerometer filtering and roughness scoring."""

from roughride.vibration.filter import VibrationFilter, filter_vibration, magnitude
from roughride.vibration.models import MotionSample
from roughride.vibration.roughness import rms

__all__ = ["MotionSample", "VibrationFilter", "filter_vibration", "magnitude", "rms"]
