"""Synthetic route playback."""

from roughride.simulation.driver import DEFAULT_SPEED_MPS, SimulationDriver
from roughride.simulation.vibration import simulate_vibration

__all__ = ["DEFAULT_SPEED_MPS", "SimulationDriver", "simulate_vibration"]
