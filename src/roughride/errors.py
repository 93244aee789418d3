"""Exception hierarchy shared by all roughride subpackages."""

from __future__ import annotations


class RoughrideError(Exception):
    """Base class for all roughride errors."""


class ConfigError(RoughrideError):
    """Raised when an environment setting cannot be parsed."""


class TrackFileError(RoughrideError):
    """Raised when a GPX track file is malformed."""


class SegmentStateError(RoughrideError):
    """Raised when a segment lifecycle rule is violated (e.g. closing twice)."""


class SimulationError(RoughrideError):
    """Raised when a simulation is started without a usable route."""


class SessionStateError(RoughrideError):
    """Raised when a recording session receives an event its state forbids."""


class SinkError(RoughrideError):
    """Raised when a segment sink fails to persist a batch.

    Recoverable: the segments themselves are kept by the caller.
    """
