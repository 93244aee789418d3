"""Segment sink interface — the persistence boundary of a recording."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from roughride.segmentation.models import SegmentRecord


class SegmentSink(Protocol):
    """Accepts finalized segment records.

    ``write_batch`` either stores the whole batch or raises
    :class:`~roughride.errors.SinkError`.  Callers do not retry.
    """

    def write_batch(self, records: Sequence[SegmentRecord]) -> int:
        """Persist *records*; return the number written."""
        ...


class NullSink:
    """Sink used when no persistence is configured; drops every batch."""

    def write_batch(self, records: Sequence[SegmentRecord]) -> int:
        return 0
