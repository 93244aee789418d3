"""SQLite persistence for finalized segments."""

from roughride.storage.segments import SegmentStorage

__all__ = ["SegmentStorage"]
