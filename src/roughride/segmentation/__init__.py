"""Route segmentation, offline and streaming."""

from roughride.segmentation.live import LiveSegmentBuilder
from roughride.segmentation.models import Segment, SegmentRecord
from roughride.segmentation.route import RouteSegmenter

__all__ = ["LiveSegmentBuilder", "RouteSegmenter", "Segment", "SegmentRecord"]
