"""Display helpers: colour classes, segment tables and previews."""

from roughride.reporting.colors import roughness_color, roughness_range, segment_colors
from roughride.reporting.formatter import (
    format_segment_table,
    vibration_preview,
    write_segment_table,
)

__all__ = [
    "format_segment_table",
    "roughness_color",
    "roughness_range",
    "segment_colors",
    "vibration_preview",
    "write_segment_table",
]
