"""Waterfall chart colors."""

from typing import Optional

POSITIVE_COLOR = "#4ade80"
NEGATIVE_COLOR = "#f87171"
TOTAL_COLOR = "#60a5fa"

POSITIVE_TEXT_COLOR = "#16a34a"
NEGATIVE_TEXT_COLOR = "#dc2626"

AXIS_TEXT_COLOR = "#6b7280"
LABEL_TEXT_COLOR = "#4b5563"
GRID_COLOR = "#e5e7eb"
CONNECTOR_COLOR = "#d1d5db"
BACKGROUND_COLOR = "#FFFFFF"


def bar_color(color: Optional[str], is_positive: bool, is_total: bool = False) -> str:
    """Return the item's own color, or the default for a total or its sign."""
    if color:
        return color
    if is_total:
        return TOTAL_COLOR
    return POSITIVE_COLOR if is_positive else NEGATIVE_COLOR
