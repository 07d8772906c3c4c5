"""Mapping between data values and vertical pixel coordinates."""

from typing import Tuple

from waterfall_dashboard.config import BOTTOM_MARGIN, MIN_BAR_HEIGHT
from waterfall_dashboard.core.errors import DegenerateRangeError


def value_to_pixel_y(
    value: float,
    min_value: float,
    scale_factor: float,
    pixel_height: float,
    bottom_margin: float = BOTTOM_MARGIN,
) -> float:
    """Convert a data value to a pixel y coordinate.

    Higher values map to smaller y (screen-up is data-up). ``min_value``
    sits ``bottom_margin`` pixels above the bottom edge.
    """
    return pixel_height - bottom_margin - (value - min_value) * scale_factor


def pixel_y_to_value(
    pixel_y: float,
    min_value: float,
    scale_factor: float,
    pixel_height: float,
    bottom_margin: float = BOTTOM_MARGIN,
) -> float:
    """Inverse of :func:`value_to_pixel_y`.

    Raises
    ------
    DegenerateRangeError
        If ``scale_factor`` is zero, since every value maps to the same y.
    """
    if scale_factor == 0:
        raise DegenerateRangeError(min_value)
    return min_value + (pixel_height - bottom_margin - pixel_y) / scale_factor


def bar_pixel_extent(
    start: float,
    end: float,
    min_value: float,
    scale_factor: float,
    pixel_height: float,
    bottom_margin: float = BOTTOM_MARGIN,
    min_bar_height: float = MIN_BAR_HEIGHT,
) -> Tuple[float, float]:
    """Return ``(top, height)`` in pixels for a bar spanning start..end.

    The height never drops below ``min_bar_height`` so zero-value bars stay
    visible.
    """
    y_start = value_to_pixel_y(start, min_value, scale_factor, pixel_height, bottom_margin)
    y_end = value_to_pixel_y(end, min_value, scale_factor, pixel_height, bottom_margin)
    top = min(y_start, y_end)
    height = abs(y_end - y_start)
    return top, max(height, min_bar_height)
