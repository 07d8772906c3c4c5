"""Core data model and widget for waterfall charts."""

from waterfall_dashboard.core.errors import (
    DegenerateRangeError,
    InvalidDimensionsError,
    InvalidZoomRequestError,
    WaterfallError,
)
from waterfall_dashboard.core.series import WaterfallItem, WaterfallSeries

__all__ = [
    "WaterfallItem",
    "WaterfallSeries",
    "WaterfallError",
    "DegenerateRangeError",
    "InvalidZoomRequestError",
    "InvalidDimensionsError",
]
