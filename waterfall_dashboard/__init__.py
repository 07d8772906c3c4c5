"""
Waterfall Dashboard — Lay out and render margin waterfall charts in Jupyter notebooks.
"""

__version__ = "0.1.0"

from waterfall_dashboard.config import DEFAULT_CONFIG, LayoutConfig
from waterfall_dashboard.core.errors import (
    DegenerateRangeError,
    InvalidDimensionsError,
    InvalidZoomRequestError,
    WaterfallError,
)
from waterfall_dashboard.core.series import WaterfallItem, WaterfallSeries
from waterfall_dashboard.core.waterfall_chart import WaterfallChart
from waterfall_dashboard.layouts.scale import pixel_y_to_value, value_to_pixel_y
from waterfall_dashboard.layouts.waterfall import (
    ChartGeometry,
    PositionedItem,
    WaterfallLayout,
    compute_waterfall_layout,
)
from waterfall_dashboard.layouts.zoom import ZoomDirection, zoom


def load_chart(path, **kwargs):  # type: ignore[no-untyped-def]
    """Convenience function to build a WaterfallChart from a saved series."""
    return WaterfallChart(WaterfallSeries.from_json(path), **kwargs)


__all__ = [
    "WaterfallItem",
    "WaterfallSeries",
    "WaterfallChart",
    "WaterfallLayout",
    "PositionedItem",
    "ChartGeometry",
    "LayoutConfig",
    "DEFAULT_CONFIG",
    "ZoomDirection",
    "compute_waterfall_layout",
    "value_to_pixel_y",
    "pixel_y_to_value",
    "zoom",
    "WaterfallError",
    "DegenerateRangeError",
    "InvalidZoomRequestError",
    "InvalidDimensionsError",
    "load_chart",
    "__version__",
]
