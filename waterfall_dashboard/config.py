"""Layout constants and the configuration object that carries them."""

from dataclasses import dataclass

RESERVED_MARGIN = 100.0  # px reserved top + bottom for labels
BOTTOM_MARGIN = 50.0  # px below the lowest value
BAR_WIDTH = 40.0
BAR_SPACING = 30.0
LEFT_OFFSET = 20.0
MIN_BAR_HEIGHT = 2.0  # px minimum for visibility

ZOOM_MIN = 0.5
ZOOM_MAX = 2.0
ZOOM_STEP = 0.2
ZOOM_DEFAULT = 1.0


@dataclass(frozen=True)
class LayoutConfig:
    """Pixel constants used by the waterfall layout.

    Attributes
    ----------
    reserved_margin : float
        Pixel band (top + bottom) kept free of bars for axis and value labels.
    bottom_margin : float
        Pixel gap between the chart bottom and the lowest data value.
    bar_width, bar_spacing, left_offset : float
        Unzoomed horizontal pitch of the bars.
    min_bar_height : float
        Smallest pixel height a bar is drawn with.
    zoom_min, zoom_max, zoom_step : float
        Bounds and increment of the horizontal zoom factor.
    """

    reserved_margin: float = RESERVED_MARGIN
    bottom_margin: float = BOTTOM_MARGIN
    bar_width: float = BAR_WIDTH
    bar_spacing: float = BAR_SPACING
    left_offset: float = LEFT_OFFSET
    min_bar_height: float = MIN_BAR_HEIGHT
    zoom_min: float = ZOOM_MIN
    zoom_max: float = ZOOM_MAX
    zoom_step: float = ZOOM_STEP

    @property
    def bar_pitch(self) -> float:
        """Unzoomed distance between the left edges of two adjacent bars."""
        return self.bar_width + self.bar_spacing


DEFAULT_CONFIG = LayoutConfig()
