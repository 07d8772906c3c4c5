"""Waterfall layout algorithm: running totals, vertical extents and scale."""

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from waterfall_dashboard.config import DEFAULT_CONFIG, LayoutConfig
from waterfall_dashboard.core.errors import DegenerateRangeError, InvalidDimensionsError
from waterfall_dashboard.core.series import WaterfallItem
from waterfall_dashboard.layouts.scale import pixel_y_to_value, value_to_pixel_y
from waterfall_dashboard.layouts.zoom import compute_bar_slots

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PositionedItem:
    """A waterfall item with its bar geometry.

    ``start`` and ``end`` are in data space; ``x`` and ``width`` are in
    pixels and already include the zoom factor.
    """

    item: WaterfallItem
    index: int
    start: float
    end: float
    height: float
    x: float
    width: float

    @property
    def label(self) -> str:
        return self.item.label

    @property
    def value(self) -> float:
        return self.item.value

    @property
    def is_total(self) -> bool:
        return self.item.is_total

    @property
    def is_positive(self) -> bool:
        return self.item.value >= 0

    @property
    def top(self) -> float:
        return max(self.start, self.end)

    @property
    def bottom(self) -> float:
        return min(self.start, self.end)


@dataclass(frozen=True)
class ChartGeometry:
    """Aggregate vertical geometry of a waterfall chart.

    Attributes
    ----------
    max_value, min_value : float
        Extrema over every bar start and end.
    pixel_height : float
        Total drawing height in pixels.
    scale_factor : float
        Pixels per data unit; ``0.0`` when the range is degenerate.
    chart_width : float
        Pixel width needed to hold every bar at ``zoom_level``.
    zoom_level : float
        Horizontal zoom factor the slots were computed with.
    bottom_margin : float
        Pixel gap below ``min_value``.
    is_degenerate : bool
        True when the range is zero or too small to give a finite scale.
    """

    max_value: float
    min_value: float
    pixel_height: float
    scale_factor: float
    chart_width: float
    zoom_level: float
    bottom_margin: float
    is_degenerate: bool = False

    @property
    def value_range(self) -> float:
        return self.max_value - self.min_value

    @property
    def mid_value(self) -> float:
        return (self.max_value + self.min_value) / 2

    @property
    def baseline_visible(self) -> bool:
        """Whether zero lies inside the plotted range."""
        return self.min_value <= 0 <= self.max_value

    def value_to_y(self, value: float) -> float:
        return value_to_pixel_y(
            value, self.min_value, self.scale_factor, self.pixel_height, self.bottom_margin
        )

    def y_to_value(self, pixel_y: float) -> float:
        return pixel_y_to_value(
            pixel_y, self.min_value, self.scale_factor, self.pixel_height, self.bottom_margin
        )


@dataclass(frozen=True)
class WaterfallLayout:
    """Result of a layout pass."""

    positioned: List[PositionedItem]
    geometry: ChartGeometry


def _step(running_total: float, item: WaterfallItem) -> Tuple[float, float, float]:
    """Advance the running total by one item.

    Returns ``(start, end, running_total)``. Totals are drawn from zero and
    leave the running total untouched, so a delta after a total continues
    from the last delta rather than from the total.
    """
    if item.is_total:
        return 0.0, item.value, running_total
    end = running_total + item.value
    return running_total, end, end


def compute_waterfall_layout(
    items: Sequence[WaterfallItem],
    pixel_height: float,
    zoom_level: float = 1.0,
    config: LayoutConfig = DEFAULT_CONFIG,
    strict: bool = False,
) -> WaterfallLayout:
    """Compute bar geometry for a waterfall chart.

    Parameters
    ----------
    items : Sequence[WaterfallItem]
        Line items in display order.
    pixel_height : float
        Drawing height in pixels, including the reserved label band.
    zoom_level : float
        Horizontal zoom factor; only affects ``x``, ``width`` and
        ``chart_width``.
    config : LayoutConfig
        Margins and bar pitch.
    strict : bool
        If True, raise DegenerateRangeError for a zero or near-zero value
        range instead of returning a ``scale_factor`` of ``0.0``.

    Returns
    -------
    WaterfallLayout
        One PositionedItem per input item, in input order, plus the
        aggregate ChartGeometry.

    Raises
    ------
    InvalidDimensionsError
        If ``pixel_height`` does not exceed ``config.reserved_margin``, or
        ``zoom_level`` is not positive.
    DegenerateRangeError
        In strict mode, if every bar starts and ends at the same value, or
        the range is too small to give a finite scale.
    """
    if pixel_height <= config.reserved_margin:
        raise InvalidDimensionsError(
            f"pixel_height {pixel_height} must exceed the reserved margin "
            f"{config.reserved_margin}"
        )

    slots = compute_bar_slots(len(items), zoom_level, config)
    positioned: List[PositionedItem] = []
    running_total = 0.0
    max_value = None
    min_value = None

    for i, item in enumerate(items):
        start, end, running_total = _step(running_total, item)
        if max_value is None:
            max_value = max(start, end)
            min_value = min(start, end)
        else:
            max_value = max(max_value, start, end)
            min_value = min(min_value, start, end)
        positioned.append(
            PositionedItem(
                item=item,
                index=i,
                start=start,
                end=end,
                height=abs(item.value),
                x=slots[i].x,
                width=slots[i].width,
            )
        )

    if max_value is None or min_value is None:
        max_value = min_value = 0.0

    value_range = max_value - min_value
    scale_factor = 0.0
    if value_range != 0:
        scale_factor = (pixel_height - config.reserved_margin) / value_range
    # a subnormal range overflows to inf
    is_degenerate = value_range == 0 or not math.isfinite(scale_factor)
    if is_degenerate:
        if strict:
            raise DegenerateRangeError(min_value, max_value)
        logger.warning(
            "Degenerate waterfall range at %s over %d items; using zero scale",
            max_value,
            len(items),
        )
        scale_factor = 0.0

    if slots:
        chart_width = slots[-1].x + slots[-1].width + config.left_offset * zoom_level
    else:
        chart_width = 0.0

    geometry = ChartGeometry(
        max_value=max_value,
        min_value=min_value,
        pixel_height=pixel_height,
        scale_factor=scale_factor,
        chart_width=chart_width,
        zoom_level=zoom_level,
        bottom_margin=config.bottom_margin,
        is_degenerate=is_degenerate,
    )
    logger.debug(
        "Laid out %d waterfall items: range [%s, %s], scale %s",
        len(positioned),
        min_value,
        max_value,
        scale_factor,
    )
    return WaterfallLayout(positioned=positioned, geometry=geometry)
