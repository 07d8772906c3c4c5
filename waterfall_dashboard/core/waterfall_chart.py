"""WaterfallChart — Jupyter widget rendering a margin waterfall as HTML/SVG."""

import dataclasses
import html
import logging
import uuid
from pathlib import Path
from typing import List, Optional, Sequence, Union

from waterfall_dashboard.config import DEFAULT_CONFIG, ZOOM_DEFAULT, LayoutConfig
from waterfall_dashboard.core.errors import InvalidDimensionsError
from waterfall_dashboard.core.series import WaterfallItem, WaterfallSeries
from waterfall_dashboard.layouts.scale import bar_pixel_extent
from waterfall_dashboard.layouts.waterfall import (
    PositionedItem,
    WaterfallLayout,
    compute_waterfall_layout,
)
from waterfall_dashboard.layouts.zoom import ZoomDirection, clamp_zoom, zoom, zoomed_width
from waterfall_dashboard.styles.colors import (
    AXIS_TEXT_COLOR,
    BACKGROUND_COLOR,
    CONNECTOR_COLOR,
    GRID_COLOR,
    LABEL_TEXT_COLOR,
    NEGATIVE_COLOR,
    NEGATIVE_TEXT_COLOR,
    POSITIVE_COLOR,
    POSITIVE_TEXT_COLOR,
    TOTAL_COLOR,
    bar_color,
)

logger = logging.getLogger(__name__)

AXIS_WIDTH = 40  # px column for y-axis labels
LABEL_OFFSET = 30  # px from the bottom edge to the category labels


def _signed(value: float, fmt: Optional[str] = None) -> str:
    """Format a value with a leading '+' for positive numbers.

    Without ``fmt`` the value is printed as entered: integral floats drop
    the ``.0``, other values keep every digit.
    """
    prefix = "+" if value > 0 else ""
    if fmt is not None:
        return f"{prefix}{value:{fmt}}"
    if float(value).is_integer():
        return f"{prefix}{int(value)}"
    return f"{prefix}{float(value)!r}"


class WaterfallChart:
    """Waterfall chart for a series of deltas and totals.

    Parameters
    ----------
    data : WaterfallSeries or Sequence[WaterfallItem], optional
        The line items to plot. A bare sequence is wrapped in a series
        using ``title`` and ``subtitle``.
    title : str
        Chart title (ignored when ``data`` is a titled series).
    subtitle : str
        Secondary heading.
    height : int
        Pixel height of the plot area.
    width : int
        Unzoomed pixel width of the plot area.
    zoom_level : float
        Initial horizontal zoom factor.
    config : LayoutConfig
        Margins, bar pitch and zoom bounds.

    Raises
    ------
    InvalidDimensionsError
        If ``height`` leaves no room below the reserved label band.

    Examples
    --------
    >>> chart = WaterfallChart([
    ...     WaterfallItem("List Price", 100),
    ...     WaterfallItem("Discount", -8),
    ...     WaterfallItem("Pocket Price", 92, is_total=True),
    ... ])
    >>> chart.zoom_in()
    1.2
    >>> chart.display()
    """

    def __init__(
        self,
        data: Union[WaterfallSeries, Sequence[WaterfallItem], None] = None,
        title: str = "Margin Waterfall Analysis",
        subtitle: str = "Breakdown of price components and margin leakage points",
        height: int = 400,
        width: int = 700,
        zoom_level: float = ZOOM_DEFAULT,
        config: LayoutConfig = DEFAULT_CONFIG,
    ) -> None:
        if height <= config.reserved_margin:
            raise InvalidDimensionsError(
                f"Chart height {height} must exceed the reserved margin "
                f"{config.reserved_margin}"
            )
        if isinstance(data, WaterfallSeries):
            series = dataclasses.replace(
                data,
                title=data.title or title,
                subtitle=data.subtitle or subtitle,
            )
        else:
            series = WaterfallSeries(items=list(data or []), title=title, subtitle=subtitle)
        self.series = series
        self.height = height
        self.width = width
        self.config = config
        self.zoom_level = clamp_zoom(zoom_level, config)
        self._uid = uuid.uuid4().hex[:12]

    @property
    def items(self) -> List[WaterfallItem]:
        return self.series.items

    # ---------------------------------------------------------------- Zoom
    def zoom_in(self) -> float:
        """Widen the bar pitch by one step and return the new zoom level."""
        self.zoom_level = zoom(self.zoom_level, ZoomDirection.IN, config=self.config)
        return self.zoom_level

    def zoom_out(self) -> float:
        """Narrow the bar pitch by one step and return the new zoom level."""
        self.zoom_level = zoom(self.zoom_level, ZoomDirection.OUT, config=self.config)
        return self.zoom_level

    # -------------------------------------------------------------- Layout
    def layout(self) -> WaterfallLayout:
        """Compute the bar geometry for the current items and zoom level."""
        return compute_waterfall_layout(
            self.items, self.height, zoom_level=self.zoom_level, config=self.config
        )

    # ------------------------------------------------------------- Display
    def _repr_html_(self) -> str:
        """Jupyter auto-display."""
        return self.to_html()

    def display(self) -> None:
        """Display in IPython/Jupyter."""
        from IPython.display import HTML
        from IPython.display import display as ipy_display

        ipy_display(HTML(self.to_html()))

    def summary(self) -> None:
        """Print a text table of each bar's value and extent."""
        result = self.layout()
        lines = []
        lines.append(f"{'Item':<24} {'Value':>10} {'Start':>10} {'End':>10}")
        lines.append("-" * 57)
        for p in result.positioned:
            label = p.label + (" (total)" if p.is_total else "")
            lines.append(
                f"{label[:24]:<24} {_signed(p.value, ',.2f'):>10} "
                f"{p.start:>10,.2f} {p.end:>10,.2f}"
            )
        geometry = result.geometry
        lines.append("-" * 57)
        lines.append(f"Range: {geometry.min_value:,.2f} to {geometry.max_value:,.2f}")
        print("\n".join(lines))

    def export(self, path: Union[str, Path]) -> None:
        """Save the chart data to a JSON file."""
        self.series.to_json(path)
        logger.info("Exported %d waterfall items to %s", len(self.items), path)

    # ---------------------------------------------------------------- HTML
    def to_html(self) -> str:
        """Generate the full HTML string."""
        uid = self._uid
        parts = [
            f'<div id="wfd-{uid}" class="wfd-container">',
            f"<style>{self._css(uid)}</style>",
            self._header_html(),
        ]
        if self.items:
            parts.append(self._chart_html())
        else:
            parts.append('<div class="wfd-empty">No data to display</div>')
        parts.append(self._legend_html())
        parts.append(
            '<div class="wfd-footer">'
            "Hover over bars for detailed breakdown. Scroll horizontally when zoomed in."
            "</div>"
        )
        parts.append("</div>")
        return "\n".join(parts)

    def _css(self, uid: str) -> str:
        s = f"#wfd-{uid}"
        return f"""
{s} {{
  font-family: ui-sans-serif, system-ui, sans-serif;
  background: {BACKGROUND_COLOR}; padding: 16px;
  border: 1px solid {GRID_COLOR}; border-radius: 8px;
}}
{s} .wfd-title {{ font-size: 18px; font-weight: 600; }}
{s} .wfd-subtitle {{ font-size: 14px; color: {AXIS_TEXT_COLOR}; margin-bottom: 16px; }}
{s} .wfd-scroll {{ overflow-x: auto; }}
{s} .wfd-bar:hover {{ opacity: 0.8; }}
{s} .wfd-empty {{ padding: 32px; text-align: center; color: {AXIS_TEXT_COLOR}; }}
{s} .wfd-legend {{ display: flex; gap: 16px; margin-top: 12px; font-size: 12px; }}
{s} .wfd-legend-item {{ display: flex; align-items: center; gap: 4px; }}
{s} .wfd-legend-swatch {{ width: 12px; height: 12px; border-radius: 2px; }}
{s} .wfd-footer {{ margin-top: 12px; font-size: 12px; color: {AXIS_TEXT_COLOR}; }}
"""

    def _header_html(self) -> str:
        return (
            f'<div class="wfd-header">'
            f'<div class="wfd-title">{html.escape(self.series.title)}</div>'
            f'<div class="wfd-subtitle">{html.escape(self.series.subtitle)}</div>'
            f"</div>"
        )

    def _chart_html(self) -> str:
        result = self.layout()
        geometry = result.geometry
        height = self.height
        plot_w = max(zoomed_width(self.width, self.zoom_level), geometry.chart_width)
        svg_w = AXIS_WIDTH + plot_w

        svg_parts = [
            f'<svg class="wfd-svg" width="{svg_w:.0f}" height="{height}" '
            f'viewBox="0 0 {svg_w:.0f} {height}">'
        ]
        svg_parts.extend(self._axis_svg(result, plot_w))
        previous: Optional[PositionedItem] = None
        for p in result.positioned:
            if previous is not None and not p.is_total:
                svg_parts.append(self._connector_svg(previous, p, result))
            svg_parts.append(self._bar_svg(p, result))
            previous = p
        svg_parts.append("</svg>")
        return f'<div class="wfd-scroll">{"".join(svg_parts)}</div>'

    def _axis_svg(self, result: WaterfallLayout, plot_w: float) -> List[str]:
        geometry = result.geometry
        parts = []
        ticks = [geometry.max_value, geometry.mid_value, geometry.min_value]
        for value in ticks:
            y = geometry.value_to_y(value)
            parts.append(
                f'<line x1="{AXIS_WIDTH}" y1="{y:.1f}" x2="{AXIS_WIDTH + plot_w:.1f}" '
                f'y2="{y:.1f}" stroke="{GRID_COLOR}" stroke-width="1"/>'
            )
            parts.append(
                f'<text class="wfd-axis-label" x="{AXIS_WIDTH - 6}" y="{y:.1f}" '
                f'text-anchor="end" dominant-baseline="middle" font-size="11" '
                f'fill="{AXIS_TEXT_COLOR}">{value:.0f}</text>'
            )
        return parts

    def _connector_svg(
        self, previous: PositionedItem, current: PositionedItem, result: WaterfallLayout
    ) -> str:
        y = result.geometry.value_to_y(current.start)
        x1 = AXIS_WIDTH + previous.x + previous.width
        x2 = AXIS_WIDTH + current.x
        return (
            f'<line class="wfd-connector" x1="{x1:.1f}" y1="{y:.1f}" x2="{x2:.1f}" '
            f'y2="{y:.1f}" stroke="{CONNECTOR_COLOR}" stroke-width="2"/>'
        )

    def _bar_svg(self, p: PositionedItem, result: WaterfallLayout) -> str:
        geometry = result.geometry
        top, bar_h = bar_pixel_extent(
            p.start,
            p.end,
            geometry.min_value,
            geometry.scale_factor,
            geometry.pixel_height,
            self.config.bottom_margin,
            self.config.min_bar_height,
        )
        x = AXIS_WIDTH + p.x
        cx = x + p.width / 2
        fill = bar_color(p.item.color, p.is_positive, p.is_total)

        tip = [p.label, _signed(p.value, ".2f")]
        if p.item.tooltip:
            tip.append(p.item.tooltip)
        tip_text = html.escape("\n".join(tip))

        value_y = top - 6 if p.is_positive else top + bar_h + 14
        value_color = POSITIVE_TEXT_COLOR if p.is_positive else NEGATIVE_TEXT_COLOR
        label_y = self.height - LABEL_OFFSET

        return (
            f'<g class="wfd-item" data-index="{p.index}">'
            f'<rect class="wfd-bar" x="{x:.1f}" y="{top:.1f}" width="{p.width:.1f}" '
            f'height="{bar_h:.1f}" rx="2" fill="{html.escape(fill)}">'
            f"<title>{tip_text}</title></rect>"
            f'<text class="wfd-value" x="{cx:.1f}" y="{value_y:.1f}" text-anchor="middle" '
            f'font-size="11" font-weight="600" fill="{value_color}">'
            f"{html.escape(_signed(p.value))}</text>"
            f'<text class="wfd-label" x="{x:.1f}" y="{label_y}" font-size="11" '
            f'fill="{LABEL_TEXT_COLOR}" transform="rotate(-45 {x:.1f} {label_y})">'
            f"{html.escape(p.label)}</text>"
            f"</g>"
        )

    def _legend_html(self) -> str:
        entries = [
            ("Increase", POSITIVE_COLOR),
            ("Decrease", NEGATIVE_COLOR),
            ("Total", TOTAL_COLOR),
        ]
        items = []
        for label, color in entries:
            items.append(
                f'<div class="wfd-legend-item">'
                f'<div class="wfd-legend-swatch" style="background:{color};"></div>'
                f"<span>{html.escape(label)}</span>"
                f"</div>"
            )
        return f'<div class="wfd-legend">{"".join(items)}</div>'
