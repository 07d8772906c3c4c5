"""Horizontal zoom stepping and bar slot layout for waterfall charts."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Union

from waterfall_dashboard.config import DEFAULT_CONFIG, LayoutConfig
from waterfall_dashboard.core.errors import InvalidDimensionsError, InvalidZoomRequestError

logger = logging.getLogger(__name__)


class ZoomDirection(Enum):
    """Direction of a zoom step."""

    IN = "in"
    OUT = "out"


@dataclass(frozen=True)
class BarSlot:
    """Horizontal placement of one bar."""

    x: float
    width: float


def clamp_zoom(level: float, config: LayoutConfig = DEFAULT_CONFIG) -> float:
    """Clamp an arbitrary zoom factor into the configured bounds."""
    return max(config.zoom_min, min(config.zoom_max, level))


def zoom(
    current: float,
    direction: Union[str, ZoomDirection],
    strict: bool = False,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> float:
    """Step the zoom factor one increment in or out.

    Parameters
    ----------
    current : float
        The current zoom factor.
    direction : str or ZoomDirection
        ``"in"`` to magnify, ``"out"`` to shrink.
    strict : bool
        If True, raise InvalidZoomRequestError instead of clamping when the
        step would leave ``[zoom_min, zoom_max]``.
    config : LayoutConfig
        Zoom bounds and step size.

    Returns
    -------
    float
        The new zoom factor. Repeated steps past a bound return the bound.

    Raises
    ------
    InvalidZoomRequestError
        If ``direction`` is unknown, or in strict mode when the step is out
        of bounds.
    """
    try:
        direction = ZoomDirection(direction)
    except ValueError:
        raise InvalidZoomRequestError(f"Unknown zoom direction: {direction!r}") from None

    if direction is ZoomDirection.IN:
        target = current + config.zoom_step
    else:
        target = current - config.zoom_step
    # 1.0 + 0.2 is 1.2000000000000002 in binary floating point
    target = round(target, 6)

    if strict and not config.zoom_min <= target <= config.zoom_max:
        raise InvalidZoomRequestError(
            f"Zoom {direction.value} from {current} leaves "
            f"[{config.zoom_min}, {config.zoom_max}]"
        )

    new_level = clamp_zoom(target, config)
    logger.debug("zoom %s: %s -> %s", direction.value, current, new_level)
    return new_level


def zoomed_width(width: float, zoom_level: float) -> float:
    """Width of the scrollable chart area at the given zoom factor."""
    return width * zoom_level


def compute_bar_slots(
    count: int,
    zoom_level: float = 1.0,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> List[BarSlot]:
    """Compute the horizontal slot of each bar.

    Bar width, spacing and left offset are all multiplied by the zoom
    factor. Vertical geometry does not depend on this function.
    """
    if zoom_level <= 0:
        raise InvalidDimensionsError(f"Zoom level must be positive, got {zoom_level}")
    if count < 0:
        raise InvalidDimensionsError(f"Bar count must be non-negative, got {count}")

    pitch = config.bar_pitch * zoom_level
    offset = config.left_offset * zoom_level
    width = config.bar_width * zoom_level
    return [BarSlot(x=offset + i * pitch, width=width) for i in range(count)]
