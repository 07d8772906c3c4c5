"""Exceptions raised by the waterfall layout and zoom helpers."""

from typing import Optional


class WaterfallError(Exception):
    """Base class for waterfall chart errors."""


class DegenerateRangeError(WaterfallError, ArithmeticError):
    """The value range of a series is empty, so no scale can be derived.

    Raised when every bar starts and ends at the same value (a flat or
    empty series), or when the range is too small to divide by. Callers usually catch it and draw an empty-state chart.
    """

    def __init__(self, min_value: float, max_value: Optional[float] = None) -> None:
        if max_value is None:
            max_value = min_value
        super().__init__(f"Degenerate value range: [{min_value!r}, {max_value!r}]")
        self.min_value = min_value
        self.max_value = max_value


class InvalidZoomRequestError(WaterfallError, ValueError):
    """A zoom step was requested that cannot be honored."""


class InvalidDimensionsError(WaterfallError, ValueError):
    """Chart dimensions leave no room to draw bars."""
