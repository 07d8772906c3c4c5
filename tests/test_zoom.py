"""Tests for zoom stepping and bar slot layout."""

import pytest

from waterfall_dashboard.config import LayoutConfig
from waterfall_dashboard.core.errors import InvalidDimensionsError, InvalidZoomRequestError
from waterfall_dashboard.layouts.zoom import (
    BarSlot,
    ZoomDirection,
    clamp_zoom,
    compute_bar_slots,
    zoom,
    zoomed_width,
)


def test_zoom_direction_values():
    assert ZoomDirection.IN.value == "in"
    assert ZoomDirection.OUT.value == "out"


def test_zoom_in_one_step():
    assert zoom(1.0, "in") == 1.2


def test_zoom_out_one_step():
    assert zoom(1.0, "out") == 0.8


def test_zoom_accepts_enum():
    assert zoom(1.0, ZoomDirection.IN) == zoom(1.0, "in")


def test_ten_steps_in_stop_at_max():
    level = 1.0
    seen = []
    for _ in range(10):
        level = zoom(level, "in")
        seen.append(level)
    assert level == 2.0
    assert seen[:5] == [1.2, 1.4, 1.6, 1.8, 2.0]
    assert all(a <= b for a, b in zip(seen, seen[1:]))


def test_ten_steps_out_stop_at_min():
    level = 1.0
    seen = []
    for _ in range(10):
        level = zoom(level, "out")
        seen.append(level)
    assert level == 0.5
    assert seen[:3] == [0.8, 0.6, 0.5]
    assert all(a >= b for a, b in zip(seen, seen[1:]))


def test_idempotent_at_bounds():
    assert zoom(2.0, "in") == 2.0
    assert zoom(zoom(2.0, "in"), "in") == 2.0
    assert zoom(0.5, "out") == 0.5


def test_unknown_direction_raises():
    with pytest.raises(InvalidZoomRequestError):
        zoom(1.0, "sideways")


def test_invalid_zoom_request_is_value_error():
    with pytest.raises(ValueError):
        zoom(1.0, "up")


def test_strict_zoom_past_bound_raises():
    with pytest.raises(InvalidZoomRequestError):
        zoom(2.0, "in", strict=True)
    with pytest.raises(InvalidZoomRequestError):
        zoom(0.5, "out", strict=True)


def test_strict_zoom_within_bounds():
    assert zoom(1.0, "in", strict=True) == 1.2


def test_out_of_range_current_is_clamped():
    assert zoom(3.0, "out") == 2.0
    assert zoom(0.1, "in") == 0.5


def test_custom_zoom_bounds():
    config = LayoutConfig(zoom_min=1.0, zoom_max=3.0, zoom_step=0.5)
    assert zoom(2.8, "in", config=config) == 3.0
    assert zoom(1.0, "out", config=config) == 1.0


def test_clamp_zoom():
    assert clamp_zoom(3.0) == 2.0
    assert clamp_zoom(0.1) == 0.5
    assert clamp_zoom(1.3) == 1.3


def test_zoomed_width():
    assert zoomed_width(700, 1.0) == 700
    assert zoomed_width(700, 1.4) == pytest.approx(980)


def test_bar_slots_at_default_zoom():
    slots = compute_bar_slots(3)
    assert slots == [BarSlot(20, 40), BarSlot(90, 40), BarSlot(160, 40)]


def test_bar_slots_pitch_scales_with_zoom():
    slots = compute_bar_slots(3, zoom_level=0.5)
    assert [s.x for s in slots] == [10, 45, 80]
    assert all(s.width == 20 for s in slots)


def test_bar_slots_empty():
    assert compute_bar_slots(0) == []


def test_bar_slots_negative_count_raises():
    with pytest.raises(InvalidDimensionsError):
        compute_bar_slots(-1)


def test_bar_slots_non_positive_zoom_raises():
    with pytest.raises(InvalidDimensionsError):
        compute_bar_slots(3, zoom_level=0)
    with pytest.raises(InvalidDimensionsError):
        compute_bar_slots(3, zoom_level=-0.5)
