"""Tests for value/pixel scale mapping."""

import pytest

from waterfall_dashboard.core.errors import DegenerateRangeError
from waterfall_dashboard.layouts.scale import (
    bar_pixel_extent,
    pixel_y_to_value,
    value_to_pixel_y,
)


def test_min_value_sits_on_bottom_margin():
    assert value_to_pixel_y(0, 0, 3.0, 400) == 350


def test_max_value_sits_below_top_margin():
    assert value_to_pixel_y(100, 0, 3.0, 400) == 50


def test_custom_bottom_margin():
    assert value_to_pixel_y(0, 0, 3.0, 400, bottom_margin=20) == 380


def test_strictly_decreasing_in_value():
    ys = [value_to_pixel_y(v, -20, 2.5, 400) for v in range(-20, 101, 5)]
    for a, b in zip(ys, ys[1:]):
        assert b < a


def test_inverse_roundtrip():
    for value in (-15.0, 0.0, 33.3, 99.9):
        y = value_to_pixel_y(value, -15.0, 2.61, 480)
        assert pixel_y_to_value(y, -15.0, 2.61, 480) == pytest.approx(value)


def test_inverse_with_zero_scale_raises():
    with pytest.raises(DegenerateRangeError):
        pixel_y_to_value(350, 0, 0.0, 400)


def test_bar_extent_positive_delta():
    top, height = bar_pixel_extent(0, 100, 0, 3.0, 400)
    assert top == 50
    assert height == 300


def test_bar_extent_negative_delta():
    top, height = bar_pixel_extent(100, 92, 0, 3.0, 400)
    assert top == pytest.approx(50)
    assert height == pytest.approx(24)


def test_bar_extent_minimum_height():
    top, height = bar_pixel_extent(50, 50, 0, 3.0, 400)
    assert top == 200
    assert height == 2


def test_bar_extent_custom_minimum_height():
    _, height = bar_pixel_extent(50, 50.1, 0, 3.0, 400, min_bar_height=4)
    assert height == 4
