"""Tests for drop-zone classification."""

import pytest

from formcanvas.engine.config import LayoutConfig
from formcanvas.engine.geometry import classify, to_local
from formcanvas.models.layout import Bounds, DropZone, Point

# 200x40 box at (100, 50): side bands end at local x=50 and start after x=150,
# vertical split at local y=20
BOX = Bounds(left=100, top=50, width=200, height=40)


def _at(local_x: float, local_y: float) -> DropZone:
    return classify(Point(x=BOX.left + local_x, y=BOX.top + local_y), BOX)


def test_to_local():
    assert to_local(Point(x=130, y=75), BOX) == (30, 25)


@pytest.mark.parametrize(
    "local_x, local_y, expected",
    [
        (10, 5, DropZone.LEFT),
        (10, 35, DropZone.LEFT),
        (49.9, 20, DropZone.LEFT),
        (190, 5, DropZone.RIGHT),
        (150.1, 39, DropZone.RIGHT),
        (100, 10, DropZone.ABOVE),
        (100, 30, DropZone.BELOW),
    ],
)
def test_zones(local_x, local_y, expected):
    assert _at(local_x, local_y) is expected


def test_side_bands_win_over_vertical_intent():
    assert _at(0, 0) is DropZone.LEFT
    assert _at(199, 39) is DropZone.RIGHT


def test_exact_left_boundary_falls_through():
    assert _at(50, 5) is DropZone.ABOVE


def test_exact_right_boundary_falls_through():
    assert _at(150, 35) is DropZone.BELOW


def test_exact_vertical_split_is_below():
    assert _at(100, 20) is DropZone.BELOW


def test_pointer_outside_box_still_classifies():
    assert _at(-5, 20) is DropZone.LEFT
    assert _at(250, 20) is DropZone.RIGHT


def test_custom_thresholds():
    cfg = LayoutConfig(side_band_fraction=0.1, vertical_split_fraction=0.25)
    pointer = Point(x=BOX.left + 30, y=BOX.top + 15)
    assert classify(pointer, BOX) is DropZone.LEFT
    assert classify(pointer, BOX, cfg) is DropZone.BELOW


def test_zone_orientation():
    assert DropZone.LEFT.is_horizontal
    assert DropZone.RIGHT.is_horizontal
    assert not DropZone.ABOVE.is_horizontal
    assert not DropZone.BELOW.is_horizontal
