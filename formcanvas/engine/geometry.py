"""Drop-zone classification from pointer position inside the target's box."""

from __future__ import annotations

from formcanvas.engine.config import LayoutConfig
from formcanvas.models.layout import Bounds, DropZone, Point


def to_local(pointer: Point, bounds: Bounds) -> tuple[float, float]:
    """Pointer coordinates relative to the target's top-left corner."""
    return pointer.x - bounds.left, pointer.y - bounds.top


def classify(
    pointer: Point,
    bounds: Bounds,
    config: LayoutConfig | None = None,
) -> DropZone:
    """Resolve the drop intent for a pointer hovering over a target.

    Side bands take priority: anywhere in the left or right band means
    horizontal placement regardless of height. The middle band splits into
    above/below. Comparisons are strict, so a pointer exactly on a threshold
    falls through to the next case.
    """
    cfg = config or LayoutConfig()
    local_x, local_y = to_local(pointer, bounds)

    if local_x < bounds.width * cfg.side_band_fraction:
        return DropZone.LEFT
    if local_x > bounds.width * (1.0 - cfg.side_band_fraction):
        return DropZone.RIGHT
    if local_y < bounds.height * cfg.vertical_split_fraction:
        return DropZone.ABOVE
    return DropZone.BELOW
