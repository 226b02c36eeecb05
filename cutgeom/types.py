"""Shared type definitions for the cut profile geometry core."""
from typing import NamedTuple

Point = tuple[float, float]

class LineSeg(NamedTuple):
    start: int | None; end: int | None

class ArcSeg(NamedTuple):
    start: int | None; end: int | None
    center: Point
    clockwise: bool = False

Curve = LineSeg | ArcSeg

class Box(NamedTuple):
    """Minimum bounding box found by the caliper sweep.

    width_dir/height_dir are the x-pair and y-pair caliper directions;
    anchors are hull indices for the (x-min, x-max, y-min, y-max) calipers.
    """
    width: float; height: float
    width_dir: Point; height_dir: Point
    anchors: tuple[int, int, int, int]

    @property
    def area(self) -> float:
        return self.width * self.height

ZERO_BOX = Box(0.0, 0.0, (0.0, 0.0), (0.0, 0.0), (0, 0, 0, 0))
