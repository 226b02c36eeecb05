"""Geometry core: point algebra, curves, convex hull and minimum bounding box."""

from .types import Point, LineSeg, ArcSeg, Curve, Box, ZERO_BOX
from .geometry import (
    GeometryError,
    add, sub, dot, cross, norm, dist, unit,
    angle, angle_between, polar_pt, rotate,
    is_malformed, arc_radius, arc_sweep, segment_length, arc_points,
    point_cloud,
)
from .hull import convex_hull, min_box
