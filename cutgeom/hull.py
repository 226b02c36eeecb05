"""Convex hull (monotone chain) and minimum-area box (rotating calipers)."""
import math
from typing import Sequence
from .types import Point, Box, ZERO_BOX
from .geometry import sub, cross, dot, unit, rotate

# ============================================================
# Convex Hull
# ============================================================
def _chain(points: list[Point]) -> list[Point]:
    """One monotone chain; pops until the last three points turn strictly left."""
    chain: list[Point] = []
    for p in points:
        while len(chain) >= 2 and cross(sub(chain[-1], chain[-2]), sub(p, chain[-2])) <= 0:
            chain.pop()
        chain.append(p)
    return chain

def convex_hull(points: Sequence[Point]) -> list[Point]:
    """Convex hull of a point cloud, CCW from the lowest-leftmost point.

    Collinear boundary points are dropped. The first point is not repeated
    at the end. Fewer than three distinct, non-collinear points give a
    degenerate hull (possibly empty) rather than an error.
    """
    ordered = sorted(points)
    lower = _chain(ordered)
    upper = _chain(ordered[::-1])
    return lower[:-1] + upper[:-1]

# ============================================================
# Minimum Bounding Box
# ============================================================
# Caliper directions follow the CCW walk at the x-min, x-max, y-min and
# y-max support points respectively.
_CALIPERS: tuple[Point, Point, Point, Point] = ((0.0, -1.0), (0.0, 1.0), (1.0, 0.0), (-1.0, 0.0))

def _extreme_anchors(hull: Sequence[Point]) -> list[int]:
    """Indices of the first x-min, x-max, y-min and y-max hull points."""
    idx = [0, 0, 0, 0]
    for i, p in enumerate(hull):
        if p[0] < hull[idx[0]][0]: idx[0] = i
        if p[0] > hull[idx[1]][0]: idx[1] = i
        if p[1] < hull[idx[2]][1]: idx[2] = i
        if p[1] > hull[idx[3]][1]: idx[3] = i
    return idx

def _caliper_turn(caliper: Point, edge: Point) -> float:
    """Non-negative CCW rotation that lays *caliper* along the unit *edge*."""
    s = max(-1.0, min(1.0, cross(caliper, edge)))  # asin domain
    theta = math.asin(s)
    if dot(caliper, edge) < 0:
        theta = math.pi - theta
    return max(theta, 0.0)

def _measure(hull: Sequence[Point], calipers: list[Point], anchors: list[int]) -> Box:
    width = abs(cross(calipers[0], sub(hull[anchors[1]], hull[anchors[0]])))
    height = abs(cross(calipers[2], sub(hull[anchors[3]], hull[anchors[2]])))
    return Box(width, height, calipers[0], calipers[2], tuple(anchors))

def min_box(hull: Sequence[Point]) -> Box:
    """Minimum-area enclosing rectangle of a convex CCW polygon.

    Rotates four calipers around the hull, always by the smallest angle that
    brings one of them flush with a hull edge, and keeps the smallest box
    seen. Returns ZERO_BOX for fewer than three hull points.
    """
    n = len(hull)
    if n < 3:
        return ZERO_BOX

    calipers = list(_CALIPERS)
    anchors = _extreme_anchors(hull)
    stop = (anchors[0] + 1) % n
    best = _measure(hull, calipers, anchors)

    # Every pass advances at least one anchor, and the y-max caliper reaches
    # the stop vertex within one turn of the hull.
    for _ in range(4 * (n + 1)):
        turns = [_caliper_turn(c, unit(sub(hull[(a+1) % n], hull[a])))
                 for c, a in zip(calipers, anchors)]
        step = min(turns)
        calipers = [rotate(c, step) for c in calipers]
        anchors = [(a+1) % n if t == step else a for a, t in zip(anchors, turns)]

        box = _measure(hull, calipers, anchors)
        if box.area < best.area:
            best = box
        if turns[3] == step and anchors[3] == stop:
            break
    return best
