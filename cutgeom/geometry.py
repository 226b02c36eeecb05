"""Point algebra, curve lengths and arc discretization."""
import math
from typing import Iterable
from .types import Point, LineSeg, ArcSeg, Curve

# ============================================================
# Error Type
# ============================================================
class GeometryError(ValueError):
    """Raised for impossible geometry requests."""

# ============================================================
# Point Algebra
# ============================================================
def add(a: Point, b: Point) -> Point:
    return (a[0]+b[0], a[1]+b[1])

def sub(a: Point, b: Point) -> Point:
    return (a[0]-b[0], a[1]-b[1])

def dot(a: Point, b: Point) -> float:
    return a[0]*b[0] + a[1]*b[1]

def cross(a: Point, b: Point) -> float:
    """Scalar 2D cross product (z component of a x b)."""
    return a[0]*b[1] - a[1]*b[0]

def norm(p: Point) -> float:
    return math.sqrt(p[0]**2 + p[1]**2)

def dist(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return norm(sub(a, b))

def unit(p: Point) -> Point:
    """Unit vector along p; the zero vector stays (0, 0)."""
    n = norm(p)
    if n == 0:
        return (0.0, 0.0)
    return (p[0]/n, p[1]/n)

def angle(p: Point) -> float:
    """Radians from the +x axis, in (-pi, pi]."""
    return math.atan2(p[1], p[0])

def angle_between(a: Point, b: Point) -> float:
    """Signed radians turning a onto b, in (-pi, pi]."""
    ua = unit(a); ub = unit(b)
    return math.atan2(cross(ua, ub), dot(ua, ub))

def polar_pt(theta: float, r: float, center: Point = (0.0, 0.0)) -> Point:
    """Point at angle theta and distance r from center."""
    return (center[0]+r*math.cos(theta), center[1]+r*math.sin(theta))

def rotate(p: Point, theta: float) -> Point:
    """Rotate p about the origin by theta radians (CCW positive)."""
    return polar_pt(angle(p)+theta, norm(p))

# ============================================================
# Curve Model
# ============================================================
def is_malformed(seg: Curve) -> bool:
    """True when a curve is bound to fewer than two boundary points."""
    return seg.start is None or seg.end is None

def arc_radius(arc: ArcSeg, pts: dict[int, Point]) -> float:
    """Radius of an arc, measured from its first boundary point."""
    return dist(pts[arc.start], arc.center)

def arc_sweep(arc: ArcSeg, pts: dict[int, Point]) -> float:
    """Signed sweep of an arc in radians.

    Negative raw angles are folded with pi + (pi - t); a clockwise arc
    negates the folded sweep, so the result lies in [-2pi, 2pi].
    """
    c = arc.center
    t = angle_between(sub(pts[arc.start], c), sub(pts[arc.end], c))
    if t < 0:
        t = math.pi + (math.pi - t)
    if arc.clockwise:
        t = -t
    return t

def segment_length(seg: Curve, pts: dict[int, Point]) -> float:
    """Length of a LineSeg or ArcSeg. Malformed curves have length 0."""
    if is_malformed(seg):
        return 0.0
    if isinstance(seg, LineSeg):
        return dist(pts[seg.start], pts[seg.end])
    return arc_radius(seg, pts) * abs(arc_sweep(seg, pts))

def arc_points(arc: ArcSeg, pts: dict[int, Point], res: int) -> list[Point]:
    """Discretize an arc into *res* points, start included, end excluded."""
    if res < 1:
        raise GeometryError(f"Resolution must be positive: res={res}")
    if is_malformed(arc):
        return []
    c = arc.center
    start = angle(sub(pts[arc.start], c))
    sweep = arc_sweep(arc, pts)
    r = arc_radius(arc, pts)
    return [polar_pt(start+sweep*i/res, r, c) for i in range(res)]

def point_cloud(pts: dict[int, Point], curves: Iterable[Curve], res: int) -> list[Point]:
    """All raw vertices followed by the discretization of every arc."""
    cloud = list(pts.values())
    for seg in curves:
        if isinstance(seg, ArcSeg):
            cloud.extend(arc_points(seg, pts, res))
    return cloud
