"""Machining time, material area and cost for a loaded scene."""
import math
from typing import NamedTuple

from cutgeom.types import LineSeg, Box
from cutgeom.geometry import is_malformed, segment_length, arc_radius, point_cloud
from cutgeom.hull import convex_hull, min_box
from .constants import (
    COST_PER_AREA, COST_PER_SECOND, MAX_VELOCITY, PADDING, DEFAULT_RESOLUTION,
)
from .scene import Scene


class Rates(NamedTuple):
    """Pricing and machine parameters used by every estimate."""
    cost_per_area: float
    cost_per_second: float
    max_velocity: float
    padding: float

DEFAULT_RATES = Rates(COST_PER_AREA, COST_PER_SECOND, MAX_VELOCITY, PADDING)


class Quote(NamedTuple):
    seconds: float
    area: float
    cost: float
    box: Box


def arc_velocity(radius: float, rates: Rates = DEFAULT_RATES) -> float:
    """Cutter speed on an arc: max velocity scaled by exp(-1/radius)."""
    return rates.max_velocity * math.exp(-1.0/radius)


def machining_seconds(scene: Scene, rates: Rates = DEFAULT_RATES) -> float:
    """Seconds to cut every edge of the scene.

    Straight edges run at max velocity; arcs slow down as the radius
    shrinks. A scene with any malformed edge takes 0 seconds.
    """
    secs = 0.0
    for seg in scene.curves.values():
        if is_malformed(seg):
            return 0.0
        length = segment_length(seg, scene.pts)
        if length == 0:
            continue
        if isinstance(seg, LineSeg):
            secs += length / rates.max_velocity
        else:
            secs += length / arc_velocity(arc_radius(seg, scene.pts), rates)
    return secs


def bounding_box(scene: Scene, res: int = DEFAULT_RESOLUTION) -> Box:
    """Minimum-area box around the vertices and discretized arcs."""
    cloud = point_cloud(scene.pts, scene.curves.values(), res)
    return min_box(convex_hull(cloud))


def material_area(box: Box, rates: Rates = DEFAULT_RATES) -> float:
    """Stock area in square inches: padded box width times padded height."""
    return (box.width + rates.padding) * (box.height + rates.padding)


def quote_scene(scene: Scene, rates: Rates = DEFAULT_RATES, res: int = DEFAULT_RESOLUTION) -> Quote:
    """Time, padded area and dollar cost to cut *scene*."""
    secs = machining_seconds(scene, rates)
    box = bounding_box(scene, res)
    area = material_area(box, rates)
    cost = secs * rates.cost_per_second + area * rates.cost_per_area
    return Quote(seconds=secs, area=area, cost=cost, box=box)


def fmt_cost(cost: float) -> str:
    """Price line, e.g. 'Estimated Cost: $14.10 US Dollars.'"""
    return f"Estimated Cost: ${cost:.2f} US Dollars."
