"""Cost and time estimates for cut profiles loaded from JSON."""

from .scene import Scene, SceneError, find_file, parse_scene, load_scene, describe_scene
from .estimate import (
    Rates, DEFAULT_RATES, Quote,
    arc_velocity, machining_seconds, bounding_box, material_area,
    quote_scene, fmt_cost,
)
