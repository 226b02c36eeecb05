"""Load cut profiles from JSON into a point arena and curves."""
import json
import logging
import os
from typing import Any, NamedTuple

from cutgeom.types import Point, LineSeg, ArcSeg, Curve

logger = logging.getLogger(__name__)

# How many times a relative path is retried one directory further up.
SEARCH_DEPTH = 5


class SceneError(ValueError):
    """Raised when a profile file is missing or structurally invalid."""


class Scene(NamedTuple):
    pts: dict[int, Point]        # vertex id -> position
    curves: dict[int, Curve]     # edge id -> LineSeg / ArcSeg


# ============================================================
# File lookup
# ============================================================
def find_file(path: str | os.PathLike, depth: int = SEARCH_DEPTH) -> str:
    """Resolve *path*, walking up to *depth* parent directories.

    "files/Rectangle.json" is tried as given, then "../files/Rectangle.json",
    and so on. Raises SceneError if none exist.
    """
    candidate = os.fspath(path)
    for _ in range(depth):
        if os.path.isfile(candidate):
            return candidate
        if os.path.isabs(candidate):
            break
        candidate = os.path.join(os.pardir, candidate)
    raise SceneError(f"File not found: {os.fspath(path)}")


# ============================================================
# Parsing
# ============================================================
def _xy(node: dict[str, Any], what: str) -> Point:
    try:
        return (float(node["X"]), float(node["Y"]))
    except (KeyError, TypeError, ValueError) as e:
        raise SceneError(f"Bad coordinates for {what}: {node!r}") from e


def _vertex_ids(edge: dict[str, Any], edge_id: int, pts: dict[int, Point]) -> list[int | None]:
    """First two vertex ids of an edge, padded with None when missing."""
    try:
        ids = [int(v) for v in edge.get("Vertices", [])][:2]
    except (TypeError, ValueError) as e:
        raise SceneError(f"Edge {edge_id} has non-integer vertex ids") from e
    for v in ids:
        if v not in pts:
            raise SceneError(f"Edge {edge_id} references unknown vertex {v}")
    if len(ids) < 2:
        logger.warning("Edge %d has %d vertices; treating as malformed", edge_id, len(ids))
    return ids + [None] * (2 - len(ids))


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name, {})
    if not isinstance(section, dict):
        raise SceneError(f"{name} must be an object, got {type(section).__name__}")
    return section


def parse_scene(data: dict[str, Any]) -> Scene:
    """Build a Scene from the decoded JSON document."""
    if not isinstance(data, dict):
        raise SceneError(f"Expected a JSON object, got {type(data).__name__}")

    pts: dict[int, Point] = {}
    for key, vertex in _section(data, "Vertices").items():
        try:
            vertex_id = int(key)
        except ValueError as e:
            raise SceneError(f"Vertex id is not an integer: {key!r}") from e
        try:
            position = vertex["Position"]
        except (KeyError, TypeError) as e:
            raise SceneError(f"Vertex {key} has no Position") from e
        pts[vertex_id] = _xy(position, f"vertex {key}")

    curves: dict[int, Curve] = {}
    for key, edge in _section(data, "Edges").items():
        try:
            edge_id = int(key)
        except ValueError as e:
            raise SceneError(f"Edge id is not an integer: {key!r}") from e
        if not isinstance(edge, dict):
            raise SceneError(f"Edge {edge_id} is not an object")
        kind = edge.get("Type")
        if kind == "LineSegment":
            start, end = _vertex_ids(edge, edge_id, pts)
            curves[edge_id] = LineSeg(start, end)
        elif kind == "CircularArc":
            start, end = _vertex_ids(edge, edge_id, pts)
            center = _xy(edge.get("Center", {}), f"edge {edge_id} center")
            cw_from = edge.get("ClockwiseFrom")
            clockwise = start is not None and cw_from is not None and str(start) == str(cw_from)
            curves[edge_id] = ArcSeg(start, end, center, clockwise)
        else:
            logger.warning("Skipping edge %d with unknown type %r", edge_id, kind)

    return Scene(pts=pts, curves=curves)


def load_scene(path: str | os.PathLike) -> Scene:
    """Find, read and parse a profile file."""
    filename = find_file(path)
    logger.info("Loading scene from %s", filename)
    with open(filename, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise SceneError(f"Invalid JSON in {filename}: {e}") from e
    scene = parse_scene(data)
    logger.info("Loaded %d vertices and %d edges", len(scene.pts), len(scene.curves))
    for line in describe_scene(scene):
        logger.debug(line)
    return scene


def describe_scene(scene: Scene) -> list[str]:
    """One line per vertex and edge: positions, arc centers and directions."""
    lines = [f"Vertex {vid}: ({x:g}, {y:g})" for vid, (x, y) in sorted(scene.pts.items())]
    for eid, curve in sorted(scene.curves.items()):
        if isinstance(curve, ArcSeg):
            cx, cy = curve.center
            turn = "CW" if curve.clockwise else "CCW"
            lines.append(f"Edge {eid}: arc {curve.start} -> {curve.end} about ({cx:g}, {cy:g}) {turn}")
        else:
            lines.append(f"Edge {eid}: line {curve.start} -> {curve.end}")
    return lines
