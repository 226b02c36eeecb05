"""Tests for quote/scene.py profile loading."""
import json
import logging
import os
import pytest
from cutgeom.types import LineSeg, ArcSeg
from quote.scene import Scene, SceneError, find_file, parse_scene, load_scene, describe_scene


def _doc(edges, vertices=None):
    if vertices is None:
        vertices = {
            "1": {"Position": {"X": 0, "Y": 0}},
            "2": {"Position": {"X": 1, "Y": 0}},
        }
    return {"Vertices": vertices, "Edges": edges}


class TestParseScene:
    def test_vertices_keyed_by_int_id(self):
        scene = parse_scene(_doc({}))
        assert scene.pts == {1: (0.0, 0.0), 2: (1.0, 0.0)}
        assert all(isinstance(c, float) for p in scene.pts.values() for c in p)

    def test_line_segment(self):
        scene = parse_scene(_doc({"7": {"Type": "LineSegment", "Vertices": [1, 2]}}))
        assert scene.curves == {7: LineSeg(1, 2)}

    def test_arc_counter_clockwise(self):
        edge = {"Type": "CircularArc", "Vertices": [1, 2],
                "Center": {"X": 0.5, "Y": 0}, "ClockwiseFrom": 2}
        scene = parse_scene(_doc({"3": edge}))
        assert scene.curves[3] == ArcSeg(1, 2, (0.5, 0.0), False)

    def test_arc_clockwise_from_first_vertex(self):
        edge = {"Type": "CircularArc", "Vertices": [1, 2],
                "Center": {"X": 0.5, "Y": 0}, "ClockwiseFrom": 1}
        assert parse_scene(_doc({"3": edge})).curves[3].clockwise is True

    def test_short_vertex_list_is_malformed(self):
        scene = parse_scene(_doc({"4": {"Type": "LineSegment", "Vertices": [1]}}))
        assert scene.curves[4] == LineSeg(1, None)

    def test_unknown_type_skipped(self):
        scene = parse_scene(_doc({"5": {"Type": "Spline", "Vertices": [1, 2]}}))
        assert scene.curves == {}

    def test_unknown_vertex_raises(self):
        with pytest.raises(SceneError, match="unknown vertex 9"):
            parse_scene(_doc({"6": {"Type": "LineSegment", "Vertices": [1, 9]}}))

    def test_missing_position_raises(self):
        with pytest.raises(SceneError, match="no Position"):
            parse_scene(_doc({}, vertices={"1": {}}))

    def test_arc_without_center_raises(self):
        with pytest.raises(SceneError, match="center"):
            parse_scene(_doc({"3": {"Type": "CircularArc", "Vertices": [1, 2]}}))

    def test_not_an_object(self):
        with pytest.raises(SceneError):
            parse_scene([1, 2, 3])

    @pytest.mark.parametrize("bad", [[], [1], 3, None, "x"])
    def test_vertices_not_an_object(self, bad):
        with pytest.raises(SceneError, match="Vertices must be an object"):
            parse_scene({"Vertices": bad, "Edges": {}})

    @pytest.mark.parametrize("bad", [[], [1], 3, None, "x"])
    def test_edges_not_an_object(self, bad):
        with pytest.raises(SceneError, match="Edges must be an object"):
            parse_scene(_doc(bad))

    def test_missing_sections_are_empty(self):
        assert parse_scene({}) == Scene(pts={}, curves={})


class TestLoadScene:
    def test_rectangle(self, rectangle):
        assert isinstance(rectangle, Scene)
        assert len(rectangle.pts) == 4
        assert len(rectangle.curves) == 4
        assert all(isinstance(c, LineSeg) for c in rectangle.curves.values())

    def test_arc_directions(self, extrude_arc, cut_arc):
        (extrude,) = [c for c in extrude_arc.curves.values() if isinstance(c, ArcSeg)]
        (cut,) = [c for c in cut_arc.curves.values() if isinstance(c, ArcSeg)]
        assert extrude.clockwise is False
        assert cut.clockwise is True
        assert extrude.center == (2.0, 0.5)

    def test_missing_file(self, tmp_path):
        with pytest.raises(SceneError, match="not found"):
            load_scene(tmp_path / "nope.json")

    def test_edges_list_in_file(self, tmp_path):
        bad = tmp_path / "list_edges.json"
        bad.write_text(json.dumps({"Vertices": {}, "Edges": [1]}))
        with pytest.raises(SceneError, match="Edges"):
            load_scene(bad)

    def test_describe(self, extrude_arc, cut_arc):
        lines = describe_scene(extrude_arc)
        assert len(lines) == len(extrude_arc.pts) + len(extrude_arc.curves)
        assert "Vertex 2: (2, 0)" in lines
        (arc,) = [line for line in lines if " arc " in line]
        assert arc.endswith("about (2, 0.5) CCW")
        (cut,) = [line for line in describe_scene(cut_arc) if " arc " in line]
        assert cut.endswith("CW") and not cut.endswith("CCW")

    def test_debug_dump_on_load(self, files_dir, caplog):
        caplog.set_level(logging.DEBUG, logger="quote.scene")
        scene = load_scene(os.path.join(files_dir, "Rectangle.json"))
        debug = [r.getMessage() for r in caplog.records if r.levelno == logging.DEBUG]
        assert debug == describe_scene(scene)
        assert any(msg.startswith("Edge 10: line ") for msg in debug)

    def test_invalid_json(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json")
        with pytest.raises(SceneError, match="Invalid JSON"):
            load_scene(bad)


class TestFindFile:
    def test_searches_parent_directories(self, tmp_path, monkeypatch):
        (tmp_path / "files").mkdir()
        target = tmp_path / "files" / "shape.json"
        target.write_text(json.dumps(_doc({})))
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        monkeypatch.chdir(deep)
        found = find_file(os.path.join("files", "shape.json"))
        assert os.path.samefile(found, target)
        assert load_scene(os.path.join("files", "shape.json")).pts[2] == (1.0, 0.0)

    def test_gives_up_after_depth(self, tmp_path, monkeypatch):
        (tmp_path / "files").mkdir()
        (tmp_path / "files" / "shape.json").write_text("{}")
        deep = tmp_path / "a" / "b" / "c" / "d" / "e"
        deep.mkdir(parents=True)
        monkeypatch.chdir(deep)
        with pytest.raises(SceneError):
            find_file(os.path.join("files", "shape.json"))
