import json
import math

import pytest

from geosketch import InvalidParameter, OverConstrained, load_scene, load_scene_file
from geosketch.scene import parse_length


def _triangle():
    return {
        "title": "right triangle",
        "points": ["a", {"name": "b"}, "c"],
        "lines": [
            {"name": "ab", "start": "a", "end": "b"},
            {"name": "ac", "start": "a", "end": "c"},
        ],
        "circles": [{"name": "around", "center": "a"}],
        "constraints": [
            {"kind": "fixed_position", "point": "a", "x": 0, "y": 0},
            {"kind": "fixed_position", "point": "b", "x": "40mm", "y": 0},
            {"kind": "perpendicular_lines", "line1": "ab", "line2": "ac"},
            {"kind": "line_length", "line": "ac", "length": "3cm"},
            {"kind": "circle_radius", "circle": "around", "radius": 0.05},
        ],
    }


def test_load_scene_builds_solvable_sketch():
    scene = load_scene(_triangle())

    assert scene.title == "right triangle"
    assert list(scene.points) == ["a", "b", "c"]
    assert scene.sketch.constraint_count == 5

    solution = scene.sketch.solve_and_extract()
    bx, by = solution.get_point_coordinates(scene.points["b"])
    cx, cy = solution.get_point_coordinates(scene.points["c"])
    assert math.isclose(bx, 0.04)
    assert by == 0.0
    assert math.isclose(cx, 0.0, abs_tol=1e-12)
    assert math.isclose(abs(cy), 0.03)

    circle = scene.sketch.extract_circle_parameters(solution, scene.circles["around"])
    assert circle.radius == 0.05
    assert str(scene.sketch.get_point(scene.points["a"]).x) == "a_x"


def test_load_scene_reports_conflicts_on_solve():
    data = {
        "points": ["a"],
        "constraints": [
            {"kind": "fixed_position", "point": "a", "x": 0, "y": 0},
            {"kind": "fixed_position", "point": "a", "x": 1, "y": 0},
        ],
    }
    scene = load_scene(data)

    with pytest.raises(OverConstrained):
        scene.sketch.solve_and_extract()


@pytest.mark.parametrize(
    "mutate, message",
    [
        (lambda d: d["constraints"].append({"kind": "tangent"}), "unknown constraint kind"),
        (lambda d: d["constraints"].append({"point": "a"}), "unknown constraint kind"),
        (lambda d: d["lines"].append({"name": "bad", "start": "a", "end": "z"}), "unknown point 'z'"),
        (lambda d: d["points"].append("a"), "duplicate name 'a'"),
        (lambda d: d["points"].append(""), "non-empty string"),
        (lambda d: d["constraints"].append({"kind": "line_length", "line": "ab"}), "requires 'length'"),
        (
            lambda d: d["constraints"].append({"kind": "line_length", "line": "ab", "length": "2ft"}),
            "unknown length unit",
        ),
        (
            lambda d: d["constraints"].append({"kind": "line_length", "line": "ab", "length": True}),
            "expected a length",
        ),
        (
            lambda d: d["constraints"].append({"kind": "circle_radius", "circle": "ab", "radius": 1}),
            "unknown circle 'ab'",
        ),
        (
            lambda d: d["constraints"].append(
                {"kind": "parallel_lines", "line1": "ab", "line2": "ac", "angle": 0}
            ),
            "does not support ['angle']",
        ),
        (lambda d: d.update(lines="ab"), "'lines' must be a list"),
        (lambda d: d["circles"].append("ring"), "circle must be an object"),
    ],
)
def test_load_scene_rejects_malformed_input(mutate, message):
    data = _triangle()
    mutate(data)

    with pytest.raises(InvalidParameter) as exc:
        load_scene(data)
    assert message in str(exc.value)


def test_load_scene_requires_mapping():
    with pytest.raises(InvalidParameter):
        load_scene(["a", "b"])


def test_parse_length():
    assert parse_length(2, "x") == 2.0
    assert math.isclose(parse_length("1in", "x"), 0.0254)
    with pytest.raises(InvalidParameter) as exc:
        parse_length(None, "constraints[0].x")
    assert str(exc.value).startswith("constraints[0].x:")


def test_load_scene_file(tmp_path):
    path = tmp_path / "triangle.json"
    path.write_text(json.dumps(_triangle()), encoding="utf-8")

    scene = load_scene_file(path)

    assert set(scene.lines) == {"ab", "ac"}


def test_load_scene_file_rejects_invalid_json(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    with pytest.raises(InvalidParameter) as exc:
        load_scene_file(path)
    assert "invalid JSON" in str(exc.value)


def test_load_scene_file_rejects_undecodable_bytes(tmp_path):
    path = tmp_path / "latin1.json"
    path.write_bytes(b'{"points": ["\xff\xfe"]}')

    with pytest.raises(InvalidParameter) as exc:
        load_scene_file(path)
    assert "invalid JSON" in str(exc.value)
