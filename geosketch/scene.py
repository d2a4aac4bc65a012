"""Build sketches from JSON-like scene descriptions.

A scene names its entities and refers to them by name::

    {
      "points": ["a", "b"],
      "lines": [{"name": "ab", "start": "a", "end": "b"}],
      "circles": [{"name": "c", "center": "a"}],
      "constraints": [
        {"kind": "fixed_position", "point": "a", "x": 0, "y": 0},
        {"kind": "line_length", "line": "ab", "length": "25mm"},
        {"kind": "circle_radius", "circle": "c", "radius": "1in"}
      ]
    }

Bare numbers are meters; strings may carry a unit (``m``, ``cm``, ``mm``,
``in``).
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

import z3

from .config import SolverConfig
from .constraints import CONSTRAINT_KINDS
from .entity import CircleId, LineId, PointId
from .errors import InvalidParameter
from .sketch import Sketch
from .units import Length

logger = logging.getLogger(__name__)

# Constructor argument roles per constraint kind, in positional order.
CONSTRAINT_FIELDS: Mapping[str, Tuple[Tuple[str, str], ...]] = {
    "fixed_position": (("point", "point"), ("x", "length"), ("y", "length")),
    "coincident_points": (("point1", "point"), ("point2", "point")),
    "line_length": (("line", "line"), ("length", "length")),
    "parallel_lines": (("line1", "line"), ("line2", "line")),
    "perpendicular_lines": (("line1", "line"), ("line2", "line")),
    "point_on_line": (("line", "line"), ("point", "point")),
    "circle_radius": (("circle", "circle"), ("radius", "length")),
}


@dataclass
class Scene:
    sketch: Sketch
    points: Dict[str, PointId] = field(default_factory=dict)
    lines: Dict[str, LineId] = field(default_factory=dict)
    circles: Dict[str, CircleId] = field(default_factory=dict)
    title: Optional[str] = None


def parse_length(value: object, where: str) -> float:
    if isinstance(value, bool):
        raise InvalidParameter(f"{where}: expected a length, got {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return Length.parse(value).to_meters()
        except InvalidParameter as exc:
            raise InvalidParameter(f"{where}: {exc}") from None
    raise InvalidParameter(f"{where}: expected a length, got {value!r}")


def _entries(data: Mapping[str, Any], key: str) -> List[Any]:
    value = data.get(key, [])
    if not isinstance(value, list):
        raise InvalidParameter(f"'{key}' must be a list, got {type(value).__name__}")
    return value


def _name_of(entry: Any, where: str) -> str:
    name = entry.get("name") if isinstance(entry, dict) else entry
    if not isinstance(name, str) or not name:
        raise InvalidParameter(f"{where}: entity name must be a non-empty string")
    return name


def _register(registry: Dict[str, Any], name: str, ident: Any, where: str) -> None:
    if name in registry:
        raise InvalidParameter(f"{where}: duplicate name '{name}'")
    registry[name] = ident


def _lookup(registry: Mapping[str, Any], name: object, role: str, where: str) -> Any:
    if not isinstance(name, str) or name not in registry:
        raise InvalidParameter(f"{where}: unknown {role} {name!r}")
    return registry[name]


def load_scene(
    data: Mapping[str, Any],
    *,
    context: Optional[z3.Context] = None,
    config: Optional[SolverConfig] = None,
) -> Scene:
    """Create a :class:`Scene` (a populated Sketch plus name tables) from ``data``."""

    if not isinstance(data, Mapping):
        raise InvalidParameter(f"scene must be a mapping, got {type(data).__name__}")

    title = data.get("title")
    scene = Scene(sketch=Sketch(context, config=config), title=title if isinstance(title, str) else None)
    sketch = scene.sketch

    for idx, entry in enumerate(_entries(data, "points")):
        where = f"points[{idx}]"
        name = _name_of(entry, where)
        _register(scene.points, name, sketch.add_point(name), where)

    for idx, entry in enumerate(_entries(data, "lines")):
        where = f"lines[{idx}]"
        if not isinstance(entry, dict):
            raise InvalidParameter(f"{where}: line must be an object")
        name = _name_of(entry, where)
        start = _lookup(scene.points, entry.get("start"), "point", where)
        end = _lookup(scene.points, entry.get("end"), "point", where)
        _register(scene.lines, name, sketch.add_line(start, end, name), where)

    for idx, entry in enumerate(_entries(data, "circles")):
        where = f"circles[{idx}]"
        if not isinstance(entry, dict):
            raise InvalidParameter(f"{where}: circle must be an object")
        name = _name_of(entry, where)
        center = _lookup(scene.points, entry.get("center"), "point", where)
        _register(scene.circles, name, sketch.add_circle(center, name), where)

    registries: Dict[str, Mapping[str, Any]] = {
        "point": scene.points,
        "line": scene.lines,
        "circle": scene.circles,
    }
    for idx, entry in enumerate(_entries(data, "constraints")):
        where = f"constraints[{idx}]"
        if not isinstance(entry, dict):
            raise InvalidParameter(f"{where}: constraint must be an object")
        kind = entry.get("kind")
        if kind not in CONSTRAINT_KINDS:
            raise InvalidParameter(
                f"{where}: unknown constraint kind {kind!r} (expected one of {sorted(CONSTRAINT_KINDS)})"
            )
        args = []
        for field_name, role in CONSTRAINT_FIELDS[kind]:
            if field_name not in entry:
                raise InvalidParameter(f"{where}: {kind} requires '{field_name}'")
            value = entry[field_name]
            if role == "length":
                args.append(parse_length(value, f"{where}.{field_name}"))
            else:
                args.append(_lookup(registries[role], value, role, where))
        extra = set(entry) - {"kind"} - {name for name, _ in CONSTRAINT_FIELDS[kind]}
        if extra:
            raise InvalidParameter(f"{where}: {kind} does not support {sorted(extra)}")
        sketch.add_constraint(CONSTRAINT_KINDS[kind](*args))

    logger.info(
        "Loaded scene %r: %d points, %d lines, %d circles, %d constraints",
        scene.title,
        len(scene.points),
        len(scene.lines),
        len(scene.circles),
        sketch.constraint_count,
    )
    return scene


def load_scene_file(
    path: Union[str, Path],
    *,
    context: Optional[z3.Context] = None,
    config: Optional[SolverConfig] = None,
) -> Scene:
    try:
        with open(path, encoding="utf-8") as fin:
            data = json.load(fin)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidParameter(f"{path}: invalid JSON ({exc})") from exc
    return load_scene(data, context=context, config=config)


__all__ = ["CONSTRAINT_FIELDS", "Scene", "load_scene", "load_scene_file", "parse_length"]
