import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from geosketch import (
    GeoSketchError,
    SvgExporter,
    get_solver_config,
    load_scene,
    load_scene_file,
)

logger = logging.getLogger(__name__)

DEMO_SCENES: Dict[str, Dict[str, Any]] = {
    "rectangle": {
        "title": "3m x 2m rectangle",
        "points": ["a", "b", "c", "d"],
        "lines": [
            {"name": "bottom", "start": "a", "end": "b"},
            {"name": "right", "start": "b", "end": "c"},
            {"name": "top", "start": "c", "end": "d"},
            {"name": "left", "start": "d", "end": "a"},
        ],
        "constraints": [
            {"kind": "fixed_position", "point": "a", "x": 0, "y": 0},
            {"kind": "fixed_position", "point": "b", "x": 3, "y": 0},
            {"kind": "line_length", "line": "right", "length": "2m"},
            {"kind": "perpendicular_lines", "line1": "bottom", "line2": "right"},
            {"kind": "parallel_lines", "line1": "bottom", "line2": "top"},
            {"kind": "parallel_lines", "line1": "left", "line2": "right"},
            {"kind": "line_length", "line": "top", "length": "3m"},
            {"kind": "fixed_position", "point": "c", "x": 3, "y": 2},
        ],
    },
    "point-on-line": {
        "title": "point on a 10m segment",
        "points": ["start", "end", "p"],
        "lines": [{"name": "segment", "start": "start", "end": "end"}],
        "constraints": [
            {"kind": "fixed_position", "point": "start", "x": 0, "y": 0},
            {"kind": "fixed_position", "point": "end", "x": 10, "y": 0},
            {"kind": "point_on_line", "line": "segment", "point": "p"},
            {"kind": "fixed_position", "point": "p", "x": 3, "y": 0},
        ],
    },
    "circle": {
        "title": "25mm circle and tangent radius",
        "points": ["center", "rim"],
        "lines": [{"name": "spoke", "start": "center", "end": "rim"}],
        "circles": [{"name": "wheel", "center": "center"}],
        "constraints": [
            {"kind": "fixed_position", "point": "center", "x": "10mm", "y": "20mm"},
            {"kind": "circle_radius", "circle": "wheel", "radius": "25mm"},
            {"kind": "line_length", "line": "spoke", "length": "25mm"},
            {"kind": "fixed_position", "point": "rim", "x": "35mm", "y": "20mm"},
        ],
    },
}


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )
    # Importing the package may already have installed a root handler.
    logging.getLogger().setLevel(log_level)


def _run(args: argparse.Namespace) -> None:
    config = get_solver_config()
    if args.timeout_ms is not None:
        config = replace(config, timeout_ms=args.timeout_ms)

    if args.scene in DEMO_SCENES:
        logger.info("Running built-in demo %s", args.scene)
        scene = load_scene(DEMO_SCENES[args.scene], config=config)
    else:
        logger.info("Loading scene from %s", args.scene)
        scene = load_scene_file(args.scene, config=config)

    sketch = scene.sketch
    solution = sketch.solve_and_extract()

    if scene.title:
        print(f"Scene: {scene.title}")
    print(f"Constraints ({sketch.constraint_count}):")
    for constraint in sketch.constraints():
        print(f"  - {constraint.description()}")

    print("Coordinates:")
    for name, point_id in scene.points.items():
        x, y = solution.get_point_coordinates(point_id)
        print(f"  {name}: ({x:.6f}, {y:.6f})")

    if scene.lines:
        print("Lines:")
        for name, line_id in scene.lines.items():
            params = solution.get_line_parameters(line_id)
            print(f"  {name}: length={params.length:.6f} angle={params.angle:.6f}")

    if scene.circles:
        print("Circles:")
        for name, circle_id in scene.circles.items():
            params = sketch.extract_circle_parameters(solution, circle_id)
            cx, cy = params.center
            print(
                f"  {name}: center=({cx:.6f}, {cy:.6f}) radius={params.radius:.6f} "
                f"circumference={params.circumference:.6f} area={params.area:.6f}"
            )

    parameters = solution.all_parameters()
    if parameters:
        print("Parameters:")
        for name, value in sorted(parameters.items()):
            print(f"  {name}: {value:.6f}")

    if solution.warnings:
        print("Solution warnings:")
        for warning in solution.warnings:
            print(f"  - {warning}")

    if args.svg_output_path:
        output_path = Path(args.svg_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing SVG document to %s", output_path)
        exporter = SvgExporter(include_points=args.include_points)
        output_path.write_text(exporter.export(sketch, solution), encoding="utf-8")
        print(f"SVG document written to {output_path}")


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Solve 2D geometric constraint sketches")
    parser.add_argument(
        "scene",
        help=f"Built-in demo ({', '.join(DEMO_SCENES)}) or path to a JSON scene file",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--timeout-ms",
        type=int,
        help="Solver timeout in milliseconds (default: none)",
    )
    parser.add_argument(
        "--svg-output-path",
        help="Write an SVG drawing of the solved sketch to the given path",
    )
    parser.add_argument(
        "--include-points",
        action="store_true",
        help="Draw point markers in the SVG output",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    try:
        _run(args)
    except (GeoSketchError, OSError) as exc:
        logger.error("%s", exc)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    main(sys.argv[1:])
