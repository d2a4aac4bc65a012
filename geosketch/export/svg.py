"""SVG rendering of a solved sketch."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Tuple

import numpy as np

from ..errors import ExportError, GeoSketchError

if TYPE_CHECKING:  # pragma: no cover - import cycle guard
    from ..sketch import Sketch
    from ..solution import Solution

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"


def _fmt(value: float) -> str:
    text = f"{value:.2f}"
    # Flipping y turns 0.0 into -0.0.
    return "0.00" if text == "-0.00" else text


@dataclass
class SvgExporter:
    """Render lines, circles and optionally points as an SVG document.

    ``scale`` converts meters into SVG user units (1000: one unit per
    millimeter).  The Y axis is flipped so that +y points up in the drawing.
    """

    scale: float = 1000.0
    stroke_width: float = 2.0
    view_box_padding: float = 10.0
    include_points: bool = False
    point_radius: float = 3.0

    def to_svg_coords(self, x: float, y: float) -> Tuple[float, float]:
        return x * self.scale, -y * self.scale

    def export(self, sketch: "Sketch", solution: "Solution") -> str:
        coords = solution.all_point_coordinates()
        if not coords:
            raise ExportError("Solution contains no point coordinates to export")

        segments: List[Tuple[Tuple[float, float], Tuple[float, float]]] = []
        for line_id, line in sketch.lines():
            try:
                start = coords[line.start]
                end = coords[line.end]
            except KeyError as exc:
                raise ExportError(f"Line {line_id} endpoint {exc.args[0]} has no coordinates") from None
            segments.append((self.to_svg_coords(*start), self.to_svg_coords(*end)))

        circles: List[Tuple[Tuple[float, float], float]] = []
        for circle_id, _circle in sketch.circles():
            try:
                params = sketch.extract_circle_parameters(solution, circle_id)
            except GeoSketchError as exc:
                raise ExportError(f"Circle {circle_id} cannot be exported: {exc}") from exc
            circles.append((self.to_svg_coords(*params.center), params.radius * self.scale))

        points = np.array([self.to_svg_coords(x, y) for x, y in coords.values()], dtype=float)
        lower = points.min(axis=0)
        upper = points.max(axis=0)
        if circles:
            centers = np.array([center for center, _ in circles], dtype=float)
            radii = np.abs(np.array([radius for _, radius in circles], dtype=float))[:, None]
            lower = np.minimum(lower, (centers - radii).min(axis=0))
            upper = np.maximum(upper, (centers + radii).max(axis=0))

        pad = self.view_box_padding
        min_x, min_y = (float(v) - pad for v in lower)
        width, height = (float(v) + 2.0 * pad for v in (upper - lower))

        stroke = f"{self.stroke_width:g}"
        out = [
            f'<svg xmlns="{SVG_NS}" viewBox="{_fmt(min_x)} {_fmt(min_y)} {_fmt(width)} {_fmt(height)}">'
        ]
        for (x1, y1), (x2, y2) in segments:
            out.append(
                f'  <line x1="{_fmt(x1)}" y1="{_fmt(y1)}" x2="{_fmt(x2)}" y2="{_fmt(y2)}" '
                f'stroke="black" stroke-width="{stroke}"/>'
            )
        for (cx, cy), radius in circles:
            out.append(
                f'  <circle cx="{_fmt(cx)}" cy="{_fmt(cy)}" r="{_fmt(radius)}" '
                f'fill="none" stroke="black" stroke-width="{stroke}"/>'
            )
        if self.include_points:
            for px, py in points:
                out.append(f'  <circle cx="{_fmt(px)}" cy="{_fmt(py)}" r="{_fmt(self.point_radius)}" fill="black"/>')
        out.append("</svg>")

        logger.info(
            "Exported SVG with %d lines, %d circles, %d points",
            len(segments),
            len(circles),
            len(points) if self.include_points else 0,
        )
        return "\n".join(out) + "\n"
