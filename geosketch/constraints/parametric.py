"""Constraints that introduce their own internal unknowns."""

from __future__ import annotations

import z3

from ..constraint import Constraint, SketchQuery
from ..entity import LineId, PointId


def point_on_line_parameter(line: LineId, point: PointId) -> str:
    """Name of the placement fraction for ``point`` on ``line``.

    Derived from both identifiers, so several points on one line, or one
    point on several lines, never share an unknown.
    """

    return f"t_line_{line.key}_point_{point.key}"


class PointOnLineConstraint(Constraint):
    """Keep a point on the closed segment between a line's endpoints.

    With ``t`` a fresh unknown::

        x == x1 + t * (x2 - x1)
        y == y1 + t * (y2 - y1)
        0 <= t <= 1
    """

    kind = "point_on_line"

    def __init__(self, line: LineId, point: PointId):
        self.line = line
        self.point = point

    @property
    def parameter_name(self) -> str:
        return point_on_line_parameter(self.line, self.point)

    def apply(self, ctx: z3.Context, solver: z3.Solver, sketch: SketchQuery) -> None:
        start, end = sketch.line_endpoints(self.line)
        px, py = sketch.point_variables(self.point)
        x1, y1 = sketch.point_variables(start)
        x2, y2 = sketch.point_variables(end)

        t = sketch.parameter_variable(self.parameter_name)
        solver.add(px == x1 + t * (x2 - x1))
        solver.add(py == y1 + t * (y2 - y1))
        solver.add(t >= 0)
        solver.add(t <= 1)

    def description(self) -> str:
        return f"Point {self.point} lies on line segment {self.line}"

    def __repr__(self) -> str:
        return f"PointOnLineConstraint(line={self.line!r}, point={self.point!r})"
