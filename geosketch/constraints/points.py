"""Constraints acting directly on point coordinates."""

from __future__ import annotations

import math

import z3

from ..constraint import Constraint, SketchQuery, exact_real
from ..entity import PointId
from ..errors import InvalidConstraint
from ..units import LengthLike, to_meters


def finite_meters(value: LengthLike, what: str) -> float:
    meters = to_meters(value)
    if not math.isfinite(meters):
        raise InvalidConstraint(f"{what} must be finite, got {meters!r}")
    return meters


class FixedPositionConstraint(Constraint):
    """Pin a point to absolute coordinates."""

    kind = "fixed_position"

    def __init__(self, point: PointId, x: LengthLike, y: LengthLike):
        self.point = point
        self.x = finite_meters(x, "x")
        self.y = finite_meters(y, "y")

    def apply(self, ctx: z3.Context, solver: z3.Solver, sketch: SketchQuery) -> None:
        px, py = sketch.point_variables(self.point)
        solver.add(px == exact_real(self.x, ctx))
        solver.add(py == exact_real(self.y, ctx))

    def description(self) -> str:
        return f"Point {self.point} is fixed at ({self.x:.3f}m, {self.y:.3f}m)"

    def __repr__(self) -> str:
        return f"FixedPositionConstraint(point={self.point!r}, x={self.x!r}, y={self.y!r})"


class CoincidentPointsConstraint(Constraint):
    """Force two points onto the same location."""

    kind = "coincident_points"

    def __init__(self, point1: PointId, point2: PointId):
        self.point1 = point1
        self.point2 = point2

    def apply(self, ctx: z3.Context, solver: z3.Solver, sketch: SketchQuery) -> None:
        x1, y1 = sketch.point_variables(self.point1)
        x2, y2 = sketch.point_variables(self.point2)
        solver.add(x1 == x2)
        solver.add(y1 == y2)

    def description(self) -> str:
        return f"Points {self.point1} and {self.point2} are coincident"

    def __repr__(self) -> str:
        return f"CoincidentPointsConstraint(point1={self.point1!r}, point2={self.point2!r})"
