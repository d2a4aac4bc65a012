from __future__ import annotations

import z3

from ..constraint import Constraint, SketchQuery, exact_real
from ..entity import CircleId
from ..units import LengthLike
from .points import finite_meters


class CircleRadiusConstraint(Constraint):
    """Fix a circle's radius unknown to a value."""

    kind = "circle_radius"

    def __init__(self, circle: CircleId, radius: LengthLike):
        self.circle = circle
        self.radius = finite_meters(radius, "radius")

    def apply(self, ctx: z3.Context, solver: z3.Solver, sketch: SketchQuery) -> None:
        _center, radius = sketch.circle_center_and_radius(self.circle)
        solver.add(radius == exact_real(self.radius, ctx))

    def description(self) -> str:
        return f"Circle {self.circle} has radius {self.radius:.3f}m"

    def __repr__(self) -> str:
        return f"CircleRadiusConstraint(circle={self.circle!r}, radius={self.radius!r})"
