"""Constraints on line lengths and directions."""

from __future__ import annotations

from typing import Tuple

import z3

from ..constraint import Constraint, SketchQuery, exact_square
from ..entity import LineId
from ..units import LengthLike
from .points import finite_meters


def line_direction(sketch: SketchQuery, line: LineId) -> Tuple[z3.ArithRef, z3.ArithRef]:
    """Return ``(x2 - x1, y2 - y1)`` for ``line``."""

    start, end = sketch.line_endpoints(line)
    x1, y1 = sketch.point_variables(start)
    x2, y2 = sketch.point_variables(end)
    return x2 - x1, y2 - y1


class LineLengthConstraint(Constraint):
    """Fix the Euclidean length of a line.

    Asserted in squared form, ``dx^2 + dy^2 == L^2``, so the solver never sees
    a square root.  Zero and negative targets are accepted as given.
    """

    kind = "line_length"

    def __init__(self, line: LineId, length: LengthLike):
        self.line = line
        self.length = finite_meters(length, "length")

    def apply(self, ctx: z3.Context, solver: z3.Solver, sketch: SketchQuery) -> None:
        dx, dy = line_direction(sketch, self.line)
        solver.add(dx * dx + dy * dy == exact_square(self.length, ctx))

    def description(self) -> str:
        return f"Line {self.line} has length {self.length:.3f}m"

    def __repr__(self) -> str:
        return f"LineLengthConstraint(line={self.line!r}, length={self.length!r})"


class ParallelLinesConstraint(Constraint):
    """Zero cross product of the two direction vectors.

    A zero-length line has direction ``(0, 0)`` and satisfies this equation
    against any other line.
    """

    kind = "parallel_lines"

    def __init__(self, line1: LineId, line2: LineId):
        self.line1 = line1
        self.line2 = line2

    def apply(self, ctx: z3.Context, solver: z3.Solver, sketch: SketchQuery) -> None:
        dx1, dy1 = line_direction(sketch, self.line1)
        dx2, dy2 = line_direction(sketch, self.line2)
        solver.add(dx1 * dy2 - dy1 * dx2 == 0)

    def description(self) -> str:
        return f"Lines {self.line1} and {self.line2} are parallel"

    def __repr__(self) -> str:
        return f"ParallelLinesConstraint(line1={self.line1!r}, line2={self.line2!r})"


class PerpendicularLinesConstraint(Constraint):
    """Zero dot product of the two direction vectors."""

    kind = "perpendicular_lines"

    def __init__(self, line1: LineId, line2: LineId):
        self.line1 = line1
        self.line2 = line2

    def apply(self, ctx: z3.Context, solver: z3.Solver, sketch: SketchQuery) -> None:
        dx1, dy1 = line_direction(sketch, self.line1)
        dx2, dy2 = line_direction(sketch, self.line2)
        solver.add(dx1 * dx2 + dy1 * dy2 == 0)

    def description(self) -> str:
        return f"Lines {self.line1} and {self.line2} are perpendicular"

    def __repr__(self) -> str:
        return f"PerpendicularLinesConstraint(line1={self.line1!r}, line2={self.line2!r})"
