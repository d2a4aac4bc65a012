"""Catalog of constraint kinds."""

from typing import Dict, Mapping, Type

from ..constraint import Constraint
from .circles import CircleRadiusConstraint
from .lines import (
    LineLengthConstraint,
    ParallelLinesConstraint,
    PerpendicularLinesConstraint,
    line_direction,
)
from .parametric import PointOnLineConstraint, point_on_line_parameter
from .points import CoincidentPointsConstraint, FixedPositionConstraint

# Mapping table documenting the equations each kind asserts.
EQUATION_TABLE: Mapping[str, str] = {
    "fixed_position": "x == X, y == Y",
    "coincident_points": "xA == xB, yA == yB",
    "line_length": "(x2-x1)^2 + (y2-y1)^2 == L^2",
    "parallel_lines": "dx1*dy2 - dy1*dx2 == 0",
    "perpendicular_lines": "dx1*dx2 + dy1*dy2 == 0",
    "point_on_line": "x == x1 + t*dx, y == y1 + t*dy, 0 <= t <= 1",
    "circle_radius": "r == R",
}

CONSTRAINT_KINDS: Dict[str, Type[Constraint]] = {
    cls.kind: cls
    for cls in (
        FixedPositionConstraint,
        CoincidentPointsConstraint,
        LineLengthConstraint,
        ParallelLinesConstraint,
        PerpendicularLinesConstraint,
        PointOnLineConstraint,
        CircleRadiusConstraint,
    )
}

__all__ = [
    "CONSTRAINT_KINDS",
    "EQUATION_TABLE",
    "CircleRadiusConstraint",
    "CoincidentPointsConstraint",
    "FixedPositionConstraint",
    "LineLengthConstraint",
    "ParallelLinesConstraint",
    "PerpendicularLinesConstraint",
    "PointOnLineConstraint",
    "line_direction",
    "point_on_line_parameter",
]
