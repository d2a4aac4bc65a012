import math

import pytest
import z3

from geosketch import (
    CONSTRAINT_KINDS,
    CircleRadiusConstraint,
    CoincidentPointsConstraint,
    EntityError,
    FixedPositionConstraint,
    InvalidConstraint,
    InvalidParameter,
    Length,
    LineLengthConstraint,
    ParallelLinesConstraint,
    PerpendicularLinesConstraint,
    PointOnLineConstraint,
    SketchQuery,
)
from geosketch.constraint import exact_real, exact_square
from geosketch.constraints import EQUATION_TABLE, point_on_line_parameter
from geosketch.entity import CircleId, LineId, PointId


class FakeSketch(SketchQuery):
    """Minimal query surface backed by plain dictionaries."""

    def __init__(self, ctx):
        self.ctx = ctx
        self.points = {}
        self.lines = {}
        self.circles = {}
        self.internal = {}

    def add_point(self, index):
        ident = PointId(index)
        self.points[ident] = (z3.Real(f"x{index}", self.ctx), z3.Real(f"y{index}", self.ctx))
        return ident

    def add_line(self, index, start, end):
        ident = LineId(index)
        self.lines[ident] = (start, end)
        return ident

    def add_circle(self, index, center):
        ident = CircleId(index)
        self.circles[ident] = (center, z3.Real(f"r{index}", self.ctx))
        return ident

    def point_variables(self, point):
        if point not in self.points:
            raise EntityError(f"Point {point} not found")
        return self.points[point]

    def line_endpoints(self, line):
        if line not in self.lines:
            raise EntityError(f"Line {line} not found")
        return self.lines[line]

    def circle_center_and_radius(self, circle):
        if circle not in self.circles:
            raise EntityError(f"Circle {circle} not found")
        return self.circles[circle]

    def length_variable(self, name):
        return self.parameter_variable(f"length_{name}")

    def angle_variable(self, name):
        return self.parameter_variable(f"angle_{name}")

    def parameter_variable(self, name):
        return self.internal.setdefault(name, z3.Real(name, self.ctx))


@pytest.fixture
def ctx():
    return z3.Context()


@pytest.fixture
def fake(ctx):
    sketch = FakeSketch(ctx)
    a = sketch.add_point(0)
    b = sketch.add_point(1)
    c = sketch.add_point(2)
    d = sketch.add_point(3)
    sketch.add_line(0, a, b)
    sketch.add_line(1, c, d)
    sketch.add_circle(0, a)
    return sketch


@pytest.mark.parametrize(
    "constraint, expected",
    [
        (FixedPositionConstraint(PointId(0), 1.0, 2.0), 2),
        (CoincidentPointsConstraint(PointId(0), PointId(1)), 2),
        (LineLengthConstraint(LineId(0), 5.0), 1),
        (ParallelLinesConstraint(LineId(0), LineId(1)), 1),
        (PerpendicularLinesConstraint(LineId(0), LineId(1)), 1),
        (PointOnLineConstraint(LineId(0), PointId(2)), 4),
        (CircleRadiusConstraint(CircleId(0), 0.5), 1),
    ],
)
def test_constraint_assertion_counts(ctx, fake, constraint, expected):
    solver = z3.Solver(ctx=ctx)
    constraint.apply(ctx, solver, fake)
    assert len(solver.assertions()) == expected


@pytest.mark.parametrize(
    "constraint, missing",
    [
        (FixedPositionConstraint(PointId(9), 0, 0), "PointId(9, 0)"),
        (CoincidentPointsConstraint(PointId(0), PointId(9)), "PointId(9, 0)"),
        (LineLengthConstraint(LineId(7), 1), "LineId(7, 0)"),
        (ParallelLinesConstraint(LineId(0), LineId(7)), "LineId(7, 0)"),
        (PerpendicularLinesConstraint(LineId(7), LineId(0)), "LineId(7, 0)"),
        (PointOnLineConstraint(LineId(0), PointId(9)), "PointId(9, 0)"),
        (CircleRadiusConstraint(CircleId(4), 1), "CircleId(4, 0)"),
    ],
)
def test_missing_entities_raise_entity_error(ctx, fake, constraint, missing):
    solver = z3.Solver(ctx=ctx)
    with pytest.raises(EntityError) as exc:
        constraint.apply(ctx, solver, fake)
    assert missing in str(exc.value)


@pytest.mark.parametrize("bad", [math.nan, math.inf, -math.inf])
def test_non_finite_targets_are_rejected(bad):
    with pytest.raises(InvalidConstraint):
        FixedPositionConstraint(PointId(0), bad, 0.0)
    with pytest.raises(InvalidConstraint):
        LineLengthConstraint(LineId(0), bad)
    with pytest.raises(InvalidConstraint):
        CircleRadiusConstraint(CircleId(0), bad)


def test_non_numeric_targets_are_rejected():
    with pytest.raises(InvalidParameter):
        LineLengthConstraint(LineId(0), "5m")


def test_length_targets_accept_units():
    constraint = LineLengthConstraint(LineId(0), Length.from_millimeters(250))
    assert constraint.length == 0.25
    assert constraint.description() == "Line LineId(0, 0) has length 0.250m"


def test_descriptions():
    assert (
        FixedPositionConstraint(PointId(1), 1.5, -2).description()
        == "Point PointId(1, 0) is fixed at (1.500m, -2.000m)"
    )
    assert str(CoincidentPointsConstraint(PointId(0), PointId(1))) == (
        "Points PointId(0, 0) and PointId(1, 0) are coincident"
    )
    assert ParallelLinesConstraint(LineId(0), LineId(1)).description().endswith("are parallel")
    assert PerpendicularLinesConstraint(LineId(0), LineId(1)).description().endswith("are perpendicular")
    assert (
        PointOnLineConstraint(LineId(2), PointId(3)).description()
        == "Point PointId(3, 0) lies on line segment LineId(2, 0)"
    )
    assert CircleRadiusConstraint(CircleId(0), 0.01).description() == "Circle CircleId(0, 0) has radius 0.010m"


def test_point_on_line_registers_named_parameter(ctx, fake):
    solver = z3.Solver(ctx=ctx)
    constraint = PointOnLineConstraint(LineId(0), PointId(2))
    constraint.apply(ctx, solver, fake)

    assert constraint.parameter_name == "t_line_0_0_point_2_0"
    assert list(fake.internal) == ["t_line_0_0_point_2_0"]
    assert point_on_line_parameter(LineId(0, 1), PointId(2, 3)) == "t_line_0_1_point_2_3"


def test_parameters_are_distinct_per_line_point_pair(ctx, fake):
    solver = z3.Solver(ctx=ctx)
    PointOnLineConstraint(LineId(0), PointId(2)).apply(ctx, solver, fake)
    PointOnLineConstraint(LineId(0), PointId(3)).apply(ctx, solver, fake)
    PointOnLineConstraint(LineId(1), PointId(0)).apply(ctx, solver, fake)

    assert len(fake.internal) == 3


def test_fixed_position_pins_point(ctx, fake):
    solver = z3.Solver(ctx=ctx)
    FixedPositionConstraint(PointId(0), 0.1, -3).apply(ctx, solver, fake)
    assert solver.check() == z3.sat

    x, y = fake.points[PointId(0)]
    model = solver.model()
    assert str(model.eval(x)) == "1/10"
    assert str(model.eval(y)) == "-3"


def test_exact_real_uses_shortest_decimal(ctx):
    value = exact_real(0.1, ctx)
    assert (value.numerator_as_long(), value.denominator_as_long()) == (1, 10)

    square = exact_square(2.5, ctx)
    assert (square.numerator_as_long(), square.denominator_as_long()) == (25, 4)


def test_registry_covers_every_kind():
    assert set(CONSTRAINT_KINDS) == set(EQUATION_TABLE)
    for kind, cls in CONSTRAINT_KINDS.items():
        assert cls.kind == kind
