"""Constraint and sketch-query interfaces.

A :class:`Constraint` knows how to turn one geometric relationship into solver
assertions.  It reads entity data exclusively through :class:`SketchQuery`,
so constraint kinds never depend on how a sketch stores its entities.
"""

from __future__ import annotations

import abc
from fractions import Fraction
from typing import ClassVar, Tuple

import z3

from .entity import CircleId, LineId, PointId


class SketchQuery(abc.ABC):
    """Read-only access to the unknowns of a sketch's entities."""

    @abc.abstractmethod
    def point_variables(self, point: PointId) -> Tuple[z3.ArithRef, z3.ArithRef]:
        """Return the ``(x, y)`` unknowns of ``point`` or raise ``EntityError``."""

    @abc.abstractmethod
    def line_endpoints(self, line: LineId) -> Tuple[PointId, PointId]:
        """Return the ``(start, end)`` point ids of ``line`` or raise ``EntityError``."""

    @abc.abstractmethod
    def circle_center_and_radius(self, circle: CircleId) -> Tuple[PointId, z3.ArithRef]:
        """Return the center id and radius unknown of ``circle`` or raise ``EntityError``."""

    @abc.abstractmethod
    def length_variable(self, name: str) -> z3.ArithRef:
        """Return the unknown ``length_{name}``, creating it on first use."""

    @abc.abstractmethod
    def angle_variable(self, name: str) -> z3.ArithRef:
        """Return the unknown ``angle_{name}``, creating it on first use."""

    @abc.abstractmethod
    def parameter_variable(self, name: str) -> z3.ArithRef:
        """Return the internal unknown ``name`` and register it for extraction."""


class Constraint(abc.ABC):
    """One unit of geometric intent, translated into solver assertions."""

    kind: ClassVar[str] = ""

    @abc.abstractmethod
    def apply(self, ctx: z3.Context, solver: z3.Solver, sketch: SketchQuery) -> None:
        """Assert this constraint's equations on ``solver``.

        Raises ``EntityError`` when a referenced id cannot be resolved.
        Assertions added before the failing lookup are left in place.
        """

    @abc.abstractmethod
    def description(self) -> str:
        """Human readable summary used in logs and diagnostics."""

    def __str__(self) -> str:
        return self.description()


def exact_real(value: float, ctx: z3.Context) -> z3.ArithRef:
    """Return ``value`` as an exact rational numeral.

    The numeral is built from the shortest decimal that round-trips the
    float, so ``0.1`` becomes ``1/10`` rather than the nearest binary fraction.
    """

    fraction = Fraction(repr(float(value)))
    return z3.RatVal(fraction.numerator, fraction.denominator, ctx=ctx)


def exact_square(value: float, ctx: z3.Context) -> z3.ArithRef:
    fraction = Fraction(repr(float(value))) ** 2
    return z3.RatVal(fraction.numerator, fraction.denominator, ctx=ctx)


__all__ = ["Constraint", "SketchQuery", "exact_real", "exact_square"]
