"""Floating point view of a solved model.

A :class:`Solution` borrows the solver model it was created from and converts
exact model values into floats on demand.  Every cache entry is written once;
later reads return the stored value without evaluating the model again.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

import z3

from .config import SolverConfig, get_solver_config
from .entity import CircleId, LineId, PointId
from .errors import SolutionError
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)

Coords = Tuple[float, float]


@dataclass(frozen=True)
class LineParameters:
    start: Coords
    end: Coords
    length: float
    angle: float


@dataclass(frozen=True)
class CircleParameters:
    center: Coords
    radius: float
    circumference: float
    area: float


def rational_parts(value: z3.ExprRef, what: str, *, algebraic_precision: int = 20) -> Tuple[int, int]:
    """Return ``(numerator, denominator)`` of a real numeral from a model.

    Irrational algebraic numbers are approximated by a rational within
    ``10 ** -algebraic_precision`` first.
    """

    if z3.is_algebraic_value(value):
        value = value.approx(algebraic_precision)
    if not z3.is_rational_value(value):
        raise SolutionError(f"Model value for {what} is not a real numeral: {value}")
    return value.numerator_as_long(), value.denominator_as_long()


def rational_to_float(numerator: int, denominator: int, what: str) -> float:
    if denominator == 0:
        raise SolutionError(f"Division by zero in {what} rational: {numerator}/{denominator}")
    try:
        result = numerator / denominator
    except OverflowError as exc:
        raise SolutionError(
            f"Non-finite result in {what} conversion: {numerator}/{denominator}"
        ) from exc
    if not math.isfinite(result):
        raise SolutionError(
            f"Non-finite result in {what} conversion: {numerator}/{denominator} = {result}"
        )
    return result


def precision_warning(
    numerator: int, denominator: int, what: str, config: SolverConfig
) -> Optional[str]:
    if abs(denominator) < config.precision_denominator_limit and abs(numerator) > config.precision_numerator_limit:
        return f"Potential precision loss in {what} conversion: {numerator}/{denominator}"
    return None


class Solution:
    """Cached, floating point results of one successful solve."""

    def __init__(self, model: z3.ModelRef, *, config: Optional[SolverConfig] = None):
        self._model = model
        self._config = config if config is not None else get_solver_config()
        self._point_coords: Dict[PointId, Coords] = {}
        self._line_params: Dict[LineId, LineParameters] = {}
        self._circle_params: Dict[CircleId, CircleParameters] = {}
        self._parameters: Dict[str, float] = {}
        self.warnings: List[str] = []

    @property
    def model(self) -> z3.ModelRef:
        return self._model

    def _evaluate(self, var: z3.ArithRef, what: str) -> float:
        try:
            value = self._model.eval(var, model_completion=True)
        except z3.Z3Exception as exc:
            raise SolutionError(f"Failed to evaluate {what}: {exc}") from exc
        numerator, denominator = rational_parts(
            value, what, algebraic_precision=self._config.algebraic_precision
        )
        result = rational_to_float(numerator, denominator, what)
        warning = precision_warning(numerator, denominator, what, self._config)
        if warning is not None:
            logger.warning(warning)
            self.warnings.append(warning)
        return result

    def extract_point_coordinates(self, point: PointId, x_var: z3.ArithRef, y_var: z3.ArithRef) -> Coords:
        cached = self._point_coords.get(point)
        if cached is not None:
            return cached
        coords = (
            self._evaluate(x_var, f"x coordinate of {point}"),
            self._evaluate(y_var, f"y coordinate of {point}"),
        )
        self._point_coords[point] = coords
        return coords

    def get_point_coordinates(self, point: PointId) -> Coords:
        try:
            return self._point_coords[point]
        except KeyError:
            raise SolutionError(f"Point {point} coordinates not extracted") from None

    def all_point_coordinates(self) -> Mapping[PointId, Coords]:
        return MappingProxyType(self._point_coords)

    def extract_parameter(self, name: str, var: z3.ArithRef) -> float:
        cached = self._parameters.get(name)
        if cached is not None:
            return cached
        value = self._evaluate(var, f"parameter '{name}'")
        self._parameters[name] = value
        return value

    def get_parameter(self, name: str) -> float:
        try:
            return self._parameters[name]
        except KeyError:
            raise SolutionError(f"Parameter '{name}' not extracted") from None

    def all_parameters(self) -> Mapping[str, float]:
        return MappingProxyType(self._parameters)

    def extract_line_parameters(self, line: LineId, start: Coords, end: Coords) -> LineParameters:
        cached = self._line_params.get(line)
        if cached is not None:
            return cached
        dx = end[0] - start[0]
        dy = end[1] - start[1]
        angle = math.atan2(dy, dx)
        if angle == -math.pi:
            angle = math.pi
        params = LineParameters(start=start, end=end, length=math.hypot(dx, dy), angle=angle)
        self._line_params[line] = params
        return params

    def get_line_parameters(self, line: LineId) -> LineParameters:
        try:
            return self._line_params[line]
        except KeyError:
            raise SolutionError(f"Line {line} parameters not extracted") from None

    def all_line_parameters(self) -> Mapping[LineId, LineParameters]:
        return MappingProxyType(self._line_params)

    def extract_circle_parameters(
        self, circle: CircleId, center: Coords, radius_var: z3.ArithRef
    ) -> CircleParameters:
        cached = self._circle_params.get(circle)
        if cached is not None:
            return cached
        radius = self._evaluate(radius_var, f"radius of {circle}")
        params = CircleParameters(
            center=center,
            radius=radius,
            circumference=2.0 * math.pi * radius,
            area=math.pi * radius * radius,
        )
        self._circle_params[circle] = params
        return params

    def get_circle_parameters(self, circle: CircleId) -> CircleParameters:
        try:
            return self._circle_params[circle]
        except KeyError:
            raise SolutionError(f"Circle {circle} parameters not extracted") from None

    def all_circle_parameters(self) -> Mapping[CircleId, CircleParameters]:
        return MappingProxyType(self._circle_params)


apply_debug_logging(globals(), logger=logger)
