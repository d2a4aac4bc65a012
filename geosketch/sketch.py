"""Sketch orchestrator: entity store, constraint list and solve pipeline."""

from __future__ import annotations

import logging
from typing import Dict, Iterable, Iterator, List, Optional, Set, Tuple

import z3

from .config import SolverConfig, get_solver_config
from .constraint import Constraint, SketchQuery
from .entities import Circle, Line, Point, default_circle_base, default_point_base
from .entity import Arena, CircleId, EntityId, LineId, PointId
from .errors import EntityError, OverConstrained, SolverError
from .logging_utils import apply_debug_logging
from .solution import CircleParameters, Solution

logger = logging.getLogger(__name__)


class Sketch(SketchQuery):
    """Points, lines, circles and the constraints relating them.

    The sketch owns one solver session bound to ``context``.  The context is
    borrowed: it must outlive the sketch and every :class:`Solution` built
    from it.  Solving always re-applies every constraint to that session;
    repeated calls therefore accumulate duplicate (harmless) assertions.
    """

    def __init__(self, context: Optional[z3.Context] = None, *, config: Optional[SolverConfig] = None):
        self._ctx = context if context is not None else z3.Context()
        self._config = config if config is not None else get_solver_config()
        self._solver = z3.Solver(ctx=self._ctx)
        if self._config.timeout_ms is not None:
            self._solver.set("timeout", int(self._config.timeout_ms))
        self._points: Arena[PointId, Point] = Arena(PointId)
        self._lines: Arena[LineId, Line] = Arena(LineId)
        self._circles: Arena[CircleId, Circle] = Arena(CircleId)
        self._constraints: List[Constraint] = []
        self._variable_names: Set[str] = set()
        self._internal_vars: Dict[str, z3.ArithRef] = {}

    @property
    def context(self) -> z3.Context:
        return self._ctx

    @property
    def solver(self) -> z3.Solver:
        return self._solver

    @property
    def config(self) -> SolverConfig:
        return self._config

    # ------------------------------------------------------------------
    # Entity store

    def _claim_base(self, preferred: str, ident: EntityId, suffixes: Iterable[str]) -> str:
        """Reserve a variable stem whose derived names are not yet in use."""

        suffixes = tuple(suffixes)

        def free(stem: str) -> bool:
            return all(f"{stem}{suffix}" not in self._variable_names for suffix in suffixes)

        stem = preferred
        if not free(stem):
            stem = f"{preferred}_{ident.key}"
            counter = 1
            while not free(stem):
                stem = f"{preferred}_{ident.key}_{counter}"
                counter += 1
        self._variable_names.update(f"{stem}{suffix}" for suffix in suffixes)
        return stem

    def add_point(self, name: Optional[str] = None) -> PointId:
        def build(ident: PointId) -> Point:
            base = self._claim_base(name or default_point_base(ident), ident, ("_x", "_y"))
            return Point.create(ident, self._ctx, name, base=base)

        return self._points.insert_with(build)

    def add_line(self, start: PointId, end: PointId, name: Optional[str] = None) -> LineId:
        return self._lines.insert_with(lambda ident: Line(ident, start, end, name))

    def add_circle(self, center: PointId, name: Optional[str] = None) -> CircleId:
        def build(ident: CircleId) -> Circle:
            base = self._claim_base(name or default_circle_base(ident), ident, ("_radius",))
            return Circle.create(ident, center, self._ctx, name, base=base)

        return self._circles.insert_with(build)

    def get_point(self, point: PointId) -> Optional[Point]:
        return self._points.get(point)

    def get_line(self, line: LineId) -> Optional[Line]:
        return self._lines.get(line)

    def get_circle(self, circle: CircleId) -> Optional[Circle]:
        return self._circles.get(circle)

    def points(self) -> Iterator[Tuple[PointId, Point]]:
        return self._points.items()

    def lines(self) -> Iterator[Tuple[LineId, Line]]:
        return self._lines.items()

    def circles(self) -> Iterator[Tuple[CircleId, Circle]]:
        return self._circles.items()

    # ------------------------------------------------------------------
    # SketchQuery

    def point_variables(self, point: PointId) -> Tuple[z3.ArithRef, z3.ArithRef]:
        entity = self._points.get(point)
        if entity is None:
            raise EntityError(f"Point {point} not found")
        return entity.x, entity.y

    def line_endpoints(self, line: LineId) -> Tuple[PointId, PointId]:
        entity = self._lines.get(line)
        if entity is None:
            raise EntityError(f"Line {line} not found")
        return entity.start, entity.end

    def circle_center_and_radius(self, circle: CircleId) -> Tuple[PointId, z3.ArithRef]:
        entity = self._circles.get(circle)
        if entity is None:
            raise EntityError(f"Circle {circle} not found")
        return entity.center, entity.radius

    def _internal_variable(self, name: str) -> z3.ArithRef:
        """Return the unknown cached under ``name``, creating it on first use.

        The solver-side name shares the registry with entity variables, so a
        point called ``length_ab`` never aliases ``length_variable("ab_x")``.
        The cache key (and the reported parameter name) stays ``name``.
        """

        var = self._internal_vars.get(name)
        if var is None:
            solver_name = name
            counter = 1
            while solver_name in self._variable_names:
                solver_name = f"{name}_{counter}"
                counter += 1
            self._variable_names.add(solver_name)
            var = z3.Real(solver_name, self._ctx)
            self._internal_vars[name] = var
        return var

    def length_variable(self, name: str) -> z3.ArithRef:
        return self._internal_variable(f"length_{name}")

    def angle_variable(self, name: str) -> z3.ArithRef:
        return self._internal_variable(f"angle_{name}")

    def parameter_variable(self, name: str) -> z3.ArithRef:
        return self._internal_variable(name)

    # ------------------------------------------------------------------
    # Constraints and solving

    def add_constraint(self, constraint: Constraint) -> None:
        self._constraints.append(constraint)

    def constraints(self) -> Tuple[Constraint, ...]:
        return tuple(self._constraints)

    @property
    def constraint_count(self) -> int:
        return len(self._constraints)

    def check(self) -> z3.CheckSatResult:
        """Run the solver and return its raw result."""

        return self._solver.check()

    def solve(self) -> z3.CheckSatResult:
        """Check the asserted equations and map the result to an error on failure."""

        result = self._solver.check()
        logger.info("Solver result=%s assertions=%d", result, len(self._solver.assertions()))
        if result == z3.sat:
            return result
        if result == z3.unsat:
            raise OverConstrained()
        raise SolverError(f"Solver returned unknown result: {self._solver.reason_unknown()}")

    def solve_constraints(self) -> z3.CheckSatResult:
        logger.info(
            "Applying %d constraints to sketch with %d points, %d lines, %d circles",
            len(self._constraints),
            len(self._points),
            len(self._lines),
            len(self._circles),
        )
        for idx, constraint in enumerate(self._constraints):
            logger.debug("Applying constraint #%d: %s", idx, constraint.description())
            constraint.apply(self._ctx, self._solver, self)
        return self.solve()

    def solve_and_extract(self) -> Solution:
        """Solve and return a Solution with every point, line and internal unknown extracted."""

        self.solve_constraints()
        try:
            model = self._solver.model()
        except z3.Z3Exception as exc:
            raise SolverError(f"No model available after solving: {exc}") from exc

        solution = Solution(model, config=self._config)
        for ident, point in self._points.items():
            solution.extract_point_coordinates(ident, point.x, point.y)

        for ident, line in self._lines.items():
            for endpoint in line.endpoints():
                if endpoint not in self._points:
                    raise EntityError(f"Line {ident} references missing point {endpoint}")
            solution.extract_line_parameters(
                ident,
                solution.get_point_coordinates(line.start),
                solution.get_point_coordinates(line.end),
            )

        for name, var in self._internal_vars.items():
            solution.extract_parameter(name, var)

        logger.info(
            "Extracted %d points, %d lines, %d parameters",
            len(solution.all_point_coordinates()),
            len(solution.all_line_parameters()),
            len(solution.all_parameters()),
        )
        return solution

    def extract_circle_parameters(self, solution: Solution, circle: CircleId) -> CircleParameters:
        """Extract ``circle`` into ``solution`` from its already-extracted center."""

        center, radius = self.circle_center_and_radius(circle)
        return solution.extract_circle_parameters(circle, solution.get_point_coordinates(center), radius)


apply_debug_logging(globals(), logger=logger)
