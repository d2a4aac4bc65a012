"""Exception hierarchy shared by the sketch pipeline."""

from __future__ import annotations


class GeoSketchError(Exception):
    """Base class for every error raised by geosketch."""


class SolverError(GeoSketchError):
    """The solver returned an indeterminate result or failed internally."""


class InvalidConstraint(GeoSketchError):
    """Malformed constraint parameters."""


class EntityError(GeoSketchError):
    """A constraint referenced an entity that is not present in the sketch."""


class OverConstrained(GeoSketchError):
    """The constraint system is proven unsatisfiable."""

    def __init__(self, message: str = "Sketch is over-constrained"):
        super().__init__(message)


class UnderConstrained(GeoSketchError):
    """Reserved: nothing in the pipeline raises this yet."""

    def __init__(self, message: str = "Sketch is under-constrained"):
        super().__init__(message)


class SolutionError(GeoSketchError):
    """Value extraction or conversion failed."""


class ExportError(GeoSketchError):
    """A drawing could not be produced from a solution."""


class InvalidParameter(GeoSketchError):
    """User supplied input could not be interpreted."""


__all__ = [
    "GeoSketchError",
    "SolverError",
    "InvalidConstraint",
    "EntityError",
    "OverConstrained",
    "UnderConstrained",
    "SolutionError",
    "ExportError",
    "InvalidParameter",
]
