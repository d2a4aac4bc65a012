import logging

from .config import SolverConfig, get_solver_config, set_solver_config
from .constraint import Constraint, SketchQuery
from .constraints import (
    CONSTRAINT_KINDS,
    CircleRadiusConstraint,
    CoincidentPointsConstraint,
    FixedPositionConstraint,
    LineLengthConstraint,
    ParallelLinesConstraint,
    PerpendicularLinesConstraint,
    PointOnLineConstraint,
)
from .entities import Circle, Line, Point
from .entity import CircleId, LineId, PointId
from .errors import (
    EntityError,
    ExportError,
    GeoSketchError,
    InvalidConstraint,
    InvalidParameter,
    OverConstrained,
    SolutionError,
    SolverError,
    UnderConstrained,
)
from .export import Exporter, SvgExporter
from .scene import Scene, load_scene, load_scene_file
from .sketch import Sketch
from .solution import CircleParameters, LineParameters, Solution
from .units import Angle, Area, Length

if not logging.getLogger().handlers:  # pragma: no cover - depends on host application
    logging.basicConfig(level=logging.INFO)

__all__ = [
    'Angle',
    'Area',
    'CONSTRAINT_KINDS',
    'Circle',
    'CircleId',
    'CircleParameters',
    'CircleRadiusConstraint',
    'CoincidentPointsConstraint',
    'Constraint',
    'EntityError',
    'ExportError',
    'Exporter',
    'FixedPositionConstraint',
    'GeoSketchError',
    'InvalidConstraint',
    'InvalidParameter',
    'Length',
    'Line',
    'LineId',
    'LineLengthConstraint',
    'LineParameters',
    'OverConstrained',
    'ParallelLinesConstraint',
    'PerpendicularLinesConstraint',
    'Point',
    'PointId',
    'PointOnLineConstraint',
    'Scene',
    'Sketch',
    'SketchQuery',
    'Solution',
    'SolutionError',
    'SolverConfig',
    'SolverError',
    'SvgExporter',
    'UnderConstrained',
    'get_solver_config',
    'load_scene',
    'load_scene_file',
    'set_solver_config',
]
