from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ..constraints.lines import (
    LineLengthConstraint,
    ParallelLinesConstraint,
    PerpendicularLinesConstraint,
)
from ..entity import LineId, PointId
from ..units import LengthLike


@dataclass(frozen=True)
class Line:
    """Segment between two points, referenced by id.

    A line owns no unknowns: its geometry is always derived from the
    coordinates of its endpoints.
    """

    id: LineId
    start: PointId
    end: PointId
    name: Optional[str] = None

    def display_name(self) -> str:
        if self.name is not None:
            return self.name
        return f"Line({self.id.index}, {self.id.generation})"

    def endpoints(self) -> Tuple[PointId, PointId]:
        return self.start, self.end

    def contains_point(self, point: PointId) -> bool:
        return point == self.start or point == self.end

    def length_equals(self, length: LengthLike) -> LineLengthConstraint:
        return LineLengthConstraint(self.id, length)

    def parallel_to(self, other: "Line") -> ParallelLinesConstraint:
        return ParallelLinesConstraint(self.id, other.id)

    def perpendicular_to(self, other: "Line") -> PerpendicularLinesConstraint:
        return PerpendicularLinesConstraint(self.id, other.id)
