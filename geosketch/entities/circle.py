from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import z3

from ..constraints.circles import CircleRadiusConstraint
from ..entity import CircleId, PointId
from ..units import LengthLike


def default_circle_base(ident: CircleId) -> str:
    return f"c{ident.key}"


@dataclass(frozen=True, eq=False)
class Circle:
    """Circle given by a center point reference and a radius unknown."""

    id: CircleId
    center: PointId
    radius: z3.ArithRef
    name: Optional[str] = None

    @classmethod
    def create(
        cls,
        ident: CircleId,
        center: PointId,
        ctx: z3.Context,
        name: Optional[str] = None,
        *,
        base: Optional[str] = None,
    ) -> "Circle":
        stem = base or name or default_circle_base(ident)
        return cls(id=ident, center=center, radius=z3.Real(f"{stem}_radius", ctx), name=name)

    def display_name(self) -> str:
        if self.name is not None:
            return self.name
        return f"Circle({self.id.index}, {self.id.generation})"

    def center_point(self) -> PointId:
        return self.center

    def radius_equals(self, radius: LengthLike) -> CircleRadiusConstraint:
        return CircleRadiusConstraint(self.id, radius)
