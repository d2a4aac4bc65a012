from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import z3

from ..entity import PointId


def default_point_base(ident: PointId) -> str:
    return f"p{ident.key}"


# eq=False: comparing solver expressions with == builds new expressions.
@dataclass(frozen=True, eq=False)
class Point:
    """2D point whose coordinates are two solver unknowns."""

    id: PointId
    x: z3.ArithRef
    y: z3.ArithRef
    name: Optional[str] = None

    @classmethod
    def create(
        cls,
        ident: PointId,
        ctx: z3.Context,
        name: Optional[str] = None,
        *,
        base: Optional[str] = None,
    ) -> "Point":
        """Allocate ``{base}_x`` and ``{base}_y`` in ``ctx``.

        ``base`` defaults to ``name`` and falls back to a prefix plus the
        identifier for anonymous points.
        """

        stem = base or name or default_point_base(ident)
        return cls(
            id=ident,
            x=z3.Real(f"{stem}_x", ctx),
            y=z3.Real(f"{stem}_y", ctx),
            name=name,
        )

    def display_name(self) -> str:
        if self.name is not None:
            return self.name
        return f"Point({self.id.index}, {self.id.generation})"

    def variables(self) -> Tuple[z3.ArithRef, z3.ArithRef]:
        return self.x, self.y
