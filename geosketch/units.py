"""Unit-carrying scalar values.

Constraints work in one canonical unit (meters for lengths, radians for
angles).  :class:`Length`, :class:`Angle` and :class:`Area` normalize user
input at construction time so that nothing downstream sees anything but the
canonical value.
"""

from __future__ import annotations

import math
import numbers
import re
from dataclasses import dataclass
from typing import Dict, Union

from .errors import InvalidParameter

# Unit suffix -> Length constructor.
_LENGTH_CONSTRUCTORS: Dict[str, str] = {
    "m": "from_meters",
    "cm": "from_centimeters",
    "mm": "from_millimeters",
    "in": "from_inches",
}

_LENGTH_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*([a-zA-Z]*)\s*$")


@dataclass(frozen=True, order=True)
class Length:
    """A length stored in meters."""

    meters: float

    @classmethod
    def from_meters(cls, value: float) -> "Length":
        return cls(float(value))

    @classmethod
    def from_millimeters(cls, value: float) -> "Length":
        return cls(float(value) / 1000.0)

    @classmethod
    def from_centimeters(cls, value: float) -> "Length":
        return cls(float(value) / 100.0)

    @classmethod
    def from_inches(cls, value: float) -> "Length":
        return cls(float(value) * 0.0254)

    @classmethod
    def parse(cls, text: str) -> "Length":
        """Parse strings such as ``"25mm"``, ``"1.5 in"`` or ``"3"`` (meters)."""

        match = _LENGTH_RE.match(text)
        if match is None:
            raise InvalidParameter(f"cannot parse length {text!r}")
        value, unit = match.groups()
        unit = unit.lower() or "m"
        if unit not in _LENGTH_CONSTRUCTORS:
            raise InvalidParameter(
                f"unknown length unit {unit!r} in {text!r} (expected one of {sorted(_LENGTH_CONSTRUCTORS)})"
            )
        return getattr(cls, _LENGTH_CONSTRUCTORS[unit])(float(value))

    def to_meters(self) -> float:
        return self.meters

    def to_millimeters(self) -> float:
        return self.meters * 1000.0

    def to_centimeters(self) -> float:
        return self.meters * 100.0

    def to_inches(self) -> float:
        return self.meters / 0.0254

    def is_zero(self, epsilon: float = 1e-12) -> bool:
        return abs(self.meters) < epsilon

    def __add__(self, other: "Length") -> "Length":
        if not isinstance(other, Length):
            return NotImplemented
        return Length(self.meters + other.meters)

    def __sub__(self, other: "Length") -> "Length":
        if not isinstance(other, Length):
            return NotImplemented
        return Length(self.meters - other.meters)

    def __mul__(self, other: Union[float, int, "Length"]) -> Union["Length", "Area"]:
        if isinstance(other, Length):
            return Area(self.meters * other.meters)
        if isinstance(other, (int, float)):
            return Length(self.meters * other)
        return NotImplemented

    def __rmul__(self, other: Union[float, int]) -> "Length":
        if isinstance(other, (int, float)):
            return Length(self.meters * other)
        return NotImplemented

    def __truediv__(self, other: Union[float, int, "Length"]) -> Union["Length", float]:
        if isinstance(other, Length):
            return self.meters / other.meters
        if isinstance(other, (int, float)):
            return Length(self.meters / other)
        return NotImplemented

    def __neg__(self) -> "Length":
        return Length(-self.meters)

    def __float__(self) -> float:
        return self.meters

    def __str__(self) -> str:
        return f"{self.meters:.3f}m"


@dataclass(frozen=True, order=True)
class Area:
    """An area stored in square meters."""

    square_meters: float

    def to_square_meters(self) -> float:
        return self.square_meters

    def to_square_millimeters(self) -> float:
        return self.square_meters * 1_000_000.0

    def __add__(self, other: "Area") -> "Area":
        if not isinstance(other, Area):
            return NotImplemented
        return Area(self.square_meters + other.square_meters)

    def __sub__(self, other: "Area") -> "Area":
        if not isinstance(other, Area):
            return NotImplemented
        return Area(self.square_meters - other.square_meters)

    def __mul__(self, other: Union[float, int]) -> "Area":
        if isinstance(other, (int, float)):
            return Area(self.square_meters * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: Union[float, int, Length, "Area"]) -> Union["Area", Length, float]:
        if isinstance(other, Area):
            return self.square_meters / other.square_meters
        if isinstance(other, Length):
            return Length(self.square_meters / other.meters)
        if isinstance(other, (int, float)):
            return Area(self.square_meters / other)
        return NotImplemented

    def __float__(self) -> float:
        return self.square_meters


@dataclass(frozen=True, order=True)
class Angle:
    """An angle stored in radians."""

    radians: float

    @classmethod
    def from_radians(cls, value: float) -> "Angle":
        return cls(float(value))

    @classmethod
    def from_degrees(cls, value: float) -> "Angle":
        return cls(math.radians(float(value)))

    def to_radians(self) -> float:
        return self.radians

    def to_degrees(self) -> float:
        return math.degrees(self.radians)

    def normalized(self) -> "Angle":
        """Return the equivalent angle in (-pi, pi]."""

        value = math.fmod(self.radians, 2.0 * math.pi)
        if value <= -math.pi:
            value += 2.0 * math.pi
        elif value > math.pi:
            value -= 2.0 * math.pi
        return Angle(value)

    def __add__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians + other.radians)

    def __sub__(self, other: "Angle") -> "Angle":
        if not isinstance(other, Angle):
            return NotImplemented
        return Angle(self.radians - other.radians)

    def __mul__(self, other: Union[float, int]) -> "Angle":
        if isinstance(other, (int, float)):
            return Angle(self.radians * other)
        return NotImplemented

    __rmul__ = __mul__

    def __neg__(self) -> "Angle":
        return Angle(-self.radians)

    def __float__(self) -> float:
        return self.radians


LengthLike = Union[Length, float, int]


def to_meters(value: LengthLike) -> float:
    """Normalize a ``Length`` or a bare number (already meters) to meters."""

    if isinstance(value, Length):
        return value.meters
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(f"expected a Length or a number of meters, got {value!r}")
    return float(value)


__all__ = ["Length", "Area", "Angle", "LengthLike", "to_meters"]
