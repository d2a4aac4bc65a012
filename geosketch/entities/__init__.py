"""Geometric entities stored by a sketch."""

from .circle import Circle, default_circle_base
from .line import Line
from .point import Point, default_point_base

__all__ = [
    "Circle",
    "Line",
    "Point",
    "default_circle_base",
    "default_point_base",
]
