"""Drawing exporters that read only the public Sketch/Solution surface."""

from typing import TYPE_CHECKING, Protocol

from .svg import SvgExporter

if TYPE_CHECKING:  # pragma: no cover
    from ..sketch import Sketch
    from ..solution import Solution


class Exporter(Protocol):
    def export(self, sketch: "Sketch", solution: "Solution") -> str:
        ...


__all__ = ["Exporter", "SvgExporter"]
