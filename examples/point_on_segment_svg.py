"""Example pipeline: slide a point along a segment and export an SVG drawing."""

import sys
from pathlib import Path

from geosketch import (
    CircleRadiusConstraint,
    FixedPositionConstraint,
    Length,
    LineLengthConstraint,
    PointOnLineConstraint,
    Sketch,
    SvgExporter,
)


def main(output: str = "point_on_segment.svg") -> None:
    sketch = Sketch()
    start = sketch.add_point("start")
    end = sketch.add_point("end")
    slider = sketch.add_point("slider")
    segment = sketch.add_line(start, end, "segment")
    arm = sketch.add_line(start, slider, "arm")
    marker = sketch.add_circle(slider, "marker")

    on_segment = PointOnLineConstraint(segment, slider)
    sketch.add_constraint(FixedPositionConstraint(start, 0, 0))
    sketch.add_constraint(FixedPositionConstraint(end, Length.from_inches(4), Length.from_inches(3)))
    sketch.add_constraint(on_segment)
    sketch.add_constraint(LineLengthConstraint(arm, Length.from_inches(2)))
    sketch.add_constraint(CircleRadiusConstraint(marker, Length.from_millimeters(5)))

    solution = sketch.solve_and_extract()
    x, y = solution.get_point_coordinates(slider)
    print(f"slider: ({x:.6f}, {y:.6f})")
    print(f"{on_segment.parameter_name}: {solution.get_parameter(on_segment.parameter_name):.6f}")

    svg = SvgExporter(include_points=True).export(sketch, solution)
    Path(output).write_text(svg, encoding="utf-8")
    print(f"SVG document written to {output}")


if __name__ == "__main__":
    main(*sys.argv[1:2])
