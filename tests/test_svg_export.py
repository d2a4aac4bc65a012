import pytest

from geosketch import (
    CircleRadiusConstraint,
    ExportError,
    FixedPositionConstraint,
    PointId,
    Sketch,
    Solution,
    SvgExporter,
)


def _segment_sketch():
    sketch = Sketch()
    a = sketch.add_point("a")
    b = sketch.add_point("b")
    sketch.add_constraint(FixedPositionConstraint(a, 0, 0))
    sketch.add_constraint(FixedPositionConstraint(b, 1, 2))
    sketch.add_line(a, b)
    return sketch, a, b


def test_exports_lines_with_flipped_y_axis():
    sketch, _, _ = _segment_sketch()
    solution = sketch.solve_and_extract()

    svg = SvgExporter().export(sketch, solution)

    assert svg.startswith('<svg xmlns="http://www.w3.org/2000/svg" viewBox="-10.00 -2010.00 1020.00 2020.00">')
    assert '<line x1="0.00" y1="0.00" x2="1000.00" y2="-2000.00" stroke="black" stroke-width="2"/>' in svg
    assert svg.rstrip().endswith("</svg>")
    assert "<circle" not in svg


def test_exporter_options():
    sketch, _, _ = _segment_sketch()
    solution = sketch.solve_and_extract()

    svg = SvgExporter(scale=10.0, stroke_width=0.5, view_box_padding=0.0, include_points=True).export(
        sketch, solution
    )

    assert 'viewBox="0.00 -20.00 10.00 20.00"' in svg
    assert 'stroke-width="0.5"' in svg
    assert svg.count('fill="black"') == 2
    assert '<circle cx="10.00" cy="-20.00" r="3.00" fill="black"/>' in svg


def test_exports_circles_and_grows_view_box():
    sketch = Sketch()
    center = sketch.add_point()
    sketch.add_constraint(FixedPositionConstraint(center, 1, 1))
    circle = sketch.add_circle(center)
    sketch.add_constraint(CircleRadiusConstraint(circle, 0.5))
    solution = sketch.solve_and_extract()

    svg = SvgExporter().export(sketch, solution)

    assert '<circle cx="1000.00" cy="-1000.00" r="500.00" fill="none" stroke="black" stroke-width="2"/>' in svg
    assert 'viewBox="490.00 -1510.00 1020.00 1020.00"' in svg


def test_empty_solution_cannot_be_exported():
    sketch = Sketch()
    solution = sketch.solve_and_extract()

    with pytest.raises(ExportError):
        SvgExporter().export(sketch, solution)


def test_missing_line_endpoint_raises_export_error():
    sketch, a, _ = _segment_sketch()
    sketch.solve_constraints()
    solution = Solution(sketch.solver.model())
    solution.extract_point_coordinates(a, *sketch.get_point(a).variables())

    with pytest.raises(ExportError) as exc:
        SvgExporter().export(sketch, solution)
    assert "PointId(1, 0)" in str(exc.value)


def test_circle_with_unknown_center_raises_export_error():
    sketch = Sketch()
    anchor = sketch.add_point()
    sketch.add_constraint(FixedPositionConstraint(anchor, 0, 0))
    sketch.add_circle(PointId(9))
    solution = sketch.solve_and_extract()

    with pytest.raises(ExportError):
        SvgExporter().export(sketch, solution)
