"""Example pipeline: constrain a rectangle and print the solved geometry."""

from geosketch import (
    FixedPositionConstraint,
    Length,
    Sketch,
)


def main() -> None:
    sketch = Sketch()
    a = sketch.add_point("a")
    b = sketch.add_point("b")
    c = sketch.add_point("c")
    d = sketch.add_point("d")

    bottom = sketch.add_line(a, b, "bottom")
    right = sketch.add_line(b, c, "right")
    top = sketch.add_line(c, d, "top")
    left = sketch.add_line(d, a, "left")

    sketch.add_constraint(FixedPositionConstraint(a, 0, 0))
    sketch.add_constraint(FixedPositionConstraint(b, Length.from_millimeters(300), 0))
    sketch.add_constraint(FixedPositionConstraint(c, Length.from_millimeters(300), Length.from_millimeters(200)))
    sketch.add_constraint(sketch.get_line(bottom).perpendicular_to(sketch.get_line(right)))
    sketch.add_constraint(sketch.get_line(top).parallel_to(sketch.get_line(bottom)))
    sketch.add_constraint(sketch.get_line(left).parallel_to(sketch.get_line(right)))
    sketch.add_constraint(sketch.get_line(top).length_equals(Length.from_millimeters(300)))

    solution = sketch.solve_and_extract()

    print("Constraints:")
    for constraint in sketch.constraints():
        print(f"  - {constraint}")
    print("Points:")
    for ident, point in sketch.points():
        x, y = solution.get_point_coordinates(ident)
        print(f"  {point.display_name()}: ({x:.6f}, {y:.6f})")
    print("Lines:")
    for ident, line in sketch.lines():
        params = solution.get_line_parameters(ident)
        print(f"  {line.display_name()}: length={params.length:.6f} angle={params.angle:.6f}")


if __name__ == "__main__":
    main()
