"""
Geometry calculator demo.

Builds a small collection of shapes and prints the calculator report
followed by a one-line summary per shape.
"""

import argparse
import logging
import sys

from . import Circle, GeometryCalculator, InvalidParameter, Rectangle, Triangle
from .log import setup_default_logging

logger = logging.getLogger(__name__)


def build_demo() -> GeometryCalculator:
    calculator = GeometryCalculator()
    calculator.add_shape(Circle(5.0))
    calculator.add_shape(Rectangle(4.0, 6.0))
    calculator.add_shape(Triangle(3.0, 3.0, 3.0))
    calculator.add_shape(Triangle(3.0, 4.0, 5.0))
    return calculator


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="geometry-calculator",
        description="Compute areas and perimeters for a demo set of shapes",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level name (default: WARNING)",
    )
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level)

    print("Geometry Calculator Demo")
    print("=======================")
    print()

    try:
        print("Adding shapes...")
        calculator = build_demo()
    except InvalidParameter as e:
        logger.error("demo shape rejected: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(calculator.shapes_info())
    print("Individual shape details:")
    for i in range(calculator.shape_count()):
        shape = calculator.get_shape(i)
        if shape is not None:
            print(
                f"Shape {i + 1}: {shape.name()} "
                f"(Area: {shape.area():.2f}, Perimeter: {shape.perimeter():.2f})"
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())
