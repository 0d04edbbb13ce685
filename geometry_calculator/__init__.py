from abc import ABC, abstractmethod
import math

EPSILON = 1e-9


class InvalidParameter(ValueError):
    """Raised when a shape is built or updated with parameters it can't hold."""

    def __init__(self, operation: str, constraint: str):
        super().__init__(f"{operation}: {constraint}")
        self.operation = operation
        self.constraint = constraint


def _check_number(operation: str, label: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidParameter(operation, f"{label} must be a number, got {type(value).__name__}")


def _check_positive(operation: str, label: str, *values) -> None:
    for value in values:
        _check_number(operation, label, value)
    # `not > 0` also rejects NaN
    if not all(value > 0 for value in values):
        raise InvalidParameter(operation, f"{label} must be positive")


def _satisfies_triangle_inequality(a: float, b: float, c: float) -> bool:
    return a + b > c and b + c > a and a + c > b


class Shape(ABC):
    @abstractmethod
    def area(self) -> float:
        pass

    @abstractmethod
    def perimeter(self) -> float:
        pass

    @abstractmethod
    def name(self) -> str:
        pass

    @abstractmethod
    def is_valid(self) -> bool:
        """Re-derive validity from the stored parameters."""


class Polygon(Shape):
    @abstractmethod
    def edge_count(self) -> int:
        pass

    @abstractmethod
    def vertex_count(self) -> int:
        pass


class Circle(Shape):
    def __init__(self, radius: float):
        _check_positive("Circle", "radius", radius)
        self._radius = radius

    @property
    def radius(self) -> float:
        return self._radius

    def set_radius(self, radius: float) -> None:
        _check_positive("Circle.set_radius", "radius", radius)
        self._radius = radius

    def area(self) -> float:
        return math.pi * self._radius * self._radius

    def perimeter(self) -> float:
        return 2 * math.pi * self._radius

    def diameter(self) -> float:
        return 2 * self._radius

    def name(self) -> str:
        return "Circle"

    def is_valid(self) -> bool:
        return self._radius > 0

    def __repr__(self) -> str:
        return f"Circle(radius={self._radius!r})"


class Rectangle(Polygon):
    def __init__(self, width: float, height: float):
        _check_positive("Rectangle", "dimensions", width, height)
        self._width = width
        self._height = height

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    def set_dimensions(self, width: float, height: float) -> None:
        """Replace both dimensions, or neither if either one is rejected."""
        _check_positive("Rectangle.set_dimensions", "dimensions", width, height)
        self._width = width
        self._height = height

    def area(self) -> float:
        return self._width * self._height

    def perimeter(self) -> float:
        return 2 * (self._width + self._height)

    def edge_count(self) -> int:
        return 4

    def vertex_count(self) -> int:
        return 4

    def is_square(self) -> bool:
        return self._width == self._height

    def name(self) -> str:
        return "Rectangle"

    def is_valid(self) -> bool:
        return self._width > 0 and self._height > 0

    def __repr__(self) -> str:
        return f"Rectangle(width={self._width!r}, height={self._height!r})"


class Triangle(Polygon):
    def __init__(self, side_a: float, side_b: float, side_c: float):
        self._check_sides("Triangle", side_a, side_b, side_c)
        self._side_a = side_a
        self._side_b = side_b
        self._side_c = side_c

    @staticmethod
    def _check_sides(operation: str, a: float, b: float, c: float) -> None:
        _check_positive(operation, "sides", a, b, c)
        if not _satisfies_triangle_inequality(a, b, c):
            raise InvalidParameter(operation, "triangle inequality not satisfied")

    @property
    def side_a(self) -> float:
        return self._side_a

    @property
    def side_b(self) -> float:
        return self._side_b

    @property
    def side_c(self) -> float:
        return self._side_c

    def sides(self) -> tuple:
        return (self._side_a, self._side_b, self._side_c)

    def set_sides(self, side_a: float, side_b: float, side_c: float) -> None:
        """Replace all three sides, checked as a triple before any is stored."""
        self._check_sides("Triangle.set_sides", side_a, side_b, side_c)
        self._side_a = side_a
        self._side_b = side_b
        self._side_c = side_c

    def is_equilateral(self) -> bool:
        return (abs(self._side_a - self._side_b) < EPSILON
                and abs(self._side_b - self._side_c) < EPSILON)

    def is_isosceles(self) -> bool:
        return (abs(self._side_a - self._side_b) < EPSILON
                or abs(self._side_b - self._side_c) < EPSILON
                or abs(self._side_a - self._side_c) < EPSILON)

    def area(self) -> float:
        # Heron's formula; the sides always satisfy the triangle inequality,
        # only float rounding on a near-degenerate triple can dip below zero
        s = self.perimeter() / 2
        radicand = s * (s - self._side_a) * (s - self._side_b) * (s - self._side_c)
        return math.sqrt(max(radicand, 0.0))

    def perimeter(self) -> float:
        return self._side_a + self._side_b + self._side_c

    def edge_count(self) -> int:
        return 3

    def vertex_count(self) -> int:
        return 3

    def name(self) -> str:
        if self.is_equilateral():
            return "Equilateral Triangle"
        if self.is_isosceles():
            return "Isosceles Triangle"
        return "Scalene Triangle"

    def is_valid(self) -> bool:
        return (self._side_a > 0 and self._side_b > 0 and self._side_c > 0
                and _satisfies_triangle_inequality(self._side_a, self._side_b, self._side_c))

    def __repr__(self) -> str:
        return f"Triangle(side_a={self._side_a!r}, side_b={self._side_b!r}, side_c={self._side_c!r})"


from .calculator import GeometryCalculator  # noqa: E402

__all__ = [
    "EPSILON",
    "InvalidParameter",
    "Shape",
    "Polygon",
    "Circle",
    "Rectangle",
    "Triangle",
    "GeometryCalculator",
]
