import logging
from typing import Iterator, List, Optional

from . import Shape

logger = logging.getLogger(__name__)


class GeometryCalculator:
    """Owns an insertion-ordered list of shapes and sums over it.

    Shapes handed to `add_shape` belong to the calculator afterwards; callers
    should treat what `get_shape` and iteration return as read-only.
    """

    def __init__(self):
        self._shapes: List[Shape] = []

    def add_shape(self, shape: Optional[Shape]) -> bool:
        """Append `shape` if it is a valid Shape.

        Anything else (None, a non-shape, an invalid shape) is dropped without
        raising. Returns whether the shape was stored.
        """
        if not isinstance(shape, Shape) or not shape.is_valid():
            logger.warning("dropping shape %r: absent or invalid", shape)
            return False
        self._shapes.append(shape)
        logger.debug("stored %s at index %d", shape.name(), len(self._shapes) - 1)
        return True

    def shape_count(self) -> int:
        return len(self._shapes)

    def total_area(self) -> float:
        total = 0.0
        for shape in self._shapes:
            total += shape.area()
        return total

    def total_perimeter(self) -> float:
        total = 0.0
        for shape in self._shapes:
            total += shape.perimeter()
        return total

    def shapes_info(self) -> str:
        """Render every shape and the totals as a multi-line report."""
        lines = [
            "=== Geometry Calculator Results ===",
            f"Total shapes: {len(self._shapes)}",
            "",
        ]
        for position, shape in enumerate(self._shapes, start=1):
            lines.append(f"Shape {position}: {shape.name()}")
            lines.append(f"  Area: {shape.area():.2f}")
            lines.append(f"  Perimeter: {shape.perimeter():.2f}")
            lines.append("")
        lines.append("Totals:")
        lines.append(f"  Total Area: {self.total_area():.2f}")
        lines.append(f"  Total Perimeter: {self.total_perimeter():.2f}")
        return "\n".join(lines) + "\n"

    def get_shape(self, index: int) -> Optional[Shape]:
        # Negative indices are out of range, not counted from the end
        if not 0 <= index < len(self._shapes):
            return None
        return self._shapes[index]

    def clear(self) -> None:
        logger.debug("clearing %d shapes", len(self._shapes))
        self._shapes.clear()

    def __len__(self) -> int:
        return len(self._shapes)

    def __iter__(self) -> Iterator[Shape]:
        return iter(tuple(self._shapes))
