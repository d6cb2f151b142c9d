"""
================================================================================
Geometry - Plain Coordinate Types
================================================================================

The core works in widget pixel coordinates with the origin at the top-left
corner and Y growing downwards, the same convention QPainter uses. Keeping
the type free of Qt lets the interaction logic be tested without a display.
"""

from typing import NamedTuple, Tuple


class Point(NamedTuple):
    """A 2D coordinate in widget pixels."""

    x: float
    y: float

    @classmethod
    def of(cls, value) -> 'Point':
        """
        Coerce a pair-like value into a Point.

        Args:
            value: A Point, a 2-sequence of numbers, or anything with x/y

        Returns:
            The equivalent Point
        """
        if isinstance(value, Point):
            return value
        if hasattr(value, 'x') and hasattr(value, 'y'):
            x, y = value.x, value.y
            # Qt point types expose x()/y() as methods
            if callable(x):
                x, y = x(), y()
            return cls(float(x), float(y))
        x, y = value
        return cls(float(x), float(y))

    def axis_distance(self, other: 'Point') -> Tuple[float, float]:
        """Absolute distance to another point along each axis."""
        return abs(self.x - other.x), abs(self.y - other.y)
