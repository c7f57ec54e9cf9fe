"""
Geometric primitives recorded in a stroke.

A stroke is made of one start Point (stamped on mouse press) followed by
Segments (one per mouse drag event). Both are immutable and expose the
two transforms the symmetric drawing needs: mirror about a vertical axis
and rotation about a centre.
"""

import math
from dataclasses import dataclass
from typing import Tuple, Union


def rotate_point(x: float, y: float, degrees: float,
                 cx: float, cy: float) -> Tuple[float, float]:
    """
    Rotate (x, y) about (cx, cy) by the given angle.

    Canvas coordinates grow downwards, so positive angles turn clockwise
    on screen (same convention as QTransform.rotate).

    Args:
        x: Point x coordinate
        y: Point y coordinate
        degrees: Rotation angle in degrees
        cx: Centre x coordinate
        cy: Centre y coordinate

    Returns:
        Rotated (x, y)
    """
    radians = math.radians(degrees)
    cos_a = math.cos(radians)
    sin_a = math.sin(radians)
    dx = x - cx
    dy = y - cy
    return (cx + dx * cos_a - dy * sin_a,
            cy + dx * sin_a + dy * cos_a)


@dataclass(frozen=True)
class Point:
    """
    Dot stamped at the start of a stroke, drawn as a small circle outline.

    (x, y) is the centre of the circle, so the dot sits on the press
    position and stays centred on it under rotation and reflection.
    """

    x: float
    y: float
    diameter: float

    kind = 'point'

    def reflected(self, cx: float) -> 'Point':
        """Mirror about the vertical axis x = cx."""
        return Point(2 * cx - self.x, self.y, self.diameter)

    def rotated(self, degrees: float, cx: float, cy: float) -> 'Point':
        """Rotate about (cx, cy)."""
        x, y = rotate_point(self.x, self.y, degrees, cx, cy)
        return Point(x, y, self.diameter)

    def bounds(self) -> Tuple[float, float, float, float]:
        """Bounding rect (x, y, w, h) of the circle."""
        radius = self.diameter / 2.0
        return (self.x - radius, self.y - radius, self.diameter, self.diameter)


@dataclass(frozen=True)
class Segment:
    """Straight line between two consecutive drag positions."""

    x1: float
    y1: float
    x2: float
    y2: float

    kind = 'segment'

    def reflected(self, cx: float) -> 'Segment':
        """Mirror about the vertical axis x = cx."""
        return Segment(2 * cx - self.x1, self.y1, 2 * cx - self.x2, self.y2)

    def rotated(self, degrees: float, cx: float, cy: float) -> 'Segment':
        """Rotate both endpoints about (cx, cy)."""
        x1, y1 = rotate_point(self.x1, self.y1, degrees, cx, cy)
        x2, y2 = rotate_point(self.x2, self.y2, degrees, cx, cy)
        return Segment(x1, y1, x2, y2)

    @property
    def length(self) -> float:
        return math.dist((self.x1, self.y1), (self.x2, self.y2))


Primitive = Union[Point, Segment]


def is_close(a: Primitive, b: Primitive, tolerance: float = 1e-6) -> bool:
    """
    Compare two primitives coordinate by coordinate.

    Args:
        a: First primitive
        b: Second primitive
        tolerance: Absolute tolerance per coordinate

    Returns:
        True if both are the same kind and all coordinates match
    """
    if a.kind != b.kind:
        return False
    if isinstance(a, Point):
        values_a = (a.x, a.y, a.diameter)
        values_b = (b.x, b.y, b.diameter)
    else:
        values_a = (a.x1, a.y1, a.x2, a.y2)
        values_b = (b.x1, b.y1, b.x2, b.y2)
    return all(math.isclose(p, q, rel_tol=0.0, abs_tol=tolerance)
               for p, q in zip(values_a, values_b))


__all__ = ['Point', 'Segment', 'Primitive', 'rotate_point', 'is_close']
