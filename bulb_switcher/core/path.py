"""
================================================================================
String Path - Geometry of the Drawn String
================================================================================

Computes, for one frame, the polyline the string is drawn along and where
the round marker at its end goes.

While held:
    One straight segment from the anchor (bulb_center_x, 0) to the pointer.

Otherwise:
    A sine curve hanging from the anchor down to the current length,
    sampled every sample_step pixels along Y:

        x(y) = anchor_x + amplitude * sin(2 * pi * (length - y) / length)

    The phase is anchored so the node sits on the free end (y = length),
    and it is recomputed from the current length every frame, so the
    period follows the string as it stretches during the release animation.

A string of zero (or negative) length collapses to a single point at the
anchor instead of dividing by zero.
"""

from typing import NamedTuple, Tuple

import numpy as np

try:
    from .geometry import Point
    from ..utils.constants import PATH_SAMPLE_STEP
except ImportError:
    from core.geometry import Point
    from utils.constants import PATH_SAMPLE_STEP


class StringPath(NamedTuple):
    """
    Drawable geometry for one frame.

    Attributes:
        points: Polyline vertices, starting at the anchor
        marker: Center of the end marker circle
    """

    points: Tuple[Point, ...]
    marker: Point

    @property
    def is_collapsed(self) -> bool:
        return len(self.points) < 2


def compute_string_path(anchor_x: float, length: float, amplitude: float,
                        is_touching: bool, touch_position: Point,
                        sample_step: float = PATH_SAMPLE_STEP) -> StringPath:
    """
    Compute the string polyline and end marker.

    Args:
        anchor_x: X coordinate the string hangs from
        length: Current string length
        amplitude: Current wave amplitude (signed)
        is_touching: Whether the string is held
        touch_position: Pointer position while held
        sample_step: Vertical spacing between curve samples

    Returns:
        StringPath for this frame

    Example:
        >>> path = compute_string_path(100, 0, 25, False, Point(0, 0))
        >>> path.points
        (Point(x=100.0, y=0.0),)
    """
    anchor = Point(float(anchor_x), 0.0)

    if is_touching:
        touch = Point.of(touch_position)
        return StringPath(points=(anchor, touch), marker=touch)

    if length <= 0:
        return StringPath(points=(anchor,), marker=anchor)

    step = sample_step if sample_step > 0 else PATH_SAMPLE_STEP
    ys = np.arange(0.0, int(length) + 1, step)
    ys = ys[ys <= length]
    phase = 2.0 * np.pi * (length - ys) / length
    xs = anchor.x + amplitude * np.sin(phase)

    # y = 0 is the anchor itself
    points = [anchor]
    points.extend(Point(float(x), float(y)) for x, y in zip(xs[1:], ys[1:]))

    end = Point(anchor.x, float(length))
    if points[-1].y < length:
        points.append(end)

    return StringPath(points=tuple(points), marker=end)
