"""
================================================================================
Gesture Tracker - Grabbing and Dragging the String
================================================================================

Converts raw pointer presses, moves and releases into the interaction state
of the pull string and the edge-triggered listener callbacks.

Algorithm:
    1. On press, compare the press position with the string's resting end
       along each axis. Only a press within the touch threshold on both
       axes grabs the string; anything else is ignored entirely.
    2. While grabbed, every move updates the current position. The widget
       reads it on its next paint.
    3. On release, the final position is recorded, on_release fires and the
       string is let go.

Only one logical contact is followed. A second press while the string is
already held is ignored.
"""

import logging
from dataclasses import dataclass
from typing import Optional

try:
    from .geometry import Point
    from .listener import BulbSwitcherActionListener
except ImportError:
    from core.geometry import Point
    from core.listener import BulbSwitcherActionListener

logger = logging.getLogger(__name__)


@dataclass
class InteractionState:
    """
    Pointer state owned by the gesture tracker.

    Attributes:
        position: Last recorded pointer position
        is_touching: True while the string is held
    """

    position: Point
    is_touching: bool = False


class GestureTracker:
    """
    Tracks a single press-drag-release cycle on the string end.

    Example:
        >>> tracker = GestureTracker(50.0, listener, Point(100, 100))
        >>> tracker.press(Point(110, 95), Point(100, 100))
        True
        >>> tracker.move(Point(140, 160))
        >>> tracker.release()
    """

    def __init__(self, touch_threshold: float, listener: BulbSwitcherActionListener,
                 initial_position: Point):
        """
        Initialize the tracker.

        Args:
            touch_threshold: Max per-axis distance from the resting end to grab it
            listener: Receives on_pull and on_release
            initial_position: Position reported before the first press
        """
        self.touch_threshold = touch_threshold
        self.listener = listener
        self.state = InteractionState(position=Point.of(initial_position))

    @property
    def is_touching(self) -> bool:
        return self.state.is_touching

    @property
    def position(self) -> Point:
        return self.state.position

    def is_within_reach(self, position: Point, resting_endpoint: Point) -> bool:
        """Check whether a press at position would grab the string."""
        dx, dy = Point.of(position).axis_distance(Point.of(resting_endpoint))
        return dx <= self.touch_threshold and dy <= self.touch_threshold

    def press(self, position, resting_endpoint) -> bool:
        """
        Handle a pointer press.

        Args:
            position: Where the pointer went down
            resting_endpoint: Where the string currently ends

        Returns:
            True if the press grabbed the string
        """
        if self.state.is_touching:
            return False

        position = Point.of(position)
        if not self.is_within_reach(position, resting_endpoint):
            logger.debug("Press at %s ignored, string end is at %s", position, resting_endpoint)
            return False

        self.state.position = position
        self.state.is_touching = True
        logger.debug("String grabbed at %s", position)
        self.listener.on_pull(position)
        return True

    def move(self, position) -> None:
        """Update the held position. Ignored when the string is not held."""
        if self.state.is_touching:
            self.state.position = Point.of(position)

    def release(self, position: Optional[Point] = None) -> bool:
        """
        Handle the pointer going up.

        Args:
            position: Final pointer position, if the release event carries one

        Returns:
            True if a held string was let go
        """
        if not self.state.is_touching:
            return False

        if position is not None:
            self.state.position = Point.of(position)

        logger.debug("String released at %s", self.state.position)
        self.listener.on_release(self.state.position)
        self.state.is_touching = False
        return True
