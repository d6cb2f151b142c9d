"""
================================================================================
Listener - Pull String Notifications
================================================================================

The pull string reports three moments of a gesture to whoever is interested
(typically the theme controller):

    on_pull(position)      the user grabbed the string end
    on_release(position)   the user let go, at the last recorded position
    on_end_release()       the release animation finished

Any object with these three methods qualifies; no base class is needed.
"""

from typing import Protocol

try:
    from .geometry import Point
except ImportError:
    from core.geometry import Point


class BulbSwitcherActionListener(Protocol):
    """Notification sink for pull string gestures."""

    def on_pull(self, position: Point) -> None:
        ...

    def on_release(self, position: Point) -> None:
        ...

    def on_end_release(self) -> None:
        ...


class NullListener:
    """Listener that ignores every notification."""

    def on_pull(self, position: Point) -> None:
        pass

    def on_release(self, position: Point) -> None:
        pass

    def on_end_release(self) -> None:
        pass
