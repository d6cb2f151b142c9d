"""
================================================================================
Pull String - Interaction and Animation Controller
================================================================================

Ties the gesture tracker, the animation sequencer and the path geometry
together into the toolkit-independent model behind the BulbSwitcher widget.

Data flow:
    press/move/release -> GestureTracker -> InteractionState
    release             -> AnimationSequencer drives length and amplitude
    advance(dt)         -> one frame tick of the sequencer
    path()              -> StringPath sampled from the latest state

The widget only has to forward pointer events, tick advance() from a timer
and draw whatever path() returns.
"""

from typing import Optional

try:
    from .config import BulbStringConfig
    from .geometry import Point
    from .gesture import GestureTracker
    from .listener import BulbSwitcherActionListener, NullListener
    from .path import StringPath, compute_string_path
    from .sequencer import AnimatedValue, AnimationSequencer
except ImportError:
    from core.config import BulbStringConfig
    from core.geometry import Point
    from core.gesture import GestureTracker
    from core.listener import BulbSwitcherActionListener, NullListener
    from core.path import StringPath, compute_string_path
    from core.sequencer import AnimatedValue, AnimationSequencer


class PullString:
    """
    Model of one pull string: who holds it, how it moves, what to draw.

    Attributes:
        config: The immutable configuration
        listener: Receives on_pull, on_release and on_end_release
        tracker: Gesture tracker owning the interaction state
        sequencer: Release animation driver

    Example:
        >>> string = PullString()
        >>> string.press(Point(100, 100))
        True
        >>> string.move(Point(130, 180))
        >>> string.release()
        True
        >>> while string.is_animating:
        ...     string.advance(16)
    """

    def __init__(self, config: Optional[BulbStringConfig] = None,
                 listener: Optional[BulbSwitcherActionListener] = None):
        """
        Initialize the pull string.

        Args:
            config: Geometry, keyframes and style (defaults if None)
            listener: Gesture notification sink (ignored if None)
        """
        self.config = config if config is not None else BulbStringConfig()
        self.listener = listener if listener is not None else NullListener()

        self._amplitude = AnimatedValue(0.0)
        self._length = AnimatedValue(self.config.initial_y_offset)

        self.tracker = GestureTracker(
            self.config.touch_threshold,
            self.listener,
            self.config.initial_touch_position,
        )
        self.sequencer = AnimationSequencer(
            self.config,
            self._length,
            self._amplitude,
            self.listener.on_end_release,
        )

    # =========================================================================
    # State
    # =========================================================================

    @property
    def amplitude(self) -> float:
        """Current wave amplitude."""
        return self._amplitude.value

    @property
    def length(self) -> float:
        """Current string length."""
        return self._length.value

    @property
    def is_touching(self) -> bool:
        return self.tracker.is_touching

    @property
    def is_animating(self) -> bool:
        return self.sequencer.is_running

    @property
    def touch_position(self) -> Point:
        return self.tracker.position

    @property
    def resting_endpoint(self) -> Point:
        """Where the string currently ends when nobody holds it."""
        return Point(self.config.bulb_center_x, self._length.value)

    # =========================================================================
    # Pointer Input
    # =========================================================================

    def press(self, position) -> bool:
        """
        Try to grab the string.

        A successful grab abandons any running release animation; its
        completion will never be reported.

        Returns:
            True if the press grabbed the string
        """
        if self.tracker.is_touching:
            return False

        resting_endpoint = self.resting_endpoint
        if self.tracker.is_within_reach(position, resting_endpoint):
            # Listeners must not see the abandoned animation during on_pull
            self.sequencer.cancel()
        return self.tracker.press(position, resting_endpoint)

    def move(self, position) -> None:
        """Drag the held string end."""
        self.tracker.move(position)

    def release(self, position=None) -> bool:
        """
        Let go of the string and start the release animation.

        Returns:
            True if the string was held
        """
        if not self.tracker.release(position):
            return False
        self.sequencer.start()
        return True

    # =========================================================================
    # Frame Tick
    # =========================================================================

    def advance(self, dt: float) -> None:
        """Advance the release animation by dt milliseconds."""
        self.sequencer.advance(dt)

    def path(self) -> StringPath:
        """Geometry to draw for the current frame."""
        return compute_string_path(
            self.config.bulb_center_x,
            self._length.value,
            self._amplitude.value,
            self.tracker.is_touching,
            self.tracker.position,
            self.config.sample_step,
        )
