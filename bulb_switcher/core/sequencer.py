"""
================================================================================
Animation Sequencer - Release Animation
================================================================================

After the string is let go it springs back through a scripted, two-part
motion before the listener hears that the release is over.

Timelines:
    Length: visits each configured length in order, interpolating linearly
        from the current length over one step duration per keyframe.
    Wave: for each (amplitude, direction) keyframe, swings linearly out to
        amplitude * direction over one step, then back to 0 over another.
        Decreasing amplitudes with alternating directions read as damping.

Both timelines start together and are stepped by the same frame tick. They
may finish at different times; the sequencer counts completions and fires
on_complete once both are done, then snaps the amplitude to exactly 0. The
length keeps its final keyframe value as the next resting length.

Time left over when a tween ends mid-tick rolls into the next tween, so the
total duration of a timeline does not depend on the frame rate.
"""

import logging
from typing import Callable, List, Optional, Sequence

try:
    from ..utils.constants import ANIMATION_STEP_MS
except ImportError:
    from utils.constants import ANIMATION_STEP_MS

logger = logging.getLogger(__name__)


class AnimatedValue:
    """
    A scalar written by one timeline and read by the renderer.

    Example:
        >>> amplitude = AnimatedValue(0.0)
        >>> amplitude.value = 12.5
        >>> amplitude.snap_to(0.0)
    """

    def __init__(self, value: float = 0.0):
        self.value = float(value)

    def snap_to(self, value: float) -> None:
        """Jump straight to a value."""
        self.value = float(value)

    def __repr__(self) -> str:
        return f"AnimatedValue({self.value!r})"


class Tween:
    """Linear interpolation from start to target over a fixed duration."""

    def __init__(self, start: float, target: float, duration: float):
        self.start = start
        self.target = target
        self.duration = duration
        self.elapsed = 0.0

    @property
    def done(self) -> bool:
        return self.duration <= 0 or self.elapsed >= self.duration

    @property
    def value(self) -> float:
        if self.done:
            return self.target
        return self.start + (self.target - self.start) * (self.elapsed / self.duration)

    def advance(self, dt: float) -> float:
        """
        Move the tween forward in time.

        Args:
            dt: Elapsed time since the last advance

        Returns:
            Time left over after the tween reached its target (0 if it did not)
        """
        remaining = max(self.duration - self.elapsed, 0.0)
        if dt >= remaining:
            self.elapsed = max(self.duration, 0.0)
            return dt - remaining
        self.elapsed += dt
        return 0.0


class KeyframeTimeline:
    """
    Drives one AnimatedValue through a list of targets, one tween each.

    Each tween starts from whatever value the AnimatedValue holds when the
    tween begins, so a timeline picks up smoothly from an interrupted one.
    """

    def __init__(self, value: AnimatedValue, targets: Sequence[float],
                 duration: float = ANIMATION_STEP_MS):
        self.value = value
        self.targets: List[float] = list(targets)
        self.duration = duration
        self._index = 0
        self._tween: Optional[Tween] = None

    @property
    def done(self) -> bool:
        return self._index >= len(self.targets)

    @property
    def total_duration(self) -> float:
        return len(self.targets) * max(self.duration, 0.0)

    def advance(self, dt: float) -> float:
        """
        Step the timeline.

        Args:
            dt: Elapsed time since the last tick

        Returns:
            Time left over after the final keyframe (0 while still running)
        """
        while not self.done:
            if self._tween is None:
                self._tween = Tween(self.value.value, self.targets[self._index], self.duration)
            dt = self._tween.advance(dt)
            self.value.value = self._tween.value
            if not self._tween.done:
                return 0.0
            self._tween = None
            self._index += 1
        return dt


class LengthTimeline(KeyframeTimeline):
    """Stretches the string through each configured length in turn."""

    def __init__(self, length: AnimatedValue, length_sequence: Sequence[float],
                 duration: float = ANIMATION_STEP_MS):
        super().__init__(length, length_sequence, duration)


class WaveTimeline(KeyframeTimeline):
    """Swings the string out to each signed amplitude and back to center."""

    def __init__(self, amplitude: AnimatedValue, wave_sequence: Sequence,
                 duration: float = ANIMATION_STEP_MS):
        targets = []
        for swing, direction in wave_sequence:
            targets.append(swing * direction)
            targets.append(0.0)
        super().__init__(amplitude, targets, duration)


class AnimationSequencer:
    """
    Runs the length and wave timelines together and joins on both.

    Example:
        >>> sequencer = AnimationSequencer(config, length, amplitude, listener.on_end_release)
        >>> sequencer.start()
        >>> while sequencer.is_running:
        ...     sequencer.advance(16)
    """

    def __init__(self, config, length: AnimatedValue, amplitude: AnimatedValue,
                 on_complete: Callable[[], None]):
        """
        Initialize the sequencer.

        Args:
            config: BulbStringConfig providing the keyframe sequences
            length: Animated string length
            amplitude: Animated wave amplitude
            on_complete: Called once when both timelines have finished
        """
        self.config = config
        self.length = length
        self.amplitude = amplitude
        self.on_complete = on_complete

        self._timelines: List[KeyframeTimeline] = []
        self._pending = 0
        self._running = False
        self.elapsed = 0.0

    @property
    def is_running(self) -> bool:
        return self._running

    def start(self) -> None:
        """Start the release animation from the current length and amplitude."""
        duration = self.config.step_duration_ms
        self._timelines = [
            LengthTimeline(self.length, self.config.length_sequence, duration),
            WaveTimeline(self.amplitude, self.config.wave_sequence, duration),
        ]
        self._pending = sum(1 for timeline in self._timelines if not timeline.done)
        self._running = True
        self.elapsed = 0.0
        logger.debug("Release animation started (length=%.1f, amplitude=%.1f)",
                     self.length.value, self.amplitude.value)

        if self._pending == 0:
            self._finish()

    def advance(self, dt: float) -> None:
        """
        Step both timelines by one frame tick.

        Args:
            dt: Elapsed time since the last tick
        """
        if not self._running:
            return

        self.elapsed += dt
        for timeline in self._timelines:
            if timeline.done:
                continue
            timeline.advance(dt)
            if timeline.done:
                self._pending -= 1

        if self._pending == 0:
            self._finish()

    def cancel(self) -> None:
        """Abandon the running animation without notifying anyone."""
        if not self._running:
            return
        logger.debug("Release animation cancelled after %.1fms", self.elapsed)
        self._running = False
        self._timelines = []
        self._pending = 0

    def _finish(self) -> None:
        """Fire completion exactly once and settle the wave."""
        self._running = False
        self._timelines = []
        logger.debug("Release animation finished after %.1fms", self.elapsed)
        self.on_complete()
        self.amplitude.snap_to(0.0)
