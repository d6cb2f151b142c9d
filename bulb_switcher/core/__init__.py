"""
================================================================================
Core Package - Pull String Logic
================================================================================

This package contains the behaviour behind the pull string, kept free of
widget code so it can be driven and tested without a display:
configuration, gesture tracking, the release animation and the geometry of
the drawn string.

Modules:
    geometry: Point coordinate type
    config: Immutable string configuration with JSON load/save
    listener: Gesture notification protocol
    gesture: Press/drag/release tracking
    sequencer: Keyframe timelines for the release animation
    path: Polyline and marker geometry for each frame
    pull_string: Controller composing all of the above
    theme_controller: Light/dark mode flag toggled by the string
"""

try:
    from .geometry import Point
    from .config import BulbStringConfig, get_default_config
    from .listener import BulbSwitcherActionListener, NullListener
    from .gesture import GestureTracker, InteractionState
    from .sequencer import AnimatedValue, AnimationSequencer, LengthTimeline, WaveTimeline
    from .path import StringPath, compute_string_path
    from .pull_string import PullString
    from .theme_controller import ThemeController
except ImportError:
    from core.geometry import Point
    from core.config import BulbStringConfig, get_default_config
    from core.listener import BulbSwitcherActionListener, NullListener
    from core.gesture import GestureTracker, InteractionState
    from core.sequencer import AnimatedValue, AnimationSequencer, LengthTimeline, WaveTimeline
    from core.path import StringPath, compute_string_path
    from core.pull_string import PullString
    from core.theme_controller import ThemeController

__all__ = [
    'Point',
    'BulbStringConfig',
    'get_default_config',
    'BulbSwitcherActionListener',
    'NullListener',
    'GestureTracker',
    'InteractionState',
    'AnimatedValue',
    'AnimationSequencer',
    'LengthTimeline',
    'WaveTimeline',
    'StringPath',
    'compute_string_path',
    'PullString',
    'ThemeController',
]
