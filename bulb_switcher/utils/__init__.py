"""
================================================================================
Utils Package - Core Constants
================================================================================

This package contains the constants shared by the pull string core and its
widgets. Keeping these centralized ensures consistency and makes the
codebase easier to maintain.

Modules:
    constants: Animation timing, sampling and canvas dimensions
"""

try:
    from .constants import (
        # Animation timing
        ANIMATION_STEP_MS,
        FRAME_INTERVAL_MS,
        # String geometry
        PATH_SAMPLE_STEP,
        STRING_CANVAS_WIDTH,
        STRING_CANVAS_HEIGHT,
        # Color validation
        HEX_COLOR_LENGTHS,
    )
except ImportError:
    from utils.constants import (
        ANIMATION_STEP_MS,
        FRAME_INTERVAL_MS,
        PATH_SAMPLE_STEP,
        STRING_CANVAS_WIDTH,
        STRING_CANVAS_HEIGHT,
        HEX_COLOR_LENGTHS,
    )

__all__ = [
    'ANIMATION_STEP_MS',
    'FRAME_INTERVAL_MS',
    'PATH_SAMPLE_STEP',
    'STRING_CANVAS_WIDTH',
    'STRING_CANVAS_HEIGHT',
    'HEX_COLOR_LENGTHS',
]
