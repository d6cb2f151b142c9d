"""
================================================================================
Constants - Application-Wide Configuration Values
================================================================================

This module defines the timing and sampling constants used by the pull
string. Centralizing these values keeps the widget, the animation sequencer
and the configuration defaults in agreement.
"""

# =============================================================================
# Animation Timing
# =============================================================================

# Duration of a single keyframe interpolation (in milliseconds)
# Each length keyframe takes one step; each wave keyframe takes two
ANIMATION_STEP_MS: float = 100.0

# Interval between frame ticks while the release animation runs
# 16ms is roughly one refresh at 60Hz
FRAME_INTERVAL_MS: int = 16

# =============================================================================
# String Geometry
# =============================================================================

# Vertical distance between samples of the waving string (in pixels)
PATH_SAMPLE_STEP: float = 5.0

# Canvas reserved for the string below the bulb
STRING_CANVAS_WIDTH: int = 200
STRING_CANVAS_HEIGHT: int = 260

# =============================================================================
# Color Validation
# =============================================================================

# Accepted color strings: #RRGGBB or #AARRGGBB
HEX_COLOR_LENGTHS: tuple = (7, 9)
