"""
================================================================================
Styles Package - Visual Design System
================================================================================

This package defines the light and dark palettes the pull string toggles
between, and the stylesheet helpers that apply them.

Modules:
    theme: Palettes, font family and stylesheet helpers
"""

try:
    from .theme import (
        # Color palettes
        LIGHT_COLORS,
        DARK_COLORS,
        # Typography
        FONT_FAMILY,
        # Helper functions
        get_colors,
        get_window_style,
    )
except ImportError:
    from styles.theme import (
        LIGHT_COLORS,
        DARK_COLORS,
        FONT_FAMILY,
        get_colors,
        get_window_style,
    )

__all__ = [
    'LIGHT_COLORS',
    'DARK_COLORS',
    'FONT_FAMILY',
    'get_colors',
    'get_window_style',
]
