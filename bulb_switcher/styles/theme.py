"""
================================================================================
Theme - Light and Dark Palettes
================================================================================

This module defines the two palettes the pull string switches between and
the stylesheet helpers that apply them to the main window.

Color choices:
    - Light: warm off-white background, the bulb glows yellow
    - Dark: deep slate background, the bulb is a muted outline
"""

from typing import Dict

# =============================================================================
# Color Palettes
# =============================================================================

LIGHT_COLORS: Dict[str, str] = {
    # -------------------------------------------------------------------------
    # Surfaces
    # -------------------------------------------------------------------------
    'background': '#fafafa',
    'surface': '#ffffff',

    # -------------------------------------------------------------------------
    # Text
    # -------------------------------------------------------------------------
    'text': '#2d3436',
    'text_muted': '#636e72',

    # -------------------------------------------------------------------------
    # Bulb
    # -------------------------------------------------------------------------
    'bulb_glass': '#fdcb6e',
    'bulb_glow': '#ffeaa7',
    'bulb_outline': '#e1a134',
    'bulb_base': '#636e72',
}

DARK_COLORS: Dict[str, str] = {
    'background': '#1e272e',
    'surface': '#2d3436',

    'text': '#dfe6e9',
    'text_muted': '#b2bec3',

    'bulb_glass': '#485460',
    'bulb_glow': '#00000000',
    'bulb_outline': '#808e9b',
    'bulb_base': '#808e9b',
}

# =============================================================================
# Typography
# =============================================================================

FONT_FAMILY: str = "Comic Sans MS, Comic Sans, cursive, sans-serif"


# =============================================================================
# Style Helper Functions
# =============================================================================

def get_colors(dark: bool) -> Dict[str, str]:
    """
    Return the palette for the given mode.

    Args:
        dark: True for the dark palette

    Example:
        >>> get_colors(dark=True)['background']
        '#1e272e'
    """
    return DARK_COLORS if dark else LIGHT_COLORS


def get_window_style(dark: bool, font_family: str = FONT_FAMILY) -> str:
    """
    Generate the main window stylesheet for a mode.

    Args:
        dark: True for the dark palette
        font_family: Font family to use

    Returns:
        CSS stylesheet string for QMainWindow and its labels
    """
    colors = get_colors(dark)
    return f"""
        QMainWindow, QWidget#centralWidget {{
            background-color: {colors['background']};
        }}
        QLabel {{
            font-family: {font_family};
            color: {colors['text_muted']};
            font-size: 12px;
        }}
    """
