"""
================================================================================
Bulb Switcher - Pull-String Light Switch
================================================================================

A light bulb with a string hanging from it. Drag the end of the string and
let go: the string springs back with a damped wiggle and the application
flips between its light and dark themes.

Package Structure:
    bulb_switcher/
    ├── __init__.py          # This file - package entry point
    ├── app.py               # Application launcher
    ├── main_window.py       # Main application window
    ├── core/                # Toolkit-independent logic
    │   ├── config.py            # String geometry, keyframes, style
    │   ├── gesture.py           # Press/drag/release tracking
    │   ├── sequencer.py         # Release animation timelines
    │   ├── path.py              # String geometry per frame
    │   ├── pull_string.py       # Controller tying them together
    │   └── theme_controller.py  # Light/dark flag
    ├── styles/              # Visual design system
    │   └── theme.py         # Light and dark palettes
    ├── utils/               # Constants
    │   └── constants.py     # Timing and sampling
    └── widgets/             # Custom UI components
        ├── pull_string_widget.py # The pull string
        └── bulb_icon.py          # The bulb

Usage:
    # Launch the application
    python -m bulb_switcher.app

    # Or embed the string in your own window
    from bulb_switcher.widgets import BulbSwitcher
    switcher = BulbSwitcher()
    switcher.released.connect(on_released)
"""

__version__ = "1.0.0"

try:
    from .app import main
    from .main_window import BulbSwitcherWindow
except ImportError:
    from app import main
    from main_window import BulbSwitcherWindow

__all__ = [
    'main',
    'BulbSwitcherWindow',
]
