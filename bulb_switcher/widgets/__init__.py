"""
================================================================================
Widgets Package - Custom UI Components
================================================================================

This package contains the two widgets that make up the light switch: the
bulb and the string hanging from it.

Modules:
    pull_string_widget: The draggable, animated pull string
    bulb_icon: Painted bulb that glows in light mode
"""

try:
    from .pull_string_widget import BulbSwitcher
    from .bulb_icon import BulbIcon
except ImportError:
    from widgets.pull_string_widget import BulbSwitcher
    from widgets.bulb_icon import BulbIcon

__all__ = [
    'BulbSwitcher',
    'BulbIcon',
]
