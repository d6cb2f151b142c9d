"""
================================================================================
Application Entry Point
================================================================================

This module provides the main entry point for the Bulb Switcher.

Usage:
    python -m bulb_switcher.app

Or:
    from bulb_switcher.app import main
    main()

The string configuration is read from bulb_string_config.json beside the
package when that file exists; otherwise the built-in defaults are used.
"""

import logging
import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication
from PyQt6.QtGui import QFont

try:
    from .core import BulbStringConfig, get_default_config
    from .main_window import BulbSwitcherWindow
except ImportError:
    from core import BulbStringConfig, get_default_config
    from main_window import BulbSwitcherWindow


def main(config: Optional[BulbStringConfig] = None) -> int:
    """
    Launch the bulb switcher application.

    Args:
        config: Pull string configuration (loaded from the default location if None)

    Returns:
        Exit code (0 for success)

    Example:
        >>> import sys
        >>> sys.exit(main())
    """
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(levelname)s - %(message)s")

    # Create application
    app = QApplication(sys.argv)
    app.setStyle('Fusion')

    # Set global font
    app.setFont(QFont("Comic Sans MS", 10))

    # Create and show main window
    window = BulbSwitcherWindow(config if config is not None else get_default_config())
    window.show()

    # Run event loop
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
