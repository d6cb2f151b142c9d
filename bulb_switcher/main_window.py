"""
================================================================================
Main Window - Bulb Switcher
================================================================================

This module contains the main application window: a bulb with a string
hanging from it. Pulling the string flips the whole window between the
light and dark palettes.

The window is organized top to bottom:
    - Bulb icon
    - Pull string canvas
    - A short hint label
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QLabel
from PyQt6.QtCore import Qt

try:
    from .core import BulbStringConfig, ThemeController
    from .styles.theme import get_window_style
    from .widgets import BulbIcon, BulbSwitcher
except ImportError:
    from core import BulbStringConfig, ThemeController
    from styles.theme import get_window_style
    from widgets import BulbIcon, BulbSwitcher

logger = logging.getLogger(__name__)


class BulbSwitcherWindow(QMainWindow):
    """
    Main application window hosting the bulb and its pull string.

    Example:
        >>> app = QApplication(sys.argv)
        >>> window = BulbSwitcherWindow()
        >>> window.show()
        >>> sys.exit(app.exec())
    """

    def __init__(self, config: Optional[BulbStringConfig] = None, dark: bool = False):
        """
        Initialize the main window.

        Args:
            config: Pull string configuration (defaults if None)
            dark: Start in dark mode
        """
        super().__init__()
        self.setWindowTitle("Bulb Switcher")
        self.setMinimumSize(360, 480)

        self.theme = ThemeController(dark=dark, parent=self)
        self._build_ui(config)
        self._connect_signals()
        self.apply_theme(self.theme.is_dark)

    # =========================================================================
    # UI Building
    # =========================================================================

    def _build_ui(self, config: Optional[BulbStringConfig]) -> None:
        """Build the bulb, the string and the hint label."""
        central = QWidget()
        central.setObjectName("centralWidget")
        self.setCentralWidget(central)

        layout = QVBoxLayout(central)
        layout.setSpacing(0)
        layout.setContentsMargins(20, 20, 20, 20)

        self.bulb = BulbIcon(lit=not self.theme.is_dark)
        layout.addWidget(self.bulb, alignment=Qt.AlignmentFlag.AlignHCenter)

        self.switcher = BulbSwitcher(config)
        layout.addWidget(self.switcher, stretch=1, alignment=Qt.AlignmentFlag.AlignHCenter)

        self.hint_label = QLabel("Pull the string")
        self.hint_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self.hint_label)

    def _connect_signals(self) -> None:
        """Wire the string to the theme."""
        self.switcher.released.connect(self._on_string_released)
        self.switcher.release_ended.connect(self._on_release_ended)
        self.theme.theme_changed.connect(self.apply_theme)

    # =========================================================================
    # Slots
    # =========================================================================

    def _on_string_released(self, x: float, y: float) -> None:
        """Flip the theme as soon as the string is let go."""
        self.theme.toggle()

    def _on_release_ended(self) -> None:
        logger.debug("String settled")

    def apply_theme(self, dark: bool) -> None:
        """
        Restyle the window for a mode.

        Args:
            dark: True for the dark palette
        """
        self.setStyleSheet(get_window_style(dark))
        self.bulb.set_lit(not dark)
        self.hint_label.setText("Pull the string to turn the light on" if dark else "Pull the string")
