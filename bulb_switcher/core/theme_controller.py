"""
================================================================================
Theme Controller - Light/Dark Switch State
================================================================================

Holds the application-wide dark mode flag that the pull string toggles.
The flag lives for the session only; nothing is written to disk.

Signals:
    theme_changed: Emitted with the new dark flag whenever it changes
"""

import logging

from PyQt6.QtCore import QObject, pyqtSignal

logger = logging.getLogger(__name__)


class ThemeController(QObject):
    """
    Application theme state.

    Example:
        >>> controller = ThemeController()
        >>> controller.theme_changed.connect(window.apply_theme)
        >>> controller.toggle()
    """

    theme_changed = pyqtSignal(bool)

    def __init__(self, dark: bool = False, parent=None):
        """
        Initialize the controller.

        Args:
            dark: Start in dark mode
            parent: Parent QObject (optional)
        """
        super().__init__(parent)
        self._is_dark = dark

    @property
    def is_dark(self) -> bool:
        return self._is_dark

    def set_dark(self, dark: bool) -> None:
        """Switch to the given mode, notifying only on an actual change."""
        if dark == self._is_dark:
            return
        self._is_dark = dark
        logger.info("Theme switched to %s", "dark" if dark else "light")
        self.theme_changed.emit(dark)

    def toggle(self) -> None:
        """Flip between light and dark."""
        self.set_dark(not self._is_dark)
