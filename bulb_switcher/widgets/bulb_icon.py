"""
================================================================================
Bulb Icon Widget
================================================================================

The light bulb the string hangs from. It glows while the light theme is on
and fades to a dim outline in dark mode.

The bulb is drawn upside down relative to a desk lamp: glass at the top,
screw base at the bottom edge, so the string below appears to hang from it.
"""

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, QPropertyAnimation, QEasingCurve, QPointF, QRectF, pyqtProperty
from PyQt6.QtGui import QPainter, QColor, QBrush, QPen, QRadialGradient

try:
    from ..styles.theme import LIGHT_COLORS, DARK_COLORS
    from ..utils.constants import STRING_CANVAS_WIDTH
except ImportError:
    from styles.theme import LIGHT_COLORS, DARK_COLORS
    from utils.constants import STRING_CANVAS_WIDTH


def _blend(dark: str, light: str, t: float) -> QColor:
    """Linear mix of two colors; t=0 gives dark, t=1 gives light."""
    a, b = QColor(dark), QColor(light)
    return QColor(
        int(a.red() + (b.red() - a.red()) * t),
        int(a.green() + (b.green() - a.green()) * t),
        int(a.blue() + (b.blue() - a.blue()) * t),
        int(a.alpha() + (b.alpha() - a.alpha()) * t),
    )


class BulbIcon(QWidget):
    """
    A painted light bulb that fades between lit and unlit.

    Example:
        >>> bulb = BulbIcon()
        >>> bulb.set_lit(False)  # fade out for dark mode
    """

    def __init__(self, lit: bool = True, width: int = STRING_CANVAS_WIDTH, parent=None):
        """
        Initialize the bulb.

        Args:
            lit: Start glowing
            width: Widget width; the bulb is centered horizontally
            parent: Parent widget (optional)
        """
        super().__init__(parent)
        self._glow = 1.0 if lit else 0.0
        self._lit = lit

        self.setFixedSize(width, 90)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)

        self._glow_anim = QPropertyAnimation(self, b"glow")
        self._glow_anim.setDuration(300)
        self._glow_anim.setEasingCurve(QEasingCurve.Type.OutCubic)

    @pyqtProperty(float)
    def glow(self) -> float:
        """Get the current glow level (0.0 unlit to 1.0 lit)."""
        return self._glow

    @glow.setter
    def glow(self, value: float) -> None:
        """Set the glow level and trigger repaint."""
        self._glow = value
        self.update()

    @property
    def is_lit(self) -> bool:
        return self._lit

    def set_lit(self, lit: bool) -> None:
        """Fade the bulb on or off."""
        if lit == self._lit:
            return
        self._lit = lit
        self._glow_anim.stop()
        self._glow_anim.setStartValue(self._glow)
        self._glow_anim.setEndValue(1.0 if lit else 0.0)
        self._glow_anim.start()

    def paintEvent(self, event) -> None:
        """Paint the bulb with its glow halo."""
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        cx = self.width() / 2
        base_height = 16
        base_width = 20
        radius = 26
        glass_center = QPointF(cx, self.height() - base_height - radius + 6)

        # Halo (only visible when lit)
        if self._glow > 0:
            halo = QRadialGradient(glass_center, radius * 1.8)
            glow_color = QColor(LIGHT_COLORS['bulb_glow'])
            glow_color.setAlpha(int(160 * self._glow))
            halo.setColorAt(0.0, glow_color)
            glow_color.setAlpha(0)
            halo.setColorAt(1.0, glow_color)
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(QBrush(halo))
            painter.drawEllipse(glass_center, radius * 1.8, radius * 1.8)

        # Glass
        painter.setPen(QPen(_blend(DARK_COLORS['bulb_outline'], LIGHT_COLORS['bulb_outline'], self._glow), 2))
        painter.setBrush(QBrush(_blend(DARK_COLORS['bulb_glass'], LIGHT_COLORS['bulb_glass'], self._glow)))
        painter.drawEllipse(glass_center, radius, radius)

        # Screw base, its bottom edge is where the string hangs from
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(_blend(DARK_COLORS['bulb_base'], LIGHT_COLORS['bulb_base'], self._glow)))
        painter.drawRoundedRect(
            QRectF(cx - base_width / 2, self.height() - base_height, base_width, base_height),
            3, 3
        )
        painter.end()
