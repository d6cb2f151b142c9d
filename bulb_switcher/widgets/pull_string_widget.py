"""
================================================================================
Pull String Widget
================================================================================

The string hanging below the bulb. Grab its end, drag it anywhere, let go:
the string springs back with a damped wiggle and the theme flips.

Interaction:
    - Press near the end of the string (within the touch threshold) to grab it
    - While held, the string is a straight line from the bulb to the pointer
    - On release, the string stretches through its length keyframes while
      swinging through its wave keyframes

Signals mirror the listener protocol so the window can connect to them the
usual Qt way; an optional listener object receives the same notifications.
"""

from typing import Optional

from PyQt6.QtWidgets import QWidget, QSizePolicy
from PyQt6.QtCore import Qt, QTimer, QElapsedTimer, QPointF, pyqtSignal
from PyQt6.QtGui import QPainter, QPainterPath, QPen, QBrush, QColor

try:
    from ..core import BulbStringConfig, Point, PullString, StringPath
    from ..utils.constants import FRAME_INTERVAL_MS, STRING_CANVAS_WIDTH, STRING_CANVAS_HEIGHT
except ImportError:
    from core import BulbStringConfig, Point, PullString, StringPath
    from utils.constants import FRAME_INTERVAL_MS, STRING_CANVAS_WIDTH, STRING_CANVAS_HEIGHT


class BulbSwitcher(QWidget):
    """
    A pull string that reports grabs, releases and the end of its animation.

    Signals:
        pulled: Emitted with (x, y) when the string is grabbed
        released: Emitted with (x, y) when the string is let go
        release_ended: Emitted when the release animation has finished

    Example:
        >>> switcher = BulbSwitcher()
        >>> switcher.released.connect(lambda x, y: theme.toggle())
        >>> layout.addWidget(switcher)
    """

    pulled = pyqtSignal(float, float)
    released = pyqtSignal(float, float)
    release_ended = pyqtSignal()

    def __init__(self, config: Optional[BulbStringConfig] = None, listener=None, parent=None):
        """
        Initialize the pull string widget.

        Args:
            config: String geometry, keyframes and style (defaults if None)
            listener: Optional object with on_pull/on_release/on_end_release
            parent: Parent widget (optional)
        """
        super().__init__(parent)

        self._listener = listener
        self._string = PullString(config, listener=self)

        self._setup_appearance()
        self._setup_frame_timer()

    def _setup_appearance(self) -> None:
        """Configure size and cursor."""
        self.setMinimumSize(STRING_CANVAS_WIDTH, STRING_CANVAS_HEIGHT)
        self.setSizePolicy(QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Expanding)
        self.setCursor(Qt.CursorShape.OpenHandCursor)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)

    def _setup_frame_timer(self) -> None:
        """Initialize the timer that ticks the release animation."""
        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(FRAME_INTERVAL_MS)
        self._frame_timer.timeout.connect(self._on_frame)
        self._clock = QElapsedTimer()

    # =========================================================================
    # Public Properties
    # =========================================================================

    @property
    def config(self) -> BulbStringConfig:
        return self._string.config

    @property
    def pull_string(self) -> PullString:
        """The model behind the widget."""
        return self._string

    @property
    def is_touching(self) -> bool:
        return self._string.is_touching

    @property
    def is_animating(self) -> bool:
        return self._string.is_animating

    def current_path(self) -> StringPath:
        """Geometry that the next paint will draw."""
        return self._string.path()

    # =========================================================================
    # Listener Protocol (forwarded to signals)
    # =========================================================================

    def on_pull(self, position: Point) -> None:
        self.pulled.emit(position.x, position.y)
        if self._listener is not None:
            self._listener.on_pull(position)

    def on_release(self, position: Point) -> None:
        self.released.emit(position.x, position.y)
        if self._listener is not None:
            self._listener.on_release(position)

    def on_end_release(self) -> None:
        self.release_ended.emit()
        if self._listener is not None:
            self._listener.on_end_release()

    # =========================================================================
    # Event Handlers
    # =========================================================================

    def mousePressEvent(self, event) -> None:
        """Grab the string if the press lands near its end."""
        if event.button() != Qt.MouseButton.LeftButton:
            super().mousePressEvent(event)
            return

        pos = event.position()
        if self._string.press(Point(pos.x(), pos.y())):
            self._frame_timer.stop()
            self.setCursor(Qt.CursorShape.ClosedHandCursor)
            self.update()
            event.accept()
        else:
            event.ignore()

    def mouseMoveEvent(self, event) -> None:
        """Drag the held end of the string."""
        if not self._string.is_touching:
            super().mouseMoveEvent(event)
            return

        pos = event.position()
        self._string.move(Point(pos.x(), pos.y()))
        self.update()

    def mouseReleaseEvent(self, event) -> None:
        """Let go and start the release animation."""
        if event.button() != Qt.MouseButton.LeftButton or not self._string.is_touching:
            super().mouseReleaseEvent(event)
            return

        pos = event.position()
        self._string.release(Point(pos.x(), pos.y()))
        self.setCursor(Qt.CursorShape.OpenHandCursor)
        self._start_frames()
        self.update()

    def paintEvent(self, event) -> None:
        """Draw the string and the marker at its end."""
        path = self._string.path()
        config = self._string.config

        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        # String
        if not path.is_collapsed:
            pen = QPen(QColor(config.line_color))
            pen.setWidthF(config.stroke_width)
            pen.setCapStyle(Qt.PenCapStyle.RoundCap)
            pen.setJoinStyle(Qt.PenJoinStyle.RoundJoin)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)
            painter.drawPath(_to_painter_path(path))

        # End marker
        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(QBrush(QColor(config.circle_color)))
        painter.drawEllipse(
            QPointF(path.marker.x, path.marker.y),
            config.circle_radius, config.circle_radius
        )
        painter.end()

    # =========================================================================
    # Frame Tick
    # =========================================================================

    def advance(self, dt: float) -> None:
        """
        Advance the release animation by dt milliseconds and repaint.

        The frame timer calls this with the measured frame time; tests can
        call it directly to step the animation deterministically.
        """
        self._string.advance(dt)
        self.update()
        if not self._string.is_animating:
            self._frame_timer.stop()

    def _start_frames(self) -> None:
        """Run the frame timer while the release animation is active."""
        if not self._string.is_animating:
            return
        self._clock.start()
        self._frame_timer.start()

    def _on_frame(self) -> None:
        """Timer slot: step by the real time since the previous frame."""
        self.advance(float(self._clock.restart()))


def _to_painter_path(path: StringPath) -> QPainterPath:
    """Build a QPainterPath from a StringPath polyline."""
    first, *rest = path.points
    painter_path = QPainterPath(QPointF(first.x, first.y))
    for point in rest:
        painter_path.lineTo(point.x, point.y)
    return painter_path
