"""
DrawLayer - Transparent layer the user draws the doily on

Each mouse press stamps a dot, each drag event draws a line from the
previous position, and releasing the mouse commits the stroke to the
ledger. Every primitive is drawn rotated through all sectors (and
mirrored when reflection is on). Undo, redo and sector changes clear
the layer and replay the committed strokes.
"""

import logging
from typing import Optional

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import Qt, pyqtSignal, QPointF
from PyQt6.QtGui import QPainter, QColor, QImage

from ..config import Config
from ..core.brush import BrushSettings
from ..core.compositor import SymmetricCompositor
from ..core.errors import EmptyHistoryError
from ..core.ledger import Stroke, StrokeLedger
from ..core.primitives import Point, Primitive, Segment
from ..core.surface import RasterSurface
from ..core.symmetry import SymmetryConfig
from ..events.event_bus import EventBus, get_event_bus

logger = logging.getLogger(__name__)


class DrawLayer(QWidget):
    """
    Transparent drawing layer placed in front of the background layer.

    Features:
    - Live symmetric drawing while dragging
    - Per-stroke brush snapshots for faithful redraws
    - Undo/redo/clear
    """

    # Signals
    drawing_started = pyqtSignal()
    drawing_finished = pyqtSignal()
    history_changed = pyqtSignal(bool, bool)  # can_undo, can_redo

    def __init__(self, parent: Optional[QWidget] = None,
                 event_bus: Optional[EventBus] = None):
        super().__init__(parent)

        self._event_bus = event_bus or get_event_bus()
        self._brush = BrushSettings()
        self._ledger = StrokeLedger()
        self._compositor = SymmetricCompositor()
        self._surface: Optional[RasterSurface] = RasterSurface(
            Config.CANVAS_WIDTH, Config.CANVAS_HEIGHT
        )

        # Drawing state
        self._stroke: Optional[Stroke] = None
        self._last_pos: Optional[QPointF] = None

        self._setup_widget()
        self._connect_signals()

    def _setup_widget(self):
        """Configure the widget."""
        self.setFixedSize(Config.CANVAS_WIDTH, Config.CANVAS_HEIGHT)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)
        self.setAutoFillBackground(False)
        self.setCursor(Qt.CursorShape.CrossCursor)

    def _connect_signals(self):
        self._event_bus.sectors_changed.connect(self._on_sectors_changed)

    # ==================== Properties ====================

    @property
    def brush(self) -> BrushSettings:
        """Live brush settings used for the next stroke."""
        return self._brush

    @property
    def ledger(self) -> StrokeLedger:
        return self._ledger

    @property
    def surface(self) -> Optional[RasterSurface]:
        return self._surface

    @property
    def symmetry(self) -> SymmetryConfig:
        return self._event_bus.get_symmetry()

    @property
    def is_drawing(self) -> bool:
        return self._ledger.is_drawing

    # ==================== Brush Settings ====================

    def set_brush_colour(self, colour: QColor):
        self._brush = self._brush.with_changes(color=QColor(colour).name())

    def get_brush_colour(self) -> QColor:
        return QColor(self._brush.color)

    def set_brush_width(self, width: int):
        self._brush = self._brush.with_changes(width=Config.clamp_brush_width(width))

    def get_brush_width(self) -> int:
        return self._brush.width

    def toggle_reflection(self):
        """Invert the reflection flag."""
        self._brush = self._brush.with_changes(reflect=not self._brush.reflect)

    def toggle_erase(self):
        """Invert the erase flag."""
        self._brush = self._brush.with_changes(erase=not self._brush.erase)

    def get_image(self) -> QImage:
        """The drawn image, used to save to the gallery."""
        return self._surface.image()

    # ==================== Mouse Events ====================

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self._start_drawing(event.position())
            event.accept()
        else:
            super().mousePressEvent(event)

    def mouseMoveEvent(self, event):
        if self._ledger.is_drawing and event.buttons() & Qt.MouseButton.LeftButton:
            self._continue_drawing(event.position())
            event.accept()
        else:
            super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event):
        if self._ledger.is_drawing and event.button() == Qt.MouseButton.LeftButton:
            self._finish_drawing()
            event.accept()
        else:
            super().mouseReleaseEvent(event)

    # ==================== Drawing ====================

    def _start_drawing(self, pos: QPointF):
        """Start a new stroke with a dot at the press position."""
        if self._ledger.is_drawing:
            return

        self._stroke = self._ledger.begin_stroke(self._brush)
        self._last_pos = QPointF(pos)
        self.drawing_started.emit()

        point = Point(pos.x(), pos.y(), self._brush.point_diameter)
        self._add_primitive(point)
        self._emit_history()

    def _continue_drawing(self, pos: QPointF):
        """Draw a line from the previous position to the new one."""
        if self._stroke is None or self._last_pos is None:
            return

        segment = Segment(self._last_pos.x(), self._last_pos.y(), pos.x(), pos.y())
        self._add_primitive(segment)
        self._last_pos = QPointF(pos)

    def _finish_drawing(self):
        """Commit the current stroke to the undo history."""
        if self._stroke is None:
            return

        self._ledger.commit_stroke(self._stroke)
        self._stroke = None
        self._last_pos = None

        self.drawing_finished.emit()
        self._emit_history()

    def _add_primitive(self, primitive: Primitive):
        self._ledger.append_primitive(self._stroke, primitive)
        self._compositor.apply_primitive(
            primitive, self._stroke.settings, self.symmetry, self._surface
        )
        self.update()

    # ==================== History ====================

    def can_undo(self) -> bool:
        return self._ledger.can_undo()

    def can_redo(self) -> bool:
        return self._ledger.can_redo()

    def undo(self) -> bool:
        """
        Remove the last stroke and redraw the rest.

        Returns:
            False if there was nothing to undo or a stroke is being drawn
        """
        if self._ledger.is_drawing:
            return False
        try:
            self._ledger.undo()
        except EmptyHistoryError:
            logger.debug("Undo requested with empty history")
            return False
        self.redraw()
        self._emit_history()
        return True

    def redo(self) -> bool:
        """
        Restore the last undone stroke and redraw.

        Returns:
            False if there was nothing to redo or a stroke is being drawn
        """
        if self._ledger.is_drawing:
            return False
        try:
            self._ledger.redo()
        except EmptyHistoryError:
            logger.debug("Redo requested with empty history")
            return False
        self.redraw()
        self._emit_history()
        return True

    def redraw(self):
        """Clear the layer and replay every committed stroke and the open one."""
        symmetry = self.symmetry
        self._compositor.replay(self._ledger, symmetry, self._surface)
        if self._stroke is not None:
            # The open stroke is not in the undo history until release
            for primitive in self._stroke.primitives():
                self._compositor.apply_primitive(
                    primitive, self._stroke.settings, symmetry, self._surface
                )
        self.update()

    def clear(self):
        """Clear the layer and empty both history stacks."""
        self._surface.fill(None)
        self._ledger.clear()
        self._stroke = None
        self._last_pos = None
        self.update()
        self._emit_history()
        logger.info("Drawing cleared")

    def _emit_history(self):
        can_undo = self._ledger.can_undo()
        can_redo = self._ledger.can_redo()
        self.history_changed.emit(can_undo, can_redo)
        self._event_bus.history_changed.emit(can_undo, can_redo)

    def _on_sectors_changed(self, sectors: int):
        logger.debug(f"Redrawing for {sectors} sectors")
        self.redraw()

    # ==================== Painting ====================

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.drawImage(0, 0, self._surface.image())
        painter.end()


__all__ = ['DrawLayer']
