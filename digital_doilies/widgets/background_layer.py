"""
BackgroundLayer - Black backdrop with optional sector lines

Redrawn whenever the sector count or the sector-line toggle changes.
"""

from typing import Optional

from PyQt6.QtWidgets import QWidget
from PyQt6.QtGui import QPainter

from ..config import Config
from ..core.primitives import Segment
from ..core.surface import CompositeMode, RasterSurface
from ..events.event_bus import EventBus, get_event_bus


class BackgroundLayer(QWidget):
    """Background layer holding the black fill and the lines between sectors."""

    SECTOR_LINE_WIDTH = 1

    def __init__(self, parent: Optional[QWidget] = None,
                 event_bus: Optional[EventBus] = None):
        super().__init__(parent)

        self._event_bus = event_bus or get_event_bus()
        self._surface = RasterSurface(Config.CANVAS_WIDTH, Config.CANVAS_HEIGHT)

        self.setFixedSize(Config.CANVAS_WIDTH, Config.CANVAS_HEIGHT)

        self._event_bus.sectors_changed.connect(lambda _: self.draw_background())
        self._event_bus.sector_lines_toggled.connect(lambda _: self.draw_background())

        self.draw_background()

    @property
    def surface(self) -> RasterSurface:
        return self._surface

    def show_sector_lines(self) -> bool:
        return self._event_bus.show_sector_lines()

    def toggle_show_sector_lines(self):
        """Invert the sector-line toggle (triggers a redraw)."""
        self._event_bus.set_show_sector_lines(not self._event_bus.show_sector_lines())

    def draw_background(self):
        """Fill with black and draw one line from the centre per sector."""
        self._surface.fill(Config.BACKGROUND_COLOR)

        if self._event_bus.show_sector_lines():
            symmetry = self._event_bus.get_symmetry()
            cx, cy = symmetry.center
            sector_line = Segment(cx, cy, cx, 0)

            for angle in symmetry.angles():
                self._surface.draw_shape(
                    sector_line.rotated(angle, cx, cy),
                    self.SECTOR_LINE_WIDTH,
                    CompositeMode.PAINT,
                    Config.SECTOR_LINE_COLOR
                )

        self.update()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.drawImage(0, 0, self._surface.image())
        painter.end()


__all__ = ['BackgroundLayer']
