"""
Raster surface the symmetric drawing is composited onto.

Wraps a transparent QImage and a QPainter so the core can paint or
erase primitives without knowing about widgets.
"""

from enum import Enum
from typing import Optional

from PyQt6.QtCore import Qt, QLineF, QRectF
from PyQt6.QtGui import QColor, QImage, QPainter, QPen

from .primitives import Point, Primitive


class CompositeMode(Enum):
    """How a shape is combined with the pixels already on the surface."""
    PAINT = 0   # Replace pixels under the pen with the brush colour
    ERASE = 1   # Clear pixels under the pen to full transparency


class RasterSurface:
    """
    Transparent ARGB image with paint/erase drawing of primitives.

    The image uses RGBA8888 premultiplied so the byte layout is the same
    on every platform (alpha is every fourth byte).
    """

    IMAGE_FORMAT = QImage.Format.Format_RGBA8888_Premultiplied

    def __init__(self, width: int, height: int):
        self._image = QImage(width, height, self.IMAGE_FORMAT)
        self._image.fill(Qt.GlobalColor.transparent)

    # ==================== Properties ====================

    @property
    def width(self) -> int:
        return self._image.width()

    @property
    def height(self) -> int:
        return self._image.height()

    def image(self) -> QImage:
        """The backing image (live, not a copy)."""
        return self._image

    def snapshot(self) -> QImage:
        """Deep copy of the current raster."""
        return self._image.copy()

    # ==================== Drawing ====================

    def fill(self, color: Optional[str] = None):
        """Fill the whole surface; None clears it to full transparency."""
        if color is None:
            self._image.fill(Qt.GlobalColor.transparent)
        else:
            self._image.fill(QColor(color))

    def clear_region(self, x: float, y: float, w: float, h: float):
        """Clear a rectangle to full transparency."""
        painter = QPainter(self._image)
        try:
            painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Clear)
            painter.fillRect(QRectF(x, y, w, h), Qt.GlobalColor.transparent)
        finally:
            painter.end()

    def draw_shape(self, shape: Primitive, stroke_width: float,
                   mode: CompositeMode, color: str = '#000000'):
        """
        Stroke a primitive's outline onto the surface.

        Args:
            shape: Point (drawn as a circle outline) or Segment
            stroke_width: Pen width in pixels
            mode: PAINT draws with color, ERASE clears the covered pixels
            color: Pen colour for PAINT mode
        """
        painter = QPainter(self._image)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            if mode is CompositeMode.ERASE:
                painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Clear)
                # Clear ignores the pen colour; only the covered area matters
                pen = QPen(QColor(Qt.GlobalColor.black), stroke_width)
            else:
                painter.setCompositionMode(QPainter.CompositionMode.CompositionMode_Source)
                pen = QPen(QColor(color), stroke_width)
            painter.setPen(pen)
            painter.setBrush(Qt.BrushStyle.NoBrush)

            if isinstance(shape, Point):
                painter.drawEllipse(QRectF(*shape.bounds()))
            else:
                painter.drawLine(QLineF(shape.x1, shape.y1, shape.x2, shape.y2))
        finally:
            painter.end()

    # ==================== Inspection ====================

    def pixel_alpha(self, x: int, y: int) -> int:
        """Alpha (0-255) of the pixel at (x, y)."""
        return self._image.pixelColor(x, y).alpha()

    def pixel_color(self, x: int, y: int) -> QColor:
        return self._image.pixelColor(x, y)

    def _alpha_bytes(self) -> bytes:
        ptr = self._image.constBits()
        return ptr.asstring(self._image.sizeInBytes())[3::4]

    def painted_pixel_count(self) -> int:
        """Number of pixels that are not fully transparent."""
        alpha = self._alpha_bytes()
        return len(alpha) - alpha.count(0)

    def is_blank(self) -> bool:
        return self.painted_pixel_count() == 0


__all__ = ['CompositeMode', 'RasterSurface']
