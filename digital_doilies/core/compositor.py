"""
Symmetric compositor.

Turns one primitive into its full symmetric image on a raster surface
and replays a stroke ledger after undo, redo or a sector change.
"""

import logging
from typing import List, Optional

from .brush import BrushSettings
from .errors import SurfaceNotReadyError
from .ledger import StrokeLedger
from .primitives import Primitive
from .surface import CompositeMode, RasterSurface
from .symmetry import SymmetryConfig, symmetric_images

logger = logging.getLogger(__name__)


class SymmetricCompositor:
    """Draws primitives rotated through every sector, optionally mirrored."""

    def images_for(self, primitive: Primitive, settings: BrushSettings,
                   config: SymmetryConfig) -> List[Primitive]:
        """Transformed copies of a primitive for the given settings."""
        return symmetric_images(primitive, settings.reflect, config)

    def apply_primitive(self, primitive: Primitive, settings: BrushSettings,
                        config: SymmetryConfig,
                        surface: Optional[RasterSurface]) -> int:
        """
        Draw every rotated (and mirrored) copy of a primitive.

        Args:
            primitive: Point or Segment in canvas coordinates
            settings: Brush settings of the stroke the primitive belongs to
            config: Sector count and centre
            surface: Raster to draw on

        Returns:
            Number of shapes drawn

        Raises:
            SurfaceNotReadyError: If surface is None
        """
        if surface is None:
            raise SurfaceNotReadyError("No raster surface to draw on")

        mode = CompositeMode.ERASE if settings.erase else CompositeMode.PAINT
        images = self.images_for(primitive, settings, config)
        for shape in images:
            surface.draw_shape(shape, settings.width, mode, settings.color)
        return len(images)

    def replay(self, ledger: StrokeLedger, config: SymmetryConfig,
               surface: Optional[RasterSurface]):
        """
        Clear the surface and redraw every stroke in the undo sequence.

        Each stroke is drawn with the settings it captured when it was
        started, in the order the strokes were committed.

        Raises:
            SurfaceNotReadyError: If surface is None
        """
        if surface is None:
            raise SurfaceNotReadyError("No raster surface to replay onto")

        surface.fill(None)

        strokes = ledger.undo_strokes
        for stroke in strokes:
            for primitive in stroke.primitives():
                self.apply_primitive(primitive, stroke.settings, config, surface)

        logger.debug(f"Replayed {len(strokes)} stroke(s) across {config.sectors} sectors")


__all__ = ['SymmetricCompositor']
