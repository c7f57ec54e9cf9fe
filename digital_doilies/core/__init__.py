"""
Drawing core for Digital Doilies.

Provides the pieces that do not depend on widgets:
- primitives: Point / Segment and their transforms
- brush: per-stroke settings snapshot
- symmetry: sector configuration and symmetric copies
- ledger: stroke recording with undo/redo
- surface: QImage-backed raster with paint/erase
- compositor: symmetric drawing and replay
- gallery_store: fixed-capacity saved drawings
"""

from .errors import (
    DoilyError,
    EmptyHistoryError,
    NoOpenStrokeError,
    StrokeInProgressError,
    StrokeCommittedError,
    InvalidSymmetryOrderError,
    SurfaceNotReadyError,
    GalleryFullError,
)
from .primitives import Point, Segment, Primitive, rotate_point, is_close
from .brush import BrushSettings
from .symmetry import SymmetryConfig, symmetric_images
from .ledger import Stroke, StrokeLedger
from .surface import CompositeMode, RasterSurface
from .compositor import SymmetricCompositor
from .gallery_store import GalleryStore

__all__ = [
    # Errors
    'DoilyError',
    'EmptyHistoryError',
    'NoOpenStrokeError',
    'StrokeInProgressError',
    'StrokeCommittedError',
    'InvalidSymmetryOrderError',
    'SurfaceNotReadyError',
    'GalleryFullError',
    # Geometry
    'Point',
    'Segment',
    'Primitive',
    'rotate_point',
    'is_close',
    'BrushSettings',
    'SymmetryConfig',
    'symmetric_images',
    # History
    'Stroke',
    'StrokeLedger',
    # Rendering
    'CompositeMode',
    'RasterSurface',
    'SymmetricCompositor',
    'GalleryStore',
]
