"""
Exceptions raised by the drawing core.

EmptyHistoryError, InvalidSymmetryOrderError and GalleryFullError are
recoverable and handled by the widgets. The remaining errors signal a
caller bug and are left to propagate.
"""


class DoilyError(Exception):
    """Base class for all drawing core errors."""
    pass


class EmptyHistoryError(DoilyError):
    """Raised when undo or redo is requested with nothing to undo or redo."""
    pass


class NoOpenStrokeError(DoilyError):
    """Raised when a stroke operation needs an open stroke and there is none."""
    pass


class StrokeInProgressError(DoilyError):
    """Raised when a new stroke is started while another one is still open."""
    pass


class StrokeCommittedError(DoilyError):
    """Raised when a committed stroke is modified."""
    pass


class InvalidSymmetryOrderError(DoilyError, ValueError):
    """Raised when a sector count is outside the supported range."""

    def __init__(self, sectors, minimum: int, maximum: int):
        super().__init__(
            f"Sector count must be between {minimum} and {maximum}, got {sectors!r}"
        )
        self.sectors = sectors


class SurfaceNotReadyError(DoilyError):
    """Raised when drawing is attempted without a raster surface."""
    pass


class GalleryFullError(DoilyError):
    """Raised when saving to a gallery that has no free slots."""

    def __init__(self, capacity: int):
        super().__init__(
            f"You can only save {capacity} drawings at a time, "
            f"please delete a drawing from the gallery."
        )
        self.capacity = capacity


__all__ = [
    'DoilyError',
    'EmptyHistoryError',
    'NoOpenStrokeError',
    'StrokeInProgressError',
    'StrokeCommittedError',
    'InvalidSymmetryOrderError',
    'SurfaceNotReadyError',
    'GalleryFullError',
]
