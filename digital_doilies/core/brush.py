"""
Brush settings snapshot.

The draw layer holds the live settings; every stroke keeps its own copy
taken when it was started, so redraws never depend on the current brush.
"""

from dataclasses import dataclass, replace

from ..config import Config


@dataclass(frozen=True)
class BrushSettings:
    """Colour, width and mode flags active for a stroke."""

    color: str = Config.DEFAULT_BRUSH_COLOR
    width: int = Config.DEFAULT_BRUSH_WIDTH
    reflect: bool = Config.DEFAULT_REFLECT
    erase: bool = False

    def with_changes(self, **changes) -> 'BrushSettings':
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @property
    def point_diameter(self) -> float:
        """Diameter of the dot stamped at the start of a stroke."""
        return self.width - Config.POINT_SHRINK


__all__ = ['BrushSettings']
