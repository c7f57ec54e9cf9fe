"""
Rotational and reflective symmetry around the canvas centre.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from ..config import Config
from .errors import InvalidSymmetryOrderError
from .primitives import Primitive

# Absorbs float drift so the closing 360 degree copy is drawn for every N
ANGLE_EPSILON = 1e-9


@dataclass(frozen=True)
class SymmetryConfig:
    """
    Centre point and number of sectors the canvas is split into.

    Raises:
        InvalidSymmetryOrderError: If sectors is outside [MIN_SECTORS, MAX_SECTORS]
    """

    sectors: int = Config.DEFAULT_SECTORS
    center: Tuple[float, float] = Config.CANVAS_CENTER

    def __post_init__(self):
        if (isinstance(self.sectors, bool) or not isinstance(self.sectors, int)
                or not Config.MIN_SECTORS <= self.sectors <= Config.MAX_SECTORS):
            raise InvalidSymmetryOrderError(
                self.sectors, Config.MIN_SECTORS, Config.MAX_SECTORS
            )

    @property
    def step(self) -> float:
        """Angle between neighbouring sectors in degrees."""
        return 360.0 / self.sectors

    def with_sectors(self, sectors: int) -> 'SymmetryConfig':
        return SymmetryConfig(sectors=sectors, center=self.center)

    def angles(self) -> Iterator[float]:
        """
        Yield the rotation angles from 0 up to and including 360.

        The angle is accumulated by repeated float addition of the step,
        so both 0 and 360 are produced and the seam copy is drawn twice.
        """
        step = self.step
        angle = 0.0
        while angle <= 360.0 + ANGLE_EPSILON:
            yield angle
            angle += step


def symmetric_images(primitive: Primitive, reflect: bool,
                     config: SymmetryConfig) -> List[Primitive]:
    """
    Build every transformed copy of a primitive.

    For each angle the rotated primitive comes first, followed by the
    rotated mirror image when reflecting.

    Args:
        primitive: Primitive in canvas coordinates
        reflect: Mirror about the vertical axis through the centre
        config: Sector count and centre

    Returns:
        List of transformed primitives in drawing order
    """
    cx, cy = config.center
    mirrored = primitive.reflected(cx) if reflect else None

    images = []
    for angle in config.angles():
        images.append(primitive.rotated(angle, cx, cy))
        if mirrored is not None:
            images.append(mirrored.rotated(angle, cx, cy))
    return images


__all__ = ['SymmetryConfig', 'symmetric_images', 'ANGLE_EPSILON']
