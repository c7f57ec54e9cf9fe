"""
Fixed-capacity store of saved drawings.

Images are kept in memory only, in the order they were saved, and are
shown by the gallery view in pages of GALLERY_PAGE_SIZE.
"""

import logging
import math
from typing import List, Optional

from PyQt6.QtGui import QImage

from ..config import Config
from .errors import GalleryFullError

logger = logging.getLogger(__name__)


class GalleryStore:
    """Ordered list of saved drawings with a hard capacity."""

    def __init__(self, capacity: int = Config.GALLERY_CAPACITY,
                 page_size: int = Config.GALLERY_PAGE_SIZE):
        self._capacity = capacity
        self._page_size = page_size
        self._images: List[QImage] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def page_count(self) -> int:
        """Number of pages needed to show every slot."""
        return math.ceil(self._capacity / self._page_size)

    def __len__(self):
        return len(self._images)

    def is_full(self) -> bool:
        return len(self._images) >= self._capacity

    def images(self) -> List[QImage]:
        return list(self._images)

    def get(self, index: int) -> Optional[QImage]:
        """Image in a slot, or None if the slot is empty."""
        if 0 <= index < len(self._images):
            return self._images[index]
        return None

    def save(self, image: QImage) -> int:
        """
        Store a copy of an image in the next free slot.

        Args:
            image: Drawing to store; the store keeps its own copy

        Returns:
            Slot index the image was stored in

        Raises:
            GalleryFullError: If every slot is taken
        """
        if self.is_full():
            raise GalleryFullError(self._capacity)

        self._images.append(image.copy())
        index = len(self._images) - 1
        logger.info(f"Saved drawing to gallery slot {index + 1}/{self._capacity}")
        return index

    def remove(self, index: int):
        """
        Delete the image in a slot; later images move up one slot.

        Raises:
            IndexError: If the slot is empty
        """
        if not 0 <= index < len(self._images):
            raise IndexError(f"Gallery slot {index} is empty")
        del self._images[index]
        logger.info(f"Deleted drawing from gallery slot {index + 1}")

    def page_slots(self, page: int) -> range:
        """
        Slot indices shown on a page (1-based page number).

        Raises:
            IndexError: If the page does not exist
        """
        if not 1 <= page <= self.page_count:
            raise IndexError(f"Gallery page {page} does not exist")
        start = (page - 1) * self._page_size
        return range(start, min(start + self._page_size, self._capacity))


__all__ = ['GalleryStore']
