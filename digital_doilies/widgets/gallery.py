"""
GalleryView - Paged view of saved drawings

Three pages of four slots. Each slot shows a scaled thumbnail with a
delete button; the prev/next buttons flip between pages.
"""

import logging
from typing import List, Optional

from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGridLayout, QLabel, QPushButton,
    QStackedWidget, QFrame, QMessageBox
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QImage, QPixmap

from ..config import Config
from ..core.errors import GalleryFullError
from ..core.gallery_store import GalleryStore
from ..events.event_bus import EventBus, get_event_bus

logger = logging.getLogger(__name__)


class GalleryView(QWidget):
    """Gallery pane listing the drawings saved from the canvas."""

    GRID_COLUMNS = 2

    def __init__(self, parent: Optional[QWidget] = None,
                 store: Optional[GalleryStore] = None,
                 event_bus: Optional[EventBus] = None):
        super().__init__(parent)

        self._store = store or GalleryStore()
        self._event_bus = event_bus or get_event_bus()
        self._current_page = 1

        self._labels: List[QLabel] = []
        self._delete_buttons: List[QPushButton] = []

        self._build_ui()
        self.refresh()

    def _build_ui(self):
        """Build pages, slots and page controls."""
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self._pages = QStackedWidget()
        layout.addWidget(self._pages, 1)

        for page in range(1, self._store.page_count + 1):
            page_widget = QWidget()
            grid = QGridLayout(page_widget)
            for position, slot in enumerate(self._store.page_slots(page)):
                grid.addWidget(
                    self._create_slot(slot),
                    position // self.GRID_COLUMNS,
                    position % self.GRID_COLUMNS
                )
            self._pages.addWidget(page_widget)

        # Page controls
        controls = QHBoxLayout()
        self._prev_button = QPushButton("Prev Page")
        self._prev_button.clicked.connect(self.prev_page)
        self._next_button = QPushButton("Next Page")
        self._next_button.clicked.connect(self.next_page)
        controls.addStretch()
        controls.addWidget(self._prev_button)
        controls.addWidget(self._next_button)
        controls.addStretch()
        layout.addLayout(controls)

        self._update_page_buttons()

    def _create_slot(self, slot: int) -> QFrame:
        frame = QFrame()
        frame.setStyleSheet("QFrame { background-color: black; border: 1px solid white; }")
        slot_layout = QVBoxLayout(frame)

        label = QLabel("")
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        slot_layout.addWidget(label, 1)

        delete_button = QPushButton("Delete")
        delete_button.setEnabled(False)
        delete_button.clicked.connect(lambda _=False, index=slot: self.delete_image(index))
        slot_layout.addWidget(delete_button)

        self._labels.append(label)
        self._delete_buttons.append(delete_button)
        return frame

    # ==================== Properties ====================

    @property
    def store(self) -> GalleryStore:
        return self._store

    @property
    def current_page(self) -> int:
        return self._current_page

    def delete_button(self, slot: int) -> QPushButton:
        return self._delete_buttons[slot]

    def prev_button(self) -> QPushButton:
        return self._prev_button

    def next_button(self) -> QPushButton:
        return self._next_button

    # ==================== Paging ====================

    def next_page(self):
        if self._current_page < self._store.page_count:
            self._current_page += 1
            self._pages.setCurrentIndex(self._current_page - 1)
            self._update_page_buttons()

    def prev_page(self):
        if self._current_page > 1:
            self._current_page -= 1
            self._pages.setCurrentIndex(self._current_page - 1)
            self._update_page_buttons()

    def _update_page_buttons(self):
        self._prev_button.setEnabled(self._current_page > 1)
        self._next_button.setEnabled(self._current_page < self._store.page_count)

    # ==================== Images ====================

    def save_image(self, image: QImage) -> bool:
        """
        Copy a drawing into the next free slot.

        Shows a warning instead when every slot is taken.

        Returns:
            True if the drawing was stored
        """
        try:
            self._store.save(image)
        except GalleryFullError as e:
            logger.warning(str(e))
            self._event_bus.report_error("gallery", str(e))
            QMessageBox.warning(self, "Cannot Save Drawing", str(e))
            return False

        self.refresh()
        self._event_bus.gallery_changed.emit(len(self._store))
        return True

    def delete_image(self, index: int):
        """Delete a drawing; the following drawings move up one slot."""
        self._store.remove(index)
        self.refresh()
        self._event_bus.gallery_changed.emit(len(self._store))

    def refresh(self):
        """Put the stored drawings into their slots."""
        for slot, label in enumerate(self._labels):
            image = self._store.get(slot)
            if image is not None:
                size = max(1, label.height() - Config.GALLERY_THUMBNAIL_MARGIN)
                pixmap = QPixmap.fromImage(image).scaled(
                    size, size,
                    Qt.AspectRatioMode.KeepAspectRatio,
                    Qt.TransformationMode.SmoothTransformation
                )
                label.setPixmap(pixmap)
                self._delete_buttons[slot].setEnabled(True)
            else:
                label.clear()
                self._delete_buttons[slot].setEnabled(False)

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.refresh()


__all__ = ['GalleryView']
