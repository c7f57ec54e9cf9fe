"""
MainWindow - Editor window holding the canvas and the gallery

Pattern: QMainWindow with a stacked canvas/gallery page

Layout:
    +------------------------------------------+
    |  File | Edit | Brush | Canvas            |
    +------------------------------------------+
    |  BackgroundLayer                         |
    |    + DrawLayer (transparent, on top)     |
    +------------------------------------------+
"""

import logging
from typing import List, Optional

from PyQt6.QtWidgets import (
    QMainWindow, QWidget, QStackedWidget, QMenu, QMenuBar, QWidgetAction,
    QSpinBox, QLabel, QHBoxLayout, QColorDialog, QInputDialog
)
from PyQt6.QtGui import QAction, QKeySequence

from ..config import Config
from ..core.gallery_store import GalleryStore
from ..events.event_bus import EventBus, get_event_bus
from .background_layer import BackgroundLayer
from .draw_layer import DrawLayer
from .gallery import GalleryView

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window

    Features:
    - Layered canvas (background + draw layer)
    - Edit menu with undo/redo enabled from the stroke history
    - Brush colour, size and eraser
    - Sector count, sector lines and reflection toggles
    - Gallery page with a "Return to Canvas" action
    """

    CANVAS_PAGE = 0
    GALLERY_PAGE = 1

    def __init__(self, parent=None, event_bus: Optional[EventBus] = None,
                 gallery_store: Optional[GalleryStore] = None):
        super().__init__(parent)

        # Event bus and store (injectable for testing)
        self._event_bus = event_bus or get_event_bus()
        self._gallery_store = gallery_store or GalleryStore()

        self._setup_window()
        self._create_widgets()
        self._create_layout()
        self._create_menus()
        self._connect_signals()

        self.show_canvas()

    def _setup_window(self):
        """Configure window properties"""
        self.setWindowTitle(Config.APP_NAME)
        self.setFixedSize(Config.DEFAULT_WINDOW_WIDTH, Config.DEFAULT_WINDOW_HEIGHT)

    def _create_widgets(self):
        """Create UI widgets"""
        self._canvas = QWidget()
        self._canvas.setFixedSize(Config.CANVAS_WIDTH, Config.CANVAS_HEIGHT)

        # Background first so the draw layer is stacked in front of it
        self._background_layer = BackgroundLayer(self._canvas, event_bus=self._event_bus)
        self._draw_layer = DrawLayer(self._canvas, event_bus=self._event_bus)
        self._background_layer.move(0, 0)
        self._draw_layer.move(0, 0)
        self._draw_layer.raise_()

        self._gallery = GalleryView(store=self._gallery_store, event_bus=self._event_bus)

    def _create_layout(self):
        """Stack the canvas and gallery pages"""
        self._pages = QStackedWidget()
        self._pages.addWidget(self._canvas)
        self._pages.addWidget(self._gallery)
        self.setCentralWidget(self._pages)

    def _connect_signals(self):
        self._event_bus.history_changed.connect(self._update_history_actions)

    # ==================== Properties ====================

    @property
    def draw_layer(self) -> DrawLayer:
        return self._draw_layer

    @property
    def background_layer(self) -> BackgroundLayer:
        return self._background_layer

    @property
    def gallery(self) -> GalleryView:
        return self._gallery

    @property
    def undo_action(self) -> QAction:
        return self._undo_action

    @property
    def redo_action(self) -> QAction:
        return self._redo_action

    @property
    def sector_spinbox(self) -> QSpinBox:
        return self._sector_spinbox

    @property
    def eraser_action(self) -> QAction:
        return self._eraser_action

    @property
    def reflection_action(self) -> QAction:
        return self._reflection_action

    @property
    def sector_lines_action(self) -> QAction:
        return self._sector_lines_action

    @property
    def return_action(self) -> QAction:
        return self._return_action

    def canvas_menus(self) -> List[QMenu]:
        """File/Edit/Brush/Canvas menus, hidden while the gallery is shown."""
        return list(self._canvas_menus)

    def is_showing_gallery(self) -> bool:
        return self._pages.currentIndex() == self.GALLERY_PAGE

    # ==================== Menus ====================

    def _create_menus(self):
        """
        Build the menu bar.

        The canvas menus and the gallery's "Return to Canvas" action share
        one bar; switching pages toggles which of them are visible.
        """
        menu_bar = self.menuBar()
        self._canvas_menus = self._create_canvas_menus(menu_bar)

        self._return_action = QAction("Return to Canvas", self)
        self._return_action.triggered.connect(self.show_canvas)
        menu_bar.addAction(self._return_action)

    def _create_canvas_menus(self, menu_bar: QMenuBar) -> List[QMenu]:
        """Create the File/Edit/Brush/Canvas menus shown while drawing."""
        # FILE menu
        file_menu = menu_bar.addMenu("File")
        save_action = QAction("Save to Gallery", self)
        save_action.setShortcut(QKeySequence.StandardKey.Save)
        save_action.triggered.connect(self.save_to_gallery)
        file_menu.addAction(save_action)

        view_gallery_action = QAction("View Gallery", self)
        view_gallery_action.triggered.connect(self.show_gallery)
        file_menu.addAction(view_gallery_action)

        # EDIT menu
        edit_menu = menu_bar.addMenu("Edit")
        self._undo_action = QAction("Undo", self)
        self._undo_action.setShortcut(QKeySequence.StandardKey.Undo)
        self._undo_action.triggered.connect(self._draw_layer.undo)
        edit_menu.addAction(self._undo_action)

        self._redo_action = QAction("Redo", self)
        self._redo_action.setShortcuts([QKeySequence("Ctrl+Y"), QKeySequence("Ctrl+Shift+Z")])
        self._redo_action.triggered.connect(self._draw_layer.redo)
        edit_menu.addAction(self._redo_action)

        edit_menu.addSeparator()
        clear_action = QAction("Clear Drawing", self)
        clear_action.triggered.connect(self._draw_layer.clear)
        edit_menu.addAction(clear_action)

        # Refresh enabled state every time the menu opens
        edit_menu.aboutToShow.connect(self._refresh_history_actions)
        self._refresh_history_actions()

        # BRUSH menu
        brush_menu = menu_bar.addMenu("Brush")
        colour_action = QAction("Colour...", self)
        colour_action.triggered.connect(self._choose_brush_colour)
        brush_menu.addAction(colour_action)

        size_action = QAction("Size...", self)
        size_action.triggered.connect(self._choose_brush_size)
        brush_menu.addAction(size_action)

        brush_menu.addSeparator()
        self._eraser_action = QAction("Eraser", self)
        self._eraser_action.setCheckable(True)
        self._eraser_action.toggled.connect(lambda _: self._draw_layer.toggle_erase())
        brush_menu.addAction(self._eraser_action)

        # CANVAS menu
        canvas_menu = menu_bar.addMenu("Canvas")
        canvas_menu.addAction(self._create_sector_action(canvas_menu))
        canvas_menu.addSeparator()

        self._sector_lines_action = QAction("Show Sector Lines", self)
        self._sector_lines_action.setCheckable(True)
        self._sector_lines_action.setChecked(self._event_bus.show_sector_lines())
        self._sector_lines_action.toggled.connect(self._event_bus.set_show_sector_lines)
        canvas_menu.addAction(self._sector_lines_action)

        self._reflection_action = QAction("Toggle Reflection", self)
        self._reflection_action.setCheckable(True)
        self._reflection_action.setChecked(self._draw_layer.brush.reflect)
        self._reflection_action.toggled.connect(lambda _: self._draw_layer.toggle_reflection())
        canvas_menu.addAction(self._reflection_action)

        return [file_menu, edit_menu, brush_menu, canvas_menu]

    def _create_sector_action(self, parent: QMenu) -> QWidgetAction:
        """Spin box for the number of sectors embedded in the Canvas menu."""
        container = QWidget()
        layout = QHBoxLayout(container)
        layout.setContentsMargins(8, 4, 8, 4)
        layout.addWidget(QLabel("Number of Sectors:"))

        self._sector_spinbox = QSpinBox()
        self._sector_spinbox.setRange(Config.MIN_SECTORS, Config.MAX_SECTORS)
        self._sector_spinbox.setValue(self._event_bus.get_sectors())
        self._sector_spinbox.valueChanged.connect(self._event_bus.set_sectors)
        layout.addWidget(self._sector_spinbox)

        action = QWidgetAction(parent)
        action.setDefaultWidget(container)
        return action

    # ==================== Actions ====================

    def save_to_gallery(self) -> bool:
        """Copy the current drawing into the gallery."""
        return self._gallery.save_image(self._draw_layer.get_image())

    def show_gallery(self):
        self._pages.setCurrentIndex(self.GALLERY_PAGE)
        self._set_canvas_menus_visible(False)
        self._gallery.refresh()

    def show_canvas(self):
        self._pages.setCurrentIndex(self.CANVAS_PAGE)
        self._set_canvas_menus_visible(True)

    def _set_canvas_menus_visible(self, visible: bool):
        for menu in self._canvas_menus:
            menu.menuAction().setVisible(visible)
        self._return_action.setVisible(not visible)

    def _choose_brush_colour(self):
        colour = QColorDialog.getColor(
            self._draw_layer.get_brush_colour(), self, "Choose Brush Colour"
        )
        if colour.isValid():
            self._draw_layer.set_brush_colour(colour)

    def _choose_brush_size(self):
        width, ok = QInputDialog.getInt(
            self, "Choose Brush Width", "Brush width:",
            self._draw_layer.get_brush_width(),
            Config.MIN_BRUSH_WIDTH, Config.MAX_BRUSH_WIDTH, 1
        )
        if ok:
            self._draw_layer.set_brush_width(width)

    def _refresh_history_actions(self):
        self._update_history_actions(self._draw_layer.can_undo(), self._draw_layer.can_redo())

    def _update_history_actions(self, can_undo: bool, can_redo: bool):
        self._undo_action.setEnabled(can_undo)
        self._redo_action.setEnabled(can_redo)


__all__ = ['MainWindow']
