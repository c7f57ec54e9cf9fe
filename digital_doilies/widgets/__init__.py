"""UI Widgets for Digital Doilies"""

from .main_window import MainWindow
from .draw_layer import DrawLayer
from .background_layer import BackgroundLayer
from .gallery import GalleryView

__all__ = [
    'MainWindow',
    'DrawLayer',
    'BackgroundLayer',
    'GalleryView',
]
