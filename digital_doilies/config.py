"""
Global configuration for Digital Doilies

Canvas geometry, brush limits, symmetry limits and gallery capacity
live here so widgets and the drawing core read them from one place.
"""

import os
import sys
from pathlib import Path
from typing import Final, Tuple


class Config:
    """Central configuration class for all application settings"""

    # Application metadata
    APP_NAME: Final[str] = "Digital Doilies"
    APP_VERSION: Final[str] = "1.0.0"
    APP_AUTHOR: Final[str] = "Digital Doilies"

    # Paths
    APP_ROOT: Final[Path] = Path(__file__).parent
    LOG_FILE_NAME: Final[str] = "digital_doilies.log"

    # Canvas settings (fixed size raster)
    CANVAS_WIDTH: Final[int] = 800
    CANVAS_HEIGHT: Final[int] = 800
    CANVAS_CENTER: Final[Tuple[float, float]] = (400.0, 400.0)
    BACKGROUND_COLOR: Final[str] = "#000000"
    SECTOR_LINE_COLOR: Final[str] = "#ffffff"

    # Symmetry settings
    DEFAULT_SECTORS: Final[int] = 12
    MIN_SECTORS: Final[int] = 2
    MAX_SECTORS: Final[int] = 40
    DEFAULT_REFLECT: Final[bool] = True
    DEFAULT_SHOW_SECTOR_LINES: Final[bool] = True

    # Brush settings
    DEFAULT_BRUSH_COLOR: Final[str] = "#ff0000"
    DEFAULT_BRUSH_WIDTH: Final[int] = 3
    MIN_BRUSH_WIDTH: Final[int] = 1
    MAX_BRUSH_WIDTH: Final[int] = 15
    POINT_SHRINK: Final[float] = 0.9  # Start dot diameter is width minus this

    # Gallery settings
    GALLERY_CAPACITY: Final[int] = 12
    GALLERY_PAGE_SIZE: Final[int] = 4
    GALLERY_THUMBNAIL_MARGIN: Final[int] = 10

    # Window settings (canvas plus menu bar)
    DEFAULT_WINDOW_WIDTH: Final[int] = 800
    DEFAULT_WINDOW_HEIGHT: Final[int] = 844

    @classmethod
    def get_user_data_dir(cls) -> Path:
        """
        Get user data directory.

        Uses system AppData/Local (Windows), Application Support (macOS)
        or .local/share (Linux). A 'portable.txt' file next to the package
        switches to a local 'data' folder instead.
        """
        portable_flag = cls.APP_ROOT.parent / 'portable.txt'
        if portable_flag.exists():
            user_dir = cls.APP_ROOT.parent / 'data'
        elif sys.platform == 'win32':
            base_path = Path(os.environ.get('LOCALAPPDATA', os.path.expanduser('~')))
            user_dir = base_path / 'DigitalDoilies'
        elif sys.platform == 'darwin':
            user_dir = Path.home() / 'Library' / 'Application Support' / 'DigitalDoilies'
        else:
            user_dir = Path.home() / '.local' / 'share' / 'DigitalDoilies'

        user_dir.mkdir(parents=True, exist_ok=True)
        return user_dir

    @classmethod
    def get_log_dir(cls) -> Path:
        """Get the directory the log file is written to"""
        log_dir = cls.get_user_data_dir() / 'logs'
        log_dir.mkdir(parents=True, exist_ok=True)
        return log_dir

    @classmethod
    def clamp_brush_width(cls, width: int) -> int:
        """Clamp a brush width into the supported range"""
        return max(cls.MIN_BRUSH_WIDTH, min(cls.MAX_BRUSH_WIDTH, int(width)))


# Export for convenient imports
__all__ = ['Config']
