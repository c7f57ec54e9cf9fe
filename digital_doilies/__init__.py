"""
Digital Doilies

Desktop drawing application that rotates and mirrors every stroke into a
radially symmetric pattern, with undo/redo and a small gallery.
"""

from .config import Config

__version__ = Config.APP_VERSION

__all__ = ['Config', '__version__']
