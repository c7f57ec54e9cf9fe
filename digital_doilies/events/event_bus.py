"""
EventBus - Central event system for canvas-wide state

Pattern: Observer/Publisher-Subscriber
Keeps the sector count and sector-line toggle in one place so the
background and draw layers redraw together when either changes.
"""

from typing import Optional

from PyQt6.QtCore import QObject, pyqtSignal

from ..config import Config
from ..core.symmetry import SymmetryConfig


class EventBus(QObject):
    """
    Central event bus for decoupled communication between components

    Usage:
        event_bus = EventBus()
        event_bus.sectors_changed.connect(some_handler)
        event_bus.set_sectors(8)
    """

    # Canvas events
    sectors_changed = pyqtSignal(int)  # new sector count
    sector_lines_toggled = pyqtSignal(bool)  # shown/hidden

    # History events
    history_changed = pyqtSignal(bool, bool)  # can_undo, can_redo

    # Gallery events
    gallery_changed = pyqtSignal(int)  # number of stored drawings

    # Error events
    error_occurred = pyqtSignal(str, str)  # error_type, error_message

    def __init__(self):
        super().__init__()

        # State storage
        self._symmetry = SymmetryConfig(sectors=Config.DEFAULT_SECTORS)
        self._show_sector_lines: bool = Config.DEFAULT_SHOW_SECTOR_LINES

    # Getters (read current state)

    def get_sectors(self) -> int:
        """Get current number of sectors"""
        return self._symmetry.sectors

    def get_symmetry(self) -> SymmetryConfig:
        """Get the current symmetry configuration"""
        return self._symmetry

    def show_sector_lines(self) -> bool:
        """Check if sector lines are shown"""
        return self._show_sector_lines

    # Setters (update state and emit signals)

    def set_sectors(self, sectors: int):
        """
        Set the number of sectors

        Args:
            sectors: New sector count

        Raises:
            InvalidSymmetryOrderError: If sectors is out of range
        """
        symmetry = self._symmetry.with_sectors(sectors)
        if symmetry != self._symmetry:
            self._symmetry = symmetry
            self.sectors_changed.emit(sectors)

    def set_show_sector_lines(self, show: bool):
        """Show or hide the sector lines"""
        if self._show_sector_lines != show:
            self._show_sector_lines = show
            self.sector_lines_toggled.emit(show)

    # Convenience methods

    def report_error(self, error_type: str, message: str):
        """
        Report an error to the UI

        Args:
            error_type: Type of error (e.g., "gallery", "history")
            message: Human-readable error message
        """
        self.error_occurred.emit(error_type, message)


# Singleton instance (lazy initialization)
_event_bus_instance: Optional[EventBus] = None


def get_event_bus() -> EventBus:
    """
    Get global EventBus singleton instance

    Returns:
        Global EventBus instance
    """
    global _event_bus_instance
    if _event_bus_instance is None:
        _event_bus_instance = EventBus()
    return _event_bus_instance


# Export
__all__ = ['EventBus', 'get_event_bus']
