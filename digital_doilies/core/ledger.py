"""
Stroke history with undo/redo.

A Stroke holds the start dot and line segments drawn during one mouse
drag along with the brush settings active when it started. The ledger
keeps committed strokes on an undo list and undone strokes on a redo
list; starting a new stroke throws the redo list away.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from .brush import BrushSettings
from .errors import (
    EmptyHistoryError, NoOpenStrokeError, StrokeCommittedError,
    StrokeInProgressError
)
from .primitives import Point, Primitive, Segment

logger = logging.getLogger(__name__)


class Stroke:
    """One continuous drag's worth of geometry plus its settings snapshot."""

    def __init__(self, settings: BrushSettings):
        self._settings = settings
        self._start_point: Optional[Point] = None
        self._segments: List[Segment] = []
        self._committed = False

    @property
    def settings(self) -> BrushSettings:
        return self._settings

    @property
    def start_point(self) -> Optional[Point]:
        return self._start_point

    @property
    def segments(self) -> Tuple[Segment, ...]:
        return tuple(self._segments)

    @property
    def committed(self) -> bool:
        return self._committed

    def set_start_point(self, point: Point):
        self._check_open()
        self._start_point = point

    def add_segment(self, segment: Segment):
        self._check_open()
        self._segments.append(segment)

    def primitives(self) -> Iterator[Primitive]:
        """Yield the start point (if any) then the segments in drawing order."""
        if self._start_point is not None:
            yield self._start_point
        yield from self._segments

    def _freeze(self):
        self._committed = True

    def _check_open(self):
        if self._committed:
            raise StrokeCommittedError("Cannot modify a committed stroke")

    def __len__(self):
        return len(self._segments) + (1 if self._start_point is not None else 0)

    def __repr__(self):
        return (f"Stroke(color={self._settings.color}, width={self._settings.width}, "
                f"primitives={len(self)}, committed={self._committed})")


class StrokeLedger:
    """
    Undo and redo sequences of committed strokes.

    The two sequences are always disjoint. Only one stroke can be open
    at a time.
    """

    def __init__(self):
        self._undo: List[Stroke] = []
        self._redo: List[Stroke] = []
        self._open: Optional[Stroke] = None

    # ==================== State ====================

    @property
    def undo_strokes(self) -> Tuple[Stroke, ...]:
        """Committed strokes in creation order."""
        return tuple(self._undo)

    @property
    def redo_strokes(self) -> Tuple[Stroke, ...]:
        """Undone strokes, most recently undone last."""
        return tuple(self._redo)

    @property
    def open_stroke(self) -> Optional[Stroke]:
        return self._open

    @property
    def is_drawing(self) -> bool:
        return self._open is not None

    def can_undo(self) -> bool:
        return len(self._undo) > 0

    def can_redo(self) -> bool:
        return len(self._redo) > 0

    # ==================== Recording ====================

    def begin_stroke(self, settings: BrushSettings) -> Stroke:
        """
        Open a new stroke and discard the redo history.

        Args:
            settings: Brush settings captured for the whole stroke

        Returns:
            The open stroke, used as the handle for append/commit

        Raises:
            StrokeInProgressError: If a stroke is already open
        """
        if self._open is not None:
            raise StrokeInProgressError("A stroke is already being drawn")

        if self._redo:
            logger.debug(f"New stroke discards {len(self._redo)} redo stroke(s)")
        self._redo.clear()
        self._open = Stroke(settings)
        return self._open

    def append_primitive(self, handle: Stroke, primitive: Primitive):
        """
        Add a primitive to the open stroke.

        A Point becomes the stroke's start point, a Segment is appended.

        Raises:
            NoOpenStrokeError: If handle is not the open stroke
        """
        self._check_handle(handle)
        if isinstance(primitive, Point):
            handle.set_start_point(primitive)
        else:
            handle.add_segment(primitive)

    def commit_stroke(self, handle: Stroke):
        """
        Close the open stroke and push it onto the undo sequence.

        Raises:
            NoOpenStrokeError: If handle is not the open stroke
        """
        self._check_handle(handle)
        handle._freeze()
        self._undo.append(handle)
        self._open = None
        logger.debug(f"Committed {handle!r} ({len(self._undo)} in history)")

    # ==================== Undo / Redo ====================

    def undo(self) -> Stroke:
        """
        Move the most recent stroke onto the redo sequence.

        Raises:
            EmptyHistoryError: If there is nothing to undo
        """
        if not self._undo:
            raise EmptyHistoryError("Nothing to undo")
        stroke = self._undo.pop()
        self._redo.append(stroke)
        logger.debug(f"Undo -> {len(self._undo)} undo / {len(self._redo)} redo")
        return stroke

    def redo(self) -> Stroke:
        """
        Move the most recently undone stroke back onto the undo sequence.

        Raises:
            EmptyHistoryError: If there is nothing to redo
        """
        if not self._redo:
            raise EmptyHistoryError("Nothing to redo")
        stroke = self._redo.pop()
        self._undo.append(stroke)
        logger.debug(f"Redo -> {len(self._undo)} undo / {len(self._redo)} redo")
        return stroke

    def clear(self):
        """Empty both sequences and drop any open stroke."""
        self._undo.clear()
        self._redo.clear()
        self._open = None

    def _check_handle(self, handle: Stroke):
        if self._open is None:
            raise NoOpenStrokeError("No stroke is open")
        if handle is not self._open:
            raise NoOpenStrokeError("Handle does not refer to the open stroke")


__all__ = ['Stroke', 'StrokeLedger']
