"""Tests for stroke recording and undo/redo history."""

import pytest

from digital_doilies.core import (
    BrushSettings, EmptyHistoryError, NoOpenStrokeError, Point, Segment,
    StrokeCommittedError, StrokeInProgressError, StrokeLedger
)


def draw_stroke(ledger: StrokeLedger, settings: BrushSettings = None, offset: float = 0.0):
    """Record and commit a dot followed by two segments."""
    handle = ledger.begin_stroke(settings or BrushSettings())
    ledger.append_primitive(handle, Point(100.0 + offset, 100.0, 2.1))
    ledger.append_primitive(handle, Segment(100.0 + offset, 100.0, 110.0 + offset, 120.0))
    ledger.append_primitive(handle, Segment(110.0 + offset, 120.0, 130.0 + offset, 125.0))
    ledger.commit_stroke(handle)
    return handle


class TestStroke:

    def test_primitives_start_with_point(self):
        ledger = StrokeLedger()
        stroke = draw_stroke(ledger)
        primitives = list(stroke.primitives())
        assert isinstance(primitives[0], Point)
        assert all(isinstance(p, Segment) for p in primitives[1:])
        assert len(stroke) == 3

    def test_stroke_without_start_point(self):
        ledger = StrokeLedger()
        handle = ledger.begin_stroke(BrushSettings())
        ledger.append_primitive(handle, Segment(0.0, 0.0, 1.0, 1.0))
        ledger.commit_stroke(handle)
        assert handle.start_point is None
        assert list(handle.primitives()) == [Segment(0.0, 0.0, 1.0, 1.0)]

    def test_committed_stroke_is_immutable(self):
        stroke = draw_stroke(StrokeLedger())
        assert stroke.committed
        with pytest.raises(StrokeCommittedError):
            stroke.add_segment(Segment(0.0, 0.0, 1.0, 1.0))
        with pytest.raises(StrokeCommittedError):
            stroke.set_start_point(Point(0.0, 0.0, 1.0))

    def test_settings_snapshot_is_kept(self):
        settings = BrushSettings(color="#00ff00", width=7, reflect=False, erase=True)
        stroke = draw_stroke(StrokeLedger(), settings)
        assert stroke.settings == settings


class TestLedgerRecording:

    def test_new_ledger_is_empty(self):
        ledger = StrokeLedger()
        assert not ledger.can_undo()
        assert not ledger.can_redo()
        assert not ledger.is_drawing

    def test_begin_opens_stroke(self):
        ledger = StrokeLedger()
        handle = ledger.begin_stroke(BrushSettings())
        assert ledger.is_drawing
        assert ledger.open_stroke is handle
        assert not ledger.can_undo()

    def test_commit_moves_stroke_to_undo(self):
        ledger = StrokeLedger()
        stroke = draw_stroke(ledger)
        assert not ledger.is_drawing
        assert ledger.undo_strokes == (stroke,)
        assert ledger.can_undo()

    def test_begin_while_drawing_is_rejected(self):
        ledger = StrokeLedger()
        ledger.begin_stroke(BrushSettings())
        with pytest.raises(StrokeInProgressError):
            ledger.begin_stroke(BrushSettings())

    def test_append_without_open_stroke_is_rejected(self):
        ledger = StrokeLedger()
        stroke = draw_stroke(ledger)
        with pytest.raises(NoOpenStrokeError):
            ledger.append_primitive(stroke, Segment(0.0, 0.0, 1.0, 1.0))
        assert len(stroke) == 3

    def test_append_with_stale_handle_is_rejected(self):
        ledger = StrokeLedger()
        old = draw_stroke(ledger)
        ledger.begin_stroke(BrushSettings())
        with pytest.raises(NoOpenStrokeError):
            ledger.append_primitive(old, Segment(0.0, 0.0, 1.0, 1.0))

    def test_commit_without_open_stroke_is_rejected(self):
        ledger = StrokeLedger()
        stroke = draw_stroke(ledger)
        with pytest.raises(NoOpenStrokeError):
            ledger.commit_stroke(stroke)
        assert ledger.undo_strokes == (stroke,)


class TestLedgerHistory:

    def test_undo_redo_scenario(self):
        ledger = StrokeLedger()
        a = draw_stroke(ledger, offset=0)
        b = draw_stroke(ledger, offset=10)
        c = draw_stroke(ledger, offset=20)

        assert ledger.undo() is c
        assert ledger.undo_strokes == (a, b)
        assert ledger.redo_strokes == (c,)

        assert ledger.undo() is b
        assert ledger.undo_strokes == (a,)
        assert ledger.redo_strokes == (c, b)

        assert ledger.redo() is b
        assert ledger.undo_strokes == (a, b)
        assert ledger.redo_strokes == (c,)

    def test_undo_then_redo_restores_sequence(self):
        ledger = StrokeLedger()
        strokes = [draw_stroke(ledger, offset=i) for i in range(5)]
        before = ledger.undo_strokes

        ledger.undo()
        ledger.redo()

        assert ledger.undo_strokes == before == tuple(strokes)
        assert not ledger.can_redo()

    def test_sequences_stay_disjoint(self):
        ledger = StrokeLedger()
        for i in range(4):
            draw_stroke(ledger, offset=i)
        ledger.undo()
        ledger.undo()
        ledger.redo()
        assert not set(ledger.undo_strokes) & set(ledger.redo_strokes)
        assert len(ledger.undo_strokes) + len(ledger.redo_strokes) == 4

    def test_new_stroke_clears_redo(self):
        ledger = StrokeLedger()
        draw_stroke(ledger)
        draw_stroke(ledger)
        ledger.undo()
        assert ledger.can_redo()

        ledger.begin_stroke(BrushSettings())

        assert not ledger.can_redo()
        assert ledger.redo_strokes == ()

    def test_undo_on_empty_history(self):
        with pytest.raises(EmptyHistoryError):
            StrokeLedger().undo()

    def test_redo_on_empty_history(self):
        ledger = StrokeLedger()
        draw_stroke(ledger)
        with pytest.raises(EmptyHistoryError):
            ledger.redo()

    def test_clear_empties_everything(self):
        ledger = StrokeLedger()
        draw_stroke(ledger)
        draw_stroke(ledger)
        ledger.undo()
        ledger.begin_stroke(BrushSettings())

        ledger.clear()

        assert not ledger.can_undo()
        assert not ledger.can_redo()
        assert not ledger.is_drawing
