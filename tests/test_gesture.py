import pytest

from deckcore.ui_logic.gesture import GestureIntent, GestureRecognizer, apply_intent
from deckcore.ui_logic.record_sequence import RecordSequence


@pytest.fixture
def recognizer():
    return GestureRecognizer()


def swipe(recognizer, start, end):
    recognizer.on_start(start)
    recognizer.on_move(end)
    return recognizer.on_end()


def test_drag_right_is_previous(recognizer):
    assert swipe(recognizer, 100, 250) is GestureIntent.PREVIOUS
    assert recognizer.offset_x == 0
    assert recognizer.start_x is None


def test_drag_left_is_next(recognizer):
    assert swipe(recognizer, 250, 100) is GestureIntent.NEXT


def test_small_drag_is_none(recognizer):
    assert swipe(recognizer, 100, 150) is GestureIntent.NONE
    assert recognizer.offset_x == 0
    assert not recognizer.is_active


def test_exact_threshold_does_not_fire(recognizer):
    assert swipe(recognizer, 0, 100) is GestureIntent.NONE
    assert swipe(recognizer, 100, 0) is GestureIntent.NONE


def test_move_without_start_is_ignored(recognizer):
    recognizer.on_move(500)
    assert recognizer.offset_x == 0
    assert recognizer.on_end() is GestureIntent.NONE


def test_live_offset_tracks_moves(recognizer):
    recognizer.on_start(200)
    assert recognizer.is_active
    recognizer.on_move(230)
    assert recognizer.offset_x == 30
    recognizer.on_move(120)
    assert recognizer.offset_x == -80


def test_start_resets_offset(recognizer):
    recognizer.on_start(0)
    recognizer.on_move(60)
    recognizer.on_start(10)
    assert recognizer.offset_x == 0


def test_custom_threshold():
    recognizer = GestureRecognizer(threshold=20)
    assert swipe(recognizer, 0, 30) is GestureIntent.PREVIOUS


def test_cancel_clears_session(recognizer):
    recognizer.on_start(0)
    recognizer.on_move(300)
    recognizer.cancel()
    assert recognizer.on_end() is GestureIntent.NONE


def test_apply_intent_moves_sequence():
    sequence = RecordSequence()
    sequence.load(["title"], [["C"], ["B"], ["A"]])

    assert apply_intent(GestureIntent.NEXT, sequence)
    assert sequence.cursor == 2
    assert apply_intent(GestureIntent.PREVIOUS, sequence)
    assert sequence.cursor == 1
    assert not apply_intent(GestureIntent.PREVIOUS, sequence)
    assert not apply_intent(GestureIntent.NONE, sequence)
    assert sequence.cursor == 1
