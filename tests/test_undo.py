import pytest

from texteditcore.layout import MonospaceBuffer
from texteditcore.undo import UndoRecord, UndoState


def _delete(state, buf, where, length):
    state.record_delete(buf, where, length)
    buf.delete(where, length)


def _insert(state, buf, where, text):
    buf.insert(where, text)
    state.record_insert(where, len(text))


def test_defaults_match_documented_sizes():
    state = UndoState()
    assert state.state_count == 99
    assert state.char_count == 999
    assert state.redo_point == 99
    assert state.redo_char_point == 999
    assert state.undo_point == 0


@pytest.mark.parametrize("states, chars", [(0, 10), (10, 0), (-1, 5)])
def test_invalid_sizes_raise(states, chars):
    with pytest.raises(ValueError):
        UndoState(states, chars)


def test_undo_and_redo_of_delete():
    buf = MonospaceBuffer("hello world")
    state = UndoState()
    _delete(state, buf, 6, 5)
    assert buf.text == "hello "
    assert state.undo(buf) == 11
    assert buf.text == "hello world"
    assert state.redo(buf) == 6
    assert buf.text == "hello "


def test_undo_and_redo_of_insert():
    buf = MonospaceBuffer("abc")
    state = UndoState()
    _insert(state, buf, 1, "XY")
    assert state.undo(buf) == 1
    assert buf.text == "abc"
    assert state.redo(buf) == 3
    assert buf.text == "aXYbc"


def test_undo_and_redo_of_replace():
    buf = MonospaceBuffer("abc")
    state = UndoState()
    state.record_replace(buf, 1, 1, 1)
    buf.delete(1, 1)
    buf.insert(1, "Z")
    assert state.undo(buf) == 2
    assert buf.text == "abc"
    assert state.redo(buf) == 2
    assert buf.text == "aZc"


def test_empty_history_returns_none():
    buf = MonospaceBuffer("abc")
    state = UndoState()
    assert state.undo(buf) is None
    assert state.redo(buf) is None
    assert buf.text == "abc"


def test_new_record_flushes_redo():
    buf = MonospaceBuffer("abc")
    state = UndoState()
    _insert(state, buf, 3, "d")
    state.undo(buf)
    assert state.can_redo
    _insert(state, buf, 0, "z")
    assert not state.can_redo
    assert state.redo(buf) is None
    assert buf.text == "zabc"


def test_record_count_limit_discards_oldest():
    buf = MonospaceBuffer("")
    state = UndoState(state_count=3, char_count=50)
    for ch in "abcde":
        _insert(state, buf, len(buf), ch)
    for _ in range(3):
        assert state.undo(buf) is not None
    assert buf.text == "ab"
    assert state.undo(buf) is None
    assert buf.text == "ab"


def test_oversized_delete_clears_history():
    buf = MonospaceBuffer("abcdefgh")
    state = UndoState(state_count=10, char_count=4)
    _insert(state, buf, 8, "")
    _delete(state, buf, 0, 6)
    assert state.undo_point == 0
    assert state.undo(buf) is None
    assert buf.text == "gh"


def test_char_limit_discards_oldest_record():
    buf = MonospaceBuffer("abcdef")
    state = UndoState(state_count=10, char_count=4)
    _delete(state, buf, 0, 3)
    _delete(state, buf, 0, 3)
    assert buf.text == ""
    assert state.undo(buf) == 3
    assert buf.text == "def"
    assert state.undo(buf) is None


def test_create_undo_storage_positions():
    state = UndoState()
    assert state.create_undo(0, 2, 0) == 0
    assert state.create_undo(0, 3, 0) == 2
    assert state.create_undo(0, 0, 4) is None
    assert state.undo_point == 3
    assert state.undo_char_point == 5


def test_discard_undo_shifts_records_and_chars():
    buf = MonospaceBuffer("abcde")
    state = UndoState()
    state.record_delete(buf, 0, 2)
    state.record_delete(buf, 2, 3)
    state.discard_undo()
    assert state.undo_point == 1
    assert state.records[0] == UndoRecord(where=2, insert_length=3, delete_length=0, char_storage=0)
    assert state.chars[0:3] == ["c", "d", "e"]


def test_discard_undo_on_empty_is_noop():
    state = UndoState()
    state.discard_undo()
    assert state.undo_point == 0
    assert state.undo_char_point == 0


def test_discard_redo_drops_redo_step():
    buf = MonospaceBuffer("abcd")
    state = UndoState(state_count=4, char_count=20)
    _delete(state, buf, 0, 2)
    state.undo(buf)
    assert state.redo_point == 3
    state.discard_redo()
    assert state.redo_point == 4
    assert state.redo(buf) is None
    assert buf.text == "abcd"


def test_reset_forgets_history():
    buf = MonospaceBuffer("abc")
    state = UndoState()
    _delete(state, buf, 0, 1)
    state.reset()
    assert not state.can_undo
    assert state.undo(buf) is None
    assert buf.text == "bc"


def test_full_round_trip_of_many_edits():
    buf = MonospaceBuffer("the quick brown fox")
    state = UndoState()
    history = [buf.text]
    _delete(state, buf, 4, 6)
    history.append(buf.text)
    _insert(state, buf, 4, "slow ")
    history.append(buf.text)
    state.record_replace(buf, 0, 3, 1)
    buf.delete(0, 3)
    buf.insert(0, "A")
    history.append(buf.text)
    _delete(state, buf, len(buf) - 3, 3)
    history.append(buf.text)

    for expected in reversed(history[:-1]):
        assert state.undo(buf) is not None
        assert buf.text == expected
    assert state.undo(buf) is None

    for expected in history[1:]:
        assert state.redo(buf) is not None
        assert buf.text == expected
    assert state.redo(buf) is None


def test_undo_redo_restores_char_pointers():
    buf = MonospaceBuffer("abcdef")
    state = UndoState()
    _delete(state, buf, 1, 3)
    before = (state.undo_point, state.undo_char_point, state.redo_point, state.redo_char_point)
    state.undo(buf)
    state.redo(buf)
    after = (state.undo_point, state.undo_char_point, state.redo_point, state.redo_char_point)
    assert after == before