import pytest

from texteditcore.keys import is_word_boundary, move_word_left, move_word_right
from texteditcore.layout import MonospaceBuffer

TEXT = "hello big world"


@pytest.fixture
def buf():
    return MonospaceBuffer(TEXT)


def test_boundary_at_start(buf):
    assert is_word_boundary(buf, 0) is True


def test_boundary_at_word_starts(buf):
    assert is_word_boundary(buf, TEXT.index("big")) is True
    assert is_word_boundary(buf, TEXT.index("world")) is True
    assert is_word_boundary(buf, TEXT.index("ello")) is False
    assert is_word_boundary(buf, TEXT.index(" ")) is False


def test_boundary_skips_runs_of_spaces():
    spaced = MonospaceBuffer("a   b")
    assert is_word_boundary(spaced, 1) is False
    assert is_word_boundary(spaced, 2) is False
    assert is_word_boundary(spaced, 3) is False
    assert is_word_boundary(spaced, 4) is True


def test_word_moves_cross_runs_of_spaces():
    spaced = MonospaceBuffer("a   b")
    assert move_word_right(spaced, 0) == 4
    assert move_word_left(spaced, 5) == 4
    assert move_word_left(spaced, 4) == 0


def test_move_word_right_steps_through_words(buf):
    assert move_word_right(buf, 0) == TEXT.index("big")
    assert move_word_right(buf, TEXT.index("big")) == TEXT.index("world")
    assert move_word_right(buf, TEXT.index("world")) == len(TEXT)


def test_move_word_right_clamps_at_end(buf):
    assert move_word_right(buf, len(TEXT)) == len(TEXT)


def test_move_word_left_steps_through_words(buf):
    assert move_word_left(buf, len(TEXT)) == TEXT.index("world")
    assert move_word_left(buf, TEXT.index("world")) == TEXT.index("big")
    assert move_word_left(buf, TEXT.index("big")) == 0


def test_move_word_left_clamps_at_start(buf):
    assert move_word_left(buf, 0) == 0


def test_word_moves_always_advance_inside_word(buf):
    mid = TEXT.index("ig")
    assert move_word_left(buf, mid) < mid
    assert move_word_right(buf, mid) > mid
    assert move_word_left(buf, mid) == TEXT.index("big")
    assert move_word_right(buf, mid) == TEXT.index("world")