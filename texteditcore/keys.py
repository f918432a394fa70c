"""Key codes and word-movement helpers."""

from __future__ import annotations

from enum import IntEnum

from .layout import TextBuffer, is_space


class Key(IntEnum):
    """Editing keys.

    Values below ``LEFT`` are character code points to insert. ``SHIFT`` is a
    single bit that may be or'd into any movement key to extend the selection.
    """

    LEFT = 0x200000
    RIGHT = 0x200001
    UP = 0x200002
    DOWN = 0x200003
    LINESTART = 0x200004
    LINEEND = 0x200005
    TEXTSTART = 0x200006
    TEXTEND = 0x200007
    DELETE = 0x200008
    BACKSPACE = 0x200009
    UNDO = 0x20000A
    REDO = 0x20000B
    WORDLEFT = 0x20000C
    WORDRIGHT = 0x20000D
    PGUP = 0x20000E
    PGDOWN = 0x20000F
    INSERT = 0x200010
    SHIFT = 0x400000


def is_word_boundary(buffer: TextBuffer, index: int) -> bool:
    """True if a word starts at ``index``: whitespace before, non-whitespace at it."""
    if index <= 0:
        return True
    return is_space(buffer.char_at(index - 1)) and not is_space(buffer.char_at(index))


def move_word_left(buffer: TextBuffer, cursor: int) -> int:
    """Position of the start of the word before ``cursor``; moves at least one character."""
    c = cursor - 1
    while c >= 0 and not is_word_boundary(buffer, c):
        c -= 1
    return max(c, 0)


def move_word_right(buffer: TextBuffer, cursor: int) -> int:
    """Position of the start of the next word after ``cursor``; moves at least one character."""
    length = len(buffer)
    c = cursor + 1
    while c < length and not is_word_boundary(buffer, c):
        c += 1
    return min(c, length)