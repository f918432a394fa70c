"""Keyboard input handling: maps key presses onto edits, cursor moves and selection."""

from __future__ import annotations

from .keys import Key, move_word_left, move_word_right
from .layout import NEWLINE, NEWLINE_WIDTH, TextBuffer
from .state import TextEditState, find_charpos

_SHIFT = int(Key.SHIFT)


def _key_to_text(key: int) -> int:
    """Code point to insert for ``key``, or 0 when the key is not a character."""
    return key if 0 <= key < Key.LEFT else 0


def _insert_char(state: TextEditState, buffer: TextBuffer, code: int) -> None:
    ch = chr(code)
    if ch == NEWLINE and state.single_line:
        return
    if state.insert_mode and not state.has_selection() and state.cursor < len(buffer):
        state.undo.record_replace(buffer, state.cursor, 1, 1)
        buffer.delete(state.cursor, 1)
        if buffer.insert(state.cursor, ch):
            state.cursor += 1
            state.has_preferred_x = False
    else:
        state.delete_selection(buffer)
        if buffer.insert(state.cursor, ch):
            state.undo.record_insert(state.cursor, 1)
            state.cursor += 1
            state.has_preferred_x = False


def _move_down(state: TextEditState, buffer: TextBuffer, select: bool, is_page: bool) -> None:
    row_count = state.row_count_per_page if is_page else 1
    if select:
        state.prep_selection_at_cursor()
    elif state.has_selection():
        state.move_to_last(buffer)

    state.clamp(buffer)
    find = find_charpos(buffer, state.cursor, state.single_line)

    for _ in range(row_count):
        goal_x = state.preferred_x if state.has_preferred_x else find.x
        start = find.first_char + find.length

        if find.length == 0:
            break
        # Going down from the last line must not jump to that line's end.
        if buffer.char_at(find.first_char + find.length - 1) != NEWLINE:
            break

        state.cursor = start
        row = buffer.layout_row(state.cursor)
        x = row.x0
        for i in range(row.num_chars):
            dx = buffer.get_width(start, i)
            if dx == NEWLINE_WIDTH:
                break
            x += dx
            if x > goal_x:
                break
            state.cursor += 1
        state.clamp(buffer)

        state.has_preferred_x = True
        state.preferred_x = goal_x
        if select:
            state.select_end = state.cursor

        find.first_char = find.first_char + find.length
        find.length = row.num_chars


def _move_up(state: TextEditState, buffer: TextBuffer, select: bool, is_page: bool) -> None:
    row_count = state.row_count_per_page if is_page else 1
    if select:
        state.prep_selection_at_cursor()
    elif state.has_selection():
        state.move_to_first()

    state.clamp(buffer)
    find = find_charpos(buffer, state.cursor, state.single_line)

    for _ in range(row_count):
        goal_x = state.preferred_x if state.has_preferred_x else find.x

        if find.prev_first == find.first_char:
            break

        state.cursor = find.prev_first
        row = buffer.layout_row(state.cursor)
        x = row.x0
        for i in range(row.num_chars):
            dx = buffer.get_width(find.prev_first, i)
            if dx == NEWLINE_WIDTH:
                break
            x += dx
            if x > goal_x:
                break
            state.cursor += 1
        state.clamp(buffer)

        state.has_preferred_x = True
        state.preferred_x = goal_x
        if select:
            state.select_end = state.cursor

        prev_scan = find.prev_first - 1 if find.prev_first > 0 else 0
        while prev_scan > 0 and buffer.char_at(prev_scan - 1) != NEWLINE:
            prev_scan -= 1
        find.first_char = find.prev_first
        find.prev_first = prev_scan


def _line_start(state: TextEditState, buffer: TextBuffer) -> None:
    if state.single_line:
        state.cursor = 0
        return
    while state.cursor > 0 and buffer.char_at(state.cursor - 1) != NEWLINE:
        state.cursor -= 1


def _line_end(state: TextEditState, buffer: TextBuffer) -> None:
    n = len(buffer)
    if state.single_line:
        state.cursor = n
        return
    while state.cursor < n and buffer.char_at(state.cursor) != NEWLINE:
        state.cursor += 1


def handle_key(state: TextEditState, buffer: TextBuffer, key: int) -> None:
    """Apply one key press to ``buffer`` and ``state``.

    Keys below ``Key.LEFT`` are code points to insert; movement keys may carry
    ``Key.SHIFT`` to extend the selection.
    """
    key = int(key)
    base = key & ~_SHIFT
    shifted = bool(key & _SHIFT)

    # In a single-line field up and down behave like left and right.
    if state.single_line and base == Key.DOWN:
        base = int(Key.RIGHT)
    elif state.single_line and base == Key.UP:
        base = int(Key.LEFT)

    if base == Key.INSERT and not shifted:
        state.insert_mode = not state.insert_mode
    elif base == Key.UNDO and not shifted:
        cursor = state.undo.undo(buffer)
        if cursor is not None:
            state.cursor = cursor
        state.has_preferred_x = False
    elif base == Key.REDO and not shifted:
        cursor = state.undo.redo(buffer)
        if cursor is not None:
            state.cursor = cursor
        state.has_preferred_x = False
    elif base == Key.LEFT and not shifted:
        if state.has_selection():
            state.move_to_first()
        elif state.cursor > 0:
            state.cursor -= 1
        state.has_preferred_x = False
    elif base == Key.RIGHT and not shifted:
        if state.has_selection():
            state.move_to_last(buffer)
        else:
            state.cursor += 1
        state.clamp(buffer)
        state.has_preferred_x = False
    elif base == Key.LEFT:
        state.clamp(buffer)
        state.prep_selection_at_cursor()
        if state.select_end > 0:
            state.select_end -= 1
        state.cursor = state.select_end
        state.has_preferred_x = False
    elif base == Key.RIGHT:
        state.prep_selection_at_cursor()
        state.select_end += 1
        state.clamp(buffer)
        state.cursor = state.select_end
        state.has_preferred_x = False
    elif base == Key.WORDLEFT and not shifted:
        if state.has_selection():
            state.move_to_first()
        else:
            state.cursor = move_word_left(buffer, state.cursor)
            state.clamp(buffer)
    elif base == Key.WORDLEFT:
        if not state.has_selection():
            state.prep_selection_at_cursor()
        state.cursor = move_word_left(buffer, state.cursor)
        state.select_end = state.cursor
        state.clamp(buffer)
    elif base == Key.WORDRIGHT and not shifted:
        if state.has_selection():
            state.move_to_last(buffer)
        else:
            state.cursor = move_word_right(buffer, state.cursor)
            state.clamp(buffer)
    elif base == Key.WORDRIGHT:
        if not state.has_selection():
            state.prep_selection_at_cursor()
        state.cursor = move_word_right(buffer, state.cursor)
        state.select_end = state.cursor
        state.clamp(buffer)
    elif base in (Key.DOWN, Key.PGDOWN):
        _move_down(state, buffer, shifted, base == Key.PGDOWN)
    elif base in (Key.UP, Key.PGUP):
        _move_up(state, buffer, shifted, base == Key.PGUP)
    elif base == Key.DELETE:
        if state.has_selection():
            state.delete_selection(buffer)
        elif state.cursor < len(buffer):
            state.delete(buffer, state.cursor, 1)
        state.has_preferred_x = False
    elif base == Key.BACKSPACE:
        if state.has_selection():
            state.delete_selection(buffer)
        else:
            state.clamp(buffer)
            if state.cursor > 0:
                state.delete(buffer, state.cursor - 1, 1)
                state.cursor -= 1
        state.has_preferred_x = False
    elif base == Key.TEXTSTART and not shifted:
        state.cursor = state.select_start = state.select_end = 0
        state.has_preferred_x = False
    elif base == Key.TEXTEND and not shifted:
        state.cursor = len(buffer)
        state.select_start = state.select_end = 0
        state.has_preferred_x = False
    elif base == Key.TEXTSTART:
        state.prep_selection_at_cursor()
        state.cursor = state.select_end = 0
        state.has_preferred_x = False
    elif base == Key.TEXTEND:
        state.prep_selection_at_cursor()
        state.cursor = state.select_end = len(buffer)
        state.has_preferred_x = False
    elif base == Key.LINESTART and not shifted:
        state.clamp(buffer)
        state.move_to_first()
        _line_start(state, buffer)
        state.has_preferred_x = False
    elif base == Key.LINEEND and not shifted:
        state.clamp(buffer)
        state.move_to_first()
        _line_end(state, buffer)
        state.has_preferred_x = False
    elif base == Key.LINESTART:
        state.clamp(buffer)
        state.prep_selection_at_cursor()
        _line_start(state, buffer)
        state.select_end = state.cursor
        state.has_preferred_x = False
    elif base == Key.LINEEND:
        state.clamp(buffer)
        state.prep_selection_at_cursor()
        _line_end(state, buffer)
        state.select_end = state.cursor
        state.has_preferred_x = False
    else:
        code = _key_to_text(key)
        if code > 0:
            _insert_char(state, buffer, code)