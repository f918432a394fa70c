"""Cursor, selection and mouse handling for a text field."""

from __future__ import annotations

from dataclasses import dataclass, field

from .layout import NEWLINE, Row, TextBuffer
from .undo import DEFAULT_CHAR_COUNT, DEFAULT_STATE_COUNT, UndoState


@dataclass
class FindState:
    """Where a character sits in the layout, plus the start of the row above it."""

    x: float = 0.0
    y: float = 0.0
    height: float = 0.0
    first_char: int = 0
    length: int = 0
    prev_first: int = 0


def locate_coord(buffer: TextBuffer, x: float, y: float) -> int:
    """Return the character position nearest to the display point (x, y)."""
    n = len(buffer)
    base_y = 0.0
    i = 0
    row = Row()

    while i < n:
        row = buffer.layout_row(i)
        if row.num_chars <= 0:
            return n
        if i == 0 and y < base_y + row.ymin:
            return 0
        if y < base_y + row.ymax:
            break
        i += row.num_chars
        base_y += row.baseline_y_delta

    if i >= n:
        return n

    if x < row.x0:
        return i

    if x < row.x1:
        prev_x = row.x0
        for k in range(row.num_chars):
            width = buffer.get_width(i, k)
            if x < prev_x + width:
                return i + k if x < prev_x + width / 2 else i + k + 1
            prev_x += width

    last = i + row.num_chars - 1
    if buffer.char_at(last) == NEWLINE:
        return last
    return i + row.num_chars


def find_charpos(buffer: TextBuffer, n: int, single_line: bool) -> FindState:
    """Locate character ``n`` in the layout, remembering the previous row's start."""
    z = len(buffer)
    if not 0 <= n <= z:
        raise IndexError(f"character position {n} out of range")

    if n == z:
        if single_line:
            row = buffer.layout_row(0)
            return FindState(
                x=row.x1,
                y=0.0,
                height=row.ymax - row.ymin,
                first_char=0,
                length=z,
                prev_first=0,
            )
        i = 0
        prev_start = 0
        while i < z:
            row = buffer.layout_row(i)
            prev_start = i
            i += row.num_chars
        return FindState(
            x=0.0, y=0.0, height=1.0, first_char=i, length=0, prev_first=prev_start
        )

    y = 0.0
    i = 0
    prev_start = 0
    while True:
        row = buffer.layout_row(i)
        if n < i + row.num_chars:
            break
        prev_start = i
        i += row.num_chars
        y += row.baseline_y_delta

    first = i
    x = row.x0 + sum(buffer.get_width(first, k) for k in range(n - first))
    return FindState(
        x=x,
        y=y,
        height=row.ymax - row.ymin,
        first_char=first,
        length=row.num_chars,
        prev_first=prev_start,
    )


@dataclass(init=False)
class TextEditState:
    """Cursor, selection, insert mode and undo history of one text field.

    The selection runs between ``select_start`` and ``select_end``; when they
    are equal there is no selection. Start may lie after end.
    """

    cursor: int = 0
    select_start: int = 0
    select_end: int = 0
    insert_mode: bool = False
    row_count_per_page: int = 0
    cursor_at_end_of_line: bool = False
    initialized: bool = False
    has_preferred_x: bool = False
    single_line: bool = False
    preferred_x: float = 0.0
    undo: UndoState = field(default_factory=UndoState)

    def __init__(
        self,
        single_line: bool = False,
        undo_states: int = DEFAULT_STATE_COUNT,
        undo_chars: int = DEFAULT_CHAR_COUNT,
    ) -> None:
        self.undo = UndoState(undo_states, undo_chars)
        self.reset(single_line)

    def reset(self, single_line: bool = False) -> None:
        """Return to the initial state, forgetting history and selection."""
        self.undo.reset()
        self.select_start = 0
        self.select_end = 0
        self.cursor = 0
        self.has_preferred_x = False
        self.preferred_x = 0.0
        self.cursor_at_end_of_line = False
        self.initialized = True
        self.single_line = bool(single_line)
        self.insert_mode = False
        self.row_count_per_page = 0

    def has_selection(self) -> bool:
        """True if some text is selected."""
        return self.select_start != self.select_end

    def clamp(self, buffer: TextBuffer) -> None:
        """Keep cursor and selection inside the buffer after outside edits."""
        n = len(buffer)
        if self.has_selection():
            self.select_start = min(self.select_start, n)
            self.select_end = min(self.select_end, n)
            if self.select_start == self.select_end:
                self.cursor = self.select_start
        self.cursor = min(self.cursor, n)

    def _single_line_y(self, buffer: TextBuffer, y: float) -> float:
        if self.single_line:
            return buffer.layout_row(0).ymin
        return y

    def click(self, buffer: TextBuffer, x: float, y: float) -> None:
        """Move the cursor to the clicked point and clear the selection."""
        y = self._single_line_y(buffer, y)
        self.cursor = locate_coord(buffer, x, y)
        self.select_start = self.cursor
        self.select_end = self.cursor
        self.has_preferred_x = False

    def drag(self, buffer: TextBuffer, x: float, y: float) -> None:
        """Move the cursor and the selection end to the dragged point."""
        y = self._single_line_y(buffer, y)
        if self.select_start == self.select_end:
            self.select_start = self.cursor
        position = locate_coord(buffer, x, y)
        self.cursor = position
        self.select_end = position

    def delete(self, buffer: TextBuffer, where: int, length: int) -> None:
        """Delete ``length`` characters at ``where``, recording the undo step."""
        self.undo.record_delete(buffer, where, length)
        buffer.delete(where, length)
        self.has_preferred_x = False

    def delete_selection(self, buffer: TextBuffer) -> None:
        """Delete the selected text, leaving the cursor where it began."""
        self.clamp(buffer)
        if not self.has_selection():
            return
        if self.select_start < self.select_end:
            self.delete(buffer, self.select_start, self.select_end - self.select_start)
            self.select_end = self.cursor = self.select_start
        else:
            self.delete(buffer, self.select_end, self.select_start - self.select_end)
            self.select_start = self.cursor = self.select_end
        self.has_preferred_x = False

    def sort_selection(self) -> None:
        """Order the selection so that start is not after end."""
        if self.select_end < self.select_start:
            self.select_start, self.select_end = self.select_end, self.select_start

    def move_to_first(self) -> None:
        """Collapse the selection to its first character."""
        if self.has_selection():
            self.sort_selection()
            self.cursor = self.select_start
            self.select_end = self.select_start
            self.has_preferred_x = False

    def move_to_last(self, buffer: TextBuffer) -> None:
        """Collapse the selection to its end."""
        if self.has_selection():
            self.sort_selection()
            self.clamp(buffer)
            self.cursor = self.select_end
            self.select_start = self.select_end
            self.has_preferred_x = False

    def prep_selection_at_cursor(self) -> None:
        """Anchor an empty selection at the cursor, or move the cursor to the selection end."""
        if not self.has_selection():
            self.select_start = self.select_end = self.cursor
        else:
            self.cursor = self.select_end

    def cut(self, buffer: TextBuffer) -> bool:
        """Delete the selection; return True if there was one."""
        if self.has_selection():
            self.delete_selection(buffer)
            self.has_preferred_x = False
            return True
        return False

    def paste(self, buffer: TextBuffer, text: str) -> bool:
        """Replace the selection with ``text``; return False if it did not fit.

        A failed paste leaves the selection deleted; an undo restores it.
        """
        self.clamp(buffer)
        self.delete_selection(buffer)
        if buffer.insert(self.cursor, text):
            self.undo.record_insert(self.cursor, len(text))
            self.cursor += len(text)
            self.has_preferred_x = False
            return True
        return False