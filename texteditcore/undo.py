"""Bounded undo/redo history that shares one character store between both directions."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .layout import TextBuffer

DEFAULT_STATE_COUNT = 99
DEFAULT_CHAR_COUNT = 999


@dataclass
class UndoRecord:
    """One step of history.

    Applying the record deletes ``delete_length`` characters at ``where`` and
    then inserts ``insert_length`` characters taken from the character store
    at ``char_storage`` (-1 when nothing is stored).
    """

    where: int = 0
    insert_length: int = 0
    delete_length: int = 0
    char_storage: int = -1


class UndoState:
    """Undo and redo records kept in one fixed-size table.

    Undo records grow upwards from the start of the record table and redo
    records grow downwards from its end; the character store is shared in
    the same way. When space runs out the oldest entries are discarded.
    """

    def __init__(
        self,
        state_count: int = DEFAULT_STATE_COUNT,
        char_count: int = DEFAULT_CHAR_COUNT,
    ) -> None:
        if state_count <= 0:
            raise ValueError("state_count must be positive")
        if char_count <= 0:
            raise ValueError("char_count must be positive")
        self.state_count = state_count
        self.char_count = char_count
        self.records = [UndoRecord() for _ in range(state_count)]
        self.chars = [""] * char_count
        self.reset()

    def reset(self) -> None:
        """Forget all undo and redo history."""
        self.undo_point = 0
        self.undo_char_point = 0
        self.redo_point = self.state_count
        self.redo_char_point = self.char_count

    @property
    def can_undo(self) -> bool:
        """True if there is a step to undo."""
        return self.undo_point > 0

    @property
    def can_redo(self) -> bool:
        """True if there is a step to redo."""
        return self.redo_point < self.state_count

    def flush_redo(self) -> None:
        """Drop every redo record."""
        self.redo_point = self.state_count
        self.redo_char_point = self.char_count

    def discard_undo(self) -> None:
        """Drop the oldest undo record, freeing its characters."""
        if self.undo_point <= 0:
            return
        oldest = self.records[0]
        if oldest.char_storage >= 0:
            n = oldest.insert_length
            self.undo_char_point -= n
            kept = self.undo_char_point
            self.chars[0:kept] = self.chars[n : n + kept]
            for record in self.records[: self.undo_point]:
                if record.char_storage >= 0:
                    record.char_storage -= n
        self.undo_point -= 1
        count = self.undo_point
        self.records[0:count] = [replace(r) for r in self.records[1 : count + 1]]

    def discard_redo(self) -> None:
        """Drop the oldest redo record, freeing its characters."""
        k = self.state_count - 1
        if self.redo_point > k:
            return
        oldest = self.records[k]
        if oldest.char_storage >= 0:
            n = oldest.insert_length
            self.redo_char_point += n
            start = self.redo_char_point
            count = self.char_count - start
            self.chars[start : start + count] = self.chars[start - n : start - n + count]
            for record in self.records[self.redo_point : k]:
                if record.char_storage >= 0:
                    record.char_storage += n
        first = self.redo_point
        count = self.state_count - first - 1
        self.records[first + 1 : first + 1 + count] = [
            replace(r) for r in self.records[first : first + count]
        ]
        self.redo_point += 1

    def _create_record(self, numchars: int) -> UndoRecord | None:
        self.flush_redo()
        if self.undo_point == self.state_count:
            self.discard_undo()
        if numchars > self.char_count:
            self.undo_point = 0
            self.undo_char_point = 0
            return None
        while self.undo_char_point + numchars > self.char_count:
            self.discard_undo()
        record = self.records[self.undo_point]
        self.undo_point += 1
        return record

    def create_undo(self, where: int, insert_length: int, delete_length: int) -> int | None:
        """Add an undo record and return where its characters are to be stored.

        Returns None when the record stores no characters or could not be made.
        """
        record = self._create_record(insert_length)
        if record is None:
            return None
        record.where = where
        record.insert_length = insert_length
        record.delete_length = delete_length
        if insert_length == 0:
            record.char_storage = -1
            return None
        record.char_storage = self.undo_char_point
        self.undo_char_point += insert_length
        return record.char_storage

    def record_insert(self, where: int, length: int) -> None:
        """Remember that ``length`` characters were inserted at ``where``."""
        self.create_undo(where, 0, length)

    def _save(self, buffer: TextBuffer, storage: int | None, where: int, length: int) -> None:
        if storage is None:
            return
        self.chars[storage : storage + length] = [
            buffer.char_at(where + i) for i in range(length)
        ]

    def record_delete(self, buffer: TextBuffer, where: int, length: int) -> None:
        """Remember ``length`` characters at ``where`` that are about to be deleted."""
        storage = self.create_undo(where, length, 0)
        self._save(buffer, storage, where, length)

    def record_replace(
        self, buffer: TextBuffer, where: int, old_length: int, new_length: int
    ) -> None:
        """Remember characters at ``where`` that are about to be overwritten."""
        storage = self.create_undo(where, old_length, new_length)
        self._save(buffer, storage, where, old_length)

    def undo(self, buffer: TextBuffer) -> int | None:
        """Undo the latest step on ``buffer``; return the new cursor, or None."""
        if self.undo_point == 0:
            return None
        u = replace(self.records[self.undo_point - 1])
        r = self.records[self.redo_point - 1]
        r.char_storage = -1
        r.insert_length = u.delete_length
        r.delete_length = u.insert_length
        r.where = u.where

        if u.delete_length:
            if self.undo_char_point + u.delete_length >= self.char_count:
                r.insert_length = 0
            else:
                while self.undo_char_point + u.delete_length > self.redo_char_point:
                    if self.redo_point == self.state_count:
                        return None
                    self.discard_redo()
                r = self.records[self.redo_point - 1]
                r.char_storage = self.redo_char_point - u.delete_length
                self.redo_char_point -= u.delete_length
                self._save(buffer, r.char_storage, u.where, u.delete_length)
            buffer.delete(u.where, u.delete_length)

        if u.insert_length:
            stored = self.chars[u.char_storage : u.char_storage + u.insert_length]
            buffer.insert(u.where, "".join(stored))
            self.undo_char_point -= u.insert_length

        self.undo_point -= 1
        self.redo_point -= 1
        return u.where + u.insert_length

    def redo(self, buffer: TextBuffer) -> int | None:
        """Redo the latest undone step on ``buffer``; return the new cursor, or None."""
        if self.redo_point == self.state_count:
            return None
        r = replace(self.records[self.redo_point])
        u = self.records[self.undo_point]
        u.delete_length = r.insert_length
        u.insert_length = r.delete_length
        u.where = r.where
        u.char_storage = -1

        if r.delete_length:
            if self.undo_char_point + u.insert_length > self.redo_char_point:
                u.insert_length = 0
                u.delete_length = 0
            else:
                u.char_storage = self.undo_char_point
                self.undo_char_point += u.insert_length
                self._save(buffer, u.char_storage, u.where, u.insert_length)
            buffer.delete(r.where, r.delete_length)

        if r.insert_length:
            stored = self.chars[r.char_storage : r.char_storage + r.insert_length]
            buffer.insert(r.where, "".join(stored))
            self.redo_char_point += r.insert_length

        self.undo_point += 1
        self.redo_point += 1
        return r.where + r.insert_length