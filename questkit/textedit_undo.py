"""Bounded undo/redo history for the text-editing state machine.

Undo records grow upward from the start of a fixed-size record table and
redo records grow downward from its end. Characters that an undo or redo
must restore are kept the same way in a fixed-size character store. When
either area runs out, the oldest entries are discarded.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .textedit_layout import TextBuffer

DEFAULT_STATE_COUNT = 99
"""Default number of undo/redo records kept."""

DEFAULT_CHAR_COUNT = 999
"""Default number of characters the history can store."""


@dataclass
class UndoRecord:
    """One step of history: delete ``delete_length`` chars at ``where``,
    then insert ``insert_length`` chars read from ``char_storage``."""

    where: int = 0
    insert_length: int = 0
    delete_length: int = 0
    char_storage: int = -1


class UndoState:
    """Fixed-capacity undo and redo history for one text field."""

    def __init__(
        self,
        state_count: int = DEFAULT_STATE_COUNT,
        char_count: int = DEFAULT_CHAR_COUNT,
    ) -> None:
        if state_count < 1:
            raise ValueError("state_count must be at least 1")
        if char_count < 1:
            raise ValueError("char_count must be at least 1")
        self.state_count = state_count
        self.char_count = char_count
        self.records = [UndoRecord() for _ in range(state_count)]
        self.chars: list[str] = [""] * char_count
        self.undo_point = 0
        self.undo_char_point = 0
        self.redo_point = state_count
        self.redo_char_point = char_count

    def flush_redo(self) -> None:
        """Forget every redo record."""
        self.redo_point = self.state_count
        self.redo_char_point = self.char_count

    def discard_undo(self) -> None:
        """Drop the oldest undo record, compacting the stored characters."""
        if self.undo_point <= 0:
            return
        oldest = self.records[0]
        if oldest.char_storage >= 0:
            n = oldest.insert_length
            self.undo_char_point -= n
            kept = self.undo_char_point
            self.chars[0:kept] = self.chars[n:n + kept]
            for record in self.records[: self.undo_point]:
                if record.char_storage >= 0:
                    record.char_storage -= n
        self.undo_point -= 1
        count = self.undo_point
        self.records[0:count] = [replace(r) for r in self.records[1:count + 1]]

    def discard_redo(self) -> None:
        """Drop the oldest redo record, compacting the stored characters."""
        last = self.state_count - 1
        if self.redo_point > last:
            return
        oldest = self.records[last]
        if oldest.char_storage >= 0:
            n = oldest.insert_length
            self.redo_char_point += n
            start = self.redo_char_point
            end = self.char_count
            self.chars[start:end] = self.chars[start - n:end - n]
            for record in self.records[self.redo_point:last]:
                if record.char_storage >= 0:
                    record.char_storage += n
        point = self.redo_point
        self.records[point + 1:] = [replace(r) for r in self.records[point:last]]
        self.redo_point += 1

    def _create_undo_record(self, numchars: int) -> Optional[UndoRecord]:
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

    def create_undo(self, pos: int, insert_len: int, delete_len: int) -> Optional[int]:
        """Add an undo record; return where its ``insert_len`` characters go.

        Returns None when the record stores no characters or could not be kept.
        """
        record = self._create_undo_record(insert_len)
        if record is None:
            return None
        record.where = pos
        record.insert_length = insert_len
        record.delete_length = delete_len
        if insert_len == 0:
            record.char_storage = -1
            return None
        record.char_storage = self.undo_char_point
        self.undo_char_point += insert_len
        return record.char_storage

    def _save_chars(self, buffer: TextBuffer, storage: Optional[int], where: int, length: int) -> None:
        if storage is None:
            return
        self.chars[storage:storage + length] = [
            buffer.get_char(where + offset) for offset in range(length)
        ]

    def make_insert(self, where: int, length: int) -> None:
        """Record that ``length`` characters were inserted at ``where``."""
        self.create_undo(where, 0, length)

    def make_delete(self, buffer: TextBuffer, where: int, length: int) -> None:
        """Record the ``length`` characters at ``where`` before they are deleted."""
        storage = self.create_undo(where, length, 0)
        self._save_chars(buffer, storage, where, length)

    def make_replace(
        self, buffer: TextBuffer, where: int, old_length: int, new_length: int
    ) -> None:
        """Record that ``old_length`` characters at ``where`` become ``new_length``."""
        storage = self.create_undo(where, old_length, new_length)
        self._save_chars(buffer, storage, where, old_length)

    def undo(self, buffer: TextBuffer) -> Optional[int]:
        """Undo the latest step; return the new cursor, or None if nothing was done."""
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
                self.redo_char_point = r.char_storage
                self._save_chars(buffer, r.char_storage, u.where, u.delete_length)
            buffer.delete_chars(u.where, u.delete_length)

        if u.insert_length:
            start = u.char_storage
            buffer.insert_chars(u.where, self.chars[start:start + u.insert_length])
            self.undo_char_point -= u.insert_length

        self.undo_point -= 1
        self.redo_point -= 1
        return u.where + u.insert_length

    def redo(self, buffer: TextBuffer) -> Optional[int]:
        """Redo the latest undone step; return the new cursor, or None."""
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
                self._save_chars(buffer, u.char_storage, u.where, u.insert_length)
            buffer.delete_chars(r.where, r.delete_length)

        if r.insert_length:
            start = r.char_storage
            buffer.insert_chars(r.where, self.chars[start:start + r.insert_length])
            self.redo_char_point += r.insert_length

        self.undo_point += 1
        self.redo_point += 1
        return r.where + r.insert_length