"""Text-field editing state: cursor, selection, keyboard and mouse handling.

A :class:`TextEditState` maps user input onto insertions and deletions in a
:class:`~questkit.textedit_layout.TextBuffer`, keeping the cursor, selection
and undo history up to date. Behaviour follows common desktop text controls.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from .textedit_layout import (
    NEWLINE,
    NEWLINE_WIDTH,
    TextBuffer,
    find_charpos,
    locate_coord,
)
from .textedit_undo import UndoState

_KEY_BASE = 0x200000
_MAX_CODEPOINT = 0x110000


class Key(IntEnum):
    """Control keys understood by :meth:`TextEditState.key`.

    ``SHIFT`` is a flag to be or'd with another key to extend the selection.
    Plain integers below 0x110000 are treated as character codes.
    """

    LEFT = _KEY_BASE + 1
    RIGHT = _KEY_BASE + 2
    UP = _KEY_BASE + 3
    DOWN = _KEY_BASE + 4
    PGUP = _KEY_BASE + 5
    PGDOWN = _KEY_BASE + 6
    LINESTART = _KEY_BASE + 7
    LINEEND = _KEY_BASE + 8
    TEXTSTART = _KEY_BASE + 9
    TEXTEND = _KEY_BASE + 10
    DELETE = _KEY_BASE + 11
    BACKSPACE = _KEY_BASE + 12
    UNDO = _KEY_BASE + 13
    REDO = _KEY_BASE + 14
    INSERT = _KEY_BASE + 15
    WORDLEFT = _KEY_BASE + 16
    WORDRIGHT = _KEY_BASE + 17
    SHIFT = 0x400000


def _is_word_boundary(buffer: TextBuffer, idx: int) -> bool:
    if idx <= 0:
        return True
    return buffer.get_char(idx - 1).isspace() and not buffer.get_char(idx).isspace()


def _move_word_left(buffer: TextBuffer, c: int) -> int:
    c -= 1
    while c >= 0 and not _is_word_boundary(buffer, c):
        c -= 1
    return max(c, 0)


def _move_word_right(buffer: TextBuffer, c: int) -> int:
    length = len(buffer)
    c += 1
    while c < length and not _is_word_boundary(buffer, c):
        c += 1
    return min(c, length)


class TextEditState:
    """Cursor, selection, insert mode and undo history of one text field."""

    def __init__(self, single_line: bool = False) -> None:
        self.single_line = bool(single_line)
        self.cursor = 0
        self.select_start = 0
        self.select_end = 0
        self.insert_mode = False
        self.row_count_per_page = 0
        self.has_preferred_x = False
        self.preferred_x = 0.0
        self.undostate = UndoState()

    # ----------------------------------------------------------------- helpers

    def has_selection(self) -> bool:
        """True when some text is selected."""
        return self.select_start != self.select_end

    def clamp(self, buffer: TextBuffer) -> None:
        """Bring cursor and selection back inside the buffer after outside edits."""
        n = len(buffer)
        if self.has_selection():
            self.select_start = min(self.select_start, n)
            self.select_end = min(self.select_end, n)
            if self.select_start == self.select_end:
                self.cursor = self.select_start
        if self.cursor > n:
            self.cursor = n

    def _delete(self, buffer: TextBuffer, where: int, length: int) -> None:
        self.undostate.make_delete(buffer, where, length)
        buffer.delete_chars(where, length)
        self.has_preferred_x = False

    def _delete_selection(self, buffer: TextBuffer) -> None:
        self.clamp(buffer)
        if not self.has_selection():
            return
        if self.select_start < self.select_end:
            self._delete(buffer, self.select_start, self.select_end - self.select_start)
            self.select_end = self.cursor = self.select_start
        else:
            self._delete(buffer, self.select_end, self.select_start - self.select_end)
            self.select_start = self.cursor = self.select_end
        self.has_preferred_x = False

    def _sort_selection(self) -> None:
        if self.select_end < self.select_start:
            self.select_start, self.select_end = self.select_end, self.select_start

    def _move_to_first(self) -> None:
        if self.has_selection():
            self._sort_selection()
            self.cursor = self.select_start
            self.select_end = self.select_start
            self.has_preferred_x = False

    def _move_to_last(self, buffer: TextBuffer) -> None:
        if self.has_selection():
            self._sort_selection()
            self.clamp(buffer)
            self.cursor = self.select_end
            self.select_start = self.select_end
            self.has_preferred_x = False

    def _prep_selection_at_cursor(self) -> None:
        if not self.has_selection():
            self.select_start = self.select_end = self.cursor
        else:
            self.cursor = self.select_end

    def _single_line_y(self, buffer: TextBuffer, y: float) -> float:
        if self.single_line:
            return buffer.layout_row(0).ymin
        return y

    # --------------------------------------------------------------- mouse API

    def click(self, buffer: TextBuffer, x: float, y: float) -> None:
        """Mouse down: move the cursor to the point and clear the selection."""
        y = self._single_line_y(buffer, y)
        self.cursor = locate_coord(buffer, x, y)
        self.select_start = self.cursor
        self.select_end = self.cursor
        self.has_preferred_x = False

    def drag(self, buffer: TextBuffer, x: float, y: float) -> None:
        """Mouse drag: move the cursor and the selection end to the point."""
        y = self._single_line_y(buffer, y)
        if self.select_start == self.select_end:
            self.select_start = self.cursor
        position = locate_coord(buffer, x, y)
        self.cursor = self.select_end = position

    # ---------------------------------------------------------------- edit API

    def cut(self, buffer: TextBuffer) -> bool:
        """Delete the selection; return True if there was one."""
        if self.has_selection():
            self._delete_selection(buffer)
            self.has_preferred_x = False
            return True
        return False

    def paste(self, buffer: TextBuffer, text: str) -> bool:
        """Insert ``text`` at the cursor, replacing any selection."""
        self.clamp(buffer)
        self._delete_selection(buffer)
        if buffer.insert_chars(self.cursor, text):
            self.undostate.make_insert(self.cursor, len(text))
            self.cursor += len(text)
            self.has_preferred_x = False
            return True
        return False

    def text(self, buffer: TextBuffer, text: str) -> None:
        """Type ``text`` at the cursor, honouring insert mode and the selection."""
        if not text:
            return
        if text[0] == NEWLINE and self.single_line:
            return

        if self.insert_mode and not self.has_selection() and self.cursor < len(buffer):
            self.undostate.make_replace(buffer, self.cursor, 1, 1)
            buffer.delete_chars(self.cursor, 1)
            if buffer.insert_chars(self.cursor, text):
                self.cursor += len(text)
                self.has_preferred_x = False
        else:
            self._delete_selection(buffer)
            if buffer.insert_chars(self.cursor, text):
                self.undostate.make_insert(self.cursor, len(text))
                self.cursor += len(text)
                self.has_preferred_x = False

    def undo(self, buffer: TextBuffer) -> None:
        """Undo the latest edit, if any."""
        cursor = self.undostate.undo(buffer)
        if cursor is not None:
            self.cursor = cursor

    def redo(self, buffer: TextBuffer) -> None:
        """Redo the latest undone edit, if any."""
        cursor = self.undostate.redo(buffer)
        if cursor is not None:
            self.cursor = cursor

    # ---------------------------------------------------------------- keyboard

    def key(self, buffer: TextBuffer, key: Union[int, str]) -> None:
        """Process one keyboard input: a :class:`Key`, a character or a code point."""
        if isinstance(key, str):
            self.text(buffer, key)
            return

        key = int(key)
        shift = bool(key & Key.SHIFT)
        base = key & ~Key.SHIFT

        if base == Key.INSERT and not shift:
            self.insert_mode = not self.insert_mode
        elif base == Key.UNDO and not shift:
            self.undo(buffer)
            self.has_preferred_x = False
        elif base == Key.REDO and not shift:
            self.redo(buffer)
            self.has_preferred_x = False
        elif base == Key.LEFT:
            self._key_left(buffer, shift)
        elif base == Key.RIGHT:
            self._key_right(buffer, shift)
        elif base == Key.WORDLEFT:
            self._key_word(buffer, shift, _move_word_left, left=True)
        elif base == Key.WORDRIGHT:
            self._key_word(buffer, shift, _move_word_right, left=False)
        elif base in (Key.DOWN, Key.PGDOWN):
            is_page = base == Key.PGDOWN
            if not is_page and self.single_line:
                self.key(buffer, Key.RIGHT | (key & Key.SHIFT))
                return
            self._key_down(buffer, shift, self.row_count_per_page if is_page else 1)
        elif base in (Key.UP, Key.PGUP):
            is_page = base == Key.PGUP
            if not is_page and self.single_line:
                self.key(buffer, Key.LEFT | (key & Key.SHIFT))
                return
            self._key_up(buffer, shift, self.row_count_per_page if is_page else 1)
        elif base == Key.DELETE:
            self._key_delete(buffer)
        elif base == Key.BACKSPACE:
            self._key_backspace(buffer)
        elif base == Key.TEXTSTART:
            if shift:
                self._prep_selection_at_cursor()
                self.cursor = self.select_end = 0
            else:
                self.cursor = self.select_start = self.select_end = 0
            self.has_preferred_x = False
        elif base == Key.TEXTEND:
            if shift:
                self._prep_selection_at_cursor()
                self.cursor = self.select_end = len(buffer)
            else:
                self.cursor = len(buffer)
                self.select_start = self.select_end = 0
            self.has_preferred_x = False
        elif base == Key.LINESTART:
            self._key_line_start(buffer, shift)
        elif base == Key.LINEEND:
            self._key_line_end(buffer, shift)
        elif 0 < key < _MAX_CODEPOINT:
            self.text(buffer, chr(key))

    def _key_left(self, buffer: TextBuffer, shift: bool) -> None:
        if shift:
            self.clamp(buffer)
            self._prep_selection_at_cursor()
            if self.select_end > 0:
                self.select_end -= 1
            self.cursor = self.select_end
        elif self.has_selection():
            self._move_to_first()
        elif self.cursor > 0:
            self.cursor -= 1
        self.has_preferred_x = False

    def _key_right(self, buffer: TextBuffer, shift: bool) -> None:
        if shift:
            self._prep_selection_at_cursor()
            self.select_end += 1
            self.clamp(buffer)
            self.cursor = self.select_end
        else:
            if self.has_selection():
                self._move_to_last(buffer)
            else:
                self.cursor += 1
            self.clamp(buffer)
        self.has_preferred_x = False

    def _key_word(self, buffer: TextBuffer, shift: bool, move, left: bool) -> None:
        if shift:
            if not self.has_selection():
                self._prep_selection_at_cursor()
            self.cursor = move(buffer, self.cursor)
            self.select_end = self.cursor
            self.clamp(buffer)
        elif self.has_selection():
            if left:
                self._move_to_first()
            else:
                self._move_to_last(buffer)
        else:
            self.cursor = move(buffer, self.cursor)
            self.clamp(buffer)

    def _scan_row(self, buffer: TextBuffer, row_start: int, goal_x: float) -> int:
        self.cursor = row_start
        row = buffer.layout_row(row_start)
        x = row.x0
        for i in range(row.num_chars):
            dx = buffer.get_width(row_start, i)
            if dx == NEWLINE_WIDTH:
                break
            x += dx
            if x > goal_x:
                break
            self.cursor += 1
        self.clamp(buffer)
        return row.num_chars

    def _key_down(self, buffer: TextBuffer, sel: bool, row_count: int) -> None:
        if sel:
            self._prep_selection_at_cursor()
        elif self.has_selection():
            self._move_to_last(buffer)

        self.clamp(buffer)
        find = find_charpos(buffer, self.cursor, self.single_line)

        for _ in range(row_count):
            goal_x = self.preferred_x if self.has_preferred_x else find.x
            start = find.first_char + find.length
            if find.length == 0:
                break
            if buffer.get_char(find.first_char + find.length - 1) != NEWLINE:
                break

            num_chars = self._scan_row(buffer, start, goal_x)
            self.has_preferred_x = True
            self.preferred_x = goal_x
            if sel:
                self.select_end = self.cursor

            find.first_char = find.first_char + find.length
            find.length = num_chars

    def _key_up(self, buffer: TextBuffer, sel: bool, row_count: int) -> None:
        if sel:
            self._prep_selection_at_cursor()
        elif self.has_selection():
            self._move_to_first()

        self.clamp(buffer)
        find = find_charpos(buffer, self.cursor, self.single_line)

        for _ in range(row_count):
            goal_x = self.preferred_x if self.has_preferred_x else find.x
            if find.prev_first == find.first_char:
                break

            self._scan_row(buffer, find.prev_first, goal_x)
            self.has_preferred_x = True
            self.preferred_x = goal_x
            if sel:
                self.select_end = self.cursor

            prev_scan = find.prev_first - 1 if find.prev_first > 0 else 0
            while prev_scan > 0 and buffer.get_char(prev_scan - 1) != NEWLINE:
                prev_scan -= 1
            find.first_char = find.prev_first
            find.prev_first = prev_scan

    def _key_delete(self, buffer: TextBuffer) -> None:
        if self.has_selection():
            self._delete_selection(buffer)
        elif self.cursor < len(buffer):
            self._delete(buffer, self.cursor, 1)
        self.has_preferred_x = False

    def _key_backspace(self, buffer: TextBuffer) -> None:
        if self.has_selection():
            self._delete_selection(buffer)
        else:
            self.clamp(buffer)
            if self.cursor > 0:
                prev = self.cursor - 1
                self._delete(buffer, prev, self.cursor - prev)
                self.cursor = prev
        self.has_preferred_x = False

    def _key_line_start(self, buffer: TextBuffer, shift: bool) -> None:
        self.clamp(buffer)
        if shift:
            self._prep_selection_at_cursor()
        else:
            self._move_to_first()
        if self.single_line:
            self.cursor = 0
        else:
            while self.cursor > 0 and buffer.get_char(self.cursor - 1) != NEWLINE:
                self.cursor -= 1
        if shift:
            self.select_end = self.cursor
        self.has_preferred_x = False

    def _key_line_end(self, buffer: TextBuffer, shift: bool) -> None:
        n = len(buffer)
        self.clamp(buffer)
        if shift:
            self._prep_selection_at_cursor()
        else:
            self._move_to_first()
        if self.single_line:
            self.cursor = n
        else:
            while self.cursor < n and buffer.get_char(self.cursor) != NEWLINE:
                self.cursor += 1
        if shift:
            self.select_end = self.cursor
        self.has_preferred_x = False