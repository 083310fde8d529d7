"""Text layout queries used by the text-editing state machine.

A :class:`TextBuffer` describes the string being edited and how it is laid
out in rows; :func:`locate_coord` and :func:`find_charpos` walk that layout
to map between screen coordinates and character positions.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable

NEWLINE = "\n"
"""The character that ends a row when the text is wrapped by hand."""

NEWLINE_WIDTH = -1.0
"""Width reported for a newline, so row scans can stop on it."""


@dataclass
class TextRow:
    """Layout of one displayed row of characters."""

    x0: float = 0.0
    x1: float = 0.0
    baseline_y_delta: float = 0.0
    ymin: float = 0.0
    ymax: float = 0.0
    num_chars: int = 0


@dataclass
class FindState:
    """Where a character sits on screen, plus its row and the previous row."""

    x: float = 0.0
    y: float = 0.0
    height: float = 0.0
    first_char: int = 0
    length: int = 0
    prev_first: int = 0


class TextBuffer(ABC):
    """A string being edited, together with the way it is laid out."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of characters in the buffer."""

    @abstractmethod
    def layout_row(self, start: int) -> TextRow:
        """Lay out the row of characters that begins at ``start``."""

    @abstractmethod
    def get_width(self, line_start: int, index: int) -> float:
        """Width of character ``index`` of the row beginning at ``line_start``."""

    @abstractmethod
    def get_char(self, index: int) -> str:
        """The character at ``index``."""

    @abstractmethod
    def delete_chars(self, index: int, count: int) -> None:
        """Remove ``count`` characters starting at ``index``."""

    @abstractmethod
    def insert_chars(self, index: int, chars: Iterable[str]) -> bool:
        """Insert ``chars`` at ``index``; return False if they were refused."""


class PlainTextBuffer(TextBuffer):
    """Monospaced text whose rows are broken only at newlines."""

    def __init__(self, text: str = "", char_width: float = 1.0, line_height: float = 1.0) -> None:
        if char_width <= 0:
            raise ValueError("char_width must be positive")
        if line_height <= 0:
            raise ValueError("line_height must be positive")
        self._text = text
        self.char_width = char_width
        self.line_height = line_height

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"PlainTextBuffer({self._text!r})"

    def layout_row(self, start: int) -> TextRow:
        end = self._text.find(NEWLINE, start)
        if end == -1:
            end = len(self._text)
            visible = end - start
        else:
            visible = end - start
            end += 1
        return TextRow(
            x0=0.0,
            x1=max(visible, 0) * self.char_width,
            baseline_y_delta=self.line_height,
            ymin=0.0,
            ymax=self.line_height,
            num_chars=max(end - start, 0),
        )

    def get_width(self, line_start: int, index: int) -> float:
        if self._text[line_start + index] == NEWLINE:
            return NEWLINE_WIDTH
        return self.char_width

    def get_char(self, index: int) -> str:
        return self._text[index]

    def _check_index(self, index: int) -> None:
        if not 0 <= index <= len(self._text):
            raise IndexError(f"position {index} outside 0..{len(self._text)}")

    def delete_chars(self, index: int, count: int) -> None:
        self._check_index(index)
        if count < 0:
            raise ValueError("count must not be negative")
        self._text = self._text[:index] + self._text[index + count:]

    def insert_chars(self, index: int, chars: Iterable[str]) -> bool:
        self._check_index(index)
        self._text = self._text[:index] + "".join(chars) + self._text[index:]
        return True


def locate_coord(buffer: TextBuffer, x: float, y: float) -> int:
    """Return the character position nearest to the display point ``(x, y)``."""
    n = len(buffer)
    row = TextRow()
    base_y = 0.0
    i = 0

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
        k = 0
        while k < row.num_chars:
            w = buffer.get_width(i, k)
            if x < prev_x + w:
                if x < prev_x + w / 2:
                    return i + k
                return i + k + 1
            prev_x += w
            k += 1

    if buffer.get_char(i + row.num_chars - 1) == NEWLINE:
        return i + row.num_chars - 1
    return i + row.num_chars


def find_charpos(buffer: TextBuffer, n: int, single_line: bool) -> FindState:
    """Locate character ``n`` on screen and describe its row and the one above."""
    z = len(buffer)

    if n == z and single_line:
        row = buffer.layout_row(0)
        return FindState(
            x=row.x1,
            y=0.0,
            height=row.ymax - row.ymin,
            first_char=0,
            length=z,
            prev_first=0,
        )

    find = FindState()
    prev_start = 0
    i = 0
    while True:
        row = buffer.layout_row(i)
        if n < i + row.num_chars:
            break
        if i + row.num_chars == z and z > 0 and buffer.get_char(z - 1) != NEWLINE:
            break
        prev_start = i
        i += row.num_chars
        find.y += row.baseline_y_delta
        if i == z:
            row.num_chars = 0
            break

    first = i
    find.first_char = first
    find.length = row.num_chars
    find.height = row.ymax - row.ymin
    find.prev_first = prev_start

    find.x = row.x0
    k = 0
    while first + k < n:
        find.x += buffer.get_width(first, k)
        k += 1
    return find