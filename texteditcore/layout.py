"""Text storage and layout queries used by the editing engine."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

NEWLINE = "\n"

# Width reported for a newline character; row scans stop when they meet it.
NEWLINE_WIDTH = -1.0


def is_space(ch: str) -> bool:
    """Return True if the character counts as whitespace for word movement."""
    return ch.isspace()


@dataclass(frozen=True)
class Row:
    """Shape of one displayed row of characters."""

    x0: float = 0.0
    x1: float = 0.0
    baseline_y_delta: float = 0.0
    ymin: float = 0.0
    ymax: float = 0.0
    num_chars: int = 0


class TextBuffer(ABC):
    """A string being edited, as seen by the editing engine."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of characters in the buffer."""

    @abstractmethod
    def layout_row(self, start: int) -> Row:
        """Lay out the row of characters that begins at ``start``."""

    @abstractmethod
    def get_width(self, line_start: int, index: int) -> float:
        """Width of the ``index``-th character of the row starting at ``line_start``."""

    @abstractmethod
    def char_at(self, index: int) -> str:
        """The character at ``index``."""

    @abstractmethod
    def delete(self, index: int, count: int) -> None:
        """Remove ``count`` characters starting at ``index``."""

    @abstractmethod
    def insert(self, index: int, chars: str) -> bool:
        """Insert ``chars`` at ``index``; return False if they do not fit."""


class MonospaceBuffer(TextBuffer):
    """A buffer laid out in fixed-width glyphs, one row per text line."""

    def __init__(
        self,
        text: str = "",
        glyph_width: float = 1.0,
        line_height: float = 1.0,
        max_length: int | None = None,
    ) -> None:
        if glyph_width <= 0:
            raise ValueError("glyph_width must be positive")
        if line_height <= 0:
            raise ValueError("line_height must be positive")
        if max_length is not None and max_length < 0:
            raise ValueError("max_length must not be negative")
        if max_length is not None and len(text) > max_length:
            raise ValueError("text is longer than max_length")
        self._chars = list(text)
        self.glyph_width = float(glyph_width)
        self.line_height = float(line_height)
        self.max_length = max_length

    @property
    def text(self) -> str:
        """The current contents as a string."""
        return "".join(self._chars)

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return len(self._chars)

    def layout_row(self, start: int) -> Row:
        length = len(self._chars)
        if start >= length:
            return Row(
                x0=0.0,
                x1=0.0,
                baseline_y_delta=self.line_height,
                ymin=0.0,
                ymax=self.line_height,
                num_chars=0,
            )
        try:
            end = self._chars.index(NEWLINE, start) + 1
            visible = end - start - 1
        except ValueError:
            end = length
            visible = end - start
        return Row(
            x0=0.0,
            x1=visible * self.glyph_width,
            baseline_y_delta=self.line_height,
            ymin=0.0,
            ymax=self.line_height,
            num_chars=end - start,
        )

    def get_width(self, line_start: int, index: int) -> float:
        if self.char_at(line_start + index) == NEWLINE:
            return NEWLINE_WIDTH
        return self.glyph_width

    def char_at(self, index: int) -> str:
        if not 0 <= index < len(self._chars):
            raise IndexError(f"character index {index} out of range")
        return self._chars[index]

    def delete(self, index: int, count: int) -> None:
        if count < 0 or index < 0 or index + count > len(self._chars):
            raise IndexError("deletion range out of bounds")
        del self._chars[index : index + count]

    def insert(self, index: int, chars: str) -> bool:
        if not 0 <= index <= len(self._chars):
            raise IndexError(f"insert position {index} out of range")
        if self.max_length is not None and len(self._chars) + len(chars) > self.max_length:
            return False
        self._chars[index:index] = list(chars)
        return True