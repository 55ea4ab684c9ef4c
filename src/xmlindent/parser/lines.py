"""Offset <-> (line, column) mapping shared by the lexer and the document buffer."""

from __future__ import annotations

import re
from bisect import bisect_right

# \r\n counts as a single line break, lone \r and \n as one each.
LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class LineIndex:
    """Line start offsets of a text."""

    def __init__(self, text: str) -> None:
        self._length = len(text)
        self._starts = [0] + [m.end() for m in LINE_BREAK_RE.finditer(text)]

    @property
    def line_count(self) -> int:
        return len(self._starts)

    def position(self, offset: int) -> tuple[int, int]:
        """Return the 1-based line and 0-based column of ``offset``."""
        index = bisect_right(self._starts, offset) - 1
        return index + 1, offset - self._starts[index]

    def line_of(self, offset: int) -> int:
        return bisect_right(self._starts, offset)

    def offset(self, line: int, column: int) -> int:
        """Return the offset of a 1-based ``line`` and 1-based ``column``."""
        if not 1 <= line <= len(self._starts):
            raise ValueError(f"Line {line} out of range 1..{len(self._starts)}")
        result = self._starts[line - 1] + column - 1
        if column < 1 or result > self._length:
            raise ValueError(f"Column {column} out of range on line {line}")
        return result
