"""
In-memory Editor implementation.

Backs the file layer, the interactive harness and the tests. Each
transaction is resolved against the text as it was before the transaction,
applied in one step, and pushed onto an undo stack.
"""

import logging
from typing import List, Tuple

from .base import Edit, Editor, Position

log = logging.getLogger(__name__)


class TextBuffer(Editor):
    """
    Line-addressable text document.

    Usage:
        buffer = TextBuffer(path.read_text())
        buffer.set_cursor(Position(3))
        buffer.transaction([Edit(Position(3, 0), "- ")])
        buffer.undo()
    """

    def __init__(self, text: str = "") -> None:
        self._lines: List[str] = text.split("\n")
        self._cursor = Position(0, 0)
        self._undo: List[Tuple[List[str], Position]] = []

    @property
    def text(self) -> str:
        return "\n".join(self._lines)

    @property
    def history(self) -> int:
        """Number of transactions that can be undone."""
        return len(self._undo)

    def get_line(self, line_number: int) -> str:
        if line_number < 0:
            raise IndexError(f"Line {line_number} out of range")
        return self._lines[line_number]

    def line_count(self) -> int:
        return len(self._lines)

    def get_cursor(self) -> Position:
        return self._cursor

    def set_cursor(self, position: Position) -> None:
        line = min(max(position.line, 0), self.last_line())
        ch = min(max(position.ch, 0), len(self._lines[line]))
        self._cursor = Position(line, ch)

    def transaction(self, edits: List[Edit]) -> None:
        if not edits:
            return

        text = self.text
        resolved = []
        for index, edit in enumerate(edits):
            start = self._offset(edit.start)
            end = start if edit.is_insert else self._offset(edit.end)
            if end < start:
                raise ValueError(f"Edit range is reversed: {edit}")
            resolved.append((start, end, index, edit.text))

        # Stable on submission order, so inserts at one position keep their order
        resolved.sort(key=lambda item: (item[0], item[2]))

        pieces = []
        consumed = 0
        for start, end, _, replacement in resolved:
            if start < consumed:
                raise ValueError("Overlapping edits in one transaction")
            pieces.append(text[consumed:start])
            pieces.append(replacement)
            consumed = end
        pieces.append(text[consumed:])

        self._undo.append((self._lines, self._cursor))
        self._lines = "".join(pieces).split("\n")
        self.set_cursor(self._cursor)
        log.debug("Applied transaction with %d edit(s)", len(edits))

    def undo(self) -> bool:
        """
        Revert the most recent transaction.

        Returns:
            False if there was nothing to undo
        """
        if not self._undo:
            return False
        self._lines, self._cursor = self._undo.pop()
        return True

    def _offset(self, position: Position) -> int:
        if position.line < 0 or position.line > self.last_line():
            raise ValueError(f"Position outside document: {position}")
        if position.ch < 0 or position.ch > len(self._lines[position.line]):
            raise ValueError(f"Position outside line: {position}")
        return sum(len(line) + 1 for line in self._lines[:position.line]) + position.ch
