"""
Host editor contract.

The archiving core only talks to a line-addressable text surface through
this interface. Any implementation must apply a transaction all-or-nothing
and record it as a single undo step.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True, order=True)
class Position:
    """Zero-based line and character offset."""

    line: int
    ch: int = 0


@dataclass(frozen=True)
class Edit:
    """
    Replace the range [start, end) with text.

    With no end the edit is a pure insertion at start.
    """

    start: Position
    text: str
    end: Optional[Position] = None

    @property
    def is_insert(self) -> bool:
        return self.end is None or self.end == self.start


class Editor(ABC):
    """Abstract line-addressable document with atomic multi-edit transactions."""

    @abstractmethod
    def get_line(self, line_number: int) -> str:
        """
        Text of a line, without its line break.

        Raises:
            IndexError: if the line does not exist
        """

    @abstractmethod
    def line_count(self) -> int:
        """Number of lines in the document (at least 1)."""

    def last_line(self) -> int:
        """Index of the last line."""
        return self.line_count() - 1

    @abstractmethod
    def get_cursor(self) -> Position:
        """Current cursor position."""

    @abstractmethod
    def set_cursor(self, position: Position) -> None:
        """Move the cursor."""

    @abstractmethod
    def transaction(self, edits: List[Edit]) -> None:
        """
        Apply all edits as one atomic change.

        Every edit position refers to the document as it was before the
        transaction started.
        """


def line_at(editor: Editor, line_number: int) -> Optional[str]:
    """Bounds-checked line read: None for lines outside the document."""
    if line_number < 0 or line_number > editor.last_line():
        return None
    return editor.get_line(line_number)
