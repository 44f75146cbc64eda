"""
Edit batch builder.

Collects line-level insert/replace/delete operations against an Editor and
commits them as one transaction, so a whole archive operation is a single
undo step.
"""

import logging
from typing import List, Optional

from .base import Edit, Editor, Position

log = logging.getLogger(__name__)


class EditBatch:
    """
    Accumulates edits computed from the current (unmodified) document.

    Deletions are queued separately and always committed after every other
    edit: the other edits are computed from line numbers that an earlier
    deletion would shift.
    """

    def __init__(self, editor: Editor) -> None:
        self.editor = editor
        self._changes: List[Edit] = []
        self._deletions: List[Edit] = []

    @property
    def pending(self) -> List[Edit]:
        """Edits in the order they will be committed."""
        return self._changes + self._deletions

    def append_after_line(self, line_number: int, text: str) -> None:
        """Insert text as new line(s) right after the given line."""
        self._changes.append(Edit(self._line_end(line_number), "\n" + text))

    def append_to_end(self, text: str) -> None:
        """Insert text as new line(s) at the end of the document."""
        self.append_after_line(self.editor.last_line(), text)

    def replace_line(self, line_number: int, text: str) -> None:
        """Replace the content of one line, keeping its line break."""
        self._changes.append(
            Edit(self._line_start(line_number), text, self._line_end(line_number))
        )

    def delete_line(self, from_line: int, to_line: Optional[int] = None) -> None:
        """
        Delete a line, or the inclusive range from_line..to_line.

        Args:
            from_line: First line to delete
            to_line: Last line to delete (defaults to from_line)
        """
        if to_line is None:
            to_line = from_line

        if from_line > 0:
            start = self._line_end(from_line - 1)
            end = self._line_end(to_line)
        elif to_line < self.editor.last_line():
            start = self._line_start(0)
            end = self._line_start(to_line + 1)
        else:
            start = self._line_start(0)
            end = self._line_end(to_line)

        self._deletions.append(Edit(start, "", end))

    def apply(self) -> None:
        """Commit every pending edit as a single transaction."""
        edits = self.pending
        log.debug("Committing %d change(s), %d deletion(s)",
                  len(self._changes), len(self._deletions))
        self.editor.transaction(edits)
        self._changes = []
        self._deletions = []

    def _line_start(self, line_number: int) -> Position:
        return Position(line_number, 0)

    def _line_end(self, line_number: int) -> Position:
        return Position(line_number, len(self.editor.get_line(line_number)))
