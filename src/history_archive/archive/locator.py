"""
Find where a task goes inside an existing dated History subsection.

The subsection mirrors the live outline: each archived task sits under
plain-bullet copies of its ancestors. The locator walks that list, matching
ancestors level by level, and then either finds an archived copy of the task
to overwrite or the end of the matching block to insert after.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from history_archive.editor.base import Editor, line_at
from history_archive.models.task import Task
from history_archive.parsers.lines import indent_depth, is_archivable, is_same_task

log = logging.getLogger(__name__)


class ScanState(str, Enum):
    MATCHING_ANCESTOR = "matching-ancestor"
    SCANNING_TO_INSERTION_POINT = "scanning-to-insertion-point"
    DONE = "done"


@dataclass(frozen=True)
class Placement:
    """
    Where to write a task.

    replace=True: overwrite `line` with the task text.
    replace=False: insert task.render(depth) right before `line`.
    """

    line: int
    depth: int
    replace: bool


class ArchiveLocator:
    """
    State machine over a line cursor and the number of matched ancestors.

    Usage:
        placement = ArchiveLocator(editor).locate(task, date_line)
    """

    def __init__(self, editor: Editor, indent_unit: str = "\t") -> None:
        self.editor = editor
        self.indent_unit = indent_unit

    def locate(self, task: Task, date_line: int) -> Placement:
        """
        Walk the entries under a date heading.

        Args:
            task: Task to archive (already marked)
            date_line: Line of the "## YYYY-MM-DD" heading

        Returns:
            Placement for the task
        """
        line = date_line + 1
        depth = 0
        state = ScanState.MATCHING_ANCESTOR if task.parents else ScanState.SCANNING_TO_INSERTION_POINT

        while state is not ScanState.DONE:
            if state is ScanState.MATCHING_ANCESTOR:
                expected = task.parents[depth]
                # Skip descendants of earlier siblings and non-matching siblings
                while self._archivable(line) and (
                    self._depth(line) > depth
                    or (self._depth(line) == depth and not self._same(line, expected))
                ):
                    line += 1

                if self._archivable(line) and self._depth(line) == depth:
                    line += 1
                    depth += 1
                    if depth == len(task.parents):
                        state = ScanState.SCANNING_TO_INSERTION_POINT
                else:
                    # Ancestor missing from the archive; the insert recreates it
                    state = ScanState.SCANNING_TO_INSERTION_POINT

            elif state is ScanState.SCANNING_TO_INSERTION_POINT:
                while (
                    self._archivable(line)
                    and self._depth(line) >= depth
                    and not self._matches(line, depth, task.task)
                ):
                    line += 1
                state = ScanState.DONE

        replace = self._matches(line, depth, task.task)
        log.debug("Placement for %r: line=%d depth=%d replace=%s",
                  task.task.strip(), line, depth, replace)
        return Placement(line=line, depth=depth, replace=replace)

    def _archivable(self, line_number: int) -> bool:
        return is_archivable(line_at(self.editor, line_number))

    def _depth(self, line_number: int) -> int:
        return indent_depth(line_at(self.editor, line_number), self.indent_unit)

    def _same(self, line_number: int, text: str) -> bool:
        return is_same_task(self.editor.get_line(line_number), text)

    def _matches(self, line_number: int, depth: int, text: str) -> bool:
        """Archived entry at exactly this depth with the same task text."""
        return (
            self._archivable(line_number)
            and self._depth(line_number) == depth
            and self._same(line_number, text)
        )
