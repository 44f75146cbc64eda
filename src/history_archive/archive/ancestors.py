"""Rebuild a task's ancestor chain from indentation alone."""

import logging
from typing import List, Optional

from history_archive.editor.base import Editor, line_at
from history_archive.models.task import Task
from history_archive.parsers.lines import indent_depth, is_task

log = logging.getLogger(__name__)


def resolve_ancestors(editor: Editor, line_number: int, indent_unit: str = "\t") -> List[str]:
    """
    Collect the task lines enclosing a task, outermost first.

    Walks upward once per expected ancestor depth. Deeper lines (siblings and
    their subtasks) are skipped; the first shallower line must be a task at
    exactly the expected depth. Anything else means the outline is irregular
    and the chain found so far is returned.

    Args:
        editor: Document to read
        line_number: Line of the task
        indent_unit: One level of indentation

    Returns:
        Raw ancestor lines, possibly fewer than the task's depth
    """
    depth = indent_depth(line_at(editor, line_number), indent_unit)
    parents: List[str] = []
    parent_line = line_number - 1
    current_depth = depth

    for target_depth in range(depth - 1, -1, -1):
        while parent_line >= 0 and indent_depth(editor.get_line(parent_line), indent_unit) >= current_depth:
            parent_line -= 1

        candidate = line_at(editor, parent_line)
        if candidate is None or not is_task(candidate) or indent_depth(candidate, indent_unit) != target_depth:
            # Start of file, a non-task line, or an unexpected indent jump
            log.debug("Ancestor chain for line %d stops at depth %d", line_number, target_depth)
            break

        current_depth = target_depth
        parents.insert(0, candidate)

    return parents


def get_task(editor: Editor, line_number: int, indent_unit: str = "\t") -> Optional[Task]:
    """Build the Task for a line, or None if the line is not a task."""
    line = line_at(editor, line_number)
    if not is_task(line):
        return None

    parents = resolve_ancestors(editor, line_number, indent_unit)
    return Task(parents=parents, task=line, children=[])
