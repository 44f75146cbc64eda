"""
Complete / progress the task under the cursor.

Both operations copy the marked task into today's subsection of the
document's History section:

    # History
    ## 2026-02-15
    - Parent
    	- [x] Task

Completing also removes the task from where it was; progressing leaves it.
All edits go through one EditBatch, so the document changes in a single
transaction (one undo step).
"""

import logging
from typing import Dict, List, Optional

from history_archive.config import ArchiveConfig
from history_archive.editor.base import Editor, line_at
from history_archive.editor.batch import EditBatch
from history_archive.models.task import Task
from history_archive.parsers.lines import heading_level, is_task
from history_archive.utils.dates import today_string

from .ancestors import get_task
from .locator import ArchiveLocator

log = logging.getLogger(__name__)


def find_history_section(editor: Editor, start_line: int, config: ArchiveConfig) -> Optional[int]:
    """First line at or after start_line that is exactly the History heading."""
    for line_number in range(max(start_line, 0), editor.line_count()):
        if editor.get_line(line_number) == config.history_heading:
            return line_number
    return None


def history_section_end(editor: Editor, history_line: int, config: ArchiveConfig) -> int:
    """
    Last line belonging to the History section.

    The section runs until the next heading of the same or a higher level
    (e.g. the next "# " heading), or to the end of the document.
    """
    section_level = heading_level(config.history_heading) or 1
    for line_number in range(history_line + 1, editor.line_count()):
        level = heading_level(editor.get_line(line_number))
        if level is not None and level <= section_level:
            return line_number - 1
    return editor.last_line()


def find_date_section(editor: Editor, history_line: int, section_end: int, heading: str) -> Optional[int]:
    """Line of the given date heading inside the History section."""
    for line_number in range(history_line + 1, section_end + 1):
        if editor.get_line(line_number) == heading:
            return line_number
    return None


def _last_content_line(editor: Editor, first: int, last: int) -> int:
    """Last non-blank line in [first, last]; first if all are blank."""
    for line_number in range(last, first, -1):
        if editor.get_line(line_number).strip():
            return line_number
    return first


def archive_task(
    editor: Editor,
    complete: bool,
    today: Optional[str] = None,
    config: Optional[ArchiveConfig] = None,
) -> Optional[Task]:
    """
    Archive the task under the cursor into today's History subsection.

    Args:
        editor: Document with the cursor on the task
        complete: True to check the task off and remove it from its place,
            False to mark it in progress and leave it
        today: Date for the subsection heading (default: local today)
        config: Layout settings

    Returns:
        The archived (marked) Task, or None if the cursor line is not a task
    """
    config = config or ArchiveConfig()
    position = editor.get_cursor()
    task_line = position.line

    if not is_task(line_at(editor, task_line)):
        log.debug("Line %d is not a task, nothing to archive", task_line)
        return None

    task = get_task(editor, task_line, config.indent_unit)
    if task is None:
        return None

    if complete:
        task.mark_completed()
    else:
        task.mark_in_progress()

    today = today or today_string(config.date_format)
    date_heading = config.date_heading(today)
    batch = EditBatch(editor)

    history_line = find_history_section(editor, task_line + 1, config)
    if history_line is None:
        log.debug("No History section below line %d, creating one", task_line)
        batch.append_to_end(config.history_heading)
        batch.append_to_end(date_heading)
        batch.append_to_end(task.render(0))
    else:
        section_end = history_section_end(editor, history_line, config)
        date_line = find_date_section(editor, history_line, section_end, date_heading)
        if date_line is None:
            # New days go after the existing ones
            anchor = _last_content_line(editor, history_line, section_end)
            batch.append_after_line(anchor, date_heading)
            batch.append_after_line(anchor, task.render(0))
        else:
            placement = ArchiveLocator(editor, config.indent_unit).locate(task, date_line)
            if placement.replace:
                batch.replace_line(placement.line, task.task)
            else:
                batch.append_after_line(placement.line - 1, task.render(placement.depth))

    # Queued last: the edits above use line numbers from before the deletion
    if complete:
        batch.delete_line(task_line)

    batch.apply()
    editor.set_cursor(position)
    return task


def complete_task(editor: Editor, today: Optional[str] = None,
                  config: Optional[ArchiveConfig] = None) -> Optional[Task]:
    """Check off the task under the cursor and move it to the History section."""
    return archive_task(editor, True, today=today, config=config)


def progress_task(editor: Editor, today: Optional[str] = None,
                  config: Optional[ArchiveConfig] = None) -> Optional[Task]:
    """Mark the task under the cursor in progress and mirror it in the History section."""
    return archive_task(editor, False, today=today, config=config)


def read_history(editor: Editor, config: Optional[ArchiveConfig] = None) -> List[Dict]:
    """
    List the dated subsections of the first History section.

    Returns:
        [{"date": "2026-02-15", "line": 12, "entries": [...]}, ...] in document order
    """
    config = config or ArchiveConfig()
    history_line = find_history_section(editor, 0, config)
    if history_line is None:
        return []

    section_end = history_section_end(editor, history_line, config)
    days: List[Dict] = []
    current: Optional[Dict] = None
    for line_number in range(history_line + 1, section_end + 1):
        line = editor.get_line(line_number)
        if line.startswith(config.date_heading_prefix):
            current = {
                "date": line[len(config.date_heading_prefix):].strip(),
                "line": line_number,
                "entries": [],
            }
            days.append(current)
        elif current is not None and line.strip():
            current["entries"].append(line)
    return days
