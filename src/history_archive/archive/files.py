"""
Archive tasks in markdown files on disk.

Loads a file into a TextBuffer, runs one archive operation with the cursor
on the requested line, and writes the result back.
"""

import logging
from pathlib import Path
from typing import Optional, Tuple

from history_archive.config import ArchiveConfig
from history_archive.editor.base import Position
from history_archive.editor.buffer import TextBuffer
from history_archive.models.task import Task

from .history import archive_task

log = logging.getLogger(__name__)


def load_buffer(file_path: Path) -> TextBuffer:
    """Read a markdown file into a TextBuffer."""
    return TextBuffer(file_path.read_text(encoding='utf-8'))


def archive_file(
    file_path: Path,
    line: int,
    *,
    complete: bool,
    ch: int = 0,
    today: Optional[str] = None,
    config: Optional[ArchiveConfig] = None,
    dry_run: bool = False,
) -> Tuple[Optional[Task], str]:
    """
    Complete or progress the task on a line of a file.

    Args:
        file_path: Markdown file
        line: Zero-based line of the task
        complete: Complete (True) or progress (False)
        ch: Cursor column, restored after the edit
        today: Date for the History subsection (default: local today)
        config: Layout settings
        dry_run: If True, don't write the file

    Returns:
        Tuple of (archived task or None, resulting document text)

    Raises:
        IndexError: if the line is not in the file
    """
    buffer = load_buffer(file_path)
    if not 0 <= line < buffer.line_count():
        raise IndexError(f"Line {line} out of range ({buffer.line_count()} lines)")
    buffer.set_cursor(Position(line, ch))

    task = archive_task(buffer, complete, today=today, config=config)
    if task is not None and not dry_run:
        file_path.write_text(buffer.text, encoding='utf-8')
        log.info("Wrote %s", file_path)

    return task, buffer.text
