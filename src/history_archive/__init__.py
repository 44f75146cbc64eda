"""
Archive markdown checklist tasks into a dated History section.

Main API:
    from history_archive import TextBuffer, Position, complete_task

    buffer = TextBuffer(path.read_text())
    buffer.set_cursor(Position(line=4))
    complete_task(buffer)          # or progress_task(buffer)
    path.write_text(buffer.text)

    # Or straight on a file
    archive_file(path, 4, complete=True)
"""

from .archive import (
    ArchiveLocator,
    Placement,
    archive_file,
    archive_task,
    complete_task,
    get_task,
    progress_task,
    read_history,
    resolve_ancestors,
)
from .config import ArchiveConfig
from .editor import Edit, EditBatch, Editor, Position, TextBuffer
from .models import Task
from .parsers import indent_depth, is_archivable, is_bullet, is_same_task, is_task, strip_task

__all__ = [
    # Operations
    'archive_task',
    'complete_task',
    'progress_task',
    'archive_file',
    'read_history',
    # Core pieces
    'ArchiveLocator',
    'Placement',
    'get_task',
    'resolve_ancestors',
    'Task',
    'ArchiveConfig',
    # Editor
    'Edit',
    'EditBatch',
    'Editor',
    'Position',
    'TextBuffer',
    # Line classification
    'indent_depth',
    'is_archivable',
    'is_bullet',
    'is_same_task',
    'is_task',
    'strip_task',
]
