from .ancestors import get_task, resolve_ancestors
from .files import archive_file, load_buffer
from .history import (
    archive_task,
    complete_task,
    find_date_section,
    find_history_section,
    history_section_end,
    progress_task,
    read_history,
)
from .locator import ArchiveLocator, Placement, ScanState

__all__ = [
    "get_task",
    "resolve_ancestors",
    "archive_file",
    "load_buffer",
    "archive_task",
    "complete_task",
    "find_date_section",
    "find_history_section",
    "history_section_end",
    "progress_task",
    "read_history",
    "ArchiveLocator",
    "Placement",
    "ScanState",
]
