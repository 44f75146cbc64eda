from .handlers import (
    handle_history_list,
    handle_task_complete,
    handle_task_progress,
    resolve_document,
)

__all__ = [
    "handle_history_list",
    "handle_task_complete",
    "handle_task_progress",
    "resolve_document",
]
