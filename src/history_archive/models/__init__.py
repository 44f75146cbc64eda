from .task import Task, as_plain_bullet, format_checkbox_state

__all__ = [
    "Task",
    "as_plain_bullet",
    "format_checkbox_state",
]
