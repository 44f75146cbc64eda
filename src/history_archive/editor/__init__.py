from .base import Edit, Editor, Position, line_at
from .batch import EditBatch
from .buffer import TextBuffer

__all__ = [
    "Edit",
    "Editor",
    "Position",
    "line_at",
    "EditBatch",
    "TextBuffer",
]
