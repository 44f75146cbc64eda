from .lines import (
    heading_level,
    indent_depth,
    is_archivable,
    is_bullet,
    is_same_task,
    is_task,
    replace_marker,
    strip_task,
)

__all__ = [
    "heading_level",
    "indent_depth",
    "is_archivable",
    "is_bullet",
    "is_same_task",
    "is_task",
    "replace_marker",
    "strip_task",
]
