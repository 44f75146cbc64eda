"""
Task model used by the archiver.

A Task is built for one archive operation: the raw task line plus the
ancestor lines needed to place it under the right parents in the History
section. It is discarded once the edits are computed.
"""

from dataclasses import dataclass, field
from typing import List, Literal

from history_archive.parsers.lines import (
    CHECKED,
    IN_PROGRESS,
    PLAIN,
    UNCHECKED,
    checkbox_state,
    replace_marker,
)


def format_checkbox_state(status: Literal["open", "in-progress", "done"]) -> str:
    """
    Format status as a task marker.

    Args:
        status: Task status

    Returns:
        Marker string (e.g., "- [ ]", "- [/]", "- [x]")
    """
    if status == "done":
        return CHECKED
    elif status == "in-progress":
        return IN_PROGRESS
    else:
        return UNCHECKED


def as_plain_bullet(line: str) -> str:
    """Turn a checklist line into a plain bullet ("\\t- [ ] A" -> "\\t- A")."""
    for marker in (UNCHECKED, CHECKED, IN_PROGRESS):
        rewritten = replace_marker(line, marker, PLAIN)
        if rewritten != line:
            return rewritten
    return line


@dataclass
class Task:
    """A task line together with its ancestor chain (outermost first)."""

    parents: List[str]
    task: str
    children: List[str] = field(default_factory=list)  # always empty for now

    def __post_init__(self) -> None:
        # Archived ancestors are structure, not tasks to check off
        self.parents = [as_plain_bullet(parent) for parent in self.parents]

    @property
    def status(self) -> Literal["open", "in-progress", "done"]:
        return checkbox_state(self.task)

    def mark_completed(self) -> None:
        """Check the task off ("- [ ]" -> "- [x]")."""
        self.task = replace_marker(self.task, UNCHECKED, format_checkbox_state("done"))

    def mark_in_progress(self) -> None:
        """Mark the task as started ("- [ ]" -> "- [/]")."""
        self.task = replace_marker(self.task, UNCHECKED, format_checkbox_state("in-progress"))

    def render(self, from_index: int = 0) -> str:
        """
        Format the task with part of its ancestor chain.

        Args:
            from_index: First ancestor to include (0 = all of them)

        Returns:
            Ancestor lines followed by the task line, newline separated
        """
        return "\n".join(self.parents[from_index:] + [self.task])

    def __str__(self) -> str:
        return self.render(0)
