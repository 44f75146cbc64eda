"""
Line classification for markdown checklists.

Pure functions over a single line of text. A line that does not exist
(past the end of the document) is passed around as None and is never a
bullet or a task.

Features:
- Bullet / task / archivable predicates
- Indentation depth in fixed units (tabs by default)
- Marker rewriting ("- [ ]" -> "- [x]") as explicit prefix replacement
- Task text normalization for "same task" comparisons
- Heading level detection
"""

from typing import Literal, Optional

BULLET = "- "
UNCHECKED = "- [ ]"
CHECKED = "- [x]"
IN_PROGRESS = "- [/]"
PLAIN = "-"

TASK_MARKERS = (UNCHECKED + " ", CHECKED + " ")

# Order matters: the bare bullet must be tried last.
STRIP_PREFIXES = ("- [ ] ", "- [x] ", "- [/] ", "- ")


def is_bullet(line: Optional[str]) -> bool:
    """True if the line contains a bullet marker."""
    return line is not None and BULLET in line


def is_task(line: Optional[str]) -> bool:
    """True if the line contains an unchecked or checked task marker."""
    return line is not None and any(marker in line for marker in TASK_MARKERS)


def is_archivable(line: Optional[str]) -> bool:
    """True for lines that count as entries of an archived list."""
    return is_bullet(line) or is_task(line)


def indent_depth(line: Optional[str], unit: str = "\t") -> int:
    """
    Count the indentation units at the start of a line.

    Args:
        line: Markdown line (None is treated as unindented)
        unit: One level of indentation (a tab, or a run of spaces)

    Returns:
        Indentation depth (0 for no indent)
    """
    if not line or not unit:
        return 0

    depth = 0
    pos = 0
    while line.startswith(unit, pos):
        depth += 1
        pos += len(unit)
    return depth


def split_indent(line: str) -> tuple[str, str]:
    """Split a line into its leading whitespace run and the rest."""
    body = line.lstrip()
    return line[:len(line) - len(body)], body


def replace_marker(line: str, old: str, new: str) -> str:
    """
    Rewrite a leading marker token, keeping the indentation.

    The line is read as <leading whitespace><marker><remainder>. If the
    marker after the whitespace is not `old`, the line is returned as is.

    Args:
        line: Markdown line
        old: Marker to replace (e.g. "- [ ]")
        new: Replacement marker (e.g. "- [x]")

    Returns:
        The rewritten line
    """
    indent, body = split_indent(line)
    if not body.startswith(old):
        return line
    return f"{indent}{new}{body[len(old):]}"


def checkbox_state(line: str) -> Literal["open", "in-progress", "done"]:
    """Status implied by the marker at the start of a task line."""
    _, body = split_indent(line)
    if body.startswith(CHECKED):
        return "done"
    elif body.startswith(IN_PROGRESS):
        return "in-progress"
    else:
        return "open"


def strip_task(text: str) -> str:
    """
    Remove surrounding whitespace and one leading bullet/checkbox marker.

    "\\t- [x] Buy milk" -> "Buy milk"
    """
    text = text.strip()
    for prefix in STRIP_PREFIXES:
        if text.startswith(prefix):
            return text[len(prefix):]
    return text


def is_same_task(first: str, second: str) -> bool:
    """Compare two lines ignoring indentation and bullet/checkbox markers."""
    return strip_task(first) == strip_task(second)


def heading_level(line: Optional[str]) -> Optional[int]:
    """
    Level of a markdown heading line.

    Args:
        line: Markdown line

    Returns:
        Number of leading '#' characters, or None if not a heading
    """
    if not line or not line.startswith('#'):
        return None

    level = len(line) - len(line.lstrip('#'))
    rest = line[level:]
    if rest and not rest.startswith(' '):
        return None
    return level
