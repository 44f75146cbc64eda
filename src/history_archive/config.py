"""
Archive layout settings.

Defaults match the document format the archiver reads and writes:

    # History
    ## 2026-02-15
    - Parent
    	- [x] Task

Every setting can be overridden from the environment (see from_env).
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_DEFAULT_INDENT_UNIT = "\t"


def _parse_indent_unit(raw: str) -> str:
    """'tab' (or empty) -> a tab; a number -> that many spaces."""
    raw = raw.strip().lower()
    if not raw or raw in ("tab", "tabs", "\\t"):
        return _DEFAULT_INDENT_UNIT
    count = int(raw)
    if count < 1:
        raise ValueError(f"INDENT_UNIT must be 'tab' or a positive number, got {raw!r}")
    return " " * count


@dataclass(frozen=True)
class ArchiveConfig:
    history_heading: str = "# History"
    date_heading_prefix: str = "## "
    indent_unit: str = _DEFAULT_INDENT_UNIT
    date_format: str = "%Y-%m-%d"

    def date_heading(self, day: str) -> str:
        """Heading line for one day's archive ("## 2026-02-15")."""
        return f"{self.date_heading_prefix}{day}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ArchiveConfig":
        """
        Build a config from HISTORY_HEADING, DATE_HEADING_PREFIX, INDENT_UNIT
        and DATE_FORMAT, falling back to the defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            history_heading=env.get("HISTORY_HEADING", defaults.history_heading),
            date_heading_prefix=env.get("DATE_HEADING_PREFIX", defaults.date_heading_prefix),
            indent_unit=_parse_indent_unit(env.get("INDENT_UNIT", "tab")),
            date_format=env.get("DATE_FORMAT", defaults.date_format),
        )
