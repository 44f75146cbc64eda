"""MCP tool registration for history-archive."""

import json
import logging
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

from history_archive.api.handlers import (
    handle_history_list,
    handle_task_complete,
    handle_task_progress,
)
from history_archive.config import ArchiveConfig

log = logging.getLogger(__name__)


def register_tools(mcp: FastMCP, vault_root: Path, config: Optional[ArchiveConfig] = None) -> None:
    """Register all MCP tools onto the FastMCP instance."""
    config = config or ArchiveConfig()

    @mcp.tool()
    def task_complete(
        file_path: str,
        line: int,
        date: Optional[str] = None,
        dry_run: bool = False,
    ) -> str:
        """
        Complete a checklist task and move it into the note's History section.

        The task is checked off ("- [ ]" -> "- [x]"), copied under
        "# History" / "## YYYY-MM-DD" together with its parent tasks (as plain
        bullets), and removed from its original line. If the task was already
        archived that day (e.g. after task_progress) the archived copy is
        updated instead of duplicated.

        Args:
            file_path: Markdown file, absolute or relative to the vault root
            line: 1-based line number of the task
            date: Archive day (YYYY-MM-DD, "today", "yesterday", "last Friday").
                  Default: today
            dry_run: If True, return the resulting document without writing it

        Returns:
            JSON result with status "success" or "skipped", or an error
        """
        return json.dumps(
            handle_task_complete(
                vault_root, file_path=file_path, line=line, date=date,
                dry_run=dry_run, config=config,
            ),
            indent=2,
        )

    @mcp.tool()
    def task_progress(
        file_path: str,
        line: int,
        date: Optional[str] = None,
        dry_run: bool = False,
    ) -> str:
        """
        Record progress on a checklist task in the note's History section.

        The task is copied as "- [/]" under "# History" / "## YYYY-MM-DD" with
        its parent tasks; the original line is left in place.

        Args:
            file_path: Markdown file, absolute or relative to the vault root
            line: 1-based line number of the task
            date: Archive day. Default: today
            dry_run: If True, return the resulting document without writing it

        Returns:
            JSON result with status "success" or "skipped", or an error
        """
        return json.dumps(
            handle_task_progress(
                vault_root, file_path=file_path, line=line, date=date,
                dry_run=dry_run, config=config,
            ),
            indent=2,
        )

    @mcp.tool()
    def history_list(file_path: str, date: Optional[str] = None) -> str:
        """
        List the archived entries of a note's History section.

        Args:
            file_path: Markdown file, absolute or relative to the vault root
            date: Only return this day (same formats as task_complete)

        Returns:
            JSON object with a "days" array of {date, line, entries}
        """
        return json.dumps(
            handle_history_list(vault_root, file_path=file_path, date=date, config=config),
            indent=2,
        )
