"""
Archive handler functions shared by MCP tools, the REST API and the CLI.

Handlers return JSON-serializable dicts. User errors come back as
{"error": ...} instead of exceptions. Lines are 1-based, as shown in editors.
"""

import logging
from pathlib import Path
from typing import Optional

from history_archive.archive.files import archive_file, load_buffer
from history_archive.archive.history import read_history
from history_archive.config import ArchiveConfig
from history_archive.utils.dates import format_day, parse_date, today_string

log = logging.getLogger(__name__)


def resolve_document(vault_root: Path, file_path: str) -> Path:
    """
    Resolve a document path against the vault root.

    Raises:
        ValueError: if the path points outside the vault
    """
    path = Path(file_path)
    if not path.is_absolute():
        path = vault_root / path
    path = path.resolve()
    path.relative_to(vault_root.resolve())
    return path


def _open_document(vault_root: Path, file_path: str):
    """Return (path, None) or (None, error dict)."""
    try:
        path = resolve_document(vault_root, file_path)
    except ValueError:
        return None, {"error": f"Path is outside the vault: {file_path}"}
    if not path.is_file():
        return None, {"error": f"File not found: {file_path}"}
    return path, None


def _archive(
    vault_root: Path,
    *,
    file_path: str,
    line: int,
    complete: bool,
    ch: int = 0,
    date: Optional[str] = None,
    dry_run: bool = False,
    config: Optional[ArchiveConfig] = None,
) -> dict:
    config = config or ArchiveConfig()
    path, error = _open_document(vault_root, file_path)
    if error:
        return error

    if date:
        parsed = parse_date(date)
        if not parsed:
            return {"error": f"Could not parse date '{date}'"}
        day = format_day(parsed, config.date_format)
    else:
        day = today_string(config.date_format)

    try:
        task, content = archive_file(
            path, line - 1, complete=complete, ch=ch, today=day, config=config, dry_run=dry_run,
        )
    except IndexError:
        return {"error": f"Line {line} is out of range for {file_path}"}

    if task is None:
        return {"status": "skipped", "message": f"Line {line} is not a task"}

    action = "completed" if complete else "progressed"
    log.info("%s task %r in %s under %s%s", action.capitalize(), task.task.strip(),
             path, day, " (dry run)" if dry_run else "")

    result = {
        "status": "success",
        "action": action,
        "file_path": str(path),
        "line": line,
        "task": task.task.strip(),
        "task_status": task.status,
        "parents": [parent.strip() for parent in task.parents],
        "date": day,
        "dry_run": dry_run,
    }
    if dry_run:
        result["content"] = content
    return result


def handle_task_complete(
    vault_root: Path,
    *,
    file_path: str,
    line: int,
    ch: int = 0,
    date: Optional[str] = None,
    dry_run: bool = False,
    config: Optional[ArchiveConfig] = None,
) -> dict:
    return _archive(vault_root, file_path=file_path, line=line, complete=True,
                    ch=ch, date=date, dry_run=dry_run, config=config)


def handle_task_progress(
    vault_root: Path,
    *,
    file_path: str,
    line: int,
    ch: int = 0,
    date: Optional[str] = None,
    dry_run: bool = False,
    config: Optional[ArchiveConfig] = None,
) -> dict:
    return _archive(vault_root, file_path=file_path, line=line, complete=False,
                    ch=ch, date=date, dry_run=dry_run, config=config)


def handle_history_list(
    vault_root: Path,
    *,
    file_path: str,
    date: Optional[str] = None,
    config: Optional[ArchiveConfig] = None,
) -> dict:
    config = config or ArchiveConfig()
    path, error = _open_document(vault_root, file_path)
    if error:
        return error

    days = [dict(day, line=day["line"] + 1) for day in read_history(load_buffer(path), config)]
    if date:
        parsed = parse_date(date)
        if not parsed:
            return {"error": f"Could not parse date '{date}'"}
        wanted = format_day(parsed, config.date_format)
        days = [day for day in days if day["date"] == wanted]

    return {"file_path": str(path), "days": days}
