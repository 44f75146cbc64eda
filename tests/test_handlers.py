"""
Tests for api/handlers.py and archive/files.py.

Uses a temporary vault on disk.
"""

import sys
from datetime import datetime, timedelta
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from history_archive.api.handlers import (
    handle_history_list,
    handle_task_complete,
    handle_task_progress,
    resolve_document,
)
from history_archive.archive.files import archive_file
from history_archive.config import ArchiveConfig

TODAY = "2026-02-15"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_vault(tmp_path: Path) -> Path:
    vault = tmp_path / "vault"
    vault.mkdir()

    (vault / "TASKS.md").write_text(
        "### Open\n"
        "- [ ] Project\n"
        "\t- [ ] Write tests\n"
        "\t- [ ] Ship it\n"
        "- plain note\n",
        encoding="utf-8",
    )

    notes = vault / "notes"
    notes.mkdir()
    (notes / "daily.md").write_text(
        "- [ ] Call dentist\n"
        "# History\n"
        "## 2026-02-14\n"
        "- [x] File taxes\n",
        encoding="utf-8",
    )

    return vault


@pytest.fixture
def vault(tmp_path):
    return _make_vault(tmp_path)


# ---------------------------------------------------------------------------
# archive_file
# ---------------------------------------------------------------------------

class TestArchiveFile:
    def test_writes_file(self, vault):
        path = vault / "TASKS.md"
        task, content = archive_file(path, 2, complete=True, today=TODAY)
        assert task.task == "\t- [x] Write tests"
        assert path.read_text(encoding="utf-8") == content
        assert content == (
            "### Open\n- [ ] Project\n\t- [ ] Ship it\n- plain note\n"
            f"\n# History\n## {TODAY}\n- Project\n\t- [x] Write tests"
        )

    def test_dry_run_leaves_file(self, vault):
        path = vault / "TASKS.md"
        before = path.read_text(encoding="utf-8")
        task, content = archive_file(path, 2, complete=True, today=TODAY, dry_run=True)
        assert task is not None
        assert content != before
        assert path.read_text(encoding="utf-8") == before

    def test_not_a_task_does_not_write(self, vault):
        path = vault / "TASKS.md"
        before = path.read_text(encoding="utf-8")
        task, content = archive_file(path, 4, complete=True, today=TODAY)
        assert task is None
        assert content == before

    def test_line_out_of_range(self, vault):
        with pytest.raises(IndexError):
            archive_file(vault / "TASKS.md", 99, complete=True)


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------

class TestHandleTaskComplete:
    def test_success(self, vault):
        result = handle_task_complete(vault, file_path="notes/daily.md", line=1, date=TODAY)
        assert result["status"] == "success"
        assert result["action"] == "completed"
        assert result["task"] == "- [x] Call dentist"
        assert result["task_status"] == "done"
        assert result["date"] == TODAY
        assert (vault / "notes" / "daily.md").read_text(encoding="utf-8") == (
            "# History\n## 2026-02-14\n- [x] File taxes\n"
            f"## {TODAY}\n- [x] Call dentist\n"
        )

    def test_reports_parents(self, vault):
        result = handle_task_complete(vault, file_path="TASKS.md", line=3, date=TODAY)
        assert result["parents"] == ["- Project"]

    def test_natural_language_date(self, vault):
        result = handle_task_complete(vault, file_path="TASKS.md", line=3, date="yesterday")
        expected = (datetime.now().date() - timedelta(days=1)).isoformat()
        assert result["date"] == expected

    def test_default_date_is_today(self, vault):
        result = handle_task_complete(vault, file_path="TASKS.md", line=3)
        assert result["date"] == datetime.now().strftime("%Y-%m-%d")

    def test_absolute_path_inside_vault(self, vault):
        result = handle_task_complete(vault, file_path=str(vault / "TASKS.md"), line=3, date=TODAY)
        assert result["status"] == "success"

    def test_dry_run(self, vault):
        before = (vault / "TASKS.md").read_text(encoding="utf-8")
        result = handle_task_complete(vault, file_path="TASKS.md", line=3, date=TODAY, dry_run=True)
        assert result["dry_run"] is True
        assert "# History" in result["content"]
        assert (vault / "TASKS.md").read_text(encoding="utf-8") == before

    def test_not_a_task(self, vault):
        result = handle_task_complete(vault, file_path="TASKS.md", line=5, date=TODAY)
        assert result["status"] == "skipped"

    def test_line_out_of_range(self, vault):
        assert "error" in handle_task_complete(vault, file_path="TASKS.md", line=50)
        assert "error" in handle_task_complete(vault, file_path="TASKS.md", line=0)

    def test_missing_file(self, vault):
        result = handle_task_complete(vault, file_path="nope.md", line=1)
        assert "not found" in result["error"]

    def test_outside_vault(self, vault):
        result = handle_task_complete(vault, file_path="../escape.md", line=1)
        assert "outside the vault" in result["error"]

    def test_bad_date(self, vault):
        result = handle_task_complete(vault, file_path="TASKS.md", line=3, date="someday maybe")
        assert "Could not parse date" in result["error"]


class TestHandleTaskProgress:
    def test_progress_then_complete(self, vault):
        progress = handle_task_progress(vault, file_path="TASKS.md", line=3, date=TODAY)
        assert progress["action"] == "progressed"
        assert progress["task"] == "- [/] Write tests"

        complete = handle_task_complete(vault, file_path="TASKS.md", line=3, date=TODAY)
        assert complete["status"] == "success"

        history = handle_history_list(vault, file_path="TASKS.md", date=TODAY)
        assert history["days"][0]["entries"] == ["- Project", "\t- [x] Write tests"]


class TestHandleHistoryList:
    def test_lists_days(self, vault):
        result = handle_history_list(vault, file_path="notes/daily.md")
        assert result["days"] == [
            {"date": "2026-02-14", "line": 3, "entries": ["- [x] File taxes"]},
        ]

    def test_filter_by_date(self, vault):
        result = handle_history_list(vault, file_path="notes/daily.md", date="2026-01-01")
        assert result["days"] == []

    def test_no_history(self, vault):
        assert handle_history_list(vault, file_path="TASKS.md")["days"] == []

    def test_custom_config(self, vault):
        config = ArchiveConfig(history_heading="# Log")
        assert handle_history_list(vault, file_path="notes/daily.md", config=config)["days"] == []


class TestResolveDocument:
    def test_relative(self, vault):
        assert resolve_document(vault, "TASKS.md") == (vault / "TASKS.md").resolve()

    def test_escape_rejected(self, vault):
        with pytest.raises(ValueError):
            resolve_document(vault, "../../etc/passwd")
