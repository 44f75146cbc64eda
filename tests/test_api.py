"""
Tests for the REST API routes.

Uses FastAPI TestClient against a temp vault.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest
from fastapi.testclient import TestClient

from history_archive.api.app import create_app


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_vault(tmp_path: Path) -> Path:
    vault = tmp_path / "vault"
    vault.mkdir()
    (vault / "TASKS.md").write_text(
        "- [ ] Release\n"
        "\t- [ ] Tag version\n"
        "\t\t- [ ] Update changelog\n"
        "- note without checkbox\n",
        encoding="utf-8",
    )
    return vault


@pytest.fixture
def vault(tmp_path):
    return _make_vault(tmp_path)


@pytest.fixture
def client(vault):
    return TestClient(create_app(vault))


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

class TestCompleteRoute:
    def test_complete(self, client, vault):
        resp = client.post("/api/tasks/complete", json={
            "file_path": "TASKS.md", "line": 3, "date": "2026-02-15",
        })
        assert resp.status_code == 200
        data = resp.json()
        assert data["task"] == "- [x] Update changelog"
        assert data["parents"] == ["- Release", "- Tag version"]
        assert (vault / "TASKS.md").read_text(encoding="utf-8").endswith(
            "# History\n## 2026-02-15\n- Release\n\t- Tag version\n\t\t- [x] Update changelog"
        )

    def test_skipped(self, client):
        resp = client.post("/api/tasks/complete", json={"file_path": "TASKS.md", "line": 4})
        assert resp.status_code == 200
        assert resp.json()["status"] == "skipped"

    def test_missing_file(self, client):
        resp = client.post("/api/tasks/complete", json={"file_path": "nope.md", "line": 1})
        assert resp.status_code == 404

    def test_bad_date(self, client):
        resp = client.post("/api/tasks/complete", json={
            "file_path": "TASKS.md", "line": 1, "date": "whenever",
        })
        assert resp.status_code == 400

    def test_line_must_be_positive(self, client):
        resp = client.post("/api/tasks/complete", json={"file_path": "TASKS.md", "line": 0})
        assert resp.status_code == 422


class TestProgressRoute:
    def test_progress(self, client, vault):
        resp = client.post("/api/tasks/progress", json={
            "file_path": "TASKS.md", "line": 2, "date": "2026-02-15",
        })
        assert resp.status_code == 200
        assert resp.json()["task"] == "\t- [/] Tag version".strip()
        assert "\t- [ ] Tag version\n" in (vault / "TASKS.md").read_text(encoding="utf-8")


class TestHistoryRoute:
    def test_history(self, client):
        client.post("/api/tasks/progress", json={
            "file_path": "TASKS.md", "line": 1, "date": "2026-02-15",
        })
        resp = client.get("/api/history", params={"file_path": "TASKS.md"})
        assert resp.status_code == 200
        assert resp.json()["days"][0]["entries"] == ["- [/] Release"]

    def test_outside_vault(self, client):
        resp = client.get("/api/history", params={"file_path": "../x.md"})
        assert resp.status_code == 400
