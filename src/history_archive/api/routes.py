"""REST API routes for history-archive."""

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, Field

from history_archive.api.handlers import (
    handle_history_list,
    handle_task_complete,
    handle_task_progress,
)
from history_archive.config import ArchiveConfig


# ---------------------------------------------------------------------------
# Request body models
# ---------------------------------------------------------------------------


class ArchiveBody(BaseModel):
    file_path: str
    line: int = Field(ge=1)
    ch: int = Field(default=0, ge=0)
    date: Optional[str] = None
    dry_run: bool = False


def _raise_for_error(result: dict) -> dict:
    if "error" in result:
        status_code = 404 if "not found" in result["error"] else 400
        raise HTTPException(status_code=status_code, detail=result["error"])
    return result


# ---------------------------------------------------------------------------
# Route registration
# ---------------------------------------------------------------------------


def register_routes(app_router: APIRouter, vault_root: Path, config: Optional[ArchiveConfig] = None) -> None:
    """Attach all REST routes for one vault."""
    config = config or ArchiveConfig()

    @app_router.post("/tasks/complete")
    def complete_task(body: ArchiveBody):
        return _raise_for_error(
            handle_task_complete(vault_root, config=config, **body.model_dump())
        )

    @app_router.post("/tasks/progress")
    def progress_task(body: ArchiveBody):
        return _raise_for_error(
            handle_task_progress(vault_root, config=config, **body.model_dump())
        )

    @app_router.get("/history")
    def list_history(
        file_path: str = Query(...),
        date: Optional[str] = Query(None),
    ):
        return _raise_for_error(
            handle_history_list(vault_root, file_path=file_path, date=date, config=config)
        )
