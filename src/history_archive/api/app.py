"""FastAPI application factory for the history-archive REST API."""

from pathlib import Path
from typing import Optional

from fastapi import APIRouter, FastAPI

from history_archive.api.routes import register_routes
from history_archive.config import ArchiveConfig


def create_app(vault_root: Path, config: Optional[ArchiveConfig] = None) -> FastAPI:
    """Build and return a FastAPI app serving one vault."""
    app = FastAPI(title="history-archive", docs_url="/api/docs", openapi_url="/api/openapi.json")

    api = APIRouter(prefix="/api")
    register_routes(api, vault_root, config)
    app.include_router(api)

    return app
