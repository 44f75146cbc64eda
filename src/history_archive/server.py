"""
history-archive MCP server entry point.

Startup sequence:
1. Read VAULT_ROOT and the archive layout settings from the environment
2. Register the MCP tools
3. Start REST API server in background thread (if API_ENABLED)
4. Run MCP server (stdio transport)
"""

import logging
import os
import sys
import threading
from pathlib import Path

from mcp.server.fastmcp import FastMCP

from history_archive.api.tools import register_tools
from history_archive.config import ArchiveConfig

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    stream=sys.stderr,
)
log = logging.getLogger(__name__)


def _start_api_server(vault_root: Path, config: ArchiveConfig, port: int) -> None:
    """Run the FastAPI/uvicorn server in a daemon thread."""
    import uvicorn

    from history_archive.api.app import create_app

    app = create_app(vault_root, config)
    log.info("Starting REST API on port %d", port)
    uvicorn.run(app, host="0.0.0.0", port=port, log_level="warning")


def main() -> None:
    vault_root_env = os.environ.get("VAULT_ROOT", "")
    if not vault_root_env:
        log.error("VAULT_ROOT environment variable is not set")
        sys.exit(1)

    vault_root = Path(vault_root_env)
    if not vault_root.is_dir():
        log.error("VAULT_ROOT does not exist or is not a directory: %s", vault_root)
        sys.exit(1)

    try:
        config = ArchiveConfig.from_env()
    except ValueError as e:
        log.error("Invalid archive settings: %s", e)
        sys.exit(1)

    log.info("Vault root: %s", vault_root)
    log.info("History heading: %r, indent unit: %r", config.history_heading, config.indent_unit)

    api_enabled = os.environ.get("API_ENABLED", "true").lower() in ("true", "1", "yes")
    if api_enabled:
        api_port = int(os.environ.get("API_PORT", "9400"))
        api_thread = threading.Thread(
            target=_start_api_server, args=(vault_root, config, api_port), daemon=True
        )
        api_thread.start()

    mcp = FastMCP("history-archive")
    register_tools(mcp, vault_root, config)

    log.info("Starting history-archive server")
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
