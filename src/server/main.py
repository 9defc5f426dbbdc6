"""FastAPI application for the mdtree demonstrator."""

from __future__ import annotations

from fastapi import FastAPI

from mdtree.utils.logging_config import configure_logging
from server.routers.render import router as render_router
from server.server_config import APP_DESCRIPTION, APP_TITLE

configure_logging()

app = FastAPI(title=APP_TITLE, description=APP_DESCRIPTION)
app.include_router(render_router)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe."""
    return {"status": "ok"}
