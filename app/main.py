"""FastAPI application entrypoint."""

import logging
import os
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from app.api.v1 import v1_router
from app.core.config import get_settings
from app.services.catalog_loader import load_catalog
from app.services.view_model import PricingViewModel

DASHBOARD_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), "dashboard")

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    # Startup: one catalog fetch, no retry
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())
    result = await load_catalog(
        settings.catalog_source, timeout=settings.catalog_timeout_seconds,
    )
    app.state.view_model = PricingViewModel(
        result.rows, source=result.source, error=result.error,
    )
    if not result.ok:
        logger.warning("Serving an empty catalog: %s", result.error)
    yield
    # Shutdown: nothing to clean up


app = FastAPI(
    title="LLM Price Board",
    version="0.1.0",
    description="Per-model token pricing and session cost estimates",
    lifespan=lifespan,
)

# ── CORS ─────────────────────────────────────────────────────
_settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in _settings.allowed_origins.split(",")],
    allow_methods=["GET", "POST"],
    allow_headers=["*"],
)

# ── API routes ───────────────────────────────────────────────
app.include_router(v1_router)


@app.get("/health", tags=["system"])
async def health_check() -> dict:
    return {"status": "ok"}


# ── Dashboard ────────────────────────────────────────────────
if os.path.isdir(DASHBOARD_DIR):

    @app.get("/dashboard", include_in_schema=False)
    async def dashboard_root() -> FileResponse:
        return FileResponse(os.path.join(DASHBOARD_DIR, "index.html"))
