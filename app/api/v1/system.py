"""System health endpoint: reports catalog load status."""

import platform
import sys
import time

from fastapi import APIRouter
from pydantic import BaseModel

from app.api.deps import ViewModel
from app.core.config import get_settings

router = APIRouter(prefix="/system", tags=["system"])

_start_time = time.time()


class CatalogHealth(BaseModel):
    status: str  # "ok" or "error"
    source: str
    rows: int
    error: str | None = None


class HealthResponse(BaseModel):
    status: str
    uptime_seconds: int
    python_version: str
    platform: str
    catalog: CatalogHealth
    config: dict


@router.get("/health", response_model=HealthResponse)
async def system_health(view_model: ViewModel) -> HealthResponse:
    """Catalog status plus a safe subset of the running config."""
    settings = get_settings()
    catalog = CatalogHealth(
        status="error" if view_model.catalog_error else "ok",
        source=view_model.source,
        rows=len(view_model.rows),
        error=view_model.catalog_error,
    )
    return HealthResponse(
        status="ok" if catalog.status == "ok" else "degraded",
        uptime_seconds=int(time.time() - _start_time),
        python_version=sys.version.split()[0],
        platform=platform.platform(),
        catalog=catalog,
        config={
            "catalog_source": settings.catalog_source,
            "default_input_tokens": settings.default_input_tokens,
            "default_output_tokens": settings.default_output_tokens,
            "default_currency": settings.default_currency,
            "default_fx_rate": settings.default_fx_rate,
            "cors_origins": settings.allowed_origins,
        },
    )
