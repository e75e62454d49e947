"""V1 API router aggregation."""

from fastapi import APIRouter

from app.api.v1.catalog import router as catalog_router
from app.api.v1.pricing import router as pricing_router
from app.api.v1.system import router as system_router

v1_router = APIRouter(prefix="/v1")
v1_router.include_router(catalog_router)
v1_router.include_router(pricing_router)
v1_router.include_router(system_router)
