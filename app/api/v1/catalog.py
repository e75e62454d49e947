"""Catalog listing: derived rows exactly as loaded."""

from fastapi import APIRouter
from pydantic import BaseModel, ConfigDict

from app.api.deps import ViewModel
from app.models.views import finite_or_none

router = APIRouter(prefix="/catalog", tags=["catalog"])


class DerivedRowRead(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_name: str
    provider: str
    input_price_per_1M_tokens: float | None
    output_price_per_1M_tokens: float | None
    input_price_per_token: float | None
    output_price_per_token: float | None
    total_per_1M: float | None


class CatalogResponse(BaseModel):
    source: str
    error: str | None
    count: int
    rows: list[DerivedRowRead]


@router.get("", response_model=CatalogResponse)
async def list_catalog(view_model: ViewModel) -> CatalogResponse:
    """Derived catalog rows; unparsable prices are reported as null."""
    rows = [
        DerivedRowRead(
            model_name=row.model_name,
            provider=row.provider,
            input_price_per_1M_tokens=finite_or_none(row.input_price_per_1M_tokens),
            output_price_per_1M_tokens=finite_or_none(row.output_price_per_1M_tokens),
            input_price_per_token=finite_or_none(row.input_price_per_token),
            output_price_per_token=finite_or_none(row.output_price_per_token),
            total_per_1M=finite_or_none(row.total_per_1M),
        )
        for row in view_model.rows
    ]
    return CatalogResponse(
        source=view_model.source,
        error=view_model.catalog_error,
        count=len(rows),
        rows=rows,
    )
