"""Display projections returned to the dashboard: money already formatted."""

import math

from pydantic import BaseModel, ConfigDict


def finite_or_none(value: float) -> float | None:
    """JSON has no NaN/Infinity; invalid prices go out as null."""
    return value if math.isfinite(value) else None


class CardView(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_name: str
    provider: str
    input_per_1m: str
    output_per_1m: str
    total_per_1m: str
    est_cost: str
    est_cost_usd: float | None
    est_cost_display_amount: float | None
    input_tokens: str
    output_tokens: str


class ColumnHeader(BaseModel):
    key: str
    label: str
    active: bool
    indicator: str  # "▲", "▼" or ""


class TableRowView(BaseModel):
    model_config = ConfigDict(protected_namespaces=())

    model_name: str
    input_per_1m: str
    output_per_1m: str


class TableView(BaseModel):
    columns: list[ColumnHeader]
    rows: list[TableRowView]
