"""Catalog rows: raw entries, derived prices and cost-annotated display rows."""

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

TOKENS_PER_MILLION = 1_000_000


def parse_price(value: Any) -> float:
    """Parse a JSON price (number or numeric string); anything else is NaN."""
    if isinstance(value, bool):
        return math.nan
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            # ints beyond float range, same result as float("1e400")
            return math.inf if value > 0 else -math.inf
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError:
            return math.nan
    return math.nan


def parse_label(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return ""


class CatalogRow(BaseModel):
    """One priced model as it appears in the catalog file."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    model_name: str = ""
    provider: str = ""
    input_price_per_1M_tokens: float = math.nan
    output_price_per_1M_tokens: float = math.nan

    @field_validator("model_name", "provider", mode="before")
    @classmethod
    def _coerce_label(cls, value: Any) -> str:
        return parse_label(value)

    @field_validator("input_price_per_1M_tokens", "output_price_per_1M_tokens", mode="before")
    @classmethod
    def _coerce_price(cls, value: Any) -> float:
        return parse_price(value)

    @classmethod
    def from_raw(cls, raw: Any) -> "CatalogRow":
        """Build a row from one decoded JSON element. Never raises."""
        if not isinstance(raw, dict):
            return cls()
        fields = {name: raw[name] for name in cls.model_fields if name in raw}
        return cls.model_validate(fields)


class DerivedRow(CatalogRow):
    """Catalog row plus per-token and per-1M aggregate prices."""

    input_price_per_token: float = math.nan
    output_price_per_token: float = math.nan
    total_per_1M: float = math.nan

    @classmethod
    def from_catalog(cls, row: CatalogRow) -> "DerivedRow":
        return cls(
            **row.model_dump(),
            input_price_per_token=row.input_price_per_1M_tokens / TOKENS_PER_MILLION,
            output_price_per_token=row.output_price_per_1M_tokens / TOKENS_PER_MILLION,
            total_per_1M=row.input_price_per_1M_tokens + row.output_price_per_1M_tokens,
        )


class DisplayRow(DerivedRow):
    """Derived row annotated with the session cost estimate in USD."""

    est_cost_usd: float = math.nan
