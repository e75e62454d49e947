"""Interaction controller: owns the query parameters and clamps user input.

Each setter mirrors one dashboard control. Out-of-range values are clamped,
never rejected, and the projections are recomputed from current state on
every read.
"""

from __future__ import annotations

import math
from typing import Any

from app.core import pricing
from app.models.catalog import DerivedRow, DisplayRow
from app.models.query import (
    DEFAULT_FX_RATE,
    Currency,
    QueryParameters,
    SortDirection,
    SortKey,
)
from app.models.views import (
    CardView,
    ColumnHeader,
    TableRowView,
    TableView,
    finite_or_none,
)
from app.services.view_model import PricingViewModel

MAX_TOKENS = 10_000_000_000
SLIDER_MAX_TOKENS = 2_000_000
MIN_FX_RATE = 1.0
MAX_FX_RATE = 10_000.0

COLUMN_LABELS: dict[str, str] = {
    SortKey.MODEL_NAME: "Model Name",
    SortKey.INPUT: "Input / 1M",
    SortKey.OUTPUT: "Output / 1M",
}


def _as_number(value: Any) -> float:
    """Numeric-field semantics: blank or unparsable input counts as zero."""
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    try:
        return float(str(value).strip() or 0)
    except ValueError:
        return 0.0


class InteractionController:
    def __init__(
        self,
        view_model: PricingViewModel,
        params: QueryParameters | None = None,
    ) -> None:
        self.view_model = view_model
        self.params = params if params is not None else QueryParameters()

    # ── Inputs ───────────────────────────────────────────────

    def set_search(self, text: str | None) -> None:
        self.params.search_text = text or ""

    def set_input_tokens(self, value: Any) -> None:
        self.params.input_tokens = int(pricing.clamp(_as_number(value), 0, MAX_TOKENS))

    def set_output_tokens(self, value: Any) -> None:
        self.params.output_tokens = int(pricing.clamp(_as_number(value), 0, MAX_TOKENS))

    def slide_input_tokens(self, value: Any) -> None:
        self.params.input_tokens = int(pricing.clamp(_as_number(value), 0, SLIDER_MAX_TOKENS))

    def slide_output_tokens(self, value: Any) -> None:
        self.params.output_tokens = int(pricing.clamp(_as_number(value), 0, SLIDER_MAX_TOKENS))

    @property
    def input_slider(self) -> int:
        return min(self.params.input_tokens, SLIDER_MAX_TOKENS)

    @property
    def output_slider(self) -> int:
        return min(self.params.output_tokens, SLIDER_MAX_TOKENS)

    def set_currency(self, currency: Currency | str) -> None:
        self.params.currency = Currency(currency)

    def set_fx_rate(self, value: Any) -> None:
        self.params.fx_rate = pricing.clamp(_as_number(value), MIN_FX_RATE, MAX_FX_RATE)

    def reset_fx_rate(self) -> None:
        self.params.fx_rate = DEFAULT_FX_RATE

    def set_sort(self, key: str, direction: SortDirection | str) -> None:
        self.params.sort_key = key
        self.params.sort_direction = SortDirection(direction)

    def click_sort(self, key: str) -> None:
        self.params.sort_key, self.params.sort_direction = pricing.toggle_sort(
            self.params.sort_key, self.params.sort_direction, key,
        )

    # ── Projections ──────────────────────────────────────────

    @property
    def rate(self) -> float:
        return self.params.fx_rate if self.params.currency == Currency.EGP else 1.0

    def cards(self) -> list[DisplayRow]:
        return self.view_model.cards(self.params)

    def table(self) -> list[DerivedRow]:
        return self.view_model.table(self.params)

    def _money(self, amount_usd: float) -> str:
        converted = pricing.convert(amount_usd, self.params.currency, self.params.fx_rate)
        return pricing.format_money(converted, self.params.currency)

    def card_views(self) -> list[CardView]:
        input_label = pricing.format_tokens(self.params.input_tokens)
        output_label = pricing.format_tokens(self.params.output_tokens)
        views = []
        for row in self.cards():
            display_amount = pricing.convert(
                row.est_cost_usd, self.params.currency, self.params.fx_rate,
            )
            views.append(CardView(
                model_name=row.model_name,
                provider=row.provider,
                input_per_1m=self._money(row.input_price_per_1M_tokens),
                output_per_1m=self._money(row.output_price_per_1M_tokens),
                total_per_1m=self._money(row.total_per_1M),
                est_cost=pricing.format_money(display_amount, self.params.currency),
                est_cost_usd=finite_or_none(row.est_cost_usd),
                est_cost_display_amount=finite_or_none(display_amount),
                input_tokens=input_label,
                output_tokens=output_label,
            ))
        return views

    def column_headers(self) -> list[ColumnHeader]:
        headers = []
        for key, label in COLUMN_LABELS.items():
            active = self.params.sort_key == key
            indicator = ""
            if active:
                indicator = "▲" if self.params.sort_direction == SortDirection.ASC else "▼"
            headers.append(ColumnHeader(key=str(key), label=label, active=active, indicator=indicator))
        return headers

    def table_view(self) -> TableView:
        return TableView(
            columns=self.column_headers(),
            rows=[
                TableRowView(
                    model_name=row.model_name,
                    input_per_1m=self._money(row.input_price_per_1M_tokens),
                    output_per_1m=self._money(row.output_price_per_1M_tokens),
                )
                for row in self.table()
            ],
        )
