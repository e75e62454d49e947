"""Card grid and pricing table endpoints."""

from fastapi import APIRouter
from pydantic import BaseModel

from app.api.deps import Controller
from app.core.pricing import toggle_sort
from app.models.query import Currency, SortDirection, SortKey
from app.models.views import CardView, ColumnHeader, TableRowView

router = APIRouter(prefix="/pricing", tags=["pricing"])


# ── Schemas ──────────────────────────────────────────────────

class EffectiveQuery(BaseModel):
    search_text: str
    input_tokens: int
    output_tokens: int
    input_slider: int
    output_slider: int
    currency: Currency
    fx_rate: float
    rate: float


class CardsResponse(BaseModel):
    query: EffectiveQuery
    count: int
    cards: list[CardView]


class TableResponse(BaseModel):
    sort_key: str
    sort_dir: SortDirection
    currency: Currency
    count: int
    columns: list[ColumnHeader]
    rows: list[TableRowView]


class SortToggleRequest(BaseModel):
    sort_key: str = SortKey.MODEL_NAME
    sort_dir: SortDirection = SortDirection.ASC
    clicked: str


class SortState(BaseModel):
    sort_key: str
    sort_dir: SortDirection


# ── Routes ───────────────────────────────────────────────────

@router.get("/cards", response_model=CardsResponse)
async def get_cards(
    controller: Controller,
    q: str = "",
    input_tokens: str | None = None,
    output_tokens: str | None = None,
    currency: Currency | None = None,
    fx_rate: str | None = None,
) -> CardsResponse:
    """Filtered catalog with session cost estimates in the chosen currency.

    Token counts and the FX rate are clamped, never rejected.
    """
    controller.set_search(q)
    if input_tokens is not None:
        controller.set_input_tokens(input_tokens)
    if output_tokens is not None:
        controller.set_output_tokens(output_tokens)
    if currency is not None:
        controller.set_currency(currency)
    if fx_rate is not None:
        controller.set_fx_rate(fx_rate)

    params = controller.params
    cards = controller.card_views()
    return CardsResponse(
        query=EffectiveQuery(
            search_text=params.search_text,
            input_tokens=params.input_tokens,
            output_tokens=params.output_tokens,
            input_slider=controller.input_slider,
            output_slider=controller.output_slider,
            currency=params.currency,
            fx_rate=params.fx_rate,
            rate=controller.rate,
        ),
        count=len(cards),
        cards=cards,
    )


@router.get("/table", response_model=TableResponse)
async def get_table(
    controller: Controller,
    sort_key: str = SortKey.MODEL_NAME,
    sort_dir: SortDirection = SortDirection.ASC,
    currency: Currency | None = None,
    fx_rate: str | None = None,
) -> TableResponse:
    """Whole catalog sorted by column. Unknown sort keys keep catalog order."""
    controller.set_sort(sort_key, sort_dir)
    if currency is not None:
        controller.set_currency(currency)
    if fx_rate is not None:
        controller.set_fx_rate(fx_rate)

    view = controller.table_view()
    return TableResponse(
        sort_key=controller.params.sort_key,
        sort_dir=controller.params.sort_direction,
        currency=controller.params.currency,
        count=len(view.rows),
        columns=view.columns,
        rows=view.rows,
    )


@router.post("/sort", response_model=SortState)
async def post_sort_toggle(body: SortToggleRequest) -> SortState:
    """Next sort state after a column header click."""
    key, direction = toggle_sort(body.sort_key, body.sort_dir, body.clicked)
    return SortState(sort_key=key, sort_dir=direction)
