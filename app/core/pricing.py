"""Pricing pipeline: derive per-token prices, filter, estimate, convert and sort.

Every function here is pure. The view model and controller re-run them on each
change of the catalog or query parameters.
"""

import math
import unicodedata
from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal, localcontext
from operator import attrgetter

from app.models.catalog import CatalogRow, DerivedRow, DisplayRow
from app.models.query import Currency, SortDirection, SortKey

MIN_FRACTION_DIGITS = 2
MAX_FRACTION_DIGITS = 4

_CURRENCY_PREFIX: dict[str, str] = {
    Currency.USD: "$",
    Currency.EGP: "EGP ",
}

# Numeric sort keys map to the per-1M price they compare on.
_PRICE_SORT_FIELDS: dict[str, str] = {
    SortKey.INPUT: "input_price_per_1M_tokens",
    SortKey.OUTPUT: "output_price_per_1M_tokens",
}


# ── Derivation ───────────────────────────────────────────────

def derive_rows(catalog: Iterable[CatalogRow]) -> list[DerivedRow]:
    """Attach per-token and total-per-1M prices to every catalog row."""
    return [DerivedRow.from_catalog(row) for row in catalog]


def filter_rows(rows: Sequence[DerivedRow], search_text: str) -> list[DerivedRow]:
    """Case-insensitive substring match on model name or provider."""
    term = search_text.strip().lower()
    if not term:
        return list(rows)
    return [
        row for row in rows
        if term in row.model_name.lower() or term in row.provider.lower()
    ]


def estimate_cost(row: DerivedRow, input_tokens: float, output_tokens: float) -> float:
    """USD cost of a session with the given token counts."""
    return input_tokens * row.input_price_per_token + output_tokens * row.output_price_per_token


def annotate_cost(
    rows: Iterable[DerivedRow], input_tokens: float, output_tokens: float,
) -> list[DisplayRow]:
    return [
        DisplayRow(
            **row.model_dump(),
            est_cost_usd=estimate_cost(row, input_tokens, output_tokens),
        )
        for row in rows
    ]


# ── Sorting ──────────────────────────────────────────────────

def _collation_key(name: str) -> tuple[str, str, str]:
    """Accent- and case-insensitive primary order, lowercase first on ties."""
    folded = name.casefold()
    base = "".join(
        ch for ch in unicodedata.normalize("NFKD", folded) if not unicodedata.combining(ch)
    )
    return base, folded, name.swapcase()


def sort_rows(
    rows: Sequence[DerivedRow], sort_key: str, sort_direction: str,
) -> list[DerivedRow]:
    """Return a new list ordered for the pricing table.

    Ties keep their input order in both directions. Rows whose price is NaN
    cannot be compared and are appended after the sorted rows. An unknown
    sort key leaves the order untouched.
    """
    reverse = sort_direction != SortDirection.ASC

    if sort_key == SortKey.MODEL_NAME:
        return sorted(rows, key=lambda row: _collation_key(row.model_name), reverse=reverse)

    field = _PRICE_SORT_FIELDS.get(sort_key)
    if field is None:
        return list(rows)

    value = attrgetter(field)
    comparable = [row for row in rows if not math.isnan(value(row))]
    incomparable = [row for row in rows if math.isnan(value(row))]
    return sorted(comparable, key=value, reverse=reverse) + incomparable


def toggle_sort(
    current_key: str, current_direction: str, clicked_key: str,
) -> tuple[str, SortDirection]:
    """Clicking the active column flips direction; another column starts ascending."""
    if clicked_key == current_key:
        if current_direction == SortDirection.ASC:
            return current_key, SortDirection.DESC
        return current_key, SortDirection.ASC
    return clicked_key, SortDirection.ASC


# ── Currency ─────────────────────────────────────────────────

def convert(amount_usd: float, currency: str, fx_rate: float) -> float:
    """Convert a USD amount into the display currency. fx_rate is not validated."""
    if currency == Currency.EGP:
        return amount_usd * fx_rate
    return amount_usd


def format_money(amount: float, currency: str) -> str:
    """Format with grouping and 2-4 fractional digits, e.g. ``$1,234.5678``."""
    prefix = _CURRENCY_PREFIX.get(currency, f"{currency} ")
    if math.isnan(amount):
        return f"{prefix}NaN"
    if math.isinf(amount):
        return f"-{prefix}∞" if amount < 0 else f"{prefix}∞"

    with localcontext() as ctx:
        ctx.prec = len(str(int(abs(amount)))) + MAX_FRACTION_DIGITS + 1
        quantized = Decimal(str(amount)).quantize(
            Decimal(1).scaleb(-MAX_FRACTION_DIGITS), rounding=ROUND_HALF_UP,
        )
    whole, _, fraction = f"{abs(quantized):,.{MAX_FRACTION_DIGITS}f}".partition(".")
    fraction = fraction.rstrip("0").ljust(MIN_FRACTION_DIGITS, "0")
    sign = "-" if quantized < 0 else ""
    return f"{sign}{prefix}{whole}.{fraction}"


def format_tokens(count: int) -> str:
    return f"{count:,}"


def clamp(value: float, low: float, high: float) -> float:
    """Clamp into ``[low, high]``; NaN falls to ``low``."""
    if math.isnan(value):
        return low
    return max(low, min(high, value))
