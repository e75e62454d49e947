"""Pricing view model: owns the loaded catalog and produces the two projections."""

from __future__ import annotations

from collections.abc import Iterable

from app.core import pricing
from app.models.catalog import CatalogRow, DerivedRow, DisplayRow
from app.models.query import QueryParameters, SortDirection, SortKey

# Only real columns are memoized; unknown keys leave catalog order untouched.
_SORT_KEYS = frozenset(key.value for key in SortKey)


class PricingViewModel:
    """Catalog owner for the process lifetime.

    Derived rows are computed once per catalog assignment. The sorted table
    projection is memoized per (sort_key, sort_direction) and dropped whenever
    the catalog changes.
    """

    def __init__(
        self,
        catalog: Iterable[CatalogRow] = (),
        *,
        source: str = "",
        error: str | None = None,
    ) -> None:
        self.source = source
        self.catalog_error = error
        self._rows: list[DerivedRow] = []
        self._table_memo: dict[tuple[str, str], list[DerivedRow]] = {}
        self.set_catalog(catalog)

    def set_catalog(self, catalog: Iterable[CatalogRow]) -> None:
        self._rows = pricing.derive_rows(catalog)
        self._table_memo.clear()

    @property
    def rows(self) -> list[DerivedRow]:
        return list(self._rows)

    def cards(self, params: QueryParameters) -> list[DisplayRow]:
        """Filtered rows annotated with the session cost estimate."""
        filtered = pricing.filter_rows(self._rows, params.search_text)
        return pricing.annotate_cost(filtered, params.input_tokens, params.output_tokens)

    def table(self, params: QueryParameters) -> list[DerivedRow]:
        """Full catalog in table order; the search text does not apply here."""
        if params.sort_key not in _SORT_KEYS:
            return list(self._rows)

        direction = (
            SortDirection.ASC if params.sort_direction == SortDirection.ASC else SortDirection.DESC
        )
        memo_key = (str(params.sort_key), str(direction))
        ordered = self._table_memo.get(memo_key)
        if ordered is None:
            ordered = pricing.sort_rows(self._rows, params.sort_key, params.sort_direction)
            self._table_memo[memo_key] = ordered
        return list(ordered)
