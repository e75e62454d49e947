"""Catalog, query and display models."""

from app.models.catalog import CatalogRow, DerivedRow, DisplayRow
from app.models.query import Currency, QueryParameters, SortDirection, SortKey
from app.models.views import CardView, ColumnHeader, TableRowView, TableView

__all__ = [
    "CardView",
    "CatalogRow",
    "ColumnHeader",
    "Currency",
    "DerivedRow",
    "DisplayRow",
    "QueryParameters",
    "SortDirection",
    "SortKey",
    "TableRowView",
    "TableView",
]
