"""Session query parameters driving the card grid and the pricing table."""

from dataclasses import dataclass
from enum import StrEnum


class Currency(StrEnum):
    USD = "USD"
    EGP = "EGP"


class SortKey(StrEnum):
    MODEL_NAME = "model_name"
    INPUT = "input"
    OUTPUT = "output"


class SortDirection(StrEnum):
    ASC = "asc"
    DESC = "desc"


DEFAULT_INPUT_TOKENS = 100_000
DEFAULT_OUTPUT_TOKENS = 0
DEFAULT_FX_RATE = 50.0


@dataclass
class QueryParameters:
    """Mutable UI state. Values are clamped by the controller before they land here."""
    search_text: str = ""
    input_tokens: int = DEFAULT_INPUT_TOKENS
    output_tokens: int = DEFAULT_OUTPUT_TOKENS
    currency: Currency = Currency.USD
    fx_rate: float = DEFAULT_FX_RATE
    sort_key: str = SortKey.MODEL_NAME
    sort_direction: SortDirection = SortDirection.ASC
