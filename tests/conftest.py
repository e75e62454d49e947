"""Shared test fixtures: in-memory catalog + test client."""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from app.api.deps import get_view_model
from app.main import app
from app.models.catalog import CatalogRow
from app.services.view_model import PricingViewModel

SAMPLE_CATALOG = [
    {"model_name": "gpt-4o", "provider": "OpenAI",
     "input_price_per_1M_tokens": "2.50", "output_price_per_1M_tokens": "10.00"},
    {"model_name": "claude-sonnet-4-5", "provider": "Anthropic",
     "input_price_per_1M_tokens": 3, "output_price_per_1M_tokens": 15},
    {"model_name": "gemini-1.5-flash", "provider": "Google",
     "input_price_per_1M_tokens": 0.075, "output_price_per_1M_tokens": 0.30},
    {"model_name": "Mistral-Large", "provider": "Mistral",
     "input_price_per_1M_tokens": "2", "output_price_per_1M_tokens": "6"},
]


@pytest.fixture
def catalog() -> list[CatalogRow]:
    return [CatalogRow.from_raw(item) for item in SAMPLE_CATALOG]


@pytest.fixture
def view_model(catalog) -> PricingViewModel:
    return PricingViewModel(catalog, source="memory://sample")


@pytest.fixture
async def client(view_model) -> AsyncGenerator[AsyncClient, None]:
    """HTTPX async test client with the view model overridden."""
    app.dependency_overrides[get_view_model] = lambda: view_model

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def empty_client() -> AsyncGenerator[AsyncClient, None]:
    """Client serving the degraded state after a failed catalog load."""
    empty = PricingViewModel(source="data/missing.json", error="No such file")
    app.dependency_overrides[get_view_model] = lambda: empty

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
