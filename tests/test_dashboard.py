"""Tests for the static dashboard page."""

import re

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_dashboard_served(client: AsyncClient):
    resp = await client.get("/dashboard")
    assert resp.status_code == 200
    assert "LLM Price Board" in resp.text


@pytest.mark.asyncio
async def test_dashboard_escapes_every_interpolated_value(client: AsyncClient):
    html = (await client.get("/dashboard")).text
    # Inside rendered templates, each ${...} must go through esc().
    interpolations = re.findall(r"\$\{([^}]*)\}", html)
    assert interpolations
    assert all(expr.startswith("esc(") for expr in interpolations)


@pytest.mark.asyncio
async def test_dashboard_drops_stale_renders(client: AsyncClient):
    html = (await client.get("/dashboard")).text
    assert "const seq = ++latest;" in html
    assert "if (seq !== latest) return;" in html
