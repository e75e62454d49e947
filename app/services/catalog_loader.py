"""Catalog loader: fetch the model price list once at startup.

The catalog is a JSON array of objects with ``model_name``, ``provider``,
``input_price_per_1M_tokens`` and ``output_price_per_1M_tokens``. Any failure
degrades to an empty catalog; the reason is logged and kept on the result.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx

from app.models.catalog import CatalogRow

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class CatalogFormatError(ValueError):
    """The catalog payload decoded but is not a JSON array."""


@dataclass
class CatalogLoadResult:
    rows: list[CatalogRow] = field(default_factory=list)
    source: str = ""
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def resolve_path(source: str) -> Path:
    """Relative catalog paths resolve against the project root."""
    path = Path(source)
    return path if path.is_absolute() else PROJECT_ROOT / path


def parse_catalog(payload: Any) -> list[CatalogRow]:
    """Turn a decoded JSON payload into catalog rows."""
    if not isinstance(payload, list):
        raise CatalogFormatError(
            f"expected a JSON array, got {type(payload).__name__}"
        )
    return [CatalogRow.from_raw(item) for item in payload]


async def _fetch_remote(url: str, timeout: float, transport: httpx.AsyncBaseTransport | None) -> Any:
    async with httpx.AsyncClient(timeout=timeout, transport=transport) as client:
        resp = await client.get(url, headers={"Cache-Control": "no-store"})
        resp.raise_for_status()
        return resp.json()


def _read_local(path: Path) -> Any:
    with path.open(encoding="utf-8") as fh:
        return json.load(fh)


async def load_catalog(
    source: str,
    *,
    timeout: float = 10.0,
    transport: httpx.AsyncBaseTransport | None = None,
) -> CatalogLoadResult:
    """Load the catalog from a file path or http(s) URL. Never raises."""
    try:
        if is_remote(source):
            payload = await _fetch_remote(source, timeout, transport)
        else:
            payload = _read_local(resolve_path(source))
        rows = parse_catalog(payload)
    except (OSError, ValueError, httpx.HTTPError, httpx.InvalidURL) as exc:
        logger.warning("Catalog load from %s failed: %s", source, exc)
        return CatalogLoadResult(rows=[], source=source, error=str(exc) or type(exc).__name__)

    logger.info("Loaded %d catalog rows from %s", len(rows), source)
    return CatalogLoadResult(rows=rows, source=source)
