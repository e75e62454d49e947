"""Application settings loaded from environment / .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from app.models.query import Currency


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ── Catalog ───────────────────────────────────────────
    catalog_source: str = "data/models-price.json"  # file path or http(s) URL
    catalog_timeout_seconds: float = 10.0

    # ── Calculator defaults ───────────────────────────────
    default_input_tokens: int = 100_000
    default_output_tokens: int = 0
    default_currency: Currency = Currency.USD
    default_fx_rate: float = 50.0

    # ── HTTP ──────────────────────────────────────────────
    allowed_origins: str = "*"
    log_level: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    return Settings()
