from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SPLITLEDGER_",
        case_sensitive=False,
    )

    percentage_tolerance: float = Field(0.001, ge=0)
    default_currency: str = "USD"
    currency_symbol: str = "$"
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
