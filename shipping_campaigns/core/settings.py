# shipping_campaigns/core/settings.py
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CAMPAIGNS_PATH = str(Path(__file__).resolve().parents[1] / "campaigns" / "default.yaml")


class Settings(BaseSettings):
    # --- Campaigns ---
    CAMPAIGNS_PATH: str = DEFAULT_CAMPAIGNS_PATH

    # --- Output ---
    CURRENCY: str = "USD"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    # tests: get_settings.cache_clear() na monkeypatch.setenv
    return Settings()
