# src/wnlemma/core/config.py
"""
Runtime settings, read from WNLEMMA_* environment variables.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="WNLEMMA_", env_file=".env", extra="ignore")

    # --- WordNet data ---
    WORDNET_DIR: str = "~/nltk_data/corpora/wordnet"

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # "console" or "json"

    # --- Lemma cache (Redis) ---
    CACHE_ENABLED: bool = False
    REDIS_URL: str = "redis://localhost:6379/0"
    CACHE_PREFIX: str = "wnlemma"

    # --- CLI remote mode ---
    API_URL: str = "http://localhost:8000/api"


@lru_cache
def get_settings() -> Settings:
    return Settings()
