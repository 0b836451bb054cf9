"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """valguard settings loaded from VALGUARD_* environment variables."""

    # i18n
    DEFAULT_LOCALE: str = ""  # Invariant catalog when unset
    MESSAGES_DIR: str = ""    # Extra messages_*.json layered over the built-ins

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    model_config = {"env_prefix": "VALGUARD_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
