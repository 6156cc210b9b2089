"""Library configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """fieldcheck settings loaded from ``FIELDCHECK_*`` environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Engine
    FALLBACK_MESSAGE: str = "Invalid"
    MESSAGE_KEY: str = "message"

    # Event bus
    EVENT_QUEUE_LIMIT: int = 100

    model_config = {
        "env_prefix": "FIELDCHECK_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
