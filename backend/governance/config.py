"""Engine configuration via environment variables."""

from typing import Optional

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Audit
    IDENTITY_ACCESSOR: str = "get_id"

    # Identifier generation (None = current epoch milliseconds)
    ID_COUNTER_SEED: Optional[int] = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
