"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from VALIDFLOW_* environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Extra directory of JSON flow definitions, loaded after the bundled ones
    FLOWS_DIR: str = ""

    model_config = {"env_prefix": "VALIDFLOW_", "env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
