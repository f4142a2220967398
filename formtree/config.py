"""Validator configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Validator settings loaded from environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # User-facing message texts
    MANDATORY_FIELD_MESSAGE: str = "Please fill this mandatory field!"
    CHOOSE_ENTRY_MESSAGE: str = "Please choose an entry!"
    DEFAULT_ERROR_MESSAGE: str = "Wrong input"
    NO_LABEL_FOUND_TEXT: str = "No Label Found"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "FORMTREE_"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
