"""Runtime settings loaded from environment variables."""

from functools import lru_cache
from typing import Annotated

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from criminal_checker.domain.auth.credentials import MIN_SALT_ITEMS_COUNT

NonEmptyStr = Annotated[str, Field(min_length=1)]
SaltItemsCount = Annotated[int, Field(gt=MIN_SALT_ITEMS_COUNT)]


class Settings(BaseSettings):
    """Environment-driven application settings."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    salt_file_path: NonEmptyStr = Field(validation_alias="SALT_FILE_PATH")
    salt_items_count: SaltItemsCount = Field(validation_alias="SALT_ITEMS_COUNT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")


@lru_cache(maxsize=1)
def load_settings() -> Settings:
    """Load and cache application settings."""

    return Settings()  # type: ignore[call-arg]
