"""Application configuration."""
from functools import lru_cache
from typing import Literal, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.constants import USERS_COLLECTION


class ConfigError(RuntimeError):
    """Raised at startup when the selected store backend is missing settings."""


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # Store Settings
    STORE_BACKEND: Literal["supabase", "file"] = "supabase"
    USERS_COLLECTION: str = USERS_COLLECTION
    DATA_DIR: str = "data"

    # Supabase Settings
    SUPABASE_URL: Optional[str] = None
    SUPABASE_KEY: Optional[str] = None

    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()

    def require_supabase(self):
        missing = [name for name in ("SUPABASE_URL", "SUPABASE_KEY") if not getattr(self, name)]
        if missing:
            raise ConfigError(f"Supabase backend requires {', '.join(missing)}")


@lru_cache
def get_settings() -> Settings:
    return Settings()
