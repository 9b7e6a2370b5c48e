"""Settings using Pydantic Settings for configuration management."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from PARLEYCHAT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="PARLEYCHAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: str = "parleychat"
    environment: Literal["development", "testing", "production"] = "development"
    log_level: str = "INFO"

    # Test tools: directory holding sample assets (defaults to the bundled ones)
    test_assets_dir: Path | None = None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
