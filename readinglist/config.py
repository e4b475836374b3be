"""Application configuration using Pydantic settings."""

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Reading List Service"
    debug: bool = False

    # Book list; list_heading overrides the default or demo heading
    list_heading: Optional[str] = None
    placeholder_image: str = "https://placehold.co/96x96?text=Book"
    quick_add_description: str = (
        "This is a placeholder entry. Replace it with a real recommendation."
    )
    seed_demo_books: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
