"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API
    api_version: str = "0.1.0"
    debug: bool = False
    cors_allow_origins: list[str] = ["*"]

    # Data store ("sql" or "postgrest")
    store_backend: str = "sql"
    database_url: str = "postgresql+asyncpg://storefront:storefront_dev_password@db:5432/storefront"
    postgrest_url: str = "http://localhost:54321"
    postgrest_api_key: str = "dev-anon-key-change-in-production"
    store_timeout: float = 10.0

    # Listings
    default_page_size: int = 12
    featured_stock_threshold: int = 10

    # Logging
    log_level: str = "INFO"

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"


settings = Settings()
