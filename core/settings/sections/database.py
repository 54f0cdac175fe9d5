from pydantic_settings import SettingsConfigDict

from core.settings.base import StorefrontBaseSettings


class DatabaseSettings(StorefrontBaseSettings):
    """
    Database configuration settings.

    Loaded from environment variables (DB_ prefix) or .env file.
    """

    database_url: str = "sqlite+aiosqlite:///./storefront.db"

    # Connection pool settings (in-memory SQLite uses a single connection;
    # pool_timeout doubles as the SQLite busy timeout)
    pool_size: int = 10
    max_overflow: int = 20
    pool_timeout: int = 30
    pool_recycle: int = 3600  # 1 hour

    # Echo SQL (for debugging)
    echo_sql: bool = False

    # Create missing tables on startup
    create_tables: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DB_",
        extra="ignore",
    )
