# core/settings/base.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorefrontBaseSettings(BaseSettings):
    """Common loading rules: process env first, then the project .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )
