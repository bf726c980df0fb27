"""Settings for the CLI and the shared client, loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the enka.network fetcher.

    Only ``get_client()`` and the CLI read these; the fetch functions take
    plain parameters.
    """

    model_config = SettingsConfigDict(
        env_prefix="ENKA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    user_agent: str | None = None
    timeout: float = 30.0
    follow_redirects: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
