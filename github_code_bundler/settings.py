"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings for the code bundler."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    github_token: SecretStr | None = None
    request_timeout: float = 30.0

    def credential(self) -> str | None:
        if self.github_token is None:
            return None
        return self.github_token.get_secret_value() or None


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
