from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict



class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Required: the service refuses to start without it
    TMDB_API_KEY: str
    TMDB_BASE_URL: str = "https://api.themoviedb.org/3"
    TMDB_IMAGE_BASE_URL: str = "https://image.tmdb.org/t/p"
    TMDB_LANGUAGE: str = "en-US"
    EMBED_BASE_URL: str = "https://getsuperembed.link/"
    REQUEST_TIMEOUT: float = 10.0

    APP_NAME: str = "minimal-media-browser"
    APP_ENV: Literal["development", "production"] = "production"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"
    SOURCE_URL: str = "https://github.com/your-username/minimal-media-browser"

    @field_validator("TMDB_API_KEY")
    @classmethod
    def _require_api_key(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("TMDB_API_KEY is required")
        return value


settings = Settings()
