"""Application configuration models."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_DATA_DIR = Path(__file__).resolve().parent / "data"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Settings(BaseSettings):
    """Settings loaded from environment variables or a .env file."""

    app_name: str = Field(default="Anime Catalog Bridge", alias="APP_NAME")
    server_host: str = Field(default="0.0.0.0", alias="HOST")
    server_port: int = Field(default=3000, alias="PORT", ge=1, le=65_535)

    source_origin: str = Field(default="https://9animetv.to", alias="SOURCE_ORIGIN")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, alias="USER_AGENT")

    data_dir: Path = Field(default=DEFAULT_DATA_DIR, alias="DATA_DIR")
    fallback_filename: str = Field(default="anime.json", alias="FALLBACK_FILE")

    environment: Literal["development", "production"] = Field(
        default="development", alias="ENVIRONMENT"
    )

    @field_validator("source_origin", mode="before")
    @classmethod
    def _normalise_origin(cls, value: object) -> str:
        """Strip trailing slashes so paths can be appended safely."""

        text = str(value or "").strip().rstrip("/")
        if not text.startswith(("http://", "https://")):
            raise ValueError("SOURCE_ORIGIN must be an http(s) URL")
        return text

    @property
    def fallback_path(self) -> Path:
        """Return the location of the baseline fallback snapshot."""

        return self.data_dir / self.fallback_filename

    def snapshot_path(self, filename: str) -> Path:
        return self.data_dir / filename

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", populate_by_name=True
    )


@lru_cache
def get_settings() -> Settings:
    """Return a cached settings instance."""

    return Settings()  # type: ignore[call-arg]


settings = get_settings()
