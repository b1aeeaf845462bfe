"""Environment-driven API configuration."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_name: str = "GeoJSON Compare API"
    app_version: str = "0.1.0"
    accepted_extensions: str = ".geojson,.json"
    validate_geojson_uploads: bool = True
    max_upload_bytes: int = 0
    cors_allowed_origins: str = (
        "http://localhost:3000,http://127.0.0.1:3000,"
        "http://localhost:5173,http://127.0.0.1:5173"
    )

    model_config = SettingsConfigDict(
        env_prefix="GEOJSON_COMPARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    def extension_list(self) -> tuple[str, ...]:
        return tuple(
            item.strip().lower() for item in self.accepted_extensions.split(",") if item.strip()
        )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()
