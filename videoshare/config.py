"""Application configuration using Pydantic settings."""
from pathlib import Path
from typing import List
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application
    app_name: str = "VideoShare"
    app_version: str = "1.0.0"
    environment: str = "development"
    debug: bool = False
    log_level: str = "INFO"

    # API
    api_v1_prefix: str = "/v1"
    cors_origins: List[str] = Field(default_factory=lambda: ["http://localhost:3000"])

    # Database
    database_url: str = "sqlite+aiosqlite:///./data/videoshare.db"
    seed_demo_data: bool = True

    # Security
    secret_key: str = Field(
        default="change-me-in-production-videoshare-secret",
        min_length=32
    )
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60 * 24 * 7
    password_hash_scheme: str = "pbkdf2_sha256"

    # Media storage
    media_dir: Path = Path("./data/media")
    media_url_prefix: str = "/media"
    max_upload_mb: int = 500

    # Catalog
    default_language: str = "en"
    related_videos_limit: int = 10
    verified_subscriber_threshold: int = 100_000

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list."""
        if isinstance(v, str):
            import json
            return json.loads(v)
        return v

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


# Global settings instance
settings = Settings()
