"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    regiongrow_env: str = "development"
    regiongrow_log_level: str = "info"

    # Segmentation defaults (tile side is 2^default_n)
    default_n: int = 5
    default_threshold: float = 800.0
    max_passes: int | None = None

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
