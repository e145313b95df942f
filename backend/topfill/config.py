"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    topfill_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Generation defaults (overridable per request / per CLI run)
    default_canvas: int = 420
    default_decimals: int = 0
    default_minify: bool = True
    default_faces: int = 42
    default_density: float = 1.6

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
