"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    asciisketch_env: str = "development"
    asciisketch_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Grid cell size used when a request leaves it out
    cell_width: float = 14.0
    cell_height: float = 24.0

    # Largest accepted drawing, in characters
    max_text_chars: int = 20_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
