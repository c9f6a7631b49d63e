"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    formcanvas_env: str = "development"
    formcanvas_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:5173"]

    # Persistence
    forms_dir: str = "data/forms"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
