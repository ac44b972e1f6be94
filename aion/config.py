"""Runtime configuration, read from the environment and optional .env files."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Every option can be set by its upper-cased name, e.g. ``OPENAI_API_KEY``."""

    app_title: str = "Aion API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # An empty key makes the client send a placeholder that upstream rejects
    openai_api_key: str = ""
    openai_base_url: str = "https://api.openai.com/v1"

    suggestion_model: str = "gpt-4o"
    suggestion_max_tokens: int = 150
    suggestion_timeout_seconds: float = 30.0
    suggestion_max_retries: int = 1

    seed_demo_user: bool = True

    # Level names per logger category; see infrastructure/logging/log_config.py
    log_level: str = "INFO"
    log_level_http: str = "WARNING"
    log_level_uvicorn: str = "INFO"
    log_level_llm: str = "INFO"
    log_level_store: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=_ENV_FILES,
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Process-wide settings, built on first use."""
    return Settings()
