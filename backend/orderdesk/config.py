"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Frontend origins come from settings, never hardcoded in main.py

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box against a Vite dev server
"""

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

BUNDLED_STATIC_DIR = str(Path(__file__).resolve().parent / "static")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_name: str = "Order Desk API"
    version: str = "1.0.0"
    environment: str = "development"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]
    force_https: bool = False

    # Frontend: mounted at / only if the directory exists
    static_dir: str = BUNDLED_STATIC_DIR

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format")
    @classmethod
    def check_log_format(cls, v: str) -> str:
        v = v.lower()
        if v not in ("json", "text"):
            raise ValueError("log_format must be 'json' or 'text'")
        return v

    @property
    def docs_enabled(self) -> bool:
        """Interactive API docs are only served in development."""
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
