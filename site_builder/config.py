import logging
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Site Builder API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    cors_origins: list[str] = ["http://localhost:5173"]

    # Persistence — where the named JSON blobs live
    storage_backend: Literal["sqlite", "json", "memory"] = "sqlite"
    database_url: str = "sqlite:///data/site_builder.db"
    storage_dir: str = "data/storage"

    # Admin gate
    admin_password: str = "admin123"

    # Ledger — IANA zone whose calendar month the financial summary reports
    timezone: str = "UTC"

    # Logging — per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine — SQL queries
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_storage: str = "INFO"          # key-value storage adapters

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        if self.admin_password == "admin123" and self.app_env != "development":
            _config_logger.warning(
                "ADMIN_PASSWORD is still the default value in '%s' environment",
                self.app_env,
            )


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance — reads .env once."""
    return Settings()
