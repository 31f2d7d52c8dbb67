import logging
from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_config_logger = logging.getLogger(__name__)

_BACKEND_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _BACKEND_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Editorial Back-Office API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./backoffice.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Identity provider (OAuth / OpenID Connect)
    auth_issuer_base_url: str = "https://example.eu.auth0.com"
    auth_login_url: str = "/auth/login"
    auth_timeout_seconds: float = 10.0

    # Listing / search pagination defaults
    default_page: int = 1
    default_limit: int = 10

    # Logging: per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine: SQL queries
    log_level_http: str = "WARNING"          # httpx / httpcore: identity provider calls
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_lifecycle: str = "INFO"        # article workflow + action dispatcher

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }

    def model_post_init(self, __context: object) -> None:
        """Fall back to sane pagination defaults when the environment provides nonsense."""
        if self.default_page < 1:
            _config_logger.warning("DEFAULT_PAGE=%s is invalid, using 1", self.default_page)
            object.__setattr__(self, "default_page", 1)
        if self.default_limit < 1:
            _config_logger.warning("DEFAULT_LIMIT=%s is invalid, using 10", self.default_limit)
            object.__setattr__(self, "default_limit", 10)


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance: reads .env once."""
    return Settings()
