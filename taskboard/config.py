"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - get_settings() is cached (lru_cache): single instance per process
    - Defaults provided for every setting: works out-of-the-box

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Server
    server_host: str = "0.0.0.0"
    server_port: int = 8080
    shutdown_timeout_seconds: int = 30

    @field_validator("server_port")
    @classmethod
    def check_port_range(cls, v: int) -> int:
        if not 0 < v < 65536:
            raise ValueError("server_port must be between 1 and 65535")
        return v

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
