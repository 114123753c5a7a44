"""Application settings using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# The server never listens on anything but loopback.
LOOPBACK_HOST = "127.0.0.1"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="WEBGIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # General
    environment: str = "development"
    log_level: str = "INFO"

    # Repository
    repo_path: str = Field(default_factory=lambda: str(Path.cwd()))

    # Server
    port: int = Field(default=3000, ge=1, le=65535)
    open_browser: bool = False

    # Git
    git_binary: str = "git"
    git_timeout: float = Field(default=30.0, gt=0)
    default_remote: str = "origin"
    default_history_limit: int = Field(default=50, ge=1)

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.repo_path = str(Path(self.repo_path).expanduser().resolve())

    @property
    def host(self) -> str:
        return LOOPBACK_HOST

    @property
    def is_production(self) -> bool:
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
