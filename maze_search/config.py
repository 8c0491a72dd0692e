"""Application configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory (contains maze_search/ and mazes/)
BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Maze Search"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Mazes
    mazes_dir: Path = BASE_DIR / "mazes"
    default_algorithm: str = "bfs"
    max_maze_chars: int = 250_000

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:3000,http://localhost:8080"

    @field_validator("default_algorithm")
    @classmethod
    def validate_default_algorithm(cls, v: str) -> str:
        """Only uninformed searches are available."""
        v = v.lower()
        if v not in ("bfs", "dfs"):
            raise ValueError("DEFAULT_ALGORITHM must be 'bfs' or 'dfs'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if v not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid LOG_LEVEL: {v}")
        return v

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        if self.debug:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
