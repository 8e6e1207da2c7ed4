"""
Centralized application settings using Pydantic BaseSettings.

This module provides type-safe access to environment variables with validation.
All settings are loaded once at application startup.
"""

from pathlib import Path
from typing import List, Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings

# Default database when DATABASE_URL is not set (file next to the working directory)
DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./flashcards.db"


def _get_base_path() -> Path:
    """Get the project root (parent of backend/)."""
    return Path(__file__).parent.parent.parent


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have sensible defaults and are validated on startup.
    """

    # Database
    database_url: str = DEFAULT_DATABASE_URL

    # Server
    port: int = 8000

    # CORS configuration
    frontend_url: Optional[str] = None

    # Debug configuration
    debug: bool = False

    @field_validator("debug", mode="before")
    @classmethod
    def validate_debug(cls, v: Optional[str]) -> bool:
        """Parse debug from string to bool."""
        if isinstance(v, bool):
            return v
        if isinstance(v, str):
            return v.lower() == "true"
        return False

    @property
    def project_root(self) -> Path:
        """
        Get the project root directory.

        Returns:
            Path to the project root directory
        """
        return _get_base_path()

    @property
    def database_type(self) -> str:
        """
        Extract database type from the connection URL.

        Returns:
            "sqlite" or "postgresql" or "unknown"
        """
        if self.database_url.startswith("sqlite"):
            return "sqlite"
        elif self.database_url.startswith("postgresql"):
            return "postgresql"
        return "unknown"

    def get_cors_origins(self) -> List[str]:
        """
        Get the list of allowed CORS origins.

        Returns:
            List of allowed origin URLs
        """
        origins = [
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ]

        # Add custom frontend URL if provided
        if self.frontend_url:
            origins.append(self.frontend_url)

        return origins

    class Config:
        """Pydantic configuration."""

        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Returns:
        Settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()

        # Prefer the .env file in the project root when present
        env_path = _settings.project_root / ".env"
        if env_path.exists():
            _settings = Settings(_env_file=str(env_path))

    return _settings


def reset_settings() -> None:
    """
    Reset the settings singleton (useful for testing).
    """
    global _settings
    _settings = None
