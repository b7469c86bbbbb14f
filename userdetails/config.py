"""Configuration loading for user details verification.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Uses pydantic-settings for environment variable handling with
    .env file support via python-dotenv. List fields are given as JSON,
    e.g. ADMIN_USERS='["batman"]'.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Details checker configuration
    details_backend: Literal["static"] = Field(
        default="static",
        description="Details checker backend type",
    )
    admin_users: list[str] = Field(
        default_factory=list,
        description="Usernames with admin rights (static backend)",
    )
    known_users: list[str] = Field(
        default_factory=list,
        description="Recognised usernames without admin rights (static backend)",
    )

    # Error reporter configuration
    error_reporter_backend: Literal["stream", "logging"] = Field(
        default="stream",
        description="Error reporter backend type",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("admin_users", "known_users")
    @classmethod
    def validate_usernames(cls, v: list[str]) -> list[str]:
        """Strip usernames and reject blank entries."""
        cleaned = [name.strip() for name in v]
        if any(not name for name in cleaned):
            raise ValueError("usernames must be non-empty strings")
        return cleaned

    @model_validator(mode="after")
    def validate_disjoint_users(self) -> "Settings":
        """Ensure no user is configured as both admin and non-admin."""
        overlap = set(self.admin_users) & set(self.known_users)
        if overlap:
            raise ValueError(
                f"users listed in both admin_users and known_users: {', '.join(sorted(overlap))}"
            )
        return self


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
