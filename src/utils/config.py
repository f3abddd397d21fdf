"""Type-safe environment configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration loaded from environment variables.

    Every field has a default so the engine works out of the box.
    Engine classes receive these values explicitly; only the default
    factories (get_rule_store, find_matching_recipes) read them.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields in .env
        env_ignore_empty=True,
    )

    APP_NAME: str = Field(
        default="promptwright",
        description="Application name"
    )

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Application environment"
    )

    LOG_LEVEL: str = Field(
        default="INFO",
        description="Logging level"
    )

    DEBUG: bool = Field(
        default=False,
        description="Debug mode flag"
    )

    # Knowledge base configuration
    KNOWLEDGE_DIR: Path | None = Field(
        default=None,
        description="Directory holding per-model knowledge documents (bundled documents if unset)"
    )

    RULES_CACHE_TTL_SECONDS: float = Field(
        default=3600.0,
        description="Lifetime of a parsed rules cache entry in seconds",
        gt=0
    )

    RECIPE_MATCH_THRESHOLD: float = Field(
        default=0.1,
        description="Default minimum confidence for recipe matches",
        ge=0.0,
        le=1.0
    )

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is one of the standard levels."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                f"LOG_LEVEL must be one of {valid_levels}, got '{v}'"
            )
        return v_upper

    def get_knowledge_dir(self) -> Path:
        """Get the knowledge directory, falling back to the bundled documents."""
        if self.KNOWLEDGE_DIR is not None:
            return self.KNOWLEDGE_DIR
        return Path(__file__).resolve().parents[1] / "knowledge" / "documents"


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Loads settings from environment variables and .env file on first call.
    Subsequent calls return the cached instance.

    Returns:
        Settings: The application settings instance

    Raises:
        ValidationError: If an environment variable holds an invalid value
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset the settings singleton. Useful for testing."""
    global _settings
    _settings = None
