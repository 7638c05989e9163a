"""
Configuration management for AdoptMatch.
Loads settings from environment variables and provides typed configuration access.
"""

from typing import Optional
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application Settings
    environment: str = Field(default="development", description="Environment: development, staging, production")
    log_level: str = Field(default="INFO", description="Logging level")
    debug: bool = Field(default=False, description="Enable debug mode")

    # API Settings
    api_title: str = Field(default="AdoptMatch API", description="Title shown in the OpenAPI docs")
    api_version: str = Field(default="1.0.0", description="API version")
    user_id_header: str = Field(
        default="X-User-Id",
        description="Header carrying the authenticated user id (set by the auth gateway)"
    )

    # Priority Settings
    priority_match_weight: float = Field(
        default=0.5,
        ge=0,
        le=1,
        description="Weight of the compatibility score in the priority score"
    )
    priority_completeness_weight: float = Field(
        default=0.3,
        ge=0,
        le=1,
        description="Weight of the profile completeness in the priority score"
    )
    priority_conversation_weight: float = Field(
        default=0.2,
        ge=0,
        le=1,
        description="Weight of an existing conversation in the priority score"
    )

    @model_validator(mode="after")
    def check_priority_weights(self) -> "Settings":
        """Priority weights must add up to 1 so the score stays within 0-100."""
        total = (
            self.priority_match_weight
            + self.priority_completeness_weight
            + self.priority_conversation_weight
        )
        if abs(total - 1.0) > 1e-6:
            raise ValueError(f"priority weights must sum to 1.0 (got {total:.3f})")
        return self

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from environment (useful for testing)."""
    global _settings
    _settings = Settings()
    return _settings


# Convenience access
settings = get_settings()
