"""Application Settings - Pydantic Settings for environment configuration."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables or a .env file.

    The scheduling fields override the business constants in
    ``salon_scheduling.config.policy``.
    """

    # Observability
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_json: bool = True  # production forces JSON

    # Application
    app_env: Literal["development", "staging", "production"] = "development"

    # Scheduling policy
    edit_lead_time_days: float = Field(default=2.0, ge=0.0)
    week_start_day: int = Field(default=6, ge=0, le=6)  # Monday=0 ... Sunday=6
    weekly_stats_window: int = Field(default=8, ge=1)
    default_custom_range_days: int = Field(default=7, ge=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
