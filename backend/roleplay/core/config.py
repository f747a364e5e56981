"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Hosting service settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "Roleplay Prompts"
    debug: bool = False
    port: int = 8011

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False  # JSON lines for production

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    @model_validator(mode="after")
    def validate_settings(self):
        """Validate settings values."""
        errors = []

        if self.log_level.upper() not in LOG_LEVELS:
            errors.append(
                f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {self.log_level}"
            )

        if not 0 < self.port < 65536:
            errors.append(f"PORT must be between 1 and 65535, got {self.port}")

        if errors:
            raise ValueError(f"Configuration errors: {'; '.join(errors)}")

        return self


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
