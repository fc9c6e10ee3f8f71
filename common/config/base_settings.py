"""
Base settings class for environment configuration.

Uses Pydantic Settings for automatic environment variable loading.
Extend this class for application-specific settings.

Example:
    from common.config import BaseAppSettings

    class Settings(BaseAppSettings):
        # App-specific settings
        COURSES_PAGE_SIZE: int = 25

    settings = Settings()
    print(settings.CONTENT_API_URL)
"""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class BaseAppSettings(BaseSettings):
    """
    Base settings class with common configuration options.

    Automatically loads values from environment variables.
    Extend this class for application-specific settings.
    """

    # ==========================================================================
    # Content API Settings
    # ==========================================================================
    CONTENT_API_URL: str = "http://localhost:1337/api"
    CONTENT_API_TOKEN: Optional[str] = None  # Bearer token of the signed-in user
    CONTENT_API_TIMEOUT: float = 30.0  # Seconds

    # ==========================================================================
    # Runtime Settings
    # ==========================================================================
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    ENVIRONMENT: str = "development"  # development, staging, production

    # ==========================================================================
    # Pydantic Settings Configuration
    # ==========================================================================
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="allow",  # Allow app-specific settings
        case_sensitive=True,
    )

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT.lower() == "development"

    def validate_required(self) -> None:
        """
        Validate that required settings are configured.

        Raises:
            ValueError: If required settings are missing
        """
        errors = []

        if not self.CONTENT_API_URL:
            errors.append("CONTENT_API_URL is required")

        if self.CONTENT_API_TIMEOUT <= 0:
            errors.append("CONTENT_API_TIMEOUT must be greater than zero")

        if self.is_production() and not self.CONTENT_API_TOKEN:
            errors.append("CONTENT_API_TOKEN is required in production")

        if errors:
            raise ValueError("Configuration errors:\n- " + "\n- ".join(errors))
