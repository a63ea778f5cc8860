"""
Configuration settings for the Koordinater package.
"""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Package settings with environment variable support.

    Attributes:
        environment: Deployment environment, controls console log styling
        log_level: Log level name, or None for the environment default
        json_logs: Whether file logs are written as JSON
        locale: Default message catalog for translations
        export_dir: Directory used by the default export file saver
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="KOORDINATER_",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = "development"

    # Logging
    log_level: str | None = None
    json_logs: bool = False

    # Translations
    locale: str = "en"

    # Export
    export_dir: Path = Path("./data/exports")

    @property
    def effective_log_level(self) -> str:
        """Get the configured log level or the environment default."""
        if self.log_level:
            return self.log_level.upper()
        return "DEBUG" if self.environment == "development" else "INFO"


# Global settings instance
settings = Settings()
