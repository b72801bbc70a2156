"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here. The reporting pipeline itself
never reads the environment; it receives its posture explicitly.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

PRODUCTION_ENVIRONMENT = "production"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        environment: Deployment environment name (development, staging,
            production).
        reporter_prod: Explicit production posture for the error reporter.
            When unset, the posture follows ``environment``.
        reporter_links_enabled: Add the search link to diagnostic pages.
        reporter_log_level: Level of the error reporter's own loggers.
            Follows ``log_level`` when unset.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Error Reporter"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    environment: str = "development"
    reporter_prod: Optional[bool] = None
    reporter_links_enabled: bool = True
    reporter_log_level: Optional[str] = None

    @property
    def is_production(self) -> bool:
        """Whether error responses must hide diagnostic detail."""
        if self.reporter_prod is not None:
            return self.reporter_prod
        return self.environment.strip().lower() == PRODUCTION_ENVIRONMENT


settings = Settings()
