"""Configuration management for tablekit."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .types import Environment


class Settings(BaseModel):
    """Toolkit settings."""

    version: str = Field(default="0.1.0", description="Toolkit version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development/production/testing)",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")

    # Database
    database_url: str | None = Field(
        default=None,
        description="SQLAlchemy database URL; overrides the per-environment path",
    )
    database_path: Path | None = Field(
        default=None, description="SQLite database file path"
    )
    echo_sql: bool = Field(
        default=False, description="Echo emitted SQL through the engine logger"
    )

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.environment == Environment.PRODUCTION

    @property
    def is_testing(self) -> bool:
        """Check if running in testing mode."""
        return self.environment == Environment.TESTING


def _parse_bool(value: str) -> bool:
    return value.lower() in ["true", "1", "yes", "on"]


def load_settings() -> Settings:
    """Load settings from environment variables."""

    # Load .env file if it exists
    load_dotenv()

    database_path = os.getenv("TABLEKIT_DATABASE_PATH")

    return Settings(
        environment=Environment(os.getenv("TABLEKIT_ENV", "development")),
        log_level=os.getenv("TABLEKIT_LOG_LEVEL", "INFO").upper(),
        database_url=os.getenv("TABLEKIT_DATABASE_URL") or None,
        database_path=Path(database_path) if database_path else None,
        echo_sql=_parse_bool(os.getenv("TABLEKIT_ECHO_SQL", "false")),
    )


# Global settings instance
settings = load_settings()
