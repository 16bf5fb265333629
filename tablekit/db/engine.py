"""Database engine factory for adapters."""

from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine

from tablekit.config import Settings
from tablekit.log import get_logger
from tablekit.types import Environment

logger = get_logger(__name__)


def setup_database_url(environment: Environment, db_path: Path | None = None) -> str:
    """Construct database URL based on environment configuration.

    Args:
        environment: Environment type
        db_path: Optional custom database path. If provided, overrides default path.

    Returns:
        Database connection URL
    """

    if environment == Environment.TESTING and db_path is None:
        return "sqlite:///:memory:"

    if db_path is not None:
        db_path = Path(db_path)
    elif environment == Environment.PRODUCTION:
        db_path = Path("db", "tablekit.db")
    elif environment == Environment.DEVELOPMENT:
        db_path = Path("db", "tablekit.dev.db")
    else:
        raise ValueError(f"Unknown environment: {environment}")

    # Ensure the directory exists
    db_path.parent.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{db_path}"


def create_database_engine(
    environment: Environment,
    echo: bool = False,
    db_path: Path | None = None,
) -> Engine:
    """Create database engine based on environment configuration.

    Args:
        environment: Environment type
        echo: Enable SQL echo for debugging
        db_path: Optional custom database path. If provided, overrides default path.

    Returns:
        Configured SQLAlchemy engine
    """
    database_url = setup_database_url(environment, db_path)
    logger.info(f"Creating database engine for: {database_url}")

    return create_engine(
        database_url,
        echo=echo,
        connect_args={
            "check_same_thread": False,
            "timeout": 60.0,
        },
    )


def create_engine_from_settings(settings: Settings) -> Engine:
    """Create an engine from settings; an explicit database_url wins."""
    if settings.database_url:
        logger.info(f"Creating database engine for: {settings.database_url}")
        return create_engine(settings.database_url, echo=settings.echo_sql)

    return create_database_engine(
        settings.environment,
        echo=settings.echo_sql,
        db_path=settings.database_path,
    )
