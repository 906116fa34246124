"""
Database initialization utilities.
"""
import logging
from pathlib import Path

from sqlalchemy.engine import Engine, make_url

from gateway_admin.config import settings
from gateway_admin.db.database import engine as default_engine
from gateway_admin.db.models import Base

logger = logging.getLogger(__name__)


def ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-based SQLite database."""
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


def create_tables(engine: Engine) -> None:
    """Create all tables defined in models."""
    logger.info("Creating database tables...")
    Base.metadata.create_all(bind=engine)
    logger.info("All tables created successfully")


def drop_all_tables(engine: Engine) -> None:
    """Drop all tables (useful for testing)."""
    logger.info("Dropping all database tables...")
    Base.metadata.drop_all(bind=engine)
    logger.info("All tables dropped successfully")


def reset_database(engine: Engine) -> None:
    """Drop and recreate all tables."""
    logger.info("Resetting database...")
    drop_all_tables(engine)
    create_tables(engine)
    logger.info("Database reset complete")


def init_database() -> None:
    """Complete database initialization for the configured database."""
    logger.info("Initializing database...")
    ensure_sqlite_directory(settings.DATABASE_URL)
    create_tables(default_engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_database()
