"""
Database table creation script.

Creates all tables defined in ORM models using SQLAlchemy metadata.

Dependencies: sqlalchemy, vacation_board.configs
System role: Database schema initialization

Usage:
    python -m vacation_board.boundary.db.create_tables
"""

import asyncio
import logging

from vacation_board.boundary.db.connection import StoreAccessor
from vacation_board.configs import get_settings
from vacation_board.observability.logger import configure_logging

logger = logging.getLogger(__name__)


async def create_all_tables(store: StoreAccessor) -> None:
    """
    Create all database tables from registered ORM models.

    Idempotent: calls CREATE TABLE IF NOT EXISTS for each model, so safe
    to run against an existing employees.db. Existing rows remain unchanged.

    Args:
        store: Accessor for the target database

    Raises:
        SQLAlchemyError: If the database file cannot be opened or written
    """
    try:
        await store.initialize()
    finally:
        await store.dispose()


def main() -> None:
    """Create the schema in the configured SQLite file."""
    settings = get_settings()
    configure_logging(settings.log_level)
    store = StoreAccessor(settings.database.database_url, echo=settings.database.echo_sql)
    asyncio.run(create_all_tables(store))
    logger.info("All tables created successfully", extra={"path": settings.database.path})


if __name__ == "__main__":
    main()
