# src/vistagram/scripts/init_db.py
"""Create all tables directly from the ORM metadata (development helper)."""

import logging

from vistagram.core.settings import settings
from vistagram.db.session import create_tables

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()
    logger.info("Database initialized at %s", settings.effective_database_url)


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper())
    init_db()
