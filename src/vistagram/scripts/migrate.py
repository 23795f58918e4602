# src/vistagram/scripts/migrate.py
"""Run Alembic migrations up to head against the configured database."""
from __future__ import annotations

import logging
from pathlib import Path

from alembic import command
from alembic.config import Config

from vistagram.core.settings import settings

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[3]


def alembic_config() -> Config:
    """Build an Alembic config pointing at this checkout's migrations."""
    cfg = Config(str(PROJECT_ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    cfg.set_main_option("sqlalchemy.url", settings.database_url_sync)
    return cfg


def run_upgrade_head() -> None:
    logger.info("Upgrading schema to head")
    command.upgrade(alembic_config(), "head")


if __name__ == "__main__":
    logging.basicConfig(level=settings.log_level.upper())
    run_upgrade_head()
