"""Serve the catalog: migrate the schema, then hand over to uvicorn."""

import logging
from pathlib import Path

import uvicorn
from alembic import command
from alembic.config import Config

from libris.config import ALEMBIC_CONFIG, DB_PATH, DB_PATH_IN_USE, HOST, PORT

logger = logging.getLogger(__name__)


def prepare_database_dir(db_path: str = DB_PATH, in_use: bool = DB_PATH_IN_USE) -> Path | None:
    """Create the sqlite file's directory, unless a database URL replaced it."""
    if not in_use:
        return None
    directory = Path(db_path).parent
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def run_migrations(config_path: str = ALEMBIC_CONFIG) -> None:
    prepare_database_dir()
    logger.info("Upgrading database schema to head")
    command.upgrade(Config(config_path), "head")


def main():
    run_migrations()
    uvicorn.run("libris.app:app", host=HOST, port=PORT)
