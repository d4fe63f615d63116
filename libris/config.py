import os
from pathlib import Path

DB_PATH = os.environ.get("LIBRIS_DB_PATH", str(Path.cwd() / "libris.db"))
# LIBRIS_DATABASE_URL replaces the sqlite file at DB_PATH entirely
DB_PATH_IN_USE = "LIBRIS_DATABASE_URL" not in os.environ
DATABASE_URL = os.environ.get("LIBRIS_DATABASE_URL", f"sqlite+aiosqlite:///{DB_PATH}")

LOG_LEVEL = os.environ.get("LIBRIS_LOG_LEVEL", "INFO")

# Pagination defaults for list endpoints
DEFAULT_PAGE_SIZE = int(os.environ.get("LIBRIS_DEFAULT_PAGE_SIZE", "20"))
MAX_PAGE_SIZE = int(os.environ.get("LIBRIS_MAX_PAGE_SIZE", "100"))

HOST = os.environ.get("LIBRIS_HOST", "127.0.0.1")
PORT = int(os.environ.get("LIBRIS_PORT", "8000"))
ALEMBIC_CONFIG = os.environ.get("LIBRIS_ALEMBIC_CONFIG", "alembic.ini")
