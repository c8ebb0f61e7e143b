"""SQLite backing for the client-local store: WAL connection plus migrations."""

import importlib
import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

logger = logging.getLogger(__name__)

MIGRATIONS_PACKAGE = "weathervista.storage.migrations"
MEMORY_DB = ":memory:"


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open a SQLite connection with WAL mode enabled.

    Creates the parent directory of a file-backed database if needed.
    """
    if str(db_path) != MEMORY_DB:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(db_path))
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def run_migrations(conn: sqlite3.Connection) -> list[str]:
    """Apply pending ``v###_*`` migrations in name order. Returns the names applied."""
    conn.execute(
        "CREATE TABLE IF NOT EXISTS schema_versions ("
        "  version TEXT PRIMARY KEY,"
        "  applied_at TEXT NOT NULL DEFAULT CURRENT_TIMESTAMP"
        ")"
    )
    conn.commit()

    done = {row["version"] for row in conn.execute("SELECT version FROM schema_versions")}
    pending = [name for name in _discover_migrations() if name not in done]

    for name in pending:
        importlib.import_module(f"{MIGRATIONS_PACKAGE}.{name}").up(conn)
        conn.execute("INSERT INTO schema_versions (version) VALUES (?)", (name,))
        conn.commit()
        logger.info("Applied storage migration %s", name)

    return pending


def open_storage(db_path: str | Path) -> sqlite3.Connection:
    """Connect and bring the schema up to date."""
    conn = connect(db_path)
    run_migrations(conn)
    return conn


@contextmanager
def storage_session(db_path: str | Path) -> Iterator[sqlite3.Connection]:
    """``open_storage`` as a context manager that always closes the connection."""
    conn = open_storage(db_path)
    try:
        yield conn
    finally:
        conn.close()


def _discover_migrations() -> list[str]:
    migrations_dir = Path(__file__).parent / "migrations"
    return sorted(p.stem for p in migrations_dir.glob("v[0-9]*_*.py"))
