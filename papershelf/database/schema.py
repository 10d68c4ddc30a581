"""
Database schema definitions for PaperShelf.

Defines the papers table and its index, plus the pool initialization entry
point used once at startup.
"""

import sqlite3
from pathlib import Path
from typing import Union

from ..core import get_logger, StorageInitError, StorageReadError
from .connection import ConnectionPool, DEFAULT_MAX_CONNECTIONS

logger = get_logger(__name__)


# authors, journal, year, tags, notes and updated_at are reserved for
# metadata editing and are not written by ingestion.
PAPERS_TABLE = """
CREATE TABLE IF NOT EXISTS papers (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    title TEXT NOT NULL,
    authors TEXT,
    journal TEXT,
    year INTEGER,
    pdf_path TEXT NOT NULL,
    tags TEXT,
    notes TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
    updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""

PAPERS_INDEXES = [
    "CREATE INDEX IF NOT EXISTS idx_papers_created_at ON papers(created_at)"
]


def create_schema(conn: sqlite3.Connection) -> None:
    """
    Create the papers table and indexes if they do not exist.

    Args:
        conn: Open connection; the caller commits.
    """
    conn.execute(PAPERS_TABLE)

    for index_sql in PAPERS_INDEXES:
        conn.execute(index_sql)


async def init_schema(pool: ConnectionPool) -> None:
    """
    Initialize database schema if not exists.

    Raises:
        StorageInitError: If the table cannot be created.
    """
    logger.info("Initializing database schema")

    try:
        await pool.run(create_schema)
    except sqlite3.Error as e:
        raise StorageInitError(
            f"Failed to create table: {e}",
            {"database": str(pool.db_path)}
        )

    logger.info("Schema initialization complete")


async def initialize(
    db_path: Union[str, Path],
    max_connections: int = DEFAULT_MAX_CONNECTIONS
) -> ConnectionPool:
    """
    Open a connection pool and make sure the schema exists.

    Safe to call against an already-initialized database.

    Args:
        db_path: Path to the SQLite database file.
        max_connections: Upper bound on simultaneous connections.

    Returns:
        Open connection pool.

    Raises:
        StorageInitError: If the database cannot be opened or prepared.
    """
    logger.info("Initializing database...")

    pool = ConnectionPool(db_path, max_connections=max_connections)
    await pool.open()

    try:
        await init_schema(pool)
    except StorageInitError:
        await pool.close()
        raise

    return pool


def _read_statistics(conn: sqlite3.Connection) -> dict:
    row = conn.execute(
        "SELECT COUNT(*) as count, MIN(created_at) as oldest, MAX(created_at) as newest FROM papers"
    ).fetchone()

    return {
        "total_papers": row["count"],
        "oldest_paper": row["oldest"],
        "newest_paper": row["newest"]
    }


async def get_statistics(pool: ConnectionPool) -> dict:
    """
    Get database statistics for dashboard display.

    Returns:
        Dictionary with paper count and the oldest/newest creation times.
    """
    try:
        return await pool.run(_read_statistics)
    except sqlite3.Error as e:
        raise StorageReadError(f"Failed to read statistics: {e}")
