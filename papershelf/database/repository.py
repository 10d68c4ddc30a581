"""
Paper repository for the papers table.

Inserts new papers and answers the listing and counting queries. There is
no caching layer; every call goes to the database.
"""

import sqlite3
from dataclasses import dataclass, asdict
from typing import List, Optional

from ..core import get_logger, StorageReadError, StorageWriteError
from .connection import ConnectionPool

logger = get_logger(__name__)


@dataclass
class Paper:
    """Represents a stored paper."""
    id: int
    title: str
    pdf_path: str
    created_at: Optional[str]

    def to_dict(self) -> dict:
        """Projection handed to presentation layers."""
        return asdict(self)


class PaperRepository:
    """
    Repository for paper rows.

    Args:
        pool: Open connection pool shared by the application.
    """

    def __init__(self, pool: ConnectionPool):
        self.pool = pool

    async def insert(self, title: str, pdf_path: str) -> int:
        """
        Insert a paper. created_at and updated_at are set by the database.

        Args:
            title: Display title.
            pdf_path: Absolute path of the stored copy.

        Returns:
            The new row ID.

        Raises:
            StorageWriteError: If the insert fails; nothing is committed.
        """
        try:
            paper_id = await self.pool.run(self._insert, title, pdf_path)
        except sqlite3.Error as e:
            raise StorageWriteError(
                f"Database insert failed: {e}",
                {"title": title, "pdf_path": pdf_path}
            )

        logger.debug(f"Inserted paper {paper_id}: {title}")
        return paper_id

    @staticmethod
    def _insert(conn: sqlite3.Connection, title: str, pdf_path: str) -> int:
        cur = conn.execute(
            "INSERT INTO papers (title, pdf_path) VALUES (?, ?)",
            (title, pdf_path)
        )
        return cur.lastrowid

    async def list_all(self) -> List[Paper]:
        """
        Fetch every paper, newest first.

        Returns:
            Papers ordered by created_at descending; ties fall back to the
            row ID so the order is stable. Empty list for an empty table.

        Raises:
            StorageReadError: If the query fails.
        """
        try:
            rows = await self.pool.run(self._select_all)
        except sqlite3.Error as e:
            raise StorageReadError(f"Failed to fetch the papers: {e}")

        return [self._row_to_paper(row) for row in rows]

    @staticmethod
    def _select_all(conn: sqlite3.Connection) -> list:
        return conn.execute(
            "SELECT id, title, pdf_path, created_at FROM papers "
            "ORDER BY created_at DESC, id DESC"
        ).fetchall()

    async def count(self) -> int:
        """
        Get total paper count.

        Raises:
            StorageReadError: If the query fails.
        """
        try:
            return await self.pool.run(self._count)
        except sqlite3.Error as e:
            raise StorageReadError(f"Failed to count papers: {e}")

    @staticmethod
    def _count(conn: sqlite3.Connection) -> int:
        row = conn.execute("SELECT COUNT(*) as count FROM papers").fetchone()
        return row["count"]

    @staticmethod
    def _row_to_paper(row) -> Paper:
        """Convert a database row to a Paper object."""
        return Paper(
            id=row["id"],
            title=row["title"],
            pdf_path=row["pdf_path"],
            created_at=row["created_at"]
        )
