"""
SQLite connection pool for PaperShelf.

Keeps a bounded set of reusable connections to a single database file.
Blocking sqlite3 calls are pushed to worker threads so coroutine callers
never stall the event loop, and an asyncio semaphore caps the number of
operations in flight. Callers beyond the cap queue without a timeout.
"""

import asyncio
import sqlite3
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator, Callable, List, TypeVar, Union

from ..core import get_logger, StorageInitError
from ..utils.file_utils import ensure_directory
from ..utils.path_utils import build_connection_locator

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_MAX_CONNECTIONS = 5


class ConnectionPool:
    """
    Bounded pool of SQLite connections.

    Connections are opened lazily up to ``max_connections`` and reused
    afterwards. Each connection uses WAL mode so readers and the writer
    do not block each other.
    """

    def __init__(self, db_path: Union[str, Path], max_connections: int = DEFAULT_MAX_CONNECTIONS):
        """
        Initialize the pool without opening anything.

        Args:
            db_path: Path to the SQLite database file.
            max_connections: Upper bound on simultaneous connections.
        """
        if max_connections < 1:
            raise ValueError("max_connections must be at least 1")

        self.db_path = Path(db_path)
        self.max_connections = max_connections
        self.locator = build_connection_locator(self.db_path)

        self._semaphore = asyncio.Semaphore(max_connections)
        self._idle: List[sqlite3.Connection] = []
        self._connections: List[sqlite3.Connection] = []
        self._opened = False
        self._closed = False

    @property
    def size(self) -> int:
        """Number of connections currently open."""
        return len(self._connections)

    @property
    def is_open(self) -> bool:
        return self._opened and not self._closed

    def _create_connection(self) -> sqlite3.Connection:
        """Create a new database connection with optimal settings."""
        try:
            conn = sqlite3.connect(
                self.locator,
                uri=True,
                check_same_thread=False,
                timeout=30.0
            )

            conn.row_factory = sqlite3.Row

            conn.execute("PRAGMA journal_mode=WAL")
            conn.execute("PRAGMA synchronous=NORMAL")

            return conn

        except sqlite3.Error as e:
            raise StorageInitError(
                f"Failed to connect to database: {e}",
                {"database": str(self.db_path)}
            )

    async def open(self) -> "ConnectionPool":
        """
        Open the pool, creating the database file if absent.

        Returns:
            The pool itself.

        Raises:
            StorageInitError: If the location is inaccessible or the first
                connection cannot be established.
        """
        if self._closed:
            raise StorageInitError("Connection pool has been closed")
        if self._opened:
            return self

        try:
            ensure_directory(self.db_path.parent)
        except OSError as e:
            raise StorageInitError(
                f"Failed to create database directory: {e}",
                {"directory": str(self.db_path.parent)}
            )

        conn = await asyncio.to_thread(self._create_connection)
        try:
            await asyncio.to_thread(lambda: conn.execute("SELECT 1").fetchone())
        except sqlite3.Error as e:
            conn.close()
            raise StorageInitError(
                f"Database is not usable: {e}",
                {"database": str(self.db_path)}
            )

        self._connections.append(conn)
        self._idle.append(conn)
        self._opened = True

        logger.info(f"Connected to database: {self.db_path}")
        return self

    @asynccontextmanager
    async def acquire(self) -> AsyncIterator[sqlite3.Connection]:
        """
        Borrow a connection for the duration of the block.

        Yields:
            SQLite connection with Row factory enabled.
        """
        if not self.is_open:
            raise StorageInitError("Connection pool is not open")

        async with self._semaphore:
            if self._closed:
                raise StorageInitError("Connection pool has been closed")

            if self._idle:
                conn = self._idle.pop()
            else:
                conn = await asyncio.to_thread(self._create_connection)
                self._connections.append(conn)
                logger.debug(f"Opened pooled connection {self.size}/{self.max_connections}")

            try:
                yield conn
            finally:
                if self._closed:
                    conn.close()
                else:
                    self._idle.append(conn)

    async def run(self, fn: Callable[..., T], *args) -> T:
        """
        Run ``fn(conn, *args)`` on a pooled connection in a worker thread.

        Commits when ``fn`` returns, rolls back when it raises. If the caller
        is cancelled, the cancellation is re-raised only after the worker
        thread is done with the connection.

        Args:
            fn: Blocking function taking a connection as first argument.
            *args: Extra arguments for ``fn``.

        Returns:
            Whatever ``fn`` returns.
        """
        async with self.acquire() as conn:
            work = asyncio.ensure_future(
                asyncio.to_thread(self._run_in_transaction, conn, fn, *args)
            )
            try:
                return await asyncio.shield(work)
            except asyncio.CancelledError:
                # The connection goes back to the pool only once the thread lets go.
                await asyncio.wait({work})
                if not work.cancelled() and work.exception() is not None:
                    logger.warning(f"Cancelled database call failed: {work.exception()}")
                raise

    @staticmethod
    def _run_in_transaction(conn: sqlite3.Connection, fn: Callable[..., T], *args) -> T:
        try:
            result = fn(conn, *args)
            conn.commit()
            return result
        except Exception:
            conn.rollback()
            raise

    async def close(self) -> None:
        """Close idle connections; borrowed ones close when released."""
        if self._closed:
            return

        self._closed = True

        for conn in self._idle:
            conn.close()

        self._idle.clear()
        logger.info(f"Closed connection pool for: {self.db_path}")
