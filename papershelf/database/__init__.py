"""
Database module for SQLite persistence.

Provides the bounded connection pool, schema definitions, and queries
for the papers table.
"""

from .connection import ConnectionPool, DEFAULT_MAX_CONNECTIONS
from .schema import init_schema, initialize, get_statistics
from .repository import Paper, PaperRepository

__all__ = [
    "ConnectionPool",
    "DEFAULT_MAX_CONNECTIONS",
    "init_schema",
    "initialize",
    "get_statistics",
    "Paper",
    "PaperRepository"
]
