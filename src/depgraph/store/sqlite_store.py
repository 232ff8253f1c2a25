"""SQLiteEdgeStore -- EdgeStore backed by the ``documents`` / ``dependencies`` tables.

The table layout matches the one the indexing pipeline writes, so a store
can be opened directly on an existing index database or handed an
already-open connection.

Public API:
    SQLiteEdgeStore: EdgeStore implementation backed by SQLite.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
import uuid
from pathlib import Path
from typing import Any

from ..exceptions import StoreUnavailableError
from ..types import Dependency

logger = logging.getLogger(__name__)


class SQLiteEdgeStore:
    """SQLite implementation of the EdgeStore protocol.

    Args:
        db_path: Path to the database file, or ``":memory:"``.
        connection: Existing connection to wrap instead of opening one.
            An injected connection is never closed by this store.
        store_id: Optional human-readable identifier; auto-generated if None.

    Raises:
        StoreUnavailableError: If the database cannot be opened.
    """

    def __init__(
        self,
        db_path: Path | str = ":memory:",
        *,
        connection: sqlite3.Connection | None = None,
        store_id: str | None = None,
    ) -> None:
        self._db_path = str(db_path)
        self._store_id = store_id or f"sqlite-{uuid.uuid4().hex[:8]}"
        self._lock = threading.Lock()
        self._owns_connection = connection is None

        if connection is not None:
            self._connection = connection
            return

        try:
            self._connection = sqlite3.connect(
                self._db_path,
                check_same_thread=False,
                timeout=10.0,  # Wait up to 10 seconds for locks (concurrent access)
            )
            # Write-Ahead Logging lets readers run alongside the indexer
            self._connection.execute("PRAGMA journal_mode=WAL")
            self._connection.execute("PRAGMA foreign_keys=ON")
        except sqlite3.Error as e:
            logger.error("Failed to open edge store at %s: %s", self._db_path, e)
            raise StoreUnavailableError(f"Cannot open database {self._db_path}: {e}") from e
        logger.debug("Opened SQLite edge store %s at %s", self._store_id, self._db_path)

    @property
    def store_id(self) -> str:
        return self._store_id

    def get_connection(self) -> sqlite3.Connection:
        """Get the underlying connection for advanced operations."""
        return self._connection

    # ── schema ───────────────────────────────────────────────

    def initialize_schema(self) -> None:
        """Create the documents and dependencies tables. Idempotent."""
        statements = [
            """
            CREATE TABLE IF NOT EXISTS documents (
                path TEXT PRIMARY KEY,
                type TEXT NOT NULL DEFAULT 'other',
                hash TEXT NOT NULL DEFAULT ''
            )
            """,
            """
            CREATE TABLE IF NOT EXISTS dependencies (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                from_file TEXT NOT NULL,
                to_file TEXT NOT NULL,
                import_type TEXT NOT NULL DEFAULT 'import',
                line_number INTEGER,
                import_text TEXT,
                FOREIGN KEY (from_file) REFERENCES documents(path) ON DELETE CASCADE,
                UNIQUE(from_file, to_file, import_type)
            )
            """,
            # Forward and reverse lookups
            "CREATE INDEX IF NOT EXISTS idx_dependencies_from ON dependencies(from_file)",
            "CREATE INDEX IF NOT EXISTS idx_dependencies_to ON dependencies(to_file)",
        ]
        with self._lock:
            if self._connection is None:
                raise StoreUnavailableError(f"Edge store {self._store_id} is closed")
            try:
                for sql in statements:
                    self._connection.execute(sql)
                self._connection.commit()
            except sqlite3.Error as e:
                logger.error("Failed to initialize edge store schema: %s", e)
                raise StoreUnavailableError(f"Schema initialization failed: {e}") from e
        logger.debug("Edge store schema initialized for %s", self._store_id)

    # ── writes (ingestion side) ──────────────────────────────

    def add_document(self, path: str, doc_type: str = "other", content_hash: str = "") -> None:
        """Register *path* as an indexed document. Idempotent."""
        self._write(
            "INSERT OR IGNORE INTO documents (path, type, hash) VALUES (?, ?, ?)",
            (path, doc_type, content_hash),
        )

    def add_dependency(
        self,
        from_file: str,
        to_file: str,
        import_type: str = "import",
        line_number: int | None = None,
        import_text: str | None = None,
    ) -> Dependency:
        """Record a directed import edge.

        Raises:
            KeyError: If *from_file* is not an indexed document.
        """
        if not self.has_document(from_file):
            raise KeyError(f"Source document not found: {from_file}")
        self._write(
            """
            INSERT OR IGNORE INTO dependencies
                (from_file, to_file, import_type, line_number, import_text)
            VALUES (?, ?, ?, ?, ?)
            """,
            (from_file, to_file, import_type, line_number, import_text),
        )
        return Dependency(from_file, to_file, import_type)

    # ── reads ────────────────────────────────────────────────

    def has_document(self, path: str) -> bool:
        rows = self._query("SELECT 1 FROM documents WHERE path = ? LIMIT 1", (path,))
        return bool(rows)

    def documents(self) -> list[str]:
        rows = self._query("SELECT path FROM documents ORDER BY path")
        return [row[0] for row in rows]

    def dependencies(self) -> list[Dependency]:
        rows = self._query(
            "SELECT from_file, to_file, import_type FROM dependencies ORDER BY id"
        )
        return [Dependency(row[0], row[1], row[2]) for row in rows]

    def successors(self, path: str) -> list[str]:
        rows = self._query(
            "SELECT to_file FROM dependencies WHERE from_file = ? ORDER BY id",
            (path,),
        )
        return [row[0] for row in rows]

    def predecessors(self, path: str) -> list[str]:
        rows = self._query(
            "SELECT from_file FROM dependencies WHERE to_file = ? ORDER BY id",
            (path,),
        )
        return [row[0] for row in rows]

    # ── lifecycle ────────────────────────────────────────────

    def close(self) -> None:
        """Close the connection if this store opened it."""
        with self._lock:
            if self._owns_connection and self._connection is not None:
                self._connection.close()
                logger.debug("Closed SQLite edge store %s", self._store_id)
            self._connection = None  # type: ignore[assignment]

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    # ── private helpers ──────────────────────────────────────

    def _query(self, sql: str, params: tuple[Any, ...] = ()) -> list[tuple]:
        """Run a read query and return all rows as tuples."""
        with self._lock:
            if self._connection is None:
                raise StoreUnavailableError(f"Edge store {self._store_id} is closed")
            try:
                return [tuple(row) for row in self._connection.execute(sql, params).fetchall()]
            except sqlite3.Error as e:
                logger.error("Edge store query failed: %s", e)
                raise StoreUnavailableError(f"Query failed: {e}") from e

    def _write(self, sql: str, params: tuple[Any, ...]) -> None:
        with self._lock:
            if self._connection is None:
                raise StoreUnavailableError(f"Edge store {self._store_id} is closed")
            try:
                self._connection.execute(sql, params)
                self._connection.commit()
            except sqlite3.Error as e:
                logger.error("Edge store write failed: %s", e)
                raise StoreUnavailableError(f"Write failed: {e}") from e


__all__ = ["SQLiteEdgeStore"]
