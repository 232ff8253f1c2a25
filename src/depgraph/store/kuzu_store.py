"""KuzuEdgeStore -- Kuzu-backed implementation of the EdgeStore protocol.

Documents live in a ``Document`` node table keyed by path; imports are
``DEPENDS_ON`` relationships carrying their ``import_type``.

Public API:
    KuzuEdgeStore: Concrete EdgeStore implementation backed by Kuzu.
"""

from __future__ import annotations

import logging
import uuid
from pathlib import Path
from typing import Any

import kuzu

from ..exceptions import StoreUnavailableError
from ..types import Dependency

logger = logging.getLogger(__name__)

NODE_TABLE = "Document"
REL_TABLE = "DEPENDS_ON"


class KuzuEdgeStore:
    """Kuzu graph database implementation of the EdgeStore protocol.

    The schema is created on construction.  All Cypher queries use
    parameterised bindings to prevent injection.

    Args:
        db_path: Filesystem path for the Kuzu database.
        store_id: Optional human-readable identifier; auto-generated if None.

    Raises:
        StoreUnavailableError: If the database cannot be opened.
    """

    # ── construction / lifecycle ──────────────────────────────

    def __init__(self, db_path: Path | str, store_id: str | None = None) -> None:
        self._db_path = Path(db_path)
        self._store_id = store_id or f"kuzu-{uuid.uuid4().hex[:8]}"
        try:
            self._db = kuzu.Database(str(self._db_path))
            self._conn = kuzu.Connection(self._db)
        except RuntimeError as e:
            logger.error("Failed to open Kuzu edge store at %s: %s", self._db_path, e)
            raise StoreUnavailableError(f"Cannot open Kuzu database {self._db_path}: {e}") from e
        self._ensure_schema()
        logger.debug("Opened Kuzu edge store %s at %s", self._store_id, self._db_path)

    @property
    def store_id(self) -> str:
        return self._store_id

    def close(self) -> None:
        """Release Kuzu resources."""
        self._conn = None  # type: ignore[assignment]
        self._db = None  # type: ignore[assignment]

    def _ensure_schema(self) -> None:
        self._execute(
            f"CREATE NODE TABLE IF NOT EXISTS {NODE_TABLE}"
            f"(path STRING, PRIMARY KEY(path))"
        )
        self._execute(
            f"CREATE REL TABLE IF NOT EXISTS {REL_TABLE}"
            f"(FROM {NODE_TABLE} TO {NODE_TABLE}, import_type STRING)"
        )

    # ── writes (ingestion side) ───────────────────────────────

    def add_document(self, path: str) -> None:
        """Register *path* as an indexed document. Idempotent."""
        self._execute(f"MERGE (:{NODE_TABLE} {{path: $path}})", {"path": path})

    def add_dependency(
        self,
        from_file: str,
        to_file: str,
        import_type: str = "import",
    ) -> Dependency:
        """Create a DEPENDS_ON edge between two indexed documents.

        An identical (from, to, import_type) edge is not duplicated.

        Raises:
            KeyError: If either endpoint is not an indexed document.
        """
        if not self.has_document(from_file):
            raise KeyError(f"Source document not found: {from_file}")
        if not self.has_document(to_file):
            raise KeyError(f"Target document not found: {to_file}")

        params = {"src": from_file, "dst": to_file, "kind": import_type}
        existing = self._rows(
            f"MATCH (a:{NODE_TABLE})-[r:{REL_TABLE}]->(b:{NODE_TABLE}) "
            f"WHERE a.path = $src AND b.path = $dst AND r.import_type = $kind "
            f"RETURN count(r)",
            params,
        )
        if not existing or existing[0][0] == 0:
            self._execute(
                f"MATCH (a:{NODE_TABLE}), (b:{NODE_TABLE}) "
                f"WHERE a.path = $src AND b.path = $dst "
                f"CREATE (a)-[:{REL_TABLE} {{import_type: $kind}}]->(b)",
                params,
            )
        return Dependency(from_file, to_file, import_type)

    # ── reads ─────────────────────────────────────────────────

    def has_document(self, path: str) -> bool:
        rows = self._rows(
            f"MATCH (d:{NODE_TABLE}) WHERE d.path = $path RETURN d.path",
            {"path": path},
        )
        return bool(rows)

    def documents(self) -> list[str]:
        rows = self._rows(f"MATCH (d:{NODE_TABLE}) RETURN d.path ORDER BY d.path")
        return [row[0] for row in rows]

    def dependencies(self) -> list[Dependency]:
        rows = self._rows(
            f"MATCH (a:{NODE_TABLE})-[r:{REL_TABLE}]->(b:{NODE_TABLE}) "
            f"RETURN a.path, b.path, r.import_type "
            f"ORDER BY a.path, b.path, r.import_type"
        )
        return [Dependency(row[0], row[1], row[2]) for row in rows]

    def successors(self, path: str) -> list[str]:
        rows = self._rows(
            f"MATCH (a:{NODE_TABLE})-[:{REL_TABLE}]->(b:{NODE_TABLE}) "
            f"WHERE a.path = $path RETURN b.path ORDER BY b.path",
            {"path": path},
        )
        return [row[0] for row in rows]

    def predecessors(self, path: str) -> list[str]:
        rows = self._rows(
            f"MATCH (a:{NODE_TABLE})-[:{REL_TABLE}]->(b:{NODE_TABLE}) "
            f"WHERE b.path = $path RETURN a.path ORDER BY a.path",
            {"path": path},
        )
        return [row[0] for row in rows]

    # ── private helpers ───────────────────────────────────────

    def _execute(self, cypher: str, params: dict[str, Any] | None = None):
        if self._conn is None:
            raise StoreUnavailableError(f"Edge store {self._store_id} is closed")
        try:
            return self._conn.execute(cypher, params or {})
        except RuntimeError as e:
            logger.error("Kuzu query failed: %s", e)
            raise StoreUnavailableError(f"Query failed: {e}") from e

    def _rows(self, cypher: str, params: dict[str, Any] | None = None) -> list[list[Any]]:
        """Execute *cypher* and collect every result row."""
        result = self._execute(cypher, params)
        rows: list[list[Any]] = []
        while result.has_next():
            rows.append(result.get_next())
        return rows


__all__ = ["KuzuEdgeStore"]
