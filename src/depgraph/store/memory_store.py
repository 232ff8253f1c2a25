"""InMemoryEdgeStore -- dict-backed EdgeStore for tests and small corpora.

Public API:
    InMemoryEdgeStore: EdgeStore implementation using plain dicts.
"""

from __future__ import annotations

import logging
import threading

from ..exceptions import StoreUnavailableError
from ..types import Dependency

logger = logging.getLogger(__name__)


class InMemoryEdgeStore:
    """Dict-based EdgeStore that needs no database.

    Implements the same interface as SQLiteEdgeStore and KuzuEdgeStore.
    Thread-safe via a reentrant lock.

    Args:
        store_id: Human-readable identifier for this store instance.
    """

    def __init__(self, store_id: str = "memory") -> None:
        self._store_id = store_id
        self._documents: set[str] = set()
        self._edges: list[Dependency] = []
        self._edge_set: set[Dependency] = set()
        # path -> targets / sources, kept in edge insertion order
        self._outgoing: dict[str, list[str]] = {}
        self._incoming: dict[str, list[str]] = {}
        self._lock = threading.RLock()
        self._closed = False

    @property
    def store_id(self) -> str:
        return self._store_id

    # ── writes (ingestion side) ──────────────────────────────

    def add_document(self, path: str) -> None:
        """Register *path* as an indexed document. Idempotent."""
        with self._lock:
            self._check_open()
            self._documents.add(path)

    def add_dependency(
        self,
        from_file: str,
        to_file: str,
        import_type: str = "import",
    ) -> Dependency:
        """Record a directed import edge.

        Raises:
            KeyError: If *from_file* is not an indexed document.
        """
        with self._lock:
            self._check_open()
            if from_file not in self._documents:
                raise KeyError(f"Source document not found: {from_file}")
            edge = Dependency(from_file, to_file, import_type)
            if edge in self._edge_set:
                return edge
            self._edge_set.add(edge)
            self._edges.append(edge)
            self._outgoing.setdefault(from_file, []).append(to_file)
            self._incoming.setdefault(to_file, []).append(from_file)
        return edge

    # ── reads ────────────────────────────────────────────────

    def has_document(self, path: str) -> bool:
        with self._lock:
            self._check_open()
            return path in self._documents

    def documents(self) -> list[str]:
        with self._lock:
            self._check_open()
            return sorted(self._documents)

    def dependencies(self) -> list[Dependency]:
        with self._lock:
            self._check_open()
            return list(self._edges)

    def successors(self, path: str) -> list[str]:
        with self._lock:
            self._check_open()
            return list(self._outgoing.get(path, ()))

    def predecessors(self, path: str) -> list[str]:
        with self._lock:
            self._check_open()
            return list(self._incoming.get(path, ()))

    # ── lifecycle ────────────────────────────────────────────

    def close(self) -> None:
        with self._lock:
            self._closed = True
            self._documents.clear()
            self._edges.clear()
            self._edge_set.clear()
            self._outgoing.clear()
            self._incoming.clear()
        logger.debug("Closed in-memory edge store %s", self._store_id)

    def _check_open(self) -> None:
        if self._closed:
            raise StoreUnavailableError(f"Edge store {self._store_id} is closed")


__all__ = ["InMemoryEdgeStore"]
