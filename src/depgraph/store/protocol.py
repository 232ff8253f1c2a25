"""EdgeStore protocol -- the read-only interface all edge backends implement.

Public API:
    EdgeStore: Runtime-checkable protocol defining the edge store contract.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..types import Dependency


@runtime_checkable
class EdgeStore(Protocol):
    """Common read interface over the ``documents`` and ``dependencies`` relations.

    Every concrete implementation (SQLite, Kuzu, in-memory, etc.)
    must satisfy this protocol so the query engine can swap backends
    without changes.  Query operations only ever call these methods;
    populating a store is the ingestion collaborator's job.
    """

    # ── identity ──────────────────────────────────────────────

    @property
    def store_id(self) -> str:
        """Unique identifier for this store instance."""
        ...

    # ── documents ─────────────────────────────────────────────

    def has_document(self, path: str) -> bool:
        """Return True if *path* is an indexed document."""
        ...

    def documents(self) -> list[str]:
        """Return every indexed document path, sorted."""
        ...

    # ── dependencies ──────────────────────────────────────────

    def dependencies(self) -> list[Dependency]:
        """Return every edge in the relation, in scan order.

        Parallel edges (same pair, different import_type) are all returned.
        """
        ...

    def successors(self, path: str) -> list[str]:
        """Return ``to_file`` of every edge whose ``from_file`` is *path*."""
        ...

    def predecessors(self, path: str) -> list[str]:
        """Return ``from_file`` of every edge whose ``to_file`` is *path*."""
        ...

    # ── lifecycle ─────────────────────────────────────────────

    def close(self) -> None:
        """Release resources held by the store."""
        ...


__all__ = ["EdgeStore"]
