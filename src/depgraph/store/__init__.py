"""Edge store backends for the dependency query engine.

Public API:
    EdgeStore: Protocol all backends implement.
    InMemoryEdgeStore: Dict-based store for tests and small corpora.
    SQLiteEdgeStore: Store over the index database tables.
    KuzuEdgeStore: Kuzu-backed graph store.
    create_edge_store: Factory for creating edge stores.
"""

from __future__ import annotations

from typing import Any

from .kuzu_store import KuzuEdgeStore
from .memory_store import InMemoryEdgeStore
from .protocol import EdgeStore
from .sqlite_store import SQLiteEdgeStore


def create_edge_store(backend: str = "memory", **kwargs: Any) -> EdgeStore:
    """Create an edge store.

    Args:
        backend: ``"memory"`` (testing), ``"sqlite"`` (index database),
            ``"kuzu"`` (embedded graph database).
        **kwargs: Backend-specific configuration.

    Returns:
        An EdgeStore implementation.

    Raises:
        ValueError: If *backend* is unrecognised.
    """
    if backend == "memory":
        return InMemoryEdgeStore(store_id=kwargs.get("store_id", "memory"))
    elif backend == "sqlite":
        return SQLiteEdgeStore(
            db_path=kwargs.get("db_path", ":memory:"),
            connection=kwargs.get("connection"),
            store_id=kwargs.get("store_id"),
        )
    elif backend == "kuzu":
        return KuzuEdgeStore(
            db_path=kwargs["db_path"],
            store_id=kwargs.get("store_id"),
        )
    else:
        raise ValueError(
            f"Unknown backend: {backend!r}.  "
            f"Choose from: 'memory', 'sqlite', 'kuzu'"
        )


__all__ = [
    "EdgeStore",
    "InMemoryEdgeStore",
    "SQLiteEdgeStore",
    "KuzuEdgeStore",
    "create_edge_store",
]
