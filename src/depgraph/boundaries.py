"""Entry points and leaf nodes of the dependency graph.

Candidates come from the indexed documents; a file with no edges at all is
neither an entry point nor a leaf.
"""

from __future__ import annotations

from .store.protocol import EdgeStore


def _edge_endpoints(store: EdgeStore) -> tuple[set[str], set[str]]:
    sources: set[str] = set()
    targets: set[str] = set()
    for dep in store.dependencies():
        sources.add(dep.from_file)
        targets.add(dep.to_file)
    return sources, targets


def find_entry_points(store: EdgeStore) -> list[str]:
    """Find documents that import something but are imported by nothing."""
    sources, targets = _edge_endpoints(store)
    return sorted(
        path for path in store.documents() if path in sources and path not in targets
    )


def find_leaf_nodes(store: EdgeStore) -> list[str]:
    """Find documents that are imported but import nothing."""
    sources, targets = _edge_endpoints(store)
    return sorted(
        path for path in store.documents() if path in targets and path not in sources
    )


__all__ = ["find_entry_points", "find_leaf_nodes"]
