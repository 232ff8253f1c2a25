"""Full adjacency-list view of the dependency relation."""

from __future__ import annotations

from .store.protocol import EdgeStore


def get_dependency_graph(store: EdgeStore) -> dict[str, list[str]]:
    """Get the full dependency graph as an adjacency list.

    Reads the edge relation once and groups targets under their source in
    scan order.  Parallel edges are kept, so a target may repeat; callers
    needing a simple graph must dedupe.
    """
    graph: dict[str, list[str]] = {}
    for dep in store.dependencies():
        graph.setdefault(dep.from_file, []).append(dep.to_file)
    return graph


__all__ = ["get_dependency_graph"]
