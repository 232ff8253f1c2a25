"""High-level query facade bound to a single edge store."""

from __future__ import annotations

from .boundaries import find_entry_points, find_leaf_nodes
from .materialize import get_dependency_graph
from .neighborhood import find_related
from .options import DEFAULT_DIRECTION, DEFAULT_MAX_DEPTH
from .store.protocol import EdgeStore
from .traversal import get_forward_deps, get_reverse_deps
from .types import Direction, TraversalResult


class DependencyIndex:
    """Dependency queries over one edge store.

    Holds only the store reference; every method forwards it to the
    stateless query functions, so independent indexes can coexist.

    Attributes:
        store: The EdgeStore queries run against.
    """

    def __init__(self, store: EdgeStore):
        if not isinstance(store, EdgeStore):
            raise TypeError("store must implement the EdgeStore protocol")
        self.store = store

    def forward_deps(
        self, file_path: str, max_depth: int = DEFAULT_MAX_DEPTH
    ) -> list[TraversalResult]:
        return get_forward_deps(self.store, file_path, max_depth=max_depth)

    def reverse_deps(
        self, file_path: str, max_depth: int = DEFAULT_MAX_DEPTH
    ) -> list[TraversalResult]:
        return get_reverse_deps(self.store, file_path, max_depth=max_depth)

    def find_related(
        self,
        file_path: str,
        direction: Direction | str = DEFAULT_DIRECTION,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ) -> list[TraversalResult]:
        return find_related(self.store, file_path, direction=direction, max_depth=max_depth)

    def dependency_graph(self) -> dict[str, list[str]]:
        return get_dependency_graph(self.store)

    def entry_points(self) -> list[str]:
        return find_entry_points(self.store)

    def leaf_nodes(self) -> list[str]:
        return find_leaf_nodes(self.store)

    def close(self) -> None:
        """Close the underlying store."""
        self.store.close()

    def __enter__(self):
        """Context manager entry."""
        return self

    def __exit__(self, *args):
        """Context manager exit."""
        self.close()


__all__ = ["DependencyIndex"]
