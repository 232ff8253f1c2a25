"""depgraph: Dependency-graph index and traversal engine for file corpora."""

__version__ = "0.1.0"

from .boundaries import find_entry_points, find_leaf_nodes
from .exceptions import DepGraphError, InvalidParameterError, StoreUnavailableError
from .index import DependencyIndex
from .materialize import get_dependency_graph
from .neighborhood import find_related
from .options import DEFAULT_DIRECTION, DEFAULT_MAX_DEPTH, TraversalOptions
from .store import (
    EdgeStore,
    InMemoryEdgeStore,
    KuzuEdgeStore,
    SQLiteEdgeStore,
    create_edge_store,
)
from .traversal import get_forward_deps, get_reverse_deps, traverse
from .types import Dependency, Direction, TraversalResult

__all__ = [
    # Traversal
    "traverse",
    "get_forward_deps",
    "get_reverse_deps",
    "find_related",
    "get_dependency_graph",
    "find_entry_points",
    "find_leaf_nodes",
    "DependencyIndex",
    # Types and options
    "Direction",
    "Dependency",
    "TraversalResult",
    "TraversalOptions",
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_DIRECTION",
    # Stores
    "EdgeStore",
    "InMemoryEdgeStore",
    "SQLiteEdgeStore",
    "KuzuEdgeStore",
    "create_edge_store",
    # Exceptions
    "DepGraphError",
    "InvalidParameterError",
    "StoreUnavailableError",
]
