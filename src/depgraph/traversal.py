"""Depth-bounded, cycle-safe dependency traversal.

Cycle pruning is path-sensitive: every frontier entry carries the nodes on
its own path, and a neighbour is only skipped when it already lies on that
path.  The same file reached along a different path is explored again, and
results are deduplicated afterwards by minimum depth.

Public API:
    traverse: Single-direction traversal engine.
    get_forward_deps: Files a file imports, directly or transitively.
    get_reverse_deps: Files that import a file, directly or transitively.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable

from .exceptions import InvalidParameterError
from .options import DEFAULT_MAX_DEPTH, TraversalOptions, validate_file_path
from .store.protocol import EdgeStore
from .types import Direction, TraversalResult

logger = logging.getLogger(__name__)


def _neighbor_lookup(store: EdgeStore, direction: Direction) -> Callable[[str], list[str]]:
    """Return a per-call memoized neighbour function for *direction*.

    Parallel edges collapse to a single hop.
    """
    fetch = store.successors if direction is Direction.FORWARD else store.predecessors
    cache: dict[str, list[str]] = {}

    def neighbors(node: str) -> list[str]:
        hit = cache.get(node)
        if hit is None:
            hit = list(dict.fromkeys(fetch(node)))
            cache[node] = hit
        return hit

    return neighbors


def traverse(
    store: EdgeStore,
    origin: str,
    direction: Direction | str,
    max_depth: int,
    *,
    max_paths: int | None = None,
) -> list[TraversalResult]:
    """Breadth-first traversal from *origin* in a single direction.

    Args:
        store: Edge store to read from.
        origin: Start file.  Unknown files simply produce no results.
        direction: ``forward`` follows imports, ``reverse`` follows importers.
        max_depth: Maximum hops from *origin*.  Values below 1 yield [].
        max_paths: Optional cap on expanded path entries.  Past the cap the
            remaining frontier is pruned per call instead of per path; the
            reported files and depths are unchanged.

    Returns:
        One TraversalResult per reached file at its minimum depth, sorted by
        (depth, file).  The origin is never included.

    Raises:
        InvalidParameterError: If *direction* is not forward or reverse.
    """
    try:
        direction = Direction(direction)
    except ValueError as e:
        raise InvalidParameterError(f"Unknown direction: {direction!r}") from e
    if direction is Direction.BOTH:
        raise InvalidParameterError("traverse runs one direction; use find_related for both")
    if not origin or max_depth < 1:
        return []

    neighbors = _neighbor_lookup(store, direction)
    best_depth: dict[str, int] = {}
    expanded: set[str] = set()
    per_call_pruning = False
    paths_expanded = 0

    # BFS queue: (current_file, ordered_path, files_on_path, hops_so_far)
    queue: deque[tuple[str, tuple[str, ...], frozenset[str], int]] = deque()
    queue.append((origin, (origin,), frozenset((origin,)), 0))

    while queue:
        current, path, on_path, hops = queue.popleft()

        # Entries are dequeued in non-decreasing depth, so an already
        # expanded file was expanded at a depth <= hops.
        if per_call_pruning and current in expanded:
            continue
        expanded.add(current)
        paths_expanded += 1
        if max_paths is not None and not per_call_pruning and paths_expanded > max_paths:
            per_call_pruning = True
            logger.warning(
                "Traversal from %s expanded %d paths; switching to per-call pruning",
                origin,
                paths_expanded,
            )

        next_hops = hops + 1
        for neighbor in neighbors(current):
            if neighbor in on_path:
                continue
            if next_hops < best_depth.get(neighbor, next_hops + 1):
                best_depth[neighbor] = next_hops
            if next_hops < max_depth:
                queue.append(
                    (neighbor, path + (neighbor,), on_path | {neighbor}, next_hops)
                )

    results = [
        TraversalResult(file=file, depth=depth, direction=direction)
        for file, depth in best_depth.items()
    ]
    results.sort(key=lambda r: (r.depth, r.file))

    logger.debug(
        "traverse origin=%s direction=%s max_depth=%d paths=%d results=%d",
        origin,
        direction.value,
        max_depth,
        paths_expanded,
        len(results),
    )
    return results


def get_forward_deps(
    store: EdgeStore,
    file_path: str,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    max_paths: int | None = None,
) -> list[TraversalResult]:
    """Get forward dependencies (files that *file_path* imports).

    Raises:
        InvalidParameterError: On an empty path or a non-positive max_depth.
    """
    validate_file_path(file_path)
    options = TraversalOptions(
        max_depth=max_depth, direction=Direction.FORWARD, max_paths=max_paths
    )
    return traverse(
        store, file_path, options.direction, options.max_depth, max_paths=options.max_paths
    )


def get_reverse_deps(
    store: EdgeStore,
    file_path: str,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    max_paths: int | None = None,
) -> list[TraversalResult]:
    """Get reverse dependencies (files that import *file_path*).

    Raises:
        InvalidParameterError: On an empty path or a non-positive max_depth.
    """
    validate_file_path(file_path)
    options = TraversalOptions(
        max_depth=max_depth, direction=Direction.REVERSE, max_paths=max_paths
    )
    return traverse(
        store, file_path, options.direction, options.max_depth, max_paths=options.max_paths
    )


__all__ = ["traverse", "get_forward_deps", "get_reverse_deps"]
