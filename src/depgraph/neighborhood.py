"""Combined forward/reverse neighbourhood of a file.

Direction is part of a hit's identity: a file that is both imported by and
importing the origin (possible in cyclic graphs) is reported once per
direction.
"""

from __future__ import annotations

import logging

from .options import DEFAULT_DIRECTION, DEFAULT_MAX_DEPTH, TraversalOptions, validate_file_path
from .store.protocol import EdgeStore
from .traversal import traverse
from .types import Direction, TraversalResult

logger = logging.getLogger(__name__)

# Tiebreak for equal (depth, file): forward hits before reverse hits.
_DIRECTION_ORDER = {Direction.FORWARD: 0, Direction.REVERSE: 1}


def find_related(
    store: EdgeStore,
    file_path: str,
    *,
    direction: Direction | str = DEFAULT_DIRECTION,
    max_depth: int = DEFAULT_MAX_DEPTH,
    max_paths: int | None = None,
) -> list[TraversalResult]:
    """Find all related files (forward, reverse, or both).

    Args:
        store: Edge store to read from.
        file_path: Starting file path.
        direction: ``forward``, ``reverse`` or ``both`` (default).
        max_depth: Maximum traversal depth.
        max_paths: Optional per-direction work cap, see ``traverse``.

    Returns:
        Results deduplicated per (file, direction) at minimum depth, sorted
        by depth, then file, then direction (forward first).

    Raises:
        InvalidParameterError: On an empty path, unknown direction or a
            non-positive max_depth.
    """
    validate_file_path(file_path)
    options = TraversalOptions(max_depth=max_depth, direction=direction, max_paths=max_paths)

    by_key: dict[tuple[str, Direction], TraversalResult] = {}
    for single in options.directions():
        for result in traverse(
            store, file_path, single, options.max_depth, max_paths=options.max_paths
        ):
            key = (result.file, result.direction)
            existing = by_key.get(key)
            if existing is None or result.depth < existing.depth:
                by_key[key] = result

    related = sorted(
        by_key.values(),
        key=lambda r: (r.depth, r.file, _DIRECTION_ORDER[r.direction]),
    )
    logger.debug(
        "find_related file=%s direction=%s max_depth=%d results=%d",
        file_path,
        options.direction.value,
        options.max_depth,
        len(related),
    )
    return related


__all__ = ["find_related"]
