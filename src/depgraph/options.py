"""Query options and defaults for dependency traversal.

Options are validated once at the public boundary so the traversal
engine itself can treat every input as well-formed.
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import InvalidParameterError
from .types import Direction

DEFAULT_MAX_DEPTH = 3
DEFAULT_DIRECTION = Direction.BOTH


def _is_positive_int(value: object) -> bool:
    # bool is an int subclass; True must not pass as a depth of 1.
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def validate_file_path(file_path: object) -> str:
    """Return *file_path* unchanged if it is a usable node identifier.

    Raises:
        InvalidParameterError: If it is not a non-empty string.
    """
    if not isinstance(file_path, str) or not file_path:
        raise InvalidParameterError("file_path must be a non-empty string")
    return file_path


@dataclass(frozen=True)
class TraversalOptions:
    """Validated parameters for a traversal query.

    Attributes:
        max_depth: Maximum number of hops from the origin (>= 1).
        direction: Direction to traverse; strings are coerced.
        max_paths: Optional cap on expanded paths before the engine
            falls back to per-call visited pruning (None = unbounded).
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    direction: Direction = DEFAULT_DIRECTION
    max_paths: int | None = None

    def __post_init__(self):
        """Validate and normalise options."""
        if not _is_positive_int(self.max_depth):
            raise InvalidParameterError(
                f"max_depth must be a positive integer, got {self.max_depth!r}"
            )

        try:
            direction = Direction(self.direction)
        except ValueError as e:
            raise InvalidParameterError(
                f"direction must be one of 'forward', 'reverse', 'both', "
                f"got {self.direction!r}"
            ) from e
        object.__setattr__(self, "direction", direction)

        if self.max_paths is not None and not _is_positive_int(self.max_paths):
            raise InvalidParameterError(
                f"max_paths must be a positive integer or None, got {self.max_paths!r}"
            )

    def directions(self) -> list[Direction]:
        """Expand BOTH into the single directions it covers."""
        if self.direction is Direction.BOTH:
            return [Direction.FORWARD, Direction.REVERSE]
        return [self.direction]


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "DEFAULT_DIRECTION",
    "TraversalOptions",
    "validate_file_path",
]
