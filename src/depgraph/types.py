"""Graph data structures for dependency queries.

Public API:
    Direction: Traversal direction enum.
    Dependency: Immutable import edge between two files.
    TraversalResult: A file reached from a query origin.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Direction(str, Enum):
    """Direction for dependency traversal queries."""

    FORWARD = "forward"
    REVERSE = "reverse"
    BOTH = "both"


@dataclass(frozen=True)
class Dependency:
    """An immutable import edge.

    Attributes:
        from_file: Path of the importing file.
        to_file: Path of the imported file.
        import_type: Kind of import (e.g. "import", "require", "reference").
            Informational only; traversal never consults it.
    """

    from_file: str
    to_file: str
    import_type: str = "import"


@dataclass(frozen=True)
class TraversalResult:
    """A file reached from a query origin.

    Attributes:
        file: Path of the reached file.
        depth: Minimum number of hops from the origin.
        direction: Direction the hit was found in.
    """

    file: str
    depth: int
    direction: Direction

    def to_dict(self) -> dict[str, Any]:
        return {
            "file": self.file,
            "depth": self.depth,
            "direction": self.direction.value,
        }


__all__ = ["Direction", "Dependency", "TraversalResult"]
