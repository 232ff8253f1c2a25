"""Tests for find_related (combined forward/reverse neighbourhood).

Test categories:
- TestDirections: both, forward-only, reverse-only, default
- TestDeduplication: per-(file, direction) identity, multiple paths
- TestOrdering: depth, file, then forward before reverse
- TestCycles: cyclic graphs terminate
- TestValidation: bad parameters rejected
"""

from __future__ import annotations

import pytest

from depgraph import Direction, InvalidParameterError, TraversalResult, find_related


def fwd(file, depth):
    return TraversalResult(file=file, depth=depth, direction=Direction.FORWARD)


def rev(file, depth):
    return TraversalResult(file=file, depth=depth, direction=Direction.REVERSE)


# ── TestDirections ────────────────────────────────────────────


class TestDirections:
    """Direction selection."""

    def test_both_finds_forward_and_reverse(self, chain_store):
        related = find_related(chain_store, "b.js", direction="both", max_depth=2)
        assert related == [
            rev("a.js", 1),
            fwd("c.js", 1),
            rev("f.js", 1),
            fwd("d.js", 2),
        ]

    def test_marks_direction(self, chain_store):
        related = {r.file: r.direction for r in find_related(chain_store, "b.js", max_depth=1)}
        assert related["a.js"] is Direction.REVERSE
        assert related["c.js"] is Direction.FORWARD

    def test_defaults_to_both(self, chain_store):
        assert find_related(chain_store, "b.js", max_depth=1) == find_related(
            chain_store, "b.js", direction=Direction.BOTH, max_depth=1
        )

    def test_forward_only(self, chain_store):
        related = find_related(chain_store, "b.js", direction="forward", max_depth=3)
        assert related == [fwd("c.js", 1), fwd("d.js", 2)]

    def test_reverse_only(self, chain_store):
        related = find_related(chain_store, "c.js", direction=Direction.REVERSE, max_depth=3)
        assert related == [rev("b.js", 1), rev("a.js", 2), rev("f.js", 2)]

    def test_unknown_file_returns_empty(self, chain_store):
        assert find_related(chain_store, "nope.js") == []


# ── TestDeduplication ─────────────────────────────────────────


class TestDeduplication:
    """No (file, direction) pair is reported twice."""

    def test_deduplicates_multiple_paths(self, build_graph):
        store = build_graph(
            ["a", "b", "c", "d"],
            [("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")],
        )
        related = find_related(store, "a", direction="forward", max_depth=3)
        files = [r.file for r in related]
        assert len(files) == len(set(files))
        assert fwd("d", 2) in related

    def test_same_file_kept_in_both_directions(self, build_graph):
        store = build_graph(["a", "b"], [("a", "b"), ("b", "a")])
        assert find_related(store, "a", max_depth=3) == [fwd("b", 1), rev("b", 1)]

    def test_no_duplicate_file_direction_pairs(self, chain_store):
        chain_store.add_dependency("d.js", "a.js")
        chain_store.add_dependency("e.js", "b.js")
        for origin in ["a.js", "b.js", "c.js", "d.js", "e.js", "f.js"]:
            related = find_related(chain_store, origin, max_depth=6)
            keys = [(r.file, r.direction) for r in related]
            assert len(keys) == len(set(keys))
            assert origin not in {r.file for r in related}


# ── TestOrdering ──────────────────────────────────────────────


class TestOrdering:
    """Stable ordering across merged directions."""

    def test_sorted_by_depth_file_direction(self, chain_store):
        chain_store.add_dependency("d.js", "a.js")
        related = find_related(chain_store, "a.js", max_depth=10)
        assert related == sorted(
            related,
            key=lambda r: (r.depth, r.file, 0 if r.direction is Direction.FORWARD else 1),
        )

    def test_forward_before_reverse_on_tie(self, build_graph):
        store = build_graph(["a", "b", "c"], [("a", "b"), ("b", "a"), ("c", "a")])
        related = find_related(store, "a", max_depth=1)
        assert related == [fwd("b", 1), rev("b", 1), rev("c", 1)]


# ── TestCycles ────────────────────────────────────────────────


class TestCycles:
    """Circular dependencies complete without hanging."""

    def test_handles_circular_dependencies(self, chain_store):
        chain_store.add_dependency("d.js", "a.js")
        related = find_related(chain_store, "a.js", max_depth=10)
        assert related == [
            fwd("b.js", 1),
            rev("d.js", 1),
            fwd("e.js", 1),
            fwd("c.js", 2),
            rev("c.js", 2),
            rev("b.js", 3),
            fwd("d.js", 3),
            rev("f.js", 4),
        ]

    def test_work_cap_preserves_results(self, chain_store):
        chain_store.add_dependency("d.js", "a.js")
        assert find_related(chain_store, "a.js", max_depth=10, max_paths=2) == find_related(
            chain_store, "a.js", max_depth=10
        )


# ── TestValidation ────────────────────────────────────────────


class TestValidation:
    """Bad parameters are rejected before traversal."""

    def test_rejects_unknown_direction(self, memory_chain_store):
        with pytest.raises(InvalidParameterError):
            find_related(memory_chain_store, "a.js", direction="up")

    @pytest.mark.parametrize("depth", [0, -1, "2"])
    def test_rejects_bad_depth(self, memory_chain_store, depth):
        with pytest.raises(InvalidParameterError):
            find_related(memory_chain_store, "a.js", max_depth=depth)

    def test_rejects_empty_path(self, memory_chain_store):
        with pytest.raises(InvalidParameterError):
            find_related(memory_chain_store, "")

    def test_whitespace_path_is_an_ordinary_file(self, memory_chain_store):
        assert find_related(memory_chain_store, "  ") == []
