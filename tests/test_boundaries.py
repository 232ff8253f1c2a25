"""Tests for find_entry_points and find_leaf_nodes."""

from __future__ import annotations

from depgraph import InMemoryEdgeStore, find_entry_points, find_leaf_nodes


class TestEntryPoints:
    """Documents that import something and are imported by nothing."""

    def test_chain_graph(self, chain_store):
        assert find_entry_points(chain_store) == ["a.js", "f.js"]

    def test_isolated_document_excluded(self, chain_store):
        chain_store.add_document("lonely.js")
        assert "lonely.js" not in find_entry_points(chain_store)

    def test_cycle_removes_entry_point(self, chain_store):
        chain_store.add_dependency("d.js", "a.js")
        assert find_entry_points(chain_store) == ["f.js"]

    def test_empty_store(self, empty_store):
        assert find_entry_points(empty_store) == []


class TestLeafNodes:
    """Documents that are imported but import nothing."""

    def test_chain_graph(self, chain_store):
        assert find_leaf_nodes(chain_store) == ["d.js", "e.js"]

    def test_isolated_document_excluded(self, chain_store):
        chain_store.add_document("lonely.js")
        assert "lonely.js" not in find_leaf_nodes(chain_store)

    def test_cycle_removes_leaf(self, chain_store):
        chain_store.add_dependency("d.js", "a.js")
        assert find_leaf_nodes(chain_store) == ["e.js"]

    def test_unindexed_target_not_reported(self):
        store = InMemoryEdgeStore()
        store.add_document("app.js")
        store.add_document("util.js")
        store.add_dependency("app.js", "util.js")
        store.add_dependency("app.js", "vendor/lib.js")
        assert find_leaf_nodes(store) == ["util.js"]
        assert find_entry_points(store) == ["app.js"]

    def test_self_edge_is_neither(self):
        store = InMemoryEdgeStore()
        store.add_document("self.js")
        store.add_dependency("self.js", "self.js")
        assert find_entry_points(store) == []
        assert find_leaf_nodes(store) == []
