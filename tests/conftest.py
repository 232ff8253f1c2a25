"""Pytest configuration and fixtures for depgraph tests."""

import pytest

from depgraph.store import InMemoryEdgeStore, KuzuEdgeStore, SQLiteEdgeStore

# Dependency graph used across tests:
#   a.js -> b.js -> c.js -> d.js
#        -> e.js
#   f.js -> b.js (another path to b)
CHAIN_DOCUMENTS = ["a.js", "b.js", "c.js", "d.js", "e.js", "f.js"]
CHAIN_EDGES = [
    ("a.js", "b.js"),
    ("a.js", "e.js"),
    ("b.js", "c.js"),
    ("c.js", "d.js"),
    ("f.js", "b.js"),
]


def _make_store(backend, tmp_path):
    if backend == "memory":
        return InMemoryEdgeStore(store_id="test-memory")
    if backend == "sqlite":
        store = SQLiteEdgeStore(":memory:", store_id="test-sqlite")
        store.initialize_schema()
        return store
    return KuzuEdgeStore(db_path=tmp_path / "test_graph_db", store_id="test-kuzu")


@pytest.fixture(params=["memory", "sqlite", "kuzu"])
def empty_store(request, tmp_path):
    """An empty edge store of every backend."""
    store = _make_store(request.param, tmp_path)
    yield store
    store.close()


def populate(store, documents, edges):
    """Load documents and (from, to[, import_type]) edges into *store*."""
    for path in documents:
        store.add_document(path)
    for edge in edges:
        store.add_dependency(*edge)
    return store


@pytest.fixture
def build_graph(empty_store):
    """Return a loader that fills the parametrized store with a custom graph."""

    def _build(documents, edges):
        return populate(empty_store, documents, edges)

    return _build


@pytest.fixture
def chain_store(empty_store):
    """Store holding the chain graph, for every backend."""
    return populate(empty_store, CHAIN_DOCUMENTS, CHAIN_EDGES)


@pytest.fixture
def memory_chain_store():
    """In-memory store holding the chain graph."""
    store = populate(InMemoryEdgeStore(store_id="chain"), CHAIN_DOCUMENTS, CHAIN_EDGES)
    yield store
    store.close()
