"""Custom exceptions for depgraph."""


class DepGraphError(Exception):
    """Base exception for dependency graph operations."""


class InvalidParameterError(DepGraphError, ValueError):
    """Raised when a query parameter is rejected before traversal."""


class StoreUnavailableError(DepGraphError):
    """Raised when the backing edge store cannot be opened or queried."""
