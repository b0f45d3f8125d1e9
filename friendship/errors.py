"""Friendship graph error classes.

Every error is a caller fault raised eagerly, before the graph is mutated.
"""

from __future__ import annotations


class FriendshipGraphError(ValueError):
    """Base exception for friendship graph errors."""

    pass


class InvalidArgumentError(FriendshipGraphError):
    """Raised when a required person is None."""

    pass


class DuplicateVertexError(FriendshipGraphError):
    """Raised when adding a person already present as a vertex."""

    pass


class VertexNotFoundError(FriendshipGraphError):
    """Raised when a person is not a vertex of the graph."""

    pass


class SelfLoopError(FriendshipGraphError):
    """Raised when both edge endpoints are the same person."""

    pass


class DuplicateEdgeError(FriendshipGraphError):
    """Raised when the same unordered pair is already linked."""

    pass
