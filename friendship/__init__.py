"""
Friendship - undirected social graph of people with shortest-distance queries.

This package contains:
- models: Person and Edge
- graph: FriendshipGraph (insertion and BFS distance)
- errors: Error taxonomy raised on invalid insertions and queries
"""

from friendship.errors import (
    DuplicateEdgeError,
    DuplicateVertexError,
    FriendshipGraphError,
    InvalidArgumentError,
    SelfLoopError,
    VertexNotFoundError,
)
from friendship.graph import UNREACHED, FriendshipGraph
from friendship.models import Edge, Person

__all__ = [
    "DuplicateEdgeError",
    "DuplicateVertexError",
    "Edge",
    "FriendshipGraph",
    "FriendshipGraphError",
    "InvalidArgumentError",
    "Person",
    "SelfLoopError",
    "UNREACHED",
    "VertexNotFoundError",
]
