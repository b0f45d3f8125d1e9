"""
Friendship graph: people as vertices, undirected friendships as edges.

The graph is mutable and append-only. Vertices and edges are kept in
insertion order; neighbor lookup goes through a NetworkX adjacency graph
that is updated on every successful insert. Not thread-safe; callers
sharing a graph across threads must hold their own lock around every call.
"""

from __future__ import annotations

import logging
from collections import deque

import networkx as nx

from ..errors import (
    DuplicateEdgeError,
    DuplicateVertexError,
    InvalidArgumentError,
    SelfLoopError,
    VertexNotFoundError,
)
from ..logging_config import TRACE
from ..models import Edge, Person

logger = logging.getLogger(__name__)

UNREACHED = -1


class FriendshipGraph:
    """Undirected graph of people supporting shortest-distance queries"""

    def __init__(self) -> None:
        self._vertices: list[Person] = []
        self._edges: list[Edge] = []
        self._adjacency = nx.Graph()

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_vertex(self, p: Person | None) -> None:
        """Add a person to the graph.

        Raises:
            InvalidArgumentError: p is None or not a Person
            DuplicateVertexError: an equal person is already a vertex
        """
        _require_person(p)

        if p in self._adjacency:
            raise DuplicateVertexError(f"Vertex already in graph: {p}")

        self._vertices.append(p)
        self._adjacency.add_node(p)
        logger.debug(f"Added vertex {p} ({len(self._vertices)} vertices)")

    def add_edge(self, p1: Person | None, p2: Person | None) -> None:
        """Link two existing vertices.

        p1 is recorded as the tail and p2 as the head, but the edge is
        undirected: adding (p2, p1) afterwards is a duplicate.

        Raises:
            InvalidArgumentError: either person is None or not a Person
            VertexNotFoundError: either person is not a vertex
            SelfLoopError: p1 equals p2
            DuplicateEdgeError: the unordered pair is already linked
        """
        self._require_vertices(p1, p2)

        if p1 == p2:
            raise SelfLoopError(f"Cannot add self-loop: {p1}")

        if self._adjacency.has_edge(p1, p2):
            raise DuplicateEdgeError(f"Edge already in graph: {p1} - {p2}")

        edge = Edge(tail=p1, head=p2)
        self._edges.append(edge)
        self._adjacency.add_edge(p1, p2)
        logger.debug(f"Added edge {edge} ({len(self._edges)} edges)")

    # =========================================================================
    # Queries
    # =========================================================================

    def get_distance(self, v1: Person | None, v2: Person | None) -> int:
        """Shortest hop count between two vertices, or -1 if no path exists.

        Breadth-first search from v1. A vertex's distance is fixed the first
        time it is reached, which in an unweighted graph is along a shortest
        path.

        Raises:
            InvalidArgumentError: either person is None or not a Person
            VertexNotFoundError: either person is not a vertex
        """
        self._require_vertices(v1, v2)

        if v1 == v2:
            return 0

        distances = dict.fromkeys(self._vertices, UNREACHED)
        distances[v1] = 0
        queue = deque([v1])

        while queue:
            current = queue.popleft()
            for neighbor in self._adjacency.neighbors(current):
                if distances[neighbor] == UNREACHED:
                    distances[neighbor] = distances[current] + 1
                    queue.append(neighbor)

        reached = sum(1 for d in distances.values() if d != UNREACHED)
        logger.log(TRACE, f"BFS from {v1} reached {reached}/{len(distances)} vertices")

        return distances[v2]

    def get_neighbors(self, p: Person | None) -> list[Person]:
        """People sharing an edge with p, in edge insertion order."""
        self._require_vertices(p)
        return list(self._adjacency.neighbors(p))

    def has_edge(self, p1: Person | None, p2: Person | None) -> bool:
        """Whether p1 and p2 are linked, in either orientation."""
        self._require_vertices(p1, p2)
        return self._adjacency.has_edge(p1, p2)

    @property
    def vertices(self) -> tuple[Person, ...]:
        return tuple(self._vertices)

    @property
    def edges(self) -> tuple[Edge, ...]:
        return tuple(self._edges)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    def to_networkx(self) -> nx.Graph:
        """Copy of the adjacency graph with Person nodes."""
        return self._adjacency.copy()

    def __contains__(self, p: object) -> bool:
        return isinstance(p, Person) and p in self._adjacency

    def __len__(self) -> int:
        return len(self._vertices)

    def __repr__(self) -> str:
        return f"FriendshipGraph(vertices={len(self._vertices)}, edges={len(self._edges)})"

    # =========================================================================
    # Helpers
    # =========================================================================

    def _require_vertices(self, *people: Person | None) -> None:
        # Every argument is type-checked before membership is checked
        for p in people:
            _require_person(p)

        for p in people:
            if p not in self._adjacency:
                raise VertexNotFoundError(f"Vertex not in graph: {p}")


def _require_person(p: object) -> None:
    if p is None:
        raise InvalidArgumentError("Vertex cannot be null")
    if not isinstance(p, Person):
        raise InvalidArgumentError(f"Vertex must be a Person, got {type(p).__name__}")
