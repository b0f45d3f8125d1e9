"""
Root test configuration and fixtures for the friendship project.

Provides people and graph fixtures shared by the unit tests, and restores
the root logger after tests that call configure_logging().
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

# Add project root to path to allow imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from friendship.errors import DuplicateEdgeError  # noqa: E402
from friendship.graph import FriendshipGraph  # noqa: E402
from friendship.models import Person  # noqa: E402


def make_people(*names: str) -> dict[str, Person]:
    """Create Person objects keyed by name."""
    return {name: Person(name) for name in names}


def build_graph(names: list[str], links: list[tuple[str, str]]) -> tuple[FriendshipGraph, dict[str, Person]]:
    """Build a graph from vertex names and (tail, head) name pairs."""
    people = make_people(*names)
    graph = FriendshipGraph()
    for person in people.values():
        graph.add_vertex(person)
    for tail, head in links:
        graph.add_edge(people[tail], people[head])
    return graph, people


@pytest.fixture
def empty_graph():
    """A graph with no vertices."""
    return FriendshipGraph()


@pytest.fixture
def friends():
    """Rachel, Ross, Ben and Kramer, not yet in any graph."""
    return make_people("Rachel", "Ross", "Ben", "Kramer")


@pytest.fixture
def friends_graph(friends):
    """Rachel-Ross and Ross-Ben linked, Kramer isolated.

    Each link is also attempted in the reverse direction; the duplicate is
    rejected and ignored.
    """
    graph = FriendshipGraph()
    for person in friends.values():
        graph.add_vertex(person)

    rachel, ross, ben = friends["Rachel"], friends["Ross"], friends["Ben"]
    for p1, p2 in ((rachel, ross), (ross, rachel), (ross, ben), (ben, ross)):
        try:
            graph.add_edge(p1, p2)
        except DuplicateEdgeError:
            pass

    return graph


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo configure_logging() side effects on the root logger."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def graph_factory():
    """Factory building a graph from names and (tail, head) name pairs."""
    return build_graph
