#!/usr/bin/env python3
"""
Demonstration of FriendshipGraph distance queries.

Builds a four-person graph (Rachel, Ross, Ben, Kramer), links Rachel-Ross
and Ross-Ben (each attempted in both directions, the reverse attempt being
rejected as a duplicate), and prints:

    1   Rachel -> Ross
    2   Rachel -> Ben
    0   Rachel -> Rachel
    -1  Rachel -> Kramer

Usage:
    friendship-demo [--log-level DEBUG]
    python -m friendship.demo
"""

from __future__ import annotations

import argparse
import logging
import sys

from friendship.errors import DuplicateEdgeError
from friendship.graph import FriendshipGraph
from friendship.logging_config import configure_logging, level_from_name
from friendship.models import Person
from friendship.settings import VALID_LOG_LEVELS

logger = logging.getLogger(__name__)

DEMO_NAMES = ("Rachel", "Ross", "Ben", "Kramer")


def build_demo_graph() -> tuple[FriendshipGraph, dict[str, Person]]:
    """Build the demo graph, returning it with its people keyed by name."""
    graph = FriendshipGraph()
    people = {name: Person(name) for name in DEMO_NAMES}

    for person in people.values():
        graph.add_vertex(person)

    rachel, ross, ben = people["Rachel"], people["Ross"], people["Ben"]
    for p1, p2 in ((rachel, ross), (ross, rachel), (ross, ben), (ben, ross)):
        try:
            graph.add_edge(p1, p2)
        except DuplicateEdgeError as e:
            logger.warning(f"Skipping edge: {e}")

    logger.info(f"Built demo graph with {len(graph)} vertices and {graph.edge_count} edges")
    return graph, people


def run_demo() -> list[int]:
    """Distances Rachel-Ross, Rachel-Ben, Rachel-Rachel, Rachel-Kramer."""
    graph, people = build_demo_graph()
    rachel = people["Rachel"]
    return [
        graph.get_distance(rachel, people["Ross"]),
        graph.get_distance(rachel, people["Ben"]),
        graph.get_distance(rachel, rachel),
        graph.get_distance(rachel, people["Kramer"]),
    ]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print shortest friendship distances for a small demo graph")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=VALID_LOG_LEVELS,
        help="Override FRIENDSHIP_LOG_LEVEL for this run (logs go to stderr)",
    )
    args = parser.parse_args(argv)

    # Distances go to stdout, logs to stderr
    level = level_from_name(args.log_level) if args.log_level else None
    configure_logging(level=level, stream=sys.stderr)

    for distance in run_demo():
        print(distance)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
