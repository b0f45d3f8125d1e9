from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict

from .errors import VertexNotFoundError


class Person(BaseModel):
    """A vertex label. Two people are the same vertex iff their names match exactly."""

    model_config = ConfigDict(frozen=True)

    name: str

    def __init__(self, name: str, **data: Any) -> None:
        super().__init__(name=name, **data)

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, eq=False)
class Edge:
    """Undirected friendship link.

    tail/head record insertion intent only; Edge(a, b) == Edge(b, a).
    """

    tail: Person
    head: Person

    @property
    def endpoints(self) -> frozenset[Person]:
        return frozenset((self.tail, self.head))

    def connects(self, person: Person) -> bool:
        return person == self.tail or person == self.head

    def other(self, person: Person) -> Person:
        """Return the endpoint opposite to person."""
        if person == self.tail:
            return self.head
        if person == self.head:
            return self.tail
        raise VertexNotFoundError(f"Vertex not in edge: {person}")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self.endpoints == other.endpoints

    def __hash__(self) -> int:
        return hash(self.endpoints)

    def __str__(self) -> str:
        return f"{self.tail} - {self.head}"
