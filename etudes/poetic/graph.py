"""Abstract interface for a mutable weighted directed graph."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Generic, TypeVar

L = TypeVar("L", bound=Hashable)


class Graph(ABC, Generic[L]):
    """A mutable weighted directed graph with labelled vertices.

    Edges are directed and carry a positive integer weight. Vertex labels
    must be hashable and immutable.
    """

    @abstractmethod
    def add(self, vertex: L) -> bool:
        """Add a vertex; return False if it was already present."""

    @abstractmethod
    def set(self, source: L, target: L, weight: int) -> int:
        """Add, change or remove an edge and return its previous weight.

        A nonzero weight adds or updates the edge, adding missing vertices.
        A zero weight removes the edge if it exists and changes nothing else.
        A negative weight raises ValueError.
        """

    @abstractmethod
    def remove(self, vertex: L) -> bool:
        """Remove a vertex and its edges; return False if it was absent."""

    @abstractmethod
    def vertices(self) -> set[L]:
        """Return a copy of the set of vertex labels."""

    @abstractmethod
    def sources(self, target: L) -> dict[L, int]:
        """Return a map from each vertex with an edge into target to its weight."""

    @abstractmethod
    def targets(self, source: L) -> dict[L, int]:
        """Return a map from each vertex reached by an edge from source to its weight."""