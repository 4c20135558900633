"""Graph implementation backed by a list of edges."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic

from .graph import Graph, L


def _check_weight(weight: int) -> None:
    if weight < 0:
        raise ValueError("Edge weight cannot be negative.")


@dataclass(frozen=True)
class Edge(Generic[L]):
    """An immutable directed edge from source to target with a weight."""

    source: L
    target: L
    weight: int

    def __post_init__(self) -> None:
        _check_weight(self.weight)


class ConcreteEdgesGraph(Graph[L]):
    """A graph that stores a vertex set and a list of edges."""

    def __init__(self) -> None:
        self._vertices: set[L] = set()
        self._edges: list[Edge[L]] = []

    def _find_edge(self, source: L, target: L) -> Edge[L] | None:
        return next(
            (e for e in self._edges if e.source == source and e.target == target),
            None,
        )

    def add(self, vertex: L) -> bool:
        if vertex in self._vertices:
            return False
        self._vertices.add(vertex)
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        _check_weight(weight)

        previous = 0
        existing = self._find_edge(source, target)
        if existing is not None:
            previous = existing.weight
            self._edges.remove(existing)

        if weight == 0:
            return previous

        self._vertices.add(source)
        self._vertices.add(target)
        self._edges.append(Edge(source, target, weight))
        return previous

    def remove(self, vertex: L) -> bool:
        if vertex not in self._vertices:
            return False
        self._vertices.discard(vertex)
        self._edges = [
            e for e in self._edges if e.source != vertex and e.target != vertex
        ]
        return True

    def vertices(self) -> set[L]:
        return set(self._vertices)

    def sources(self, target: L) -> dict[L, int]:
        return {e.source: e.weight for e in self._edges if e.target == target}

    def targets(self, source: L) -> dict[L, int]:
        return {e.target: e.weight for e in self._edges if e.source == source}