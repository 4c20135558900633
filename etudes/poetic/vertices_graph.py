"""Graph implementation backed by vertices that hold their own edges."""

from __future__ import annotations

from typing import Generic

from .graph import Graph, L


class Vertex(Generic[L]):
    """A mutable vertex holding weighted edges to and from other vertices."""

    def __init__(self, label: L) -> None:
        self.label = label
        self._targets: dict[Vertex[L], int] = {}
        self._sources: dict[Vertex[L], int] = {}

    def __repr__(self) -> str:
        return f"Vertex({self.label!r})"

    def set_target(self, target: Vertex[L], weight: int) -> int:
        """Set the weight of the edge to target and return its previous weight.

        A zero weight removes the edge; a negative weight raises ValueError.
        """
        if weight < 0:
            raise ValueError("Edge weight cannot be negative.")

        previous = self._targets.get(target, 0)
        if weight == 0:
            self._targets.pop(target, None)
            target._sources.pop(self, None)
            return previous

        self._targets[target] = weight
        target._sources[self] = weight
        return previous

    def get_sources(self) -> dict[L, int]:
        """Return a map from source labels to the weights of edges into this vertex."""
        return {v.label: w for v, w in self._sources.items()}

    def get_targets(self) -> dict[L, int]:
        """Return a map from target labels to the weights of edges from this vertex."""
        return {v.label: w for v, w in self._targets.items()}


class ConcreteVerticesGraph(Graph[L]):
    """A graph that stores vertices, each holding its adjacent edges."""

    def __init__(self) -> None:
        self._vertices: dict[L, Vertex[L]] = {}

    def _vertex(self, label: L) -> Vertex[L]:
        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = self._vertices[label] = Vertex(label)
        return vertex

    def add(self, vertex: L) -> bool:
        if vertex in self._vertices:
            return False
        self._vertices[vertex] = Vertex(vertex)
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        if weight < 0:
            raise ValueError("Edge weight cannot be negative.")
        source_vertex = self._vertex(source)
        target_vertex = self._vertex(target)
        return source_vertex.set_target(target_vertex, weight)

    def remove(self, vertex: L) -> bool:
        removed = self._vertices.get(vertex)
        if removed is None:
            return False

        incoming = removed.get_sources()
        outgoing = removed.get_targets()
        for label, other in self._vertices.items():
            if label in incoming:
                other.set_target(removed, 0)
            if label in outgoing:
                removed.set_target(other, 0)

        del self._vertices[vertex]
        return True

    def vertices(self) -> set[L]:
        return set(self._vertices)

    def sources(self, target: L) -> dict[L, int]:
        vertex = self._vertices.get(target)
        return vertex.get_sources() if vertex is not None else {}

    def targets(self, source: L) -> dict[L, int]:
        vertex = self._vertices.get(source)
        return vertex.get_targets() if vertex is not None else {}