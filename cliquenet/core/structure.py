from __future__ import annotations

from enum import Enum
from typing import Iterator, NamedTuple, Protocol, runtime_checkable

__all__ = ["Adjacency", "Projection", "GraphLike"]


class Adjacency(NamedTuple):
    """A neighbor together with the edge that connects to it.

    Attributes:
        vertex: Neighboring vertex id
        edge: Id of the connecting edge
    """

    vertex: int
    edge: int


class Projection(str, Enum):
    """What a cursor yields on dereference (ADJACENCY, VERTEX, EDGE).

    The value names the graph query that computes the projected item for
    ``(vertex, rank)``.

    Attributes:
        ADJACENCY: Neighbor id and edge id as an :class:`Adjacency`
        VERTEX: Neighbor id only
        EDGE: Connecting edge id only
    """

    ADJACENCY = "adjacency_from_vertex"
    VERTEX = "vertex_from_vertex"
    EDGE = "edge_from_vertex"


@runtime_checkable
class GraphLike(Protocol):
    """
    Read-only query surface shared by every graph representation.

    Generic algorithms are written against this shape; implementations
    satisfy it structurally and do not inherit from it.
    """

    def number_of_vertices(self) -> int: ...
    def number_of_edges(self) -> int: ...
    def number_of_edges_from_vertex(self, vertex: int) -> int: ...
    def number_of_edges_to_vertex(self, vertex: int) -> int: ...
    def vertex_of_edge(self, edge: int, j: int) -> int: ...
    def vertex_from_vertex(self, vertex: int, j: int) -> int: ...
    def vertex_to_vertex(self, vertex: int, j: int) -> int: ...
    def edge_from_vertex(self, vertex: int, j: int) -> int: ...
    def edge_to_vertex(self, vertex: int, j: int) -> int: ...
    def adjacency_from_vertex(self, vertex: int, j: int) -> Adjacency: ...
    def adjacency_to_vertex(self, vertex: int, j: int) -> Adjacency: ...
    def find_edge(self, vertex0: int, vertex1: int) -> tuple[bool, int]: ...
    def multiple_edges_enabled(self) -> bool: ...
    def vertices_from_vertex(self, vertex: int) -> Iterator[int]: ...
    def edges_from_vertex(self, vertex: int) -> Iterator[int]: ...
    def adjacencies_from_vertex(self, vertex: int) -> Iterator[Adjacency]: ...


"""
Pairs {v0, v1} with v0 < v1 are numbered lexicographically:

      0 1 2 3
    0 - 0 1 2
    1 0 - 3 4
    2 1 3 - 5
    3 2 4 5 -
"""
