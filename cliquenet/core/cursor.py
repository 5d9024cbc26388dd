"""
Random-access cursors over the neighbors of one vertex.

A cursor is the triple (graph, vertex, rank) plus a :class:`Projection` that
decides what dereferencing yields. It stores no adjacency data: every
dereference asks the graph, which recomputes the value from the index
bijection. Callers that dereference the same position repeatedly should keep
the value themselves.

The graph is held through a weak reference. The graph must outlive the
cursor; touching a cursor whose graph is gone raises ``ReferenceError``.

Ordering and equality are defined only between cursors over the same graph
object and the same vertex. For any other pair ``==``, ``<``, ``<=``, ``>``,
``>=`` are all False (and ``!=`` is True); no error is raised. The projection
does not take part in comparisons.
"""
from __future__ import annotations

import weakref
from numbers import Integral

from .. import config
from ..utils.validation import check_rank, check_vertex
from .structure import Projection

__all__ = ["Cursor", "iterate"]


class Cursor:
    """
    Random-access cursor over the neighbor range of ``vertex``.

    Parameters
    ----------
    graph : CompleteGraph
        Graph to traverse (weakly referenced).
    vertex : int, default 0
        Fixed vertex whose neighbors are enumerated.
    rank : int, default 0
        Position in ``[0, degree]``; ``degree`` is the past-the-end position.
    projection : Projection, default Projection.ADJACENCY
        What :meth:`deref` and ``cursor[k]`` yield.

    Notes
    -----
    Python has no ``++``/``--``; :meth:`increment`/:meth:`decrement` are the
    prefix forms (move, return self) and :meth:`post_increment`/
    :meth:`post_decrement` the postfix forms (return a copy of the old
    position, then move).
    """

    __slots__ = ("_graph_ref", "vertex", "rank", "projection")
    __hash__ = None  # mutable

    def __init__(self, graph, vertex: int = 0, rank: int = 0,
                 projection: Projection = Projection.ADJACENCY):
        if config.is_checked():
            check_vertex(vertex, graph.number_of_vertices())
            check_rank(rank, graph.number_of_edges_from_vertex(vertex), inclusive=True)
        self._graph_ref = weakref.ref(graph)
        self.vertex = vertex
        self.rank = rank
        self.projection = Projection(projection)

    @classmethod
    def from_cursor(cls, other: "Cursor", projection: Projection) -> "Cursor":
        """View ``other``'s position through a different projection."""
        out = cls.__new__(cls)
        out._graph_ref = other._graph_ref
        out.vertex = other.vertex
        out.rank = other.rank
        out.projection = Projection(projection)
        return out

    @property
    def graph(self):
        graph = self._graph_ref()
        if graph is None:
            raise ReferenceError("cursor used after its graph was destroyed")
        return graph

    def copy(self) -> "Cursor":
        return Cursor.from_cursor(self, self.projection)

    __copy__ = copy

    def as_adjacencies(self) -> "Cursor":
        return Cursor.from_cursor(self, Projection.ADJACENCY)

    def as_vertices(self) -> "Cursor":
        return Cursor.from_cursor(self, Projection.VERTEX)

    def as_edges(self) -> "Cursor":
        return Cursor.from_cursor(self, Projection.EDGE)

    # movement

    def _moved_to(self, rank: int) -> int:
        if config.is_checked():
            graph = self.graph
            check_rank(rank, graph.number_of_edges_from_vertex(self.vertex), inclusive=True)
        return rank

    def __iadd__(self, d):
        if not isinstance(d, Integral):
            return NotImplemented
        self.rank = self._moved_to(self.rank + d)
        return self

    def __isub__(self, d):
        if not isinstance(d, Integral):
            return NotImplemented
        self.rank = self._moved_to(self.rank - d)
        return self

    def __add__(self, d):
        if not isinstance(d, Integral):
            return NotImplemented
        out = self.copy()
        out += d
        return out

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, Cursor):
            return self.distance(other)
        if not isinstance(other, Integral):
            return NotImplemented
        out = self.copy()
        out -= other
        return out

    def distance(self, other: "Cursor") -> int:
        """
        ``self.rank - other.rank`` for cursors over the same graph and vertex.

        Raises
        ------
        ValueError
            If the cursors traverse different graphs or vertices.
        """
        if not self._same_range(other):
            raise ValueError("distance is only defined within one graph and vertex")
        return self.rank - other.rank

    def increment(self) -> "Cursor":
        self += 1
        return self

    def decrement(self) -> "Cursor":
        self -= 1
        return self

    def post_increment(self) -> "Cursor":
        old = self.copy()
        self += 1
        return old

    def post_decrement(self) -> "Cursor":
        old = self.copy()
        self -= 1
        return old

    # access

    def _project(self, rank: int):
        return getattr(self.graph, self.projection.value)(self.vertex, rank)

    def deref(self):
        """Item at the current position, recomputed on every call."""
        return self._project(self.rank)

    def __getitem__(self, k: int):
        """Item at ``rank + k``; does not move the cursor."""
        return self._project(self.rank + k)

    # comparison (same graph and vertex only)

    def _same_range(self, other: "Cursor") -> bool:
        if self.vertex != other.vertex:
            return False
        graph = self._graph_ref()
        # a collected graph matches nothing, not even another collected one
        return graph is not None and graph is other._graph_ref()

    def __eq__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.rank == other.rank and self._same_range(other)

    def __ne__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return not self.__eq__(other)

    def __lt__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.rank < other.rank and self._same_range(other)

    def __le__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.rank <= other.rank and self._same_range(other)

    def __gt__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.rank > other.rank and self._same_range(other)

    def __ge__(self, other):
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.rank >= other.rank and self._same_range(other)

    def __repr__(self) -> str:
        return f"<Cursor {self.projection.name.lower()} · vertex={self.vertex} · rank={self.rank}>"


def iterate(begin: Cursor, end: Cursor):
    """
    Yield the items of the half-open range ``[begin, end)``.

    ``begin`` is not moved. Cursors over different ranges yield nothing.
    """
    it = begin.copy()
    while it < end:
        yield it.deref()
        it += 1
