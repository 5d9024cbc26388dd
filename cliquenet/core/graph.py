from __future__ import annotations

import numpy as np

from .. import config
from ..utils.validation import check_count, check_rank, check_vertex, require
from . import _indexing
from ._state import _State
from .cursor import Cursor, iterate
from .structure import Adjacency, Projection
from .visitor import IdleGraphVisitor

__all__ = ["CompleteGraph"]


class CompleteGraph:
    """
    Complete undirected graph on ``n`` vertices, stored as ``n`` alone.

    Vertices are ``0..n-1``; every pair of distinct vertices is joined by
    exactly one edge, numbered ``0..n(n-1)/2 - 1`` (pairs with lower vertex 0
    first, then lower vertex 1, ...). Every query is closed-form arithmetic
    on these indices; no adjacency is ever materialized.

    The query surface matches the explicit graph types used by generic
    algorithms (see :class:`cliquenet.core.structure.GraphLike`). "from" and
    "to" variants are identical because the graph is symmetric.

    Parameters
    ----------
    number_of_vertices : int, default 0
        Vertex count ``n``.
    visitor : object, optional
        Structural-change hook with ``on_resize(graph, old, new)``. Defaults
        to :class:`IdleGraphVisitor`.

    Notes
    -----
    - Queries are read-only and safe to share across threads. :meth:`resize`
      and :meth:`assign` write the vertex count without synchronization;
      callers must keep readers out while they run.
    - In checked mode (:mod:`cliquenet.config`) preconditions raise
      :class:`~cliquenet.utils.validation.ContractViolation`.

    Examples
    --------
    >>> G = CompleteGraph(4)
    >>> G.number_of_edges()
    6
    >>> list(G.vertices_from_vertex(2))
    [0, 1, 3]
    >>> G.find_edge(3, 1)
    (True, 4)
    """

    def __init__(self, number_of_vertices: int = 0, visitor=None):
        self._number_of_vertices = check_count(number_of_vertices)
        self._visitor = IdleGraphVisitor() if visitor is None else visitor
        self._state = _State()

    def __repr__(self) -> str:
        return f"<CompleteGraph | V={self.number_of_vertices()} · E={self.number_of_edges()}>"

    # Construction

    def assign(self, number_of_vertices: int = 0, visitor=None) -> None:
        """
        Replace the vertex count and the visitor.

        The (new) visitor is notified after the count is in place, and only
        if the count changed.
        """
        self._visitor = IdleGraphVisitor() if visitor is None else visitor
        self.resize(number_of_vertices)

    def resize(self, number_of_vertices: int) -> None:
        """
        Set the vertex count, keeping the visitor.

        Nothing is cached, so the graph afterwards is indistinguishable from
        ``CompleteGraph(number_of_vertices)``.

        Raises
        ------
        TypeError
            If the count is not an integer.
        ValueError
            If the count is negative.
        """
        new = check_count(number_of_vertices)
        old = self._number_of_vertices
        self._number_of_vertices = new
        if new != old:
            self._state.bump()
            self._visitor.on_resize(self, old, new)

    @property
    def visitor(self):
        return self._visitor

    # Counts

    def number_of_vertices(self) -> int:
        return self._number_of_vertices

    def number_of_edges(self) -> int:
        return _indexing.number_of_edges(self._number_of_vertices)

    def number_of_edges_from_vertex(self, vertex: int) -> int:
        if config.is_checked():
            check_vertex(vertex, self._number_of_vertices)
        return self._number_of_vertices - 1

    def number_of_edges_to_vertex(self, vertex: int) -> int:
        return self.number_of_edges_from_vertex(vertex)

    def multiple_edges_enabled(self) -> bool:
        """Always False: at most one edge joins two vertices."""
        return False

    # Edge endpoints

    def vertex_of_edge(self, edge: int, j: int) -> int:
        """
        Endpoint ``j`` (0 or 1) of ``edge``; endpoint 0 is the smaller vertex.
        """
        if config.is_checked():
            require(j in (0, 1), f"endpoint index must be 0 or 1, got {j!r}")
        return _indexing.vertices_of_edge(self._number_of_vertices, edge)[j]

    def endpoints(self, edge: int) -> tuple[int, int]:
        """Both endpoints ``(v0, v1)`` of ``edge`` with ``v0 < v1``."""
        return _indexing.vertices_of_edge(self._number_of_vertices, edge)

    def find_edge(self, vertex0: int, vertex1: int) -> tuple[bool, int]:
        """
        Returns
        -------
        tuple[bool, int]
            ``(False, 0)`` when ``vertex0 == vertex1``, else ``(True, edge)``.
        """
        return _indexing.find_edge(self._number_of_vertices, vertex0, vertex1)

    # Rank queries

    def _check_rank(self, vertex: int, j: int) -> None:
        check_vertex(vertex, self._number_of_vertices)
        check_rank(j, self._number_of_vertices - 1)

    def vertex_from_vertex(self, vertex: int, j: int) -> int:
        """The ``j``-th neighbor of ``vertex`` in ascending order."""
        if config.is_checked():
            self._check_rank(vertex, j)
        return _indexing.vertex_of_rank(vertex, j)

    def vertex_to_vertex(self, vertex: int, j: int) -> int:
        return self.vertex_from_vertex(vertex, j)

    def edge_from_vertex(self, vertex: int, j: int) -> int:
        """Edge joining ``vertex`` to its ``j``-th neighbor."""
        return self.adjacency_from_vertex(vertex, j).edge

    def edge_to_vertex(self, vertex: int, j: int) -> int:
        return self.edge_from_vertex(vertex, j)

    def adjacency_from_vertex(self, vertex: int, j: int) -> Adjacency:
        if config.is_checked():
            self._check_rank(vertex, j)
        n = self._number_of_vertices
        if j < vertex:
            return Adjacency(j, _indexing.edge_of_strictly_increasing_pair(n, j, vertex))
        return Adjacency(j + 1, _indexing.edge_of_strictly_increasing_pair(n, vertex, j + 1))

    def adjacency_to_vertex(self, vertex: int, j: int) -> Adjacency:
        return self.adjacency_from_vertex(vertex, j)

    def rank_from_vertex(self, vertex: int, neighbor: int) -> int:
        """Rank of ``neighbor`` within the neighbors of ``vertex``."""
        if config.is_checked():
            check_vertex(vertex, self._number_of_vertices)
            check_vertex(neighbor, self._number_of_vertices)
        return _indexing.rank_of_vertex(vertex, neighbor)

    # Cursor ranges

    def _begin(self, vertex: int, projection: Projection) -> Cursor:
        return Cursor(self, vertex, 0, projection)

    def _end(self, vertex: int, projection: Projection) -> Cursor:
        return Cursor(self, vertex, self.number_of_edges_from_vertex(vertex), projection)

    def vertices_from_vertex_begin(self, vertex: int) -> Cursor:
        return self._begin(vertex, Projection.VERTEX)

    def vertices_from_vertex_end(self, vertex: int) -> Cursor:
        return self._end(vertex, Projection.VERTEX)

    def vertices_to_vertex_begin(self, vertex: int) -> Cursor:
        return self._begin(vertex, Projection.VERTEX)

    def vertices_to_vertex_end(self, vertex: int) -> Cursor:
        return self._end(vertex, Projection.VERTEX)

    def edges_from_vertex_begin(self, vertex: int) -> Cursor:
        return self._begin(vertex, Projection.EDGE)

    def edges_from_vertex_end(self, vertex: int) -> Cursor:
        return self._end(vertex, Projection.EDGE)

    def edges_to_vertex_begin(self, vertex: int) -> Cursor:
        return self._begin(vertex, Projection.EDGE)

    def edges_to_vertex_end(self, vertex: int) -> Cursor:
        return self._end(vertex, Projection.EDGE)

    def adjacencies_from_vertex_begin(self, vertex: int) -> Cursor:
        return self._begin(vertex, Projection.ADJACENCY)

    def adjacencies_from_vertex_end(self, vertex: int) -> Cursor:
        return self._end(vertex, Projection.ADJACENCY)

    def adjacencies_to_vertex_begin(self, vertex: int) -> Cursor:
        return self._begin(vertex, Projection.ADJACENCY)

    def adjacencies_to_vertex_end(self, vertex: int) -> Cursor:
        return self._end(vertex, Projection.ADJACENCY)

    # Iteration

    def vertices_from_vertex(self, vertex: int):
        return iterate(self.vertices_from_vertex_begin(vertex), self.vertices_from_vertex_end(vertex))

    def edges_from_vertex(self, vertex: int):
        return iterate(self.edges_from_vertex_begin(vertex), self.edges_from_vertex_end(vertex))

    def adjacencies_from_vertex(self, vertex: int):
        return iterate(
            self.adjacencies_from_vertex_begin(vertex), self.adjacencies_from_vertex_end(vertex)
        )

    vertices_to_vertex = vertices_from_vertex
    edges_to_vertex = edges_from_vertex
    adjacencies_to_vertex = adjacencies_from_vertex

    def vertices(self):
        return range(self._number_of_vertices)

    def edges(self):
        """Yield ``(edge, v0, v1)`` for every edge in index order."""
        edge = 0
        n = self._number_of_vertices
        for v0 in range(n):
            for v1 in range(v0 + 1, n):
                yield edge, v0, v1
                edge += 1

    # Array queries

    def edge_indices(self, vertex0, vertex1) -> np.ndarray:
        """Vectorized :meth:`find_edge` for pairs of distinct vertices."""
        return _indexing.edge_indices(self._number_of_vertices, vertex0, vertex1)

    def endpoints_array(self, edges=None) -> tuple[np.ndarray, np.ndarray]:
        """
        Vectorized :meth:`endpoints`.

        Parameters
        ----------
        edges : array_like of int, optional
            Edge indices. Defaults to every edge, in index order.
        """
        if edges is None:
            edges = np.arange(self.number_of_edges(), dtype=np.int64)
        return _indexing.endpoints_of_edges(self._number_of_vertices, edges)

    # Lazy backend proxies

    @property
    def nx(self):
        """
        On-demand accessor for NetworkX algorithms.

        Examples
        --------
        >>> G.nx.shortest_path(0, 3)
        """
        from ..adapters import manager as _backend_manager

        return _backend_manager.get_proxy("networkx", self)

    @property
    def ig(self):
        """
        On-demand accessor for igraph methods.

        Examples
        --------
        >>> G.ig.diameter()
        """
        from ..adapters import manager as _backend_manager

        return _backend_manager.get_proxy("igraph", self)
