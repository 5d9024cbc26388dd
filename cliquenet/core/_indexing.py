"""
Arithmetic behind the implicit complete graph.

Edges are the unordered pairs ``{v0, v1}`` with ``v0 < v1 < n``, numbered so
that all pairs with lower vertex 0 come first (``n - 1`` of them), then the
pairs with lower vertex 1 (``n - 2`` of them), and so on. Nothing here keeps
state: every function takes the vertex count ``n`` explicitly.

The scalar functions convert their arguments to Python ints (numpy integers
included) and are exact for any ``n``. The array functions work on int64
numpy arrays and refuse ``n >= 2**31``.
"""
from __future__ import annotations

import math
from operator import index

import numpy as np

from .. import config
from ..utils.validation import ContractViolation, check_edge, check_vertex, require

__all__ = [
    "number_of_edges",
    "pairs_before",
    "edge_of_strictly_increasing_pair",
    "vertices_of_edge",
    "vertex_of_rank",
    "rank_of_vertex",
    "find_edge",
    "edge_indices",
    "endpoints_of_edges",
    "MAX_ARRAY_VERTICES",
]

# Largest n for which v0 * (2n - v0 - 1) stays inside int64.
MAX_ARRAY_VERTICES = 2**31


def number_of_edges(n: int) -> int:
    n = index(n)
    return n * (n - 1) // 2 if n > 1 else 0


def pairs_before(n: int, vertex0: int) -> int:
    """Number of pairs whose lower vertex is strictly less than ``vertex0``."""
    n, vertex0 = index(n), index(vertex0)
    return vertex0 * (2 * n - vertex0 - 1) // 2


def edge_of_strictly_increasing_pair(n: int, vertex0: int, vertex1: int) -> int:
    """
    Edge index of the pair ``(vertex0, vertex1)``.

    Requires ``0 <= vertex0 < vertex1 < n``.
    """
    n, vertex0, vertex1 = index(n), index(vertex0), index(vertex1)
    if config.is_checked():
        check_vertex(vertex1, n)
        require(
            0 <= vertex0 < vertex1,
            f"pair ({vertex0!r}, {vertex1!r}) is not strictly increasing",
        )
    return (n - 1) * vertex0 - vertex0 * (vertex0 + 1) // 2 + vertex1 - 1


def _settle(n: int, edge: int, vertex0: int) -> int:
    # the estimate may be off near a bin boundary; walk to the bin holding edge
    while vertex0 > 0 and pairs_before(n, vertex0) > edge:
        vertex0 -= 1
    while vertex0 < n - 2 and pairs_before(n, vertex0 + 1) <= edge:
        vertex0 += 1
    return vertex0


def vertices_of_edge(n: int, edge: int) -> tuple[int, int]:
    """
    Endpoints ``(v0, v1)`` with ``v0 < v1`` of an edge index.

    ``v0`` is the smaller root of ``pairs_before(n, x) = edge``, i.e.
    ``floor(p - sqrt(p**2 - 2*edge))`` with ``p = (2n - 1) / 2``. It is
    estimated with an integer square root and then verified against
    :func:`pairs_before`; ``v1`` follows from the forward formula.
    """
    n, edge = index(n), index(edge)
    if config.is_checked():
        check_edge(edge, number_of_edges(n))
    a = 2 * n - 1
    vertex0 = (a - math.isqrt(a * a - 8 * edge)) // 2
    vertex0 = _settle(n, edge, vertex0)
    vertex1 = edge - pairs_before(n, vertex0) + vertex0 + 1
    return vertex0, vertex1


def vertex_of_rank(vertex: int, j: int) -> int:
    """The ``j``-th neighbor of ``vertex`` in ascending order."""
    vertex, j = index(vertex), index(j)
    return j if j < vertex else j + 1


def rank_of_vertex(vertex: int, neighbor: int) -> int:
    """Inverse of :func:`vertex_of_rank`."""
    vertex, neighbor = index(vertex), index(neighbor)
    if config.is_checked():
        require(neighbor != vertex, f"vertex {vertex!r} is not its own neighbor")
    return neighbor if neighbor < vertex else neighbor - 1


def find_edge(n: int, vertex0: int, vertex1: int) -> tuple[bool, int]:
    """
    Look up the edge joining two vertices given in any order.

    Returns ``(False, 0)`` for ``vertex0 == vertex1`` (no self-loops),
    ``(True, edge)`` otherwise.
    """
    n, vertex0, vertex1 = index(n), index(vertex0), index(vertex1)
    if config.is_checked():
        check_vertex(vertex0, n)
        check_vertex(vertex1, n)
    if vertex0 == vertex1:
        return False, 0
    if vertex0 < vertex1:
        return True, edge_of_strictly_increasing_pair(n, vertex0, vertex1)
    return True, edge_of_strictly_increasing_pair(n, vertex1, vertex0)


# Array variants

def _check_array_size(n: int) -> None:
    if n >= MAX_ARRAY_VERTICES:
        raise OverflowError(
            f"array bijection supports n < {MAX_ARRAY_VERTICES}, got {n}; "
            "use the scalar functions"
        )


def _pairs_before_array(n: int, vertex0: np.ndarray) -> np.ndarray:
    return vertex0 * (2 * n - vertex0 - 1) // 2


def edge_indices(n: int, vertex0, vertex1) -> np.ndarray:
    """
    Edge indices for arrays of endpoints (either order, never equal).

    Parameters
    ----------
    n : int
        Number of vertices.
    vertex0, vertex1 : array_like of int
        Endpoints, broadcast against each other.

    Returns
    -------
    numpy.ndarray
        int64 edge indices.
    """
    _check_array_size(n)
    v0 = np.asarray(vertex0, dtype=np.int64)
    v1 = np.asarray(vertex1, dtype=np.int64)
    lo = np.minimum(v0, v1)
    hi = np.maximum(v0, v1)
    if config.is_checked() and lo.size:
        if lo.min() < 0 or hi.max() >= n:
            raise ContractViolation(f"vertex out of range [0, {n})")
        if np.any(lo == hi):
            raise ContractViolation("self-loop pair has no edge index")
    return (n - 1) * lo - lo * (lo + 1) // 2 + hi - 1


def endpoints_of_edges(n: int, edges) -> tuple[np.ndarray, np.ndarray]:
    """
    Endpoint arrays ``(v0, v1)`` with ``v0 < v1`` for an array of edge indices.

    ``v0`` is first estimated in float64 and then corrected in integer
    arithmetic until ``pairs_before(v0) <= edge < pairs_before(v0 + 1)``
    holds elementwise.
    """
    _check_array_size(n)
    e = np.asarray(edges, dtype=np.int64)
    if e.size == 0:
        return np.zeros(e.shape, dtype=np.int64), np.zeros(e.shape, dtype=np.int64)
    if config.is_checked():
        m = number_of_edges(n)
        if e.min() < 0 or e.max() >= m:
            raise ContractViolation(f"edge out of range [0, {m})")

    p = (2 * n - 1) / 2.0
    vertex0 = np.floor(p - np.sqrt(np.maximum(p * p - 2.0 * e, 0.0))).astype(np.int64)
    np.clip(vertex0, 0, max(n - 2, 0), out=vertex0)
    while True:
        too_high = (vertex0 > 0) & (_pairs_before_array(n, vertex0) > e)
        too_low = (vertex0 < n - 2) & (_pairs_before_array(n, vertex0 + 1) <= e)
        if not (too_high.any() or too_low.any()):
            break
        vertex0 = vertex0 - too_high.astype(np.int64) + too_low.astype(np.int64)

    vertex1 = e - _pairs_before_array(n, vertex0) + vertex0 + 1
    return vertex0, vertex1
