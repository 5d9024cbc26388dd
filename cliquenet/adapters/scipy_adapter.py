"""
Sparse-matrix views of a complete graph.

Incidence columns follow the undirected convention: +1 on both endpoints.
"""
from __future__ import annotations

import numpy as np
import scipy.sparse as sp

from ._base import GraphAdapter
from ._utils import DEFAULT_MAX_EDGES, _warn_if_large

__all__ = ["incidence_matrix", "adjacency_matrix", "SparseAdapter"]


def incidence_matrix(graph, *, max_edges=DEFAULT_MAX_EDGES) -> sp.csr_matrix:
    """
    Vertex × edge incidence matrix (CSR, float32, shape ``(n, m)``).
    """
    _warn_if_large(graph, max_edges, "SciPy")
    n, m = graph.number_of_vertices(), graph.number_of_edges()
    v0, v1 = graph.endpoints_array()
    edges = np.arange(m, dtype=np.int64)
    rows = np.concatenate([v0, v1])
    cols = np.concatenate([edges, edges])
    data = np.ones(2 * m, dtype=np.float32)
    return sp.csr_matrix((data, (rows, cols)), shape=(n, m))


def adjacency_matrix(graph, *, edge_ids: bool = False, max_edges=DEFAULT_MAX_EDGES) -> sp.csr_matrix:
    """
    Vertex × vertex adjacency matrix (CSR, shape ``(n, n)``, empty diagonal).

    Parameters
    ----------
    edge_ids : bool, default False
        If True, entry ``(u, v)`` holds ``edge + 1`` (int64) so that the
        implicit zero still means "no edge"; otherwise entries are 1.0.
    """
    _warn_if_large(graph, max_edges, "SciPy")
    n, m = graph.number_of_vertices(), graph.number_of_edges()
    v0, v1 = graph.endpoints_array()
    rows = np.concatenate([v0, v1])
    cols = np.concatenate([v1, v0])
    if edge_ids:
        ids = np.arange(1, m + 1, dtype=np.int64)
        data = np.concatenate([ids, ids])
    else:
        data = np.ones(2 * m, dtype=np.float32)
    return sp.csr_matrix((data, (rows, cols)), shape=(n, n))


class SparseAdapter(GraphAdapter):
    def export(self, graph, *, kind: str = "incidence", **kwargs):
        if kind == "incidence":
            return incidence_matrix(graph, **kwargs)
        if kind == "adjacency":
            return adjacency_matrix(graph, **kwargs)
        raise ValueError(f"kind must be 'incidence' or 'adjacency', got {kind!r}")
