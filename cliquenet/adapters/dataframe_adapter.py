from __future__ import annotations

from typing import Dict

import numpy as np
import polars as pl

from ._base import GraphAdapter
from ._utils import DEFAULT_MAX_EDGES, _warn_if_large

__all__ = ["to_dataframes", "adjacency_frame", "DataFrameAdapter"]


def to_dataframes(graph, *, max_edges=DEFAULT_MAX_EDGES) -> Dict[str, pl.DataFrame]:
    """
    Export graph to Polars DataFrames.

    Returns a dictionary of DataFrames:
    - 'nodes': ``vertex_id``
    - 'edges': ``edge_id``, ``source``, ``target`` in edge-index order, with
      ``source < target``

    Args:
        graph: CompleteGraph instance to export
        max_edges: Emit a RuntimeWarning above this many edges (None disables)

    Returns:
        Dictionary mapping table names to Polars DataFrames
    """
    _warn_if_large(graph, max_edges, "Polars")
    v0, v1 = graph.endpoints_array()
    return {
        "nodes": pl.DataFrame({"vertex_id": np.arange(graph.number_of_vertices(), dtype=np.int64)}),
        "edges": pl.DataFrame({
            "edge_id": np.arange(graph.number_of_edges(), dtype=np.int64),
            "source": v0,
            "target": v1,
        }),
    }


def adjacency_frame(graph, vertex: int) -> pl.DataFrame:
    """
    Neighbors of one vertex as a table with columns ``rank``, ``vertex``,
    ``edge`` (the values the adjacency cursor yields, rank by rank).
    """
    degree = graph.number_of_edges_from_vertex(vertex)
    ranks = np.arange(degree, dtype=np.int64)
    neighbors = np.where(ranks < vertex, ranks, ranks + 1)
    edges = graph.edge_indices(np.full(degree, vertex, dtype=np.int64), neighbors)
    return pl.DataFrame({"rank": ranks, "vertex": neighbors, "edge": edges})


class DataFrameAdapter(GraphAdapter):
    def export(self, graph, **kwargs):
        return to_dataframes(graph, **kwargs)
