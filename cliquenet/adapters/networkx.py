try:
    import networkx as nx
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'networkx' is not installed. "
        "Install with: pip install cliquenet[networkx]"
    ) from e

from ._base import GraphAdapter
from ._utils import DEFAULT_MAX_EDGES, _warn_if_large

__all__ = ["to_nx", "to_backend", "NetworkXAdapter"]


def to_nx(graph, *, edge_attr: str = "edge_id", max_edges=DEFAULT_MAX_EDGES):
    """
    Materialize a complete graph as ``networkx.Graph``.

    Parameters
    ----------
    graph : CompleteGraph
        Source graph.
    edge_attr : str, default "edge_id"
        Edge attribute receiving the edge index. ``None`` skips it.
    max_edges : int or None
        Emit a RuntimeWarning above this many edges.

    Returns
    -------
    networkx.Graph
        Nodes ``0..n-1``; one edge per vertex pair.
    """
    _warn_if_large(graph, max_edges, "NetworkX")
    G = nx.Graph()
    G.add_nodes_from(graph.vertices())
    if edge_attr is None:
        G.add_edges_from((v0, v1) for _, v0, v1 in graph.edges())
    else:
        G.add_edges_from((v0, v1, {edge_attr: e}) for e, v0, v1 in graph.edges())
    return G


def to_backend(graph, **kwargs):
    """Converter used by the lazy ``G.nx`` proxy."""
    return to_nx(graph, **kwargs)


class NetworkXAdapter(GraphAdapter):
    def export(self, graph, **kwargs):
        return to_nx(graph, **kwargs)
