try:
    import igraph as ig
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "Optional dependency 'igraph' is not installed. "
        "Install with: pip install cliquenet[igraph]"
    ) from e

from ._base import GraphAdapter
from ._utils import DEFAULT_MAX_EDGES, _warn_if_large

__all__ = ["to_ig", "to_backend", "IGraphAdapter"]


def to_ig(graph, *, max_edges=DEFAULT_MAX_EDGES):
    """
    Materialize a complete graph as an undirected ``igraph.Graph``.

    igraph edge ``i`` is exactly edge index ``i``; it is also stored in the
    edge attribute ``'eid'``.
    """
    _warn_if_large(graph, max_edges, "igraph")
    v0, v1 = graph.endpoints_array()
    G = ig.Graph(n=graph.number_of_vertices(), edges=list(zip(v0.tolist(), v1.tolist())), directed=False)
    G.es["eid"] = list(range(graph.number_of_edges()))
    return G


def to_backend(graph, **kwargs):
    """Converter used by the lazy ``G.ig`` proxy."""
    return to_ig(graph, **kwargs)


class IGraphAdapter(GraphAdapter):
    def export(self, graph, **kwargs):
        return to_ig(graph, **kwargs)
