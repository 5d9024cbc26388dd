class BackendProxy:
    """
    Forward attribute access to a backend library, bound to a converted graph.

    ``proxy.shortest_path(0, 3)`` calls ``module.shortest_path(backend_graph, 0, 3)``
    when the module has such a function; anything else is looked up on the
    backend graph object itself (e.g. igraph methods).
    """

    def __init__(self, graph, backend_name):
        from .manager import ensure_materialized

        self._backend = ensure_materialized(backend_name, graph)

    def __getattr__(self, name):
        # Try backend-level function (e.g., networkx.shortest_path)
        fn = getattr(self._backend["module"], name, None)
        if callable(fn):

            def wrapped(*args, **kwargs):
                return fn(self._backend["graph"], *args, **kwargs)

            return wrapped

        # Otherwise forward attribute to the backend graph itself
        return getattr(self._backend["graph"], name)
