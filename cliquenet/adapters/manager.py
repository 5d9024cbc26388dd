from __future__ import annotations

import importlib

from ._base import GraphAdapter
from ._proxy import BackendProxy

__all__ = [
    'ensure_materialized',
    'get_adapter',
    'get_proxy',
]

# ---------------------------------------------------------------------------
# 1. Central registry --------------------------------------------------------
# ---------------------------------------------------------------------------
# backend name -> (adapter module, converter function, adapter class)
_REGISTRY = {
    "networkx": ("cliquenet.adapters.networkx", "to_backend", "NetworkXAdapter"),
    "igraph": ("cliquenet.adapters.igraph", "to_backend", "IGraphAdapter"),
}


def _adapter_module(name: str):
    try:
        modname, _, _ = _REGISTRY[name.lower()]
    except KeyError:
        raise ValueError(f"No adapter registered for '{name}'") from None
    return importlib.import_module(modname)


# ---------------------------------------------------------------------------
# 2. Public helpers ----------------------------------------------------------
# ---------------------------------------------------------------------------
def get_adapter(name: str) -> GraphAdapter:
    """Return a *new* adapter instance of the requested backend."""
    module = _adapter_module(name)
    return getattr(module, _REGISTRY[name.lower()][2])()


def get_proxy(backend_name: str, graph) -> BackendProxy:
    """Return a lazy proxy so users can write `G.nx.<algo>()`."""
    if backend_name not in _REGISTRY:
        raise ValueError(f"No backend '{backend_name}' registered")
    return BackendProxy(graph, backend_name)


def ensure_materialized(backend_name: str, graph) -> dict:
    """
    Convert (or re-convert) *graph* into the requested backend object and
    cache the result on the graph's private state object.  Returns the cache
    entry: {"module": nx, "graph": nx.Graph, "version": int}
    """
    cache = graph._state._backend_cache
    entry = cache.get(backend_name)

    if entry is None or graph._state.dirty_since(entry["version"]):
        # 1. converter first: raises the install hint if the backend is missing
        converter = getattr(_adapter_module(backend_name), _REGISTRY[backend_name][1])
        converted = converter(graph)

        # 2. backend library itself, for module-level algorithms
        backend_module = importlib.import_module(backend_name)

        # 3. stash result together with current version counter
        entry = cache[backend_name] = {
            "module":  backend_module,
            "graph":   converted,
            "version": graph._state.version,
        }

    return entry
