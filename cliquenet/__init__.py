# cliquenet/__init__.py
"""cliquenet: storage-free complete graphs, single import."""
from __future__ import annotations

from importlib import import_module
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _pkg_version
from typing import Any

# Lazily exposed submodules (imported on first attribute access)
_lazy_submodules = {
    "adapters": "cliquenet.adapters",
    "config": "cliquenet.config",
    "core": "cliquenet.core",
    "utils": "cliquenet.utils",
    # adapter modules (direct convenience)
    "networkx": "cliquenet.adapters.networkx",
    "igraph": "cliquenet.adapters.igraph",
    "dataframe": "cliquenet.adapters.dataframe_adapter",
    "sparse": "cliquenet.adapters.scipy_adapter",
}

# Curated top-level symbols (lazy). name -> (module, attribute)
_lazy_symbols: dict[str, tuple[str, str]] = {
    # Core
    "CompleteGraph": ("cliquenet.core.graph", "CompleteGraph"),
    "Adjacency": ("cliquenet.core.structure", "Adjacency"),
    "Projection": ("cliquenet.core.structure", "Projection"),
    "GraphLike": ("cliquenet.core.structure", "GraphLike"),
    "Cursor": ("cliquenet.core.cursor", "Cursor"),
    "IdleGraphVisitor": ("cliquenet.core.visitor", "IdleGraphVisitor"),
    "CallbackVisitor": ("cliquenet.core.visitor", "CallbackVisitor"),
    "HistoryVisitor": ("cliquenet.core.visitor", "HistoryVisitor"),
    "ContractViolation": ("cliquenet.utils.validation", "ContractViolation"),

    # NetworkX adapter (optional dependency at call time)
    "to_nx": ("cliquenet.adapters.networkx", "to_nx"),

    # igraph adapter
    "to_ig": ("cliquenet.adapters.igraph", "to_ig"),

    # Polars tables
    "to_dataframes": ("cliquenet.adapters.dataframe_adapter", "to_dataframes"),

    # SciPy sparse matrices
    "incidence_matrix": ("cliquenet.adapters.scipy_adapter", "incidence_matrix"),
    "adjacency_matrix": ("cliquenet.adapters.scipy_adapter", "adjacency_matrix"),
}

__all__ = sorted(set(list(_lazy_submodules) + list(_lazy_symbols)))


def __getattr__(name: str) -> Any:  # PEP 562: lazy attribute resolution
    if name in _lazy_submodules:
        return import_module(_lazy_submodules[name])
    if name in _lazy_symbols:
        mod, attr = _lazy_symbols[name]
        return getattr(import_module(mod), attr)
    raise AttributeError(name)


def __dir__() -> list[str]:
    return sorted(list(globals().keys()) + list(__all__))


try:
    __version__ = _pkg_version("cliquenet")
except PackageNotFoundError:
    __version__ = "0.0.0"
