from importlib import import_module, util

__all__ = ["available_backends", "load_adapter"]

# name -> (pip_import_name, submodule, class_name)
_BACKENDS = {
    "networkx": ("networkx", ".networkx", "NetworkXAdapter"),
    "igraph": ("igraph", ".igraph", "IGraphAdapter"),  # pip pkg is igraph (formerly python-igraph)
    "polars": ("polars", ".dataframe_adapter", "DataFrameAdapter"),
    "scipy": ("scipy", ".scipy_adapter", "SparseAdapter"),
}


def _is_installed(modname: str) -> bool:
    return util.find_spec(modname) is not None


def available_backends() -> dict:
    return {name: _is_installed(mod) for name, (mod, _, _) in _BACKENDS.items()}


def load_adapter(name: str, *args, **kwargs):
    if name not in _BACKENDS:
        raise ValueError(f"Unknown adapter '{name}'")
    modname, submod, cls = _BACKENDS[name]
    if not _is_installed(modname):
        raise ModuleNotFoundError(
            f"Optional backend '{name}' is not installed. "
            f"Install with `pip install cliquenet[{name}]`."
        )
    mod = import_module(__name__ + submod)
    return getattr(mod, cls)(*args, **kwargs)
