import warnings

# Conversions below materialize every edge; above this they warn.
DEFAULT_MAX_EDGES = 5_000_000


def _warn_if_large(graph, max_edges, target: str) -> None:
    m = graph.number_of_edges()
    if max_edges is not None and m > max_edges:
        warnings.warn(
            f"CompleteGraph→{target} conversion materializes {m} edges "
            f"(max_edges={max_edges}).",
            category=RuntimeWarning,
            stacklevel=3,
        )
