"""Contract checks shared by the bijection, the graph and the cursors."""
from __future__ import annotations

from numbers import Integral

__all__ = [
    "ContractViolation",
    "require",
    "check_vertex",
    "check_rank",
    "check_edge",
    "check_count",
]


class ContractViolation(AssertionError):
    """A caller broke a documented precondition (raised in checked mode only)."""


def require(condition: bool, message: str) -> None:
    if not condition:
        raise ContractViolation(message)


def check_vertex(vertex: int, number_of_vertices: int) -> None:
    if not 0 <= vertex < number_of_vertices:
        raise ContractViolation(
            f"vertex {vertex!r} out of range [0, {number_of_vertices})"
        )


def check_rank(rank: int, degree: int, *, inclusive: bool = False) -> None:
    # inclusive admits the past-the-end rank of a cursor range
    upper = degree + 1 if inclusive else degree
    if not 0 <= rank < upper:
        bound = f"[0, {degree}]" if inclusive else f"[0, {degree})"
        raise ContractViolation(f"rank {rank!r} out of range {bound}")


def check_edge(edge: int, number_of_edges: int) -> None:
    if not 0 <= edge < number_of_edges:
        raise ContractViolation(f"edge {edge!r} out of range [0, {number_of_edges})")


def check_count(number_of_vertices) -> int:
    """
    Validate a vertex count. Enforced in both contract modes.

    Raises
    ------
    TypeError
        If the count is not an integer (bools are rejected too).
    ValueError
        If the count is negative.
    """
    if isinstance(number_of_vertices, bool) or not isinstance(number_of_vertices, Integral):
        raise TypeError(
            f"number_of_vertices must be an int, got {type(number_of_vertices).__name__}"
        )
    number_of_vertices = int(number_of_vertices)
    if number_of_vertices < 0:
        raise ValueError(f"number_of_vertices must be >= 0, got {number_of_vertices}")
    return number_of_vertices
