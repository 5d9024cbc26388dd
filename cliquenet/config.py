"""
Process-wide contract mode.

In checked mode every precondition of the graph and cursor API is verified
and a violation raises :class:`cliquenet.utils.validation.ContractViolation`.
In unchecked mode nothing is verified and invalid input gives unspecified
results.

The initial mode is read from the ``CLIQUENET_CHECKED`` environment variable
(``0``, ``false``, ``no``, ``off`` disable checking). Default is checked.
"""
from __future__ import annotations

import os
from contextlib import contextmanager

__all__ = ["is_checked", "set_checked", "checked_mode"]

_FALSY = {"0", "false", "no", "off"}


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in _FALSY


_checked = _env_flag("CLIQUENET_CHECKED", True)


def is_checked() -> bool:
    """Return True when preconditions are verified."""
    return _checked


def set_checked(flag: bool) -> bool:
    """
    Switch contract checking on or off.

    Returns
    -------
    bool
        The previous mode, so callers can restore it.
    """
    global _checked
    previous = _checked
    _checked = bool(flag)
    return previous


@contextmanager
def checked_mode(flag: bool = True):
    """
    Temporarily force the contract mode.

    Examples
    --------
    >>> with checked_mode(False):
    ...     G.vertex_from_vertex(0, 0)
    """
    previous = set_checked(flag)
    try:
        yield
    finally:
        set_checked(previous)
