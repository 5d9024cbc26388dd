"""
Structural-change hooks.

A complete graph has a single structural event: its vertex count changes
(:meth:`CompleteGraph.resize` / :meth:`CompleteGraph.assign`). The graph calls
``visitor.on_resize(graph, old, new)`` after the new count is in place and
only when it differs from the old one. Any object with that method works.
"""
from __future__ import annotations

import json
import time
from datetime import datetime, timezone

import polars as pl

__all__ = ["IdleGraphVisitor", "CallbackVisitor", "HistoryVisitor"]


class IdleGraphVisitor:
    """Default visitor; ignores every event."""

    def on_resize(self, graph, old: int, new: int) -> None:
        pass


class CallbackVisitor(IdleGraphVisitor):
    """Forward resize events to ``fn(graph, old, new)``."""

    def __init__(self, fn):
        self.fn = fn

    def on_resize(self, graph, old: int, new: int) -> None:
        self.fn(graph, old, new)


_HISTORY_SCHEMA = {
    "version": pl.Int64,
    "ts_utc": pl.Utf8,
    "mono_ns": pl.Int64,
    "op": pl.Utf8,
    "old": pl.Int64,
    "new": pl.Int64,
    "label": pl.Utf8,
}


class HistoryVisitor(IdleGraphVisitor):
    """
    Append-only, in-memory log of structural events.

    Each event carries ``version``, ``ts_utc`` (ISO-8601 UTC with ``Z``),
    ``mono_ns`` (monotonic nanoseconds since the visitor was created), ``op``
    and the event fields (``old``/``new`` for ``"resize"``, ``label`` for
    ``"mark"``).

    Examples
    --------
    >>> log = HistoryVisitor()
    >>> G = CompleteGraph(3, visitor=log)
    >>> G.resize(5)
    >>> log.history(as_df=True)
    """

    def __init__(self):
        self._history_enabled = True
        self._history = []
        self._version = 0
        self._history_clock0 = time.perf_counter_ns()

    def on_resize(self, graph, old: int, new: int) -> None:
        self._log_event("resize", old=old, new=new)

    def _utcnow_iso(self) -> str:
        return datetime.now(timezone.utc).isoformat(timespec="microseconds").replace("+00:00", "Z")

    def _log_event(self, op: str, **fields):
        if not self._history_enabled:
            return
        self._version += 1
        evt = {
            "version": self._version,
            "ts_utc": self._utcnow_iso(),
            "mono_ns": time.perf_counter_ns() - self._history_clock0,
            "op": op,
            "old": None,
            "new": None,
            "label": None,
        }
        evt.update(fields)
        self._history.append(evt)

    def history(self, as_df: bool = False):
        """
        Return the recorded events.

        Parameters
        ----------
        as_df : bool, default False
            If True, return a Polars DF [DataFrame]; otherwise a list of dicts.

        Returns
        -------
        list[dict] or polars.DataFrame
        """
        if as_df:
            return pl.DataFrame(self._history, schema=_HISTORY_SCHEMA)
        return list(self._history)

    def export_history(self, path: str) -> int:
        """
        Write the history to disk.

        Parameters
        ----------
        path : str
            Output path. Supported extensions: '.parquet', '.ndjson' (a.k.a.
            '.jsonl'), '.json', '.csv'. Unknown extensions get '.parquet'
            appended.

        Returns
        -------
        int
            Number of events written; 0 (and no file) when the history is empty.
        """
        if not self._history:
            return 0
        df = self.history(as_df=True)
        p = str(path).lower()
        if p.endswith(".parquet"):
            df.write_parquet(path)
        elif p.endswith(".ndjson") or p.endswith(".jsonl"):
            with open(path, "w", encoding="utf-8") as f:
                for r in df.iter_rows(named=True):
                    f.write(json.dumps(r, ensure_ascii=False) + "\n")
        elif p.endswith(".json"):
            with open(path, "w", encoding="utf-8") as f:
                json.dump(df.to_dicts(), f, ensure_ascii=False)
        elif p.endswith(".csv"):
            df.write_csv(path)
        else:
            df.write_parquet(str(path) + ".parquet")
        return len(df)

    def enable_history(self, flag: bool = True):
        """Pause (False) or resume (True) recording."""
        self._history_enabled = bool(flag)

    def clear_history(self):
        self._history.clear()

    def mark(self, label: str):
        """Insert a manual marker event (``op='mark'``)."""
        self._log_event("mark", label=label)
