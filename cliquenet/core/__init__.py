from .structure import Adjacency, GraphLike, Projection
from .cursor import Cursor, iterate
from .visitor import CallbackVisitor, HistoryVisitor, IdleGraphVisitor
from .graph import CompleteGraph

__all__ = [
    "Adjacency",
    "GraphLike",
    "Projection",
    "Cursor",
    "iterate",
    "IdleGraphVisitor",
    "CallbackVisitor",
    "HistoryVisitor",
    "CompleteGraph",
]
