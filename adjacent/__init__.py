"""
adjacent is a Python library for viewing a sequence as its adjacent element pairs.

A view over [e0, e1, e2, ...] yields (e0, e1), (e1, e2), ... lazily, reading
the sequence in place. It is meant as a building block for traversal code,
such as scanning a token stream for relationships between consecutive tokens.
"""

from adjacent._version import __version__
from adjacent.core.cursor import PairCursor
from adjacent.core.positions import IndexPosition, Position
from adjacent.core.view import PairView, make_adjacent_range
from adjacent.utils.iteration import pair_iter

__all__ = [
    "__version__",
    "IndexPosition",
    "PairCursor",
    "PairView",
    "Position",
    "make_adjacent_range",
    "pair_iter",
]
