"""
View module for adjacent.

This module provides PairView, a lazy view of a sequence as adjacent element
pairs, and make_adjacent_range, the factory callers use to obtain one.
"""

import logging
from typing import Any, Generic, Iterator, Tuple, TypeVar

from adjacent.core.cursor import PairCursor
from adjacent.core.positions import IndexPosition, Position, supports_index_access

logger = logging.getLogger(__name__)

P = TypeVar("P", bound=Position)


class PairView(Generic[P]):
    """
    Lazy view of a sequence as (e0, e1), (e1, e2), ... pairs.

    The view stores only the bounds of the underlying sequence and builds
    cursors on demand; it never copies or modifies the sequence. The caller
    must keep the sequence alive and unmodified while the view or any
    cursor obtained from it is in use.
    """

    __slots__ = ("_first", "_last")

    def __init__(self, first: P, last: P) -> None:
        """
        Initialize the view over the range [first, last).

        Args:
            first: Position of the first element
            last: Position one past the last element
        """
        self._first = first
        self._last = last

    def begin(self) -> PairCursor[P]:
        """Return a cursor at the first pair."""
        return PairCursor(self._first, self._last)

    def end(self) -> PairCursor[P]:
        """Return the terminal cursor."""
        return PairCursor(self._last, self._last)

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        """
        Iterate over the pairs.

        Every call starts an independent traversal, so a view can be
        iterated any number of times over an unmodified sequence.

        Yields:
            Adjacent element pairs in sequence order
        """
        cursor, end = self.begin(), self.end()
        while cursor != end:
            yield cursor.get()
            cursor.advance()

    def __repr__(self) -> str:
        return f"PairView(first={self._first!r}, last={self._last!r})"


def provides_positions(obj: Any) -> bool:
    """Check whether obj exposes its own begin() and end() positions."""
    return callable(getattr(obj, "begin", None)) and callable(getattr(obj, "end", None))


def make_adjacent_range(seq: Any) -> PairView:
    """
    Create a PairView over a sequence.

    Objects exposing ``begin()`` and ``end()`` are adapted through the
    positions they return. Any other indexable sequence (list, tuple, str,
    range, or any non-mapping object with __len__ and __getitem__) is
    adapted through IndexPosition.

    Args:
        seq: The sequence to view

    Returns:
        A PairView over seq

    Raises:
        TypeError: If seq provides neither positions nor sequence access.
            One-shot iterables such as generators belong here; use
            adjacent.utils.iteration.pair_iter for those.

    Examples:
        >>> list(make_adjacent_range([10, 20, 30]))
        [(10, 20), (20, 30)]
    """
    if provides_positions(seq):
        logger.debug("Adapting %s through its own positions", type(seq).__name__)
        return PairView(seq.begin(), seq.end())

    if supports_index_access(seq):
        logger.debug("Adapting %s through IndexPosition", type(seq).__name__)
        return PairView(IndexPosition.begin(seq), IndexPosition.end(seq))

    raise TypeError(
        f"Cannot make an adjacent range over {type(seq).__name__}: "
        "expected begin()/end() positions or a Sequence"
    )
