"""
Cursor module for adjacent.

This module provides the PairCursor class, which walks a sequence one step
at a time while holding two positions: the current element and the one
after it.
"""

from typing import Any, Generic, Tuple, TypeVar

from adjacent.core.positions import Position

P = TypeVar("P", bound=Position)


class PairCursor(Generic[P]):
    """
    Cursor over adjacent element pairs of a forward-traversable sequence.

    The cursor holds two positions, ``current`` and ``next``, with ``next``
    one step ahead of ``current``. For an empty sequence both positions equal
    the end position, so the starting cursor is already terminal.

    Cursors compare equal when their ``next`` positions are equal. The
    terminal cursor is ``PairCursor(last, last)``, so traversal stops as soon
    as the trailing position reaches the end of the sequence.
    """

    __slots__ = ("_current", "_next")

    def __init__(self, first: P, last: P) -> None:
        """
        Initialize the cursor at the first pair of the range [first, last).

        Args:
            first: Position of the first element
            last: Position one past the last element
        """
        self._current = first
        self._next = first if first == last else first.advance()

    @property
    def current(self) -> P:
        """Position of the first element of the pair."""
        return self._current

    @property
    def next(self) -> P:
        """Position of the second element of the pair."""
        return self._next

    def advance(self) -> "PairCursor[P]":
        """
        Move both positions forward one step.

        Advancing a terminal cursor is a precondition violation; no bounds
        check is made here.

        Returns:
            The cursor itself, for chaining
        """
        self._current = self._current.advance()
        self._next = self._next.advance()
        return self

    def get(self) -> Tuple[Any, Any]:
        """
        Dereference the cursor.

        The returned tuple holds the sequence's own element objects, not
        copies. Must not be called on a terminal cursor.

        Returns:
            The pair (element at current, element at next)
        """
        return self._current.get(), self._next.get()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PairCursor):
            return NotImplemented
        # Only the trailing position decides equality
        return self._next == other._next

    def __repr__(self) -> str:
        return f"PairCursor(current={self._current!r}, next={self._next!r})"
