"""
Position module for adjacent.

This module defines the forward-position protocol the pair adaptor is built
on, together with IndexPosition, the stock position over any Python sequence.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")
P = TypeVar("P", bound="Position")


def supports_index_access(obj: Any) -> bool:
    """Check whether obj can be read by integer index up to its length."""
    if isinstance(obj, Sequence):
        return True
    # Unregistered sequences (numpy arrays, small user classes) qualify too
    return (
        hasattr(obj, "__getitem__")
        and hasattr(obj, "__len__")
        and not isinstance(obj, Mapping)
    )


class Position(Protocol):
    """
    A location in a forward-traversable sequence.

    Positions are values: advance() returns a new position one step on and
    leaves the receiver untouched, so a position can be copied simply by
    keeping a reference to it. Two positions into the same sequence compare
    equal when they denote the same location.
    """

    def advance(self: P) -> P:
        ...

    def get(self) -> Any:
        ...

    def __eq__(self, other: object) -> bool:
        ...


class IndexPosition(Generic[T]):
    """
    Position into an indexable sequence, identified by an index.

    The sequence is borrowed, not copied. Dereferencing an index at or past
    the end raises whatever the sequence raises (IndexError for the
    built-in types).
    """

    __slots__ = ("_seq", "_index")

    def __init__(self, seq: Sequence, index: int = 0) -> None:
        """
        Initialize the position.

        Args:
            seq: The sequence to point into
            index: The offset of the position within seq

        Raises:
            TypeError: If seq does not support indexed access
        """
        if not supports_index_access(seq):
            raise TypeError(
                f"IndexPosition requires an indexable sequence, got {type(seq).__name__}"
            )
        self._seq = seq
        self._index = index

    @classmethod
    def begin(cls, seq: Sequence) -> "IndexPosition[T]":
        """Position of the first element of seq."""
        return cls(seq, 0)

    @classmethod
    def end(cls, seq: Sequence) -> "IndexPosition[T]":
        """Position one past the last element of seq."""
        return cls(seq, len(seq))

    @property
    def index(self) -> int:
        """Offset of the position within the sequence."""
        return self._index

    def advance(self) -> "IndexPosition[T]":
        """Return the position one step further on."""
        return IndexPosition(self._seq, self._index + 1)

    def get(self) -> T:
        """Return the element at the position."""
        return self._seq[self._index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IndexPosition):
            return NotImplemented
        # Identity, not equality: two equal lists are still different sequences
        return self._seq is other._seq and self._index == other._index

    def __hash__(self) -> int:
        return hash((id(self._seq), self._index))

    def __repr__(self) -> str:
        return f"IndexPosition(index={self._index}, len={len(self._seq)})"
