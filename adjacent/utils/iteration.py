"""
Iteration utilities for adjacent.

This module provides pair_iter, a generator form of the adjacent pair
adaptor that also accepts one-shot iterables.
"""

from typing import Any, Iterable, Iterator, Tuple

from adjacent.core.positions import supports_index_access
from adjacent.core.view import make_adjacent_range, provides_positions

_EMPTY = object()


def pair_iter(iterable: Iterable[Any]) -> Iterator[Tuple[Any, Any]]:
    """
    Iterate through adjacent pairs of items from an iterable.

    Args:
        iterable: The input iterable; generators and other iterators are
            consumed

    Yields:
        Pairs of (item, following_item); nothing for fewer than two items
    """
    # Sequences and position providers go through the view, which reads
    # the source in place instead of pulling through an iterator
    if supports_index_access(iterable) or provides_positions(iterable):
        yield from make_adjacent_range(iterable)
        return

    it = iter(iterable)
    prev = next(it, _EMPTY)
    if prev is _EMPTY:
        return
    for current in it:
        yield prev, current
        prev = current
