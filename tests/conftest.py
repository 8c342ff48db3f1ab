"""Pytest configuration for adjacent tests."""

from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

import pytest


@dataclass
class Node:
    """A singly linked list node."""

    value: Any
    next: Optional["Node"] = None


class NodePosition:
    """Forward-only position into a LinkedList; the end position holds no node."""

    def __init__(self, node: Optional[Node]) -> None:
        self.node = node

    def advance(self) -> "NodePosition":
        return NodePosition(self.node.next)

    def get(self) -> Any:
        return self.node.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NodePosition):
            return NotImplemented
        return self.node is other.node


class LinkedList:
    """Minimal forward-traversable container exposing begin()/end() positions."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        tail = None
        for value in values:
            node = Node(value)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def begin(self) -> NodePosition:
        return NodePosition(self.head)

    def end(self) -> NodePosition:
        return NodePosition(None)



class IndexableOnly:
    """Sequence-like class that is not registered as a collections.abc.Sequence."""

    def __init__(self, values: Iterable[Any]) -> None:
        self._values = list(values)

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index: int) -> Any:
        return self._values[index]


class BeginOnly:
    """Iterable that happens to have a begin() method but no end()."""

    def __init__(self, values: Iterable[Any]) -> None:
        self._values = list(values)

    def begin(self) -> Any:
        return self._values[0]

    def __iter__(self):
        return iter(self._values)

@pytest.fixture
def numbers() -> List[int]:
    """Return the four-element sequence used across scenario tests."""
    return [10, 20, 30, 40]


@pytest.fixture
def linked_numbers(numbers) -> LinkedList:
    """Return the numbers fixture as a linked list."""
    return LinkedList(numbers)


@pytest.fixture
def token_stream() -> List[str]:
    """Return a short token stream with sentence-final periods."""
    return ["Dr.", "Smith", "arrived", ".", "He", "sat", "down", "."]


@pytest.fixture
def make_linked():
    """Return a factory building a LinkedList from an iterable."""
    return LinkedList


@pytest.fixture
def make_indexable():
    """Return a factory building an unregistered indexable sequence."""
    return IndexableOnly


@pytest.fixture
def make_begin_only():
    """Return a factory building an iterable with begin() but no end()."""
    return BeginOnly
