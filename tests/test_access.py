"""Tests for indexed access and search."""

import math
from typing import Any

import pytest

from linkedarray import LinkedList, Node


class CountingNode(Node[Any]):
    """Node that counts every link it is asked to follow."""

    __slots__ = ("_next", "_prev")

    hops = 0

    @property  # type: ignore[override]
    def next(self) -> "Node[Any] | None":
        CountingNode.hops += 1
        return self._next

    @next.setter
    def next(self, node: "Node[Any] | None") -> None:
        self._next = node

    @property  # type: ignore[override]
    def prev(self) -> "Node[Any] | None":
        CountingNode.hops += 1
        return self._prev

    @prev.setter
    def prev(self, node: "Node[Any] | None") -> None:
        self._prev = node


class CountingList(LinkedList[Any]):
    node_class = CountingNode


def test_get_values() -> None:
    """Get returns the value at each valid index."""
    lst = LinkedList([10, 20, 30])
    assert lst.get(0) == 10
    assert lst.get(1) == 20
    assert lst.get(2) == 30


def test_get_out_of_range() -> None:
    """Get returns None for indices outside the list."""
    lst = LinkedList([10, 20, 30])
    assert lst.get(5) is None
    assert lst.get(3) is None
    assert lst.get(231432) is None
    assert lst.get(-1) is None
    assert LinkedList().get(0) is None


def test_get_non_integer_index() -> None:
    """Get returns None instead of raising for non-integer indices."""
    lst = LinkedList([10, 20, 30])
    # Only real integers index the list; numeric strings and floats are not coerced
    assert lst.get("x") is None
    assert lst.get("1") is None
    assert lst.get(1.0) is None
    assert lst.get(None) is None
    assert lst.get([0]) is None


def test_get_default() -> None:
    """Test a caller-supplied default for missing indices."""
    missing = object()
    lst = LinkedList([None])
    assert lst.get(0, missing) is None
    assert lst.get(1, missing) is missing
    assert lst.get("x", default=missing) is missing


def test_node_at() -> None:
    """node_at tells a stored None apart from a missing index."""
    lst = LinkedList(["a", None, "c"])

    node = lst.node_at(1)
    assert isinstance(node, Node)
    assert node.value is None
    assert lst.node_at(3) is None
    assert lst.node_at("nope") is None
    assert lst.node_at(0) is lst.head
    assert lst.node_at(2) is lst.tail


@pytest.mark.parametrize("links", ["double", "single"])
def test_get_every_index(links: str) -> None:
    """Get agrees with a plain list for every index, odd and even lengths."""
    for size in range(0, 12):
        values = list(range(100, 100 + size))
        lst = LinkedList(values, links=links)  # type: ignore[arg-type]
        for index in range(size):
            assert lst.get(index) == values[index]


def test_get_uses_at_most_half_the_hops() -> None:
    """Doubly-linked get walks from the closer end."""
    for size in range(1, 21):
        lst = CountingList(range(size))
        for index in range(size):
            CountingNode.hops = 0
            assert lst.get(index) == index
            assert CountingNode.hops <= math.ceil(size / 2)


def test_get_tail_from_the_back() -> None:
    """The last value of a long list is reached without walking forward."""
    lst = CountingList(range(10))
    CountingNode.hops = 0
    assert lst.get(9) == 9
    assert CountingNode.hops == 0

    CountingNode.hops = 0
    assert lst.get(7) == 7
    assert CountingNode.hops == 2


def test_single_link_get_walks_forward() -> None:
    """Without back-links get always starts at the head."""
    lst = CountingList(range(10), links="single")
    CountingNode.hops = 0
    assert lst.get(9) == 9
    assert CountingNode.hops == 9


def test_index_of() -> None:
    """index_of finds the first matching position."""
    lst = LinkedList(["a", "b", "c"])
    assert lst.index_of("c") == 2
    assert lst.index_of("a") == 0
    assert lst.index_of("z") == -1
    assert LinkedList().index_of("a") == -1


def test_index_of_from_index() -> None:
    """index_of starts searching at from_index."""
    lst = LinkedList(["a", "b", "a", "c"])
    assert lst.index_of("a", 1) == 2
    assert lst.index_of("a", 2) == 2
    assert lst.index_of("a", 3) == -1
    assert lst.index_of("a", 10) == -1
    assert lst.index_of("a", -2) == 2
    assert lst.index_of("a", -100) == 0


def test_last_index_of() -> None:
    """last_index_of scans from the tail toward the head."""
    lst = LinkedList(["a", "b", "c"])
    assert lst.last_index_of("a") == 0
    assert lst.last_index_of("c") == 2
    assert lst.last_index_of("z") == -1
    assert LinkedList().last_index_of("a") == -1


@pytest.mark.parametrize("links", ["double", "single"])
def test_last_index_of_from_index(links: str) -> None:
    """last_index_of returns the highest match at or before from_index."""
    lst = LinkedList(["a", "b", "a", "c"], links=links)  # type: ignore[arg-type]
    assert lst.last_index_of("a") == 2
    assert lst.last_index_of("a", 1) == 0
    assert lst.last_index_of("a", 2) == 2
    assert lst.last_index_of("a", -3) == 0
    assert lst.last_index_of("a", -5) == -1
    assert lst.last_index_of("c", 10) == 3
    assert lst.last_index_of("c", 2) == -1


def test_search_uses_strict_equality() -> None:
    """Search compares objects by identity and scalars by value."""
    inner = [1, 2]
    lst = LinkedList([True, 1, inner, {"k": 1}, "1"])

    assert lst.index_of(1) == 1
    assert lst.index_of(1.0) == 1
    assert lst.index_of(True) == 0
    assert lst.index_of(inner) == 2
    assert lst.index_of([1, 2]) == -1
    assert lst.index_of({"k": 1}) == -1
    assert lst.last_index_of("1") == 4
    assert lst.last_index_of(1) == 1


def test_search_never_matches_nan() -> None:
    """NaN is not equal to itself, so searches never find it."""
    nan = float("nan")
    lst = LinkedList([nan, 1.0])
    assert lst.index_of(nan) == -1
    assert lst.last_index_of(nan) == -1
    assert lst.index_of(1.0) == 1


@pytest.mark.parametrize("links", ["double", "single"])
def test_search_non_integer_from_index(links: str) -> None:
    """A from_index that is not an integer counts as 0 instead of raising."""
    lst = LinkedList(["a", "b", "a", "c"], links=links)  # type: ignore[arg-type]
    assert lst.index_of("a", "x") == 0
    assert lst.index_of("c", 1.5) == 3
    assert lst.last_index_of("a", "x") == 0
    assert lst.last_index_of("c", 2.0) == -1
    assert lst.last_index_of("b", [3]) == -1
