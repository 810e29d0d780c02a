"""Linked list with an Array-like API and head/tail tracking."""

import logging
import operator
import reprlib
from typing import Any, Generic, Iterable, Iterator

from linkedarray.cursor import Cursor
from linkedarray.encoding import join_values
from linkedarray.errors import InvalidLinkModeError
from linkedarray.types import LINK_MODES, LinkMode, MapFn, T, VisitFn

logger = logging.getLogger(__name__)

_SCALARS = (str, bytes, int, float, complex)


def _strict_equals(a: Any, b: Any) -> bool:
    """Value equality for scalars of the same kind, identity for everything else."""
    # Scalars compare by value first so NaN never matches, not even itself
    if isinstance(a, _SCALARS) and isinstance(b, _SCALARS):
        if isinstance(a, bool) != isinstance(b, bool):
            return False
        return bool(a == b)
    return a is b


def _search_start(from_index: object) -> int:
    """Integer value of from_index; anything else counts as 0, as Array treats NaN."""
    try:
        return operator.index(from_index)  # type: ignore[arg-type]
    except TypeError:
        return 0


class Node(Generic[T]):
    """A node in the linked list."""

    __slots__ = ("value", "prev", "next")

    def __init__(self, value: T) -> None:
        self.value = value
        self.prev: Node[T] | None = None
        self.next: Node[T] | None = None

    @property
    def is_first(self) -> bool:
        """Return True if no node precedes this one."""
        return self.prev is None

    @property
    def is_last(self) -> bool:
        """Return True if no node follows this one."""
        return self.next is None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"


class LinkedList(Generic[T]):
    """
    Linked list with an Array-like API.

    Tracks both ends, so push/pop/unshift/shift are O(1) in the default
    doubly-linked mode. Indexed access walks from whichever end is closer.
    With ``links="single"`` nodes carry no back-links: pop() then walks
    from the head and get() always traverses forward.
    """

    node_class: type[Node[Any]] = Node

    def __init__(self, values: Iterable[T] = (), *, links: LinkMode = "double") -> None:
        """
        Initialize the list.

        Args:
            values: Initial values, appended in order
            links: "double" to keep back-links between nodes, "single" to
                keep forward links only

        Raises:
            InvalidLinkModeError: If links is not a known link mode
        """
        if links not in LINK_MODES:
            logger.debug("Rejected link mode %r", links)
            raise InvalidLinkModeError(
                f"Unknown link mode {links!r}, expected one of {LINK_MODES}"
            )
        self._links: LinkMode = links
        self._doubly = links == "double"
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._length = 0
        self.extend(values)

    @property
    def head(self) -> Node[T] | None:
        return self._head

    @property
    def tail(self) -> Node[T] | None:
        return self._tail

    @property
    def length(self) -> int:
        return self._length

    @property
    def links(self) -> LinkMode:
        return self._links

    @property
    def is_doubly(self) -> bool:
        return self._doubly

    # Mutation

    def push(self, *values: T) -> int:
        """
        Append values to the end of the list, in call order.

        Returns:
            The new length of the list
        """
        return self.extend(values)

    def extend(self, values: Iterable[T]) -> int:
        """Append every value of an iterable to the end. Returns the new length."""
        if values is self:
            values = self.to_array()
        for value in values:
            self._push_one(value)
        return self._length

    def _push_one(self, value: T) -> None:
        node = self.node_class(value)
        old_tail = self._tail
        if old_tail is not None:
            old_tail.next = node
            if self._doubly:
                node.prev = old_tail
        else:
            self._head = node
        self._tail = node
        self._length += 1

    def pop(self, default: Any = None) -> Any:
        """
        Remove the last value and return it.

        Args:
            default: Returned, without mutation, if the list is empty

        Returns:
            The removed value, or default
        """
        old_tail = self._tail
        if old_tail is None:
            return default

        if self._doubly:
            new_tail = old_tail.prev
        else:
            new_tail = self._walk(self._head, self._length - 2) if self._length > 1 else None

        if new_tail is not None:
            new_tail.next = None
            old_tail.prev = None
        else:
            self._head = None

        self._tail = new_tail
        self._length -= 1
        return old_tail.value

    def unshift(self, *values: T) -> int:
        """
        Insert values at the beginning of the list.

        The values keep their relative order: ``unshift(2, 3)`` on ``[1]``
        gives ``[2, 3, 1]``.

        Returns:
            The new length of the list
        """
        return self.extendleft(values)

    def extendleft(self, values: Iterable[T]) -> int:
        """Insert every value of an iterable at the beginning, keeping their order."""
        items = list(values)
        for value in reversed(items):
            self._unshift_one(value)
        return self._length

    def _unshift_one(self, value: T) -> None:
        node = self.node_class(value)
        old_head = self._head
        if old_head is not None:
            node.next = old_head
            if self._doubly:
                old_head.prev = node
        else:
            self._tail = node
        self._head = node
        self._length += 1

    def shift(self, default: Any = None) -> Any:
        """
        Remove the first value and return it.

        Args:
            default: Returned, without mutation, if the list is empty

        Returns:
            The removed value, or default
        """
        old_head = self._head
        if old_head is None:
            return default

        new_head = old_head.next
        if new_head is not None:
            new_head.prev = None
            old_head.next = None
        else:
            self._tail = None

        self._head = new_head
        self._length -= 1
        return old_head.value

    # Indexed access and search

    def get(self, index: object, default: Any = None) -> Any:
        """
        Return the value at index.

        Args:
            index: Zero-based position
            default: Returned if index is not an integer within range

        Returns:
            The value at index, or default
        """
        node = self.node_at(index)
        return node.value if node is not None else default

    def node_at(self, index: object) -> Node[T] | None:
        """
        Return the node at index, or None if index is not an integer within range.

        Walks from the head when index is in the first half of the list,
        otherwise backward from the tail (doubly-linked mode only).
        """
        try:
            position = operator.index(index)  # type: ignore[arg-type]
        except TypeError:
            return None
        if position < 0 or position >= self._length:
            return None

        if not self._doubly or position <= self._length / 2:
            return self._walk(self._head, position)
        return self._walk(self._tail, self._length - position - 1, backward=True)

    @staticmethod
    def _walk(node: Node[T] | None, hops: int, *, backward: bool = False) -> Node[T] | None:
        while node is not None and hops > 0:
            node = node.prev if backward else node.next
            hops -= 1
        return node

    def index_of(self, value: Any, from_index: object = 0) -> int:
        """
        Return the first index at or after from_index holding value, or -1.

        A negative from_index counts back from the end of the list, and one
        that is not an integer counts as 0. Scalars (str, bytes, numbers)
        of the same kind match by equality, other values by identity.
        """
        start = _search_start(from_index)
        if start < 0:
            start = max(start + self._length, 0)

        index = start
        node = self.node_at(start)
        while node is not None:
            if _strict_equals(node.value, value):
                return index
            node = node.next
            index += 1
        return -1

    def last_index_of(self, value: Any, from_index: object = None) -> int:
        """
        Return the last index at or before from_index holding value, or -1.

        Scans from from_index toward the head. from_index defaults to the
        last position; a negative one counts back from the end of the list
        and one that is not an integer counts as 0.
        """
        if from_index is None:
            start = self._length - 1
        else:
            start = _search_start(from_index)
            if start < 0:
                start += self._length
            start = min(start, self._length - 1)
        if start < 0:
            return -1

        if not self._doubly:
            found = -1
            for index, item in enumerate(self):
                if index > start:
                    break
                if _strict_equals(item, value):
                    found = index
            return found

        index = start
        node = self.node_at(start)
        while node is not None:
            if _strict_equals(node.value, value):
                return index
            node = node.prev
            index -= 1
        return -1

    # Enumeration and conversion

    def for_each(self, fn: VisitFn) -> None:
        """Call fn(value, index) for each value, head to tail."""
        node = self._head
        index = 0
        while node is not None:
            fn(node.value, index)
            node = node.next
            index += 1

    def map(self, fn: MapFn) -> list[Any]:
        """Return a list with the results of fn(value, index) for each value."""
        result: list[Any] = []
        self.for_each(lambda value, index: result.append(fn(value, index)))
        return result

    def to_array(self) -> list[T]:
        """Return a list of all values, head to tail."""
        return list(self)

    def to_string(self) -> str:
        """Return the values joined with commas, as an Array would render."""
        return join_values(self)

    def to_json(self) -> list[T]:
        """Return a JSON-serializable representation of the list."""
        return self.to_array()

    def clone(self) -> "LinkedList[T]":
        """Return a new list with the same values and link mode, on new nodes."""
        copy = type(self)(self, links=self._links)
        logger.debug("Cloned %s list of %d values", self._links, self._length)
        return copy

    def cursor(self) -> Cursor[T]:
        """Return a new cursor positioned before the head."""
        return Cursor(self)

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        """Return the number of values in the list."""
        return self._length

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._length > 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return self._length == other._length and self.to_array() == other.to_array()

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_string()

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        if self._doubly:
            return f"{type(self).__name__}({self.to_array()!r})"
        return f"{type(self).__name__}({self.to_array()!r}, links={self._links!r})"
