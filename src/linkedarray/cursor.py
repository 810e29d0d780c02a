"""Opt-in stateful cursor over a linked list."""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Generic

from linkedarray.errors import EndOfSequenceError
from linkedarray.types import T

if TYPE_CHECKING:
    from linkedarray.linkedlist import LinkedList, Node

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Cursor(Generic[T]):
    """
    Forward cursor produced by LinkedList.cursor().

    Follows live links, so structural changes to the list while a cursor
    is open affect what it returns next.
    """

    source: "LinkedList[T]"
    position: int = field(default=-1, init=False)  # index of the last returned value
    _current: "Node[T] | None" = field(default=None, init=False, repr=False)
    _exhausted: bool = field(default=False, init=False, repr=False)

    def _upcoming(self) -> "Node[T] | None":
        if self._exhausted:
            return None
        if self._current is None:
            return self.source.head
        return self._current.next

    def has_next(self) -> bool:
        """Return True if next() would return a value."""
        return self._upcoming() is not None

    def next(self) -> T:
        """
        Advance and return the next value.

        Raises:
            EndOfSequenceError: If the cursor is past the tail (until reset())
        """
        node = self._upcoming()
        if node is None:
            if not self._exhausted:
                logger.debug("Cursor exhausted after position %d", self.position)
            self._exhausted = True
            raise EndOfSequenceError(f"No value after position {self.position}")
        self._current = node
        self.position += 1
        return node.value

    def reset(self) -> None:
        """Rewind the cursor to before the head."""
        logger.debug("Cursor reset from position %d", self.position)
        self._current = None
        self._exhausted = False
        self.position = -1
