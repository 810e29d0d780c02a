"""linkedarray - Linked lists with an Array-like API and nearest-end indexed access."""

from linkedarray.cursor import Cursor
from linkedarray.encoding import LinkedArrayJSONEncoder, dumps, join_values
from linkedarray.errors import EndOfSequenceError, InvalidLinkModeError, LinkedArrayError
from linkedarray.linkedlist import LinkedList, Node
from linkedarray.types import LinkMode, SequentialContainer

__version__ = "0.0.1"

__all__ = [
    "LinkedList",
    "Node",
    "Cursor",
    "SequentialContainer",
    "LinkMode",
    "LinkedArrayError",
    "EndOfSequenceError",
    "InvalidLinkModeError",
    "LinkedArrayJSONEncoder",
    "dumps",
    "join_values",
]
