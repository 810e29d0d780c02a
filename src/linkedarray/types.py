"""Type definitions for linkedarray."""

from typing import Any, Callable, Iterator, Literal, Protocol, TypeAlias, TypeVar, runtime_checkable

# Generic type variables for element and mapped values
T = TypeVar("T")  # Element type
R = TypeVar("R")  # Result type of map callbacks

# Whether nodes carry back-links ("double") or only forward links ("single")
LinkMode: TypeAlias = Literal["double", "single"]

LINK_MODES: tuple[LinkMode, ...] = ("double", "single")

# Callbacks receive (value, index)
VisitFn: TypeAlias = Callable[[Any, int], object]
MapFn: TypeAlias = Callable[[Any, int], Any]


@runtime_checkable
class SequentialContainer(Protocol):
    """Array-like contract shared by every link mode."""

    @property
    def length(self) -> int: ...

    def push(self, *values: Any) -> int: ...

    def pop(self, default: Any = None) -> Any: ...

    def unshift(self, *values: Any) -> int: ...

    def shift(self, default: Any = None) -> Any: ...

    def get(self, index: object, default: Any = None) -> Any: ...

    def index_of(self, value: Any, from_index: object = 0) -> int: ...

    def last_index_of(self, value: Any, from_index: object = None) -> int: ...

    def for_each(self, fn: VisitFn) -> None: ...

    def map(self, fn: MapFn) -> list[Any]: ...

    def to_array(self) -> list[Any]: ...

    def to_json(self) -> list[Any]: ...

    def clone(self) -> "SequentialContainer": ...

    def __len__(self) -> int: ...

    def __iter__(self) -> Iterator[Any]: ...
