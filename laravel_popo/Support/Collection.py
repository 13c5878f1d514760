from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar, Union, overload
import json

T = TypeVar('T')
U = TypeVar('U')


class Collection(Generic[T]):
    """Laravel-style collection of POPOs or plain values."""

    def __init__(self, items: Union[List[T], Iterable[T], None] = None):
        if items is None:
            self._items: List[T] = []
        elif isinstance(items, list):
            self._items = items.copy()
        else:
            self._items = list(items)

    @classmethod
    def make(cls, items: Union[List[T], Iterable[T], None] = None) -> 'Collection[T]':
        """Create a new collection instance."""
        return cls(items)

    @classmethod
    def wrap(cls, value: Any) -> 'Collection[Any]':
        """Wrap a value in a collection if it's not already one."""
        if isinstance(value, cls):
            return value
        return cls([value] if not isinstance(value, (list, tuple)) else value)

    @classmethod
    def times(cls, number: int, callback: Callable[[int], T]) -> 'Collection[T]':
        """Create a collection by invoking callback a given number of times."""
        return cls([callback(i) for i in range(number)])

    # Core methods
    def all(self) -> List[T]:
        """Get all items as a list."""
        return self._items.copy()

    def count(self) -> int:
        """Get the number of items."""
        return len(self._items)

    def is_empty(self) -> bool:
        """Check if the collection is empty."""
        return len(self._items) == 0

    def first(self, callback: Optional[Callable[[T], bool]] = None, default: Any = None) -> Any:
        """Get the first item."""
        if callback is None:
            return self._items[0] if self._items else default

        for item in self._items:
            if callback(item):
                return item
        return default

    def filter(self, callback: Optional[Callable[[T], bool]] = None) -> 'Collection[T]':
        """Filter items using a callback."""
        if callback is None:
            return Collection([item for item in self._items if item])

        return Collection([item for item in self._items if callback(item)])

    def map(self, callback: Callable[[T], U]) -> 'Collection[U]':
        """Transform items using a callback."""
        return Collection([callback(item) for item in self._items])

    # Serialization
    def to_array(self) -> List[Any]:
        """Convert the collection to a list, serializing Arrayable items."""
        from laravel_popo.Serializer import serialize_value
        return [serialize_value(item) for item in self._items]

    def to_test_array(self) -> List[Any]:
        """Convert the collection to a list using the snake_case form of POPOs."""
        from laravel_popo.Serializer import serialize_value
        return [serialize_value(item, test_mode=True) for item in self._items]

    def to_json(self, **kwargs: Any) -> str:
        """Convert collection to JSON."""
        return json.dumps(self.to_array(), **kwargs)

    # Magic methods
    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, key: int) -> T: ...

    @overload
    def __getitem__(self, key: slice) -> 'Collection[T]': ...

    def __getitem__(self, key: Union[int, slice]) -> Union[T, 'Collection[T]']:
        if isinstance(key, slice):
            return Collection(self._items[key])
        return self._items[key]

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Collection):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __repr__(self) -> str:
        return f"Collection({self._items})"


def collect(items: Union[List[T], Iterable[T], None] = None) -> Collection[T]:
    """Create a collection instance."""
    return Collection.make(items)
