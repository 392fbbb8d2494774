"""Ordered key -> value collection view over record fields."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Dict, FrozenSet, Iterator, List, Optional

from .paths import data_get, resolve_default

_MISSING = object()


class Collection:
    """A small, closed set of collection operations over a mapping or list.

    Mappings keep their keys. Lists and tuples are keyed by position and stay
    list-shaped through chainable operations. Scalars become a one-item list
    and ``None`` an empty one. Callbacks receive the value only.
    """

    OPERATIONS: FrozenSet[str] = frozenset(
        {
            "all",
            "count",
            "is_empty",
            "is_not_empty",
            "keys",
            "values",
            "get",
            "has",
            "first",
            "last",
            "contains",
            "search",
            "filter",
            "reject",
            "map",
            "map_into",
            "each",
            "reduce",
            "where",
            "pluck",
            "only",
            "except_",
            "sort",
            "sort_by",
            "reverse",
            "sum",
            "implode",
            "to_list",
            "to_dict",
        }
    )

    def __init__(self, items: Any = None) -> None:
        if isinstance(items, Collection):
            self._items: Dict[Any, Any] = dict(items._items)
            self._is_list = items._is_list
        elif isinstance(items, Mapping):
            self._items = dict(items)
            self._is_list = False
        elif isinstance(items, (list, tuple)):
            self._items = dict(enumerate(items))
            self._is_list = True
        elif items is None:
            self._items = {}
            self._is_list = True
        else:
            self._items = {0: items}
            self._is_list = True

    def _new(self, items: Dict[Any, Any]) -> "Collection":
        if self._is_list:
            return Collection(list(items.values()))
        return Collection(items)

    def all(self) -> Any:
        """Return the underlying items as a list or dict."""
        if self._is_list:
            return list(self._items.values())
        return dict(self._items)

    def to_list(self) -> List[Any]:
        return list(self._items.values())

    def to_dict(self) -> Dict[Any, Any]:
        return dict(self._items)

    def count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def is_not_empty(self) -> bool:
        return bool(self._items)

    def keys(self) -> "Collection":
        return Collection(list(self._items.keys()))

    def values(self) -> "Collection":
        return Collection(list(self._items.values()))

    def get(self, key: Any, default: Any = None) -> Any:
        if key in self._items:
            return self._items[key]
        return resolve_default(default)

    def has(self, key: Any) -> bool:
        return key in self._items

    def first(self, callback: Optional[Callable[[Any], Any]] = None, default: Any = None) -> Any:
        for value in self._items.values():
            if callback is None or callback(value):
                return value
        return resolve_default(default)

    def last(self, callback: Optional[Callable[[Any], Any]] = None, default: Any = None) -> Any:
        for value in reversed(list(self._items.values())):
            if callback is None or callback(value):
                return value
        return resolve_default(default)

    def contains(self, needle: Any) -> bool:
        """Check for a value, or for any value matching a callable."""
        if callable(needle):
            return any(needle(value) for value in self._items.values())
        return needle in self._items.values()

    def search(self, needle: Any) -> Any:
        """Return the key of the first matching value, or ``None``."""
        for key, value in self._items.items():
            if (callable(needle) and needle(value)) or (not callable(needle) and value == needle):
                return key
        return None

    def filter(self, callback: Optional[Callable[[Any], Any]] = None) -> "Collection":
        predicate = callback or bool
        return self._new({k: v for k, v in self._items.items() if predicate(v)})

    def reject(self, callback: Callable[[Any], Any]) -> "Collection":
        return self._new({k: v for k, v in self._items.items() if not callback(v)})

    def map(self, callback: Callable[[Any], Any]) -> "Collection":
        return self._new({k: callback(v) for k, v in self._items.items()})

    def map_into(self, cls: Callable[[Any], Any]) -> "Collection":
        """Map every value through a constructor, e.g. a record type."""
        return self.map(cls)

    def each(self, callback: Callable[[Any], Any]) -> "Collection":
        """Call ``callback`` for every value; stops early when it returns False."""
        for value in self._items.values():
            if callback(value) is False:
                break
        return self

    def reduce(self, callback: Callable[[Any, Any], Any], initial: Any = None) -> Any:
        carry = initial
        for value in self._items.values():
            carry = callback(carry, value)
        return carry

    def where(self, key: str, value: Any) -> "Collection":
        """Keep items whose value at dot-path ``key`` equals ``value``."""
        return self.filter(lambda item: data_get(item, key, _MISSING) == value)

    def pluck(self, value_key: str, key: Optional[str] = None) -> "Collection":
        """Extract the value at ``value_key`` from every item, optionally keyed by ``key``."""
        if key is None:
            return Collection([data_get(item, value_key) for item in self._items.values()])
        return Collection(
            {data_get(item, key): data_get(item, value_key) for item in self._items.values()}
        )

    def only(self, *keys: Any) -> "Collection":
        return self._new({k: v for k, v in self._items.items() if k in keys})

    def except_(self, *keys: Any) -> "Collection":
        return self._new({k: v for k, v in self._items.items() if k not in keys})

    def sort(self, callback: Optional[Callable[[Any], Any]] = None, reverse: bool = False) -> "Collection":
        """Sort by value, or by ``callback(value)`` when given."""
        ordered = sorted(
            self._items.items(),
            key=(lambda pair: callback(pair[1])) if callback else (lambda pair: pair[1]),
            reverse=reverse,
        )
        return self._new(dict(ordered))

    def sort_by(self, key: str, reverse: bool = False) -> "Collection":
        """Sort items by the value at dot-path ``key``."""
        return self.sort(lambda item: data_get(item, key), reverse=reverse)

    def reverse(self) -> "Collection":
        return self._new(dict(reversed(list(self._items.items()))))

    def sum(self, key: Any = None) -> Any:
        if key is None:
            return sum(self._items.values())
        if callable(key):
            return sum(key(value) for value in self._items.values())
        return sum(data_get(value, key, 0) for value in self._items.values())

    def implode(self, glue: str, key: Optional[str] = None) -> str:
        values = self._items.values() if key is None else self.pluck(key).to_list()
        return glue.join(str(value) for value in values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(list(self._items.values()))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Collection):
            return NotImplemented
        return self.all() == other.all()

    def __repr__(self) -> str:
        return f"Collection({self.all()!r})"
