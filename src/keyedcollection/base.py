"""Base classes and helpers for the Collection

This module defines the storage shared by all the
capabilities of a :class:`keyedcollection.Collection`
and the rules that govern its keys.

A collection stores its entries in a ``dict``, which
in Python preserves insertion order, so the order
in which entries were added is the order in which
they are iterated.

Keys can be:

* integers, usually a dense ``0..n-1`` range
  like the indexes of a list.
* strings, like the keys of a record.

Operations that append values (``push``, ``merge``, ...)
assign them the *next index*, which is one more than
the highest integer key in the collection:

>>> next_index({0: "a", "name": "b", 4: "c"})
5
>>> next_index({"name": "b"})
0
"""

import abc
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Self

__all__ = (
    "CollectionBase",
    "get_field",
    "has_field",
    "is_nested",
    "nested_values",
    "next_index",
    "pairs_of",
    "reindex",
    "as_key",
)


class CollectionBase(abc.ABC):
    """Ordered key-value storage of a collection.

    The base class only knows how to store entries,
    enforce the key rules and expose the Python
    container protocols. All the operations are
    provided by the mixins that compose the final
    :class:`keyedcollection.Collection` class.

    Non mutating operations must always build
    their result through :meth:`_new`, which guarantees
    that the result is a new instance owning its own storage.
    Operations that modify the entries in place must call
    :meth:`_changed` afterwards.

    Like a ``dict``, membership tests look at the keys,
    but iterating a collection gives its values, like a ``list``:

    >>> from keyedcollection import Collection
    >>> colors = Collection({"sky": "blue"})
    >>> "sky" in colors, "blue" in colors
    (True, False)
    >>> list(colors)
    ['blue']
    >>> colors.includes("blue")
    True
    """

    def __init__(self, items: Mapping | Iterable | None = None) -> None:
        """
        :param items: A mapping whose keys and values are copied,
                      or an iterable whose values are indexed from ``0``.
                      ``None`` creates an empty collection.
        """
        self._items: dict[int | str, Any] = {}
        if items is not None:
            for key, value in pairs_of(items):
                self._items[as_key(key, strict=True)] = value
        self._cursor = 0
        self._key_cache: list[int | str] | None = None

    @abc.abstractmethod
    def __repr__(self) -> str: ...

    def _new(self, items: Mapping | Iterable | None = None) -> Self:
        """Build a new collection of the same class."""
        return self.__class__(items)

    def _values(self) -> list[Any]:
        return list(self._items.values())

    def _keys(self) -> list[int | str]:
        """The keys in order, cached until the entries change."""
        if self._key_cache is None:
            self._key_cache = list(self._items)
        return self._key_cache

    def _changed(self) -> None:
        self._key_cache = None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values, like iterating a list would."""
        return iter(self._items.values())

    def __contains__(self, key: object) -> bool:
        """If the collection has an entry with the given key."""
        return key in self._items

    def __getitem__(self, key: int | str) -> Any:
        return self._items[key]

    def __setitem__(self, key: int | str, value: Any) -> None:
        self._items[as_key(key, strict=True)] = value
        self._changed()

    def __delitem__(self, key: int | str) -> None:
        del self._items[key]
        self._changed()

    def __eq__(self, other: object) -> bool:
        """Collections are equal when their entries are equal and in the same order."""
        if not isinstance(other, CollectionBase):
            return NotImplemented
        return list(self._items.items()) == list(other._items.items())

    __hash__ = None  # mutable container

    def get(self, key: int | str, default: Any = None) -> Any:
        """Value for ``key`` or ``default`` if the key is not in the collection."""
        return self._items.get(key, default)

    def items(self) -> Iterator[tuple[int | str, Any]]:
        """Iterate over the ``(key, value)`` pairs in order."""
        return iter(list(self._items.items()))

    def to_dict(self) -> dict[int | str, Any]:
        """Get the entries as a plain ``dict``."""
        return dict(self._items)

    def to_list(self) -> list[Any]:
        """Get the values as a plain ``list``, keys are discarded."""
        return self._values()

    def copy(self) -> Self:
        """Shallow copy of the collection, the cursor is not copied."""
        return self._new(self._items)

    def count(self) -> int:
        """The number of entries in the collection."""
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items


def as_key(value: Any, strict: bool = False) -> int | str:
    """Convert a value into a valid collection key.

    Integers and strings are valid keys as they are.
    Booleans are not integer keys, as ``True`` would
    collide with ``1``.
    Other values are rejected with ``TypeError`` when ``strict``,
    otherwise they are converted to their string representation,
    which is what happens when field values are used as keys
    by ``group_by`` or ``column``.
    """
    if isinstance(value, (int, str)) and not isinstance(value, bool):
        return value
    if strict:
        raise TypeError(
            f"Collection keys must be int or str, got {type(value).__name__}"
        )
    return str(value)


def next_index(items: Mapping) -> int:
    """The index that the next appended value would get."""
    indexes = [key for key in items if isinstance(key, int)]
    return max(indexes) + 1 if indexes else 0


def reindex(pairs: Iterable[tuple[int | str | None, Any]]) -> dict[int | str, Any]:
    """Renumber the integer keys of a sequence of pairs.

    Integer keys (and ``None``, meaning *no key*) are replaced
    by a dense ``0..n-1`` range following the order of the pairs,
    string keys are retained with their value.
    If the same string key appears more than once
    the last value wins but the key keeps the position
    of its first appearance.
    """
    result: dict[int | str, Any] = {}
    index = 0
    for key, value in pairs:
        if isinstance(key, str):
            result[key] = value
        else:
            result[index] = value
            index += 1
    return result


def pairs_of(source: Any) -> Iterator[tuple[int | str, Any]]:
    """Iterate the ``(key, value)`` pairs of something collection-like.

    Collections and mappings provide their own keys,
    any other iterable is indexed from ``0``.
    """
    if isinstance(source, CollectionBase):
        return source.items()
    if isinstance(source, Mapping):
        return iter(list(source.items()))
    if isinstance(source, (str, bytes)):
        raise TypeError(f"Cannot use {type(source).__name__} as a source of entries")
    return enumerate(source)


def is_nested(value: Any) -> bool:
    """If the value is a container that ``flatten`` should unwrap.

    Strings and bytes are sequences in Python, but for
    the purpose of a collection they are scalar values.
    """
    return isinstance(value, (list, tuple, Mapping, CollectionBase))


def nested_values(value: Any) -> list[Any]:
    """The values of a nested container, keys are discarded."""
    if isinstance(value, CollectionBase):
        return value.to_list()
    if isinstance(value, Mapping):
        return list(value.values())
    return list(value)


def has_field(item: Any, name: str) -> bool:
    """Check if a record has the given field.

    Records can be mappings, whose fields are their keys,
    or objects, whose fields are their attributes.
    """
    if isinstance(item, Mapping):
        return name in item
    return hasattr(item, name)


def get_field(item: Any, name: str) -> Any:
    """Get a field from a record.

    Missing fields always raise ``KeyError``,
    regardless of the record being a mapping or an object.
    """
    if isinstance(item, Mapping):
        return item[name]
    try:
        return getattr(item, name)
    except AttributeError:
        raise KeyError(name) from None
