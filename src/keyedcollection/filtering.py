"""Filter the entries of a collection.

A common need is to pick only the entries of a
collection that respect a specific condition.

All the filters in this module preserve the keys
of the entries they retain, so the result of filtering
a list-like collection might have gaps in its indexes:

>>> from keyedcollection import Collection
>>> Collection([1, 2, 3, 4, 5]).filter(lambda v: v % 2 == 0)
Collection({1: 2, 3: 4})

Use ``.values()`` on the result when a dense
sequence is needed.
"""

from collections.abc import Callable, Iterable, Mapping
from typing import Any, Self

from .base import CollectionBase, get_field, pairs_of


class FilteringMixin(CollectionBase):
    def filter(self, fn: Callable[..., Any] | None = None, use_both: bool = False) -> Self:
        """Keep the entries for which ``fn`` returns a truthy value.

        :param fn: The predicate, receives the value of each entry.
                   When not provided the truthy values are kept.
        :param use_both: Pass both the value and the key to ``fn``.
        """
        if fn is None:
            return self._new({k: v for k, v in self._items.items() if v})
        if use_both:
            return self._new({k: v for k, v in self._items.items() if fn(v, k)})
        return self._new({k: v for k, v in self._items.items() if fn(v)})

    def when(self, fn: Callable[[Any, int | str], Any]) -> Self:
        """Keep the entries where ``fn(value, key)`` is truthy.

        >>> from keyedcollection import Collection
        >>> Collection({"a": 1, "b": 2, "c": 3}).when(lambda v, k: v > 1)
        Collection({'b': 2, 'c': 3})
        """
        return self._new({k: v for k, v in self._items.items() if fn(v, k)})

    def unless(self, fn: Callable[[Any, int | str], Any]) -> Self:
        """Keep the entries where ``fn(value, key)`` is falsy."""
        return self._new({k: v for k, v in self._items.items() if not fn(v, k)})

    def find(self, fn: Callable[[Any, int | str], Any]) -> Any:
        """The first value for which ``fn(value, key)`` is truthy, or ``None``."""
        for key, value in self._items.items():
            if fn(value, key):
                return value
        return None

    def find_index(self, fn: Callable[[Any, int | str], Any]) -> int | str:
        """The key of the first entry for which ``fn(value, key)`` is truthy.

        Returns ``-1`` when no entry matches.
        """
        for key, value in self._items.items():
            if fn(value, key):
                return key
        return -1

    def diff(
        self,
        other: CollectionBase | Mapping | Iterable,
        columns: str | list[str] | None = None,
    ) -> Self:
        """Entries of this collection that are not present in ``other``.

        Without ``columns`` entries are compared by their whole value,
        otherwise two entries are considered the same when all the
        given columns have equal values. Keys are preserved.

        >>> from keyedcollection import Collection
        >>> people = Collection([
        ...     {"name": "John", "age": 25},
        ...     {"name": "Jane", "age": 30},
        ... ])
        >>> people.diff([{"name": "John", "age": 40}], "name")
        Collection({1: {'name': 'Jane', 'age': 30}})

        :param other: A collection, a mapping or a sequence of values.
        :param columns: A column name or a list of column names to compare.
        """
        others = [value for _, value in pairs_of(other)]

        if columns is None:
            return self._new(
                {k: v for k, v in self._items.items() if v not in others}
            )

        if isinstance(columns, str):
            columns = [columns]

        def present(item: Any) -> bool:
            return any(
                all(get_field(item, c) == get_field(o, c) for c in columns)
                for o in others
            )

        return self._new({k: v for k, v in self._items.items() if not present(v)})
