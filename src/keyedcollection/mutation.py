"""Operations that modify a collection in place.

Differently from the rest of the collection methods,
which always return a new collection, these methods
change the collection they are invoked on.

Those that return the collection itself can be chained:

>>> from keyedcollection import Collection
>>> Collection([1, 2]).push(3, 4).merge([5], Collection([6]))
Collection({0: 1, 1: 2, 2: 3, 3: 4, 4: 5, 5: 6})
"""

from collections.abc import Iterable, Mapping
from typing import Any, Self

from .base import CollectionBase, next_index, pairs_of, reindex


class MutationMixin(CollectionBase):
    def push(self, *values: Any) -> Self:
        """Append the values at the end of the collection."""
        index = next_index(self._items)
        for offset, value in enumerate(values):
            self._items[index + offset] = value
        self._changed()
        return self

    def pop(self) -> Any:
        """Remove the last entry and return its value, ``None`` if empty.

        The cursor is moved back to the first entry.
        """
        self._cursor = 0
        if not self._items:
            return None
        _, value = self._items.popitem()
        self._changed()
        return value

    def shift(self) -> Any:
        """Remove the first entry and return its value, ``None`` if empty.

        The remaining integer keys are renumbered from ``0``
        and the cursor is moved back to the first entry.
        """
        self._cursor = 0
        if not self._items:
            return None
        entries = list(self._items.items())
        self._items = reindex(entries[1:])
        self._changed()
        return entries[0][1]

    def merge(self, *sources: CollectionBase | Mapping | Iterable) -> Self:
        """Append the entries of the sources at the end of the collection.

        Entries with integer keys are appended and all integer keys
        renumbered from ``0``. Entries with string keys are added
        or, if the key already exists, replace its value.

        :param sources: Collections, mappings or sequences of values.
        """
        entries = list(self._items.items())
        for source in sources:
            entries.extend(pairs_of(source))
        self._items = reindex(entries)
        self._changed()
        return self
