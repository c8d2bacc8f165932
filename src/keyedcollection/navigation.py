"""Move around a collection with a cursor.

Each collection carries a cursor, a pointer to
one of its entries, which allows to walk through
the collection one step at the time:

>>> from keyedcollection import Collection
>>> colors = Collection(["red", "green", "blue"])
>>> colors.next()
'green'
>>> colors.key()
1
>>> colors.next(), colors.next()
('blue', None)
>>> colors.valid()
False
>>> colors.first()
'red'

The cursor belongs to the instance, it's not part
of the content of the collection. Copies of a collection
and collections restored from their serialized form
always start with the cursor on their first entry.
"""

from typing import Any

from .base import CollectionBase


class NavigationMixin(CollectionBase):
    """Cursor based navigation and positional access."""

    def _position_value(self) -> Any:
        key = self.key()
        return None if key is None else self._items[key]

    def first(self) -> Any:
        """Move the cursor to the first entry and return its value.

        Returns ``None`` if the collection is empty.
        """
        self._cursor = 0
        return self._position_value()

    def last(self) -> Any:
        """Move the cursor to the last entry and return its value.

        Returns ``None`` if the collection is empty.
        """
        self._cursor = len(self._items) - 1
        return self._position_value()

    def next(self) -> Any:
        """Advance the cursor and return the value it lands on.

        Once the cursor moves past the last entry ``None``
        is returned and the cursor stays invalid until
        :meth:`first` or :meth:`last` are used.
        """
        if 0 <= self._cursor < len(self._items):
            self._cursor += 1
        return self._position_value()

    def prev(self) -> Any:
        """Move the cursor backward and return the value it lands on.

        Moving back from the first entry returns ``None``
        and leaves the cursor invalid.
        """
        if 0 <= self._cursor < len(self._items):
            self._cursor -= 1
        return self._position_value()

    def key(self) -> int | str | None:
        """The key of the entry under the cursor, ``None`` if the cursor is invalid."""
        if 0 <= self._cursor < len(self._items):
            return self._keys()[self._cursor]
        return None

    def valid(self) -> bool:
        """If the cursor points to an entry of the collection."""
        return self.key() is not None

    def at(self, index: int) -> Any:
        """Value at the given position, regardless of the keys.

        Negative indexes count from the end of the collection,
        so ``-1`` is the last entry. The cursor is not affected.

        >>> from keyedcollection import Collection
        >>> Collection({"a": 1, "b": 2, "c": 3}).at(-1)
        3
        """
        size = len(self._items)
        position = size + index if index < 0 else index
        if not 0 <= position < size:
            raise IndexError(f"Collection index {index} out of range")
        return self._items[self._keys()[position]]
