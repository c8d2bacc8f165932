"""Project the entries of a collection.

When a collection holds records, which can be
mappings or objects with attributes, it's frequent
to need only one of their fields. That's similar
to a ``SELECT`` clause in SQL:

>>> from keyedcollection import Collection
>>> people = Collection([
...     {"id": 1, "name": "John"},
...     {"id": 2, "name": "Carter"},
... ])
>>> people.column("name")
Collection({0: 'John', 1: 'Carter'})
>>> people.column("name", "id")
Collection({1: 'John', 2: 'Carter'})

This module also implements the projections
of the collection itself to its keys or values.
"""

from typing import Any, Self

from .base import CollectionBase, as_key, get_field, has_field


class SelectionMixin(CollectionBase):
    def column(self, name: str | None, index_name: str | None = None) -> Self:
        """Project each record to the value of one of its fields.

        Records that don't have the field are skipped.

        :param name: The field to retain, ``None`` retains the whole record.
        :param index_name: The field whose value should be used as the key
                           of the result. Records that don't have it
                           are appended with the next index.
        """
        result: dict[int | str, Any] = {}
        index = 0
        for item in self._items.values():
            if name is None:
                value = item
            elif has_field(item, name):
                value = get_field(item, name)
            else:
                continue

            if index_name is not None and has_field(item, index_name):
                key = as_key(get_field(item, index_name))
            else:
                key = index
            result[key] = value
            if isinstance(key, int):
                index = max(index, key + 1)
        return self._new(result)

    def keys(self) -> Self:
        """A new collection with the keys as its values.

        >>> from keyedcollection import Collection
        >>> Collection({"a": 1, "b": 2}).keys()
        Collection({0: 'a', 1: 'b'})
        """
        return self._new(list(self._items.keys()))

    def values(self) -> Self:
        """A new collection with the same values indexed from ``0``.

        The result is always a new instance, even when
        the collection was already indexed from ``0``.
        """
        return self._new(self._values())
