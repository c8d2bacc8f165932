"""Group and aggregate the values of a collection.

Frequently when analysing data is necessary
to compute statistics like the sum or average
of the values, or to group the values by some field.

For example, given the following records::

    city, shop, n_employees
    New York, Shop A, 10
    New York, Shop B, 15
    Los Angeles, Shop C, 8

We could group by city:

>>> from keyedcollection import Collection
>>> shops = Collection([
...    {"city": "New York", "shop": "Shop A", "n_employees": 10},
...    {"city": "New York", "shop": "Shop B", "n_employees": 15},
...    {"city": "Los Angeles", "shop": "Shop C", "n_employees": 8},
... ])
>>> by_city = shops.group_by("city")
>>> by_city.keys().to_list()
['New York', 'Los Angeles']
>>> Collection(by_city["New York"]).sum("n_employees")
25

Or look for the distinct values of one or more fields:

>>> shops.unique("city").column("city")
Collection({0: 'New York', 1: 'Los Angeles'})
"""

import functools
from collections.abc import Callable
from typing import Any, Self

from .base import CollectionBase, as_key, get_field, has_field

_MISSING = object()


class AggregateMixin(CollectionBase):
    def group_by(self, key: str) -> Self:
        """Group the records by the value of one of their fields.

        Each group is a list of the records sharing the same
        value for the field, in the order they had in the collection,
        and the value of the field is the key of the group.

        When the collection is empty or its first record
        doesn't have the field, the records are returned ungrouped.

        :param key: The field to group by.
        """
        first = next(iter(self._items.values()), _MISSING)
        if first is _MISSING or not has_field(first, key):
            return self.copy()

        groups: dict[int | str, list[Any]] = {}
        for item in self._items.values():
            groups.setdefault(as_key(get_field(item, key)), []).append(item)
        return self._new(groups)

    def unique(self, columns: str | list[str] | None = None) -> Self:
        """Retain only the first occurrence of each value.

        The key of the first occurrence is preserved:

        >>> from keyedcollection import Collection
        >>> Collection([1, 2, 2, 3, 1, 5, 1, 3]).unique()
        Collection({0: 1, 1: 2, 3: 3, 5: 5})

        When ``columns`` are provided, records are considered the same
        when they have the same values for all the columns.

        :param columns: A field name or a list of field names.
        """
        if columns is None:
            return self._new(self._first_occurrences(self._items.items()))

        if isinstance(columns, str):
            columns = [columns]

        # Build a composite key out of all the columns,
        # the first record with a given composite key wins.
        keyed = (
            ("|".join(str(get_field(item, c)) for c in columns), key, item)
            for key, item in self._items.items()
        )
        seen: set[str] = set()
        result: dict[int | str, Any] = {}
        for composite, key, item in keyed:
            if composite not in seen:
                seen.add(composite)
                result[key] = item
        return self._new(result)

    @staticmethod
    def _first_occurrences(pairs) -> dict[int | str, Any]:
        """Deduplicate values by equality, also when they are not hashable."""
        hashable_seen: set[Any] = set()
        unhashable_seen: list[Any] = []
        result: dict[int | str, Any] = {}
        for key, value in pairs:
            try:
                if value in hashable_seen:
                    continue
                hashable_seen.add(value)
            except TypeError:
                if value in unhashable_seen:
                    continue
                unhashable_seen.append(value)
            result[key] = value
        return result

    def sum(self, key_or_fn: str | Callable[[Any], Any] | None = None) -> Any:
        """Sum the values of the collection.

        :param key_or_fn: When a string, sum the values of that field
                          of each record. When a callable, sum the
                          results of calling it on each value.
        """
        if key_or_fn is None:
            values = self._values()
        elif isinstance(key_or_fn, str):
            values = self.column(key_or_fn).to_list()
        else:
            values = [key_or_fn(value) for value in self._items.values()]
        return sum(values)

    def average(self, key: str | None = None) -> Any:
        """The mean of the values, or of a field of the records.

        Averaging an empty collection raises ``ZeroDivisionError``.

        >>> from keyedcollection import Collection
        >>> Collection([1, 2, 3, 4, 5]).average()
        3.0
        """
        values = self.column(key).to_list() if key else self._values()
        return sum(values) / len(values)

    def reduce(self, fn: Callable[[Any, Any], Any], initial: Any = _MISSING) -> Any:
        """Fold the values from left to right.

        ``fn`` receives the accumulated result and the next value.
        When ``initial`` is not provided, the first value is used
        as the initial result, and reducing an empty collection
        gives ``None``.
        """
        if initial is not _MISSING:
            return functools.reduce(fn, self._items.values(), initial)
        if not self._items:
            return None
        return functools.reduce(fn, self._items.values())

    def every(self, fn: Callable[[Any], Any]) -> bool:
        """If all the values satisfy ``fn``, always true for empty collections."""
        return all(fn(value) for value in self._items.values())

    def each(self, fn: Callable[[Any, int | str], Any]) -> Self:
        """Call ``fn(value, key)`` for each entry.

        The iteration stops as soon as ``fn`` returns ``False``.
        """
        for key, value in list(self._items.items()):
            if fn(value, key) is False:
                break
        return self

    def includes(self, value: Any, strict: bool = False) -> bool:
        """If the collection contains the value.

        :param strict: Also require the value to be of the same type,
                       so that ``1``, ``1.0`` and ``True`` are different.
        """
        return any(
            _equals(candidate, value, strict) for candidate in self._items.values()
        )

    def index_of(self, value: Any, strict: bool = False) -> int | str:
        """The key of the first entry equal to ``value``, ``-1`` if none.

        :param strict: Also require the value to be of the same type,
                       so that ``1``, ``1.0`` and ``True`` are different.
        """
        for key, candidate in self._items.items():
            if _equals(candidate, value, strict):
                return key
        return -1

    def join(self, glue: str = "", last_value: str | None = None) -> str:
        """Join the values into a string.

        >>> from keyedcollection import Collection
        >>> Collection(["apples", "pears", "figs"]).join(", ", "and ")
        'apples, pears, and figs'

        :param glue: The separator placed between the values.
        :param last_value: Prefixed to the last value,
                           when there are at least two values.
        """
        values = [str(value) for value in self._items.values()]
        if last_value and len(values) > 1:
            values[-1] = last_value + values[-1]
        return glue.join(values)


def _equals(candidate: Any, value: Any, strict: bool) -> bool:
    if strict and type(candidate) is not type(value):
        return False
    return candidate == value
