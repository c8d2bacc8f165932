"""Sort and reorder the entries of a collection.

When computing ranks or looking for most significant
values, it's often necessary to sort the values
of a collection.

All sorting is stable: values that compare equal
keep the relative order they had in the collection,
in both ascending and descending sorting.

>>> from keyedcollection import Collection
>>> books = Collection([{"pages": 10, "copies": 2}, {"pages": 1, "copies": 2}])
>>> books.sort(lambda b: b["pages"]).to_list()
[{'pages': 1, 'copies': 2}, {'pages': 10, 'copies': 2}]

Sorted collections are always indexed from ``0``,
as the previous keys would make little sense
in the new order.
"""

from collections.abc import Callable
from typing import Any, Self

from .base import CollectionBase, get_field, reindex


class SortingMixin(CollectionBase):
    def sort(self, fn: Callable[[Any], Any] | None = None) -> Self:
        """Sort the values in ascending order.

        :param fn: Extracts from each value the key to compare,
                   when not provided the values themselves are compared.
        """
        return self._new(sorted(self._values(), key=fn))

    def sort_desc(self, fn: Callable[[Any], Any] | None = None) -> Self:
        """Sort the values in descending order.

        >>> from keyedcollection import Collection
        >>> Collection([3, 1, 5, 2, 4]).sort_desc().to_list()
        [5, 4, 3, 2, 1]

        :param fn: Extracts from each value the key to compare,
                   when not provided the values themselves are compared.
        """
        # reverse=True preserves the original order of equal values
        return self._new(sorted(self._values(), key=fn, reverse=True))

    def sort_by(self, columns: list[str], descending: list[bool] | None = None) -> Self:
        """Sort records based on one or more of their fields.

        The records are sorted based on the columns in the order
        they are provided, each column can be sorted ascending
        or descending.

        >>> from keyedcollection import Collection
        >>> shops = Collection([
        ...     {"city": "Rome", "employees": 10},
        ...     {"city": "Milan", "employees": 8},
        ...     {"city": "Rome", "employees": 15},
        ... ])
        >>> for shop in shops.sort_by(["city", "employees"], [False, True]):
        ...     print(shop)
        {'city': 'Milan', 'employees': 8}
        {'city': 'Rome', 'employees': 15}
        {'city': 'Rome', 'employees': 10}

        :param columns: The fields to sort by in the order they should be sorted.
        :param descending: If each field should be sorted in a descending order,
                           by default all fields are sorted ascending.
        """
        if descending is None:
            descending = [False] * len(columns)
        if len(columns) != len(descending):
            raise ValueError("Columns and descending must have the same length")

        return self._new(
            sorted(
                self._values(),
                key=lambda item: SortKey(item, columns, descending),
            )
        )

    def reverse(self) -> Self:
        """Reverse the order of the entries.

        String keys stay attached to their value,
        integer keys are renumbered from ``0``:

        >>> from keyedcollection import Collection
        >>> Collection({"a": 1, "b": 2}).reverse()
        Collection({'b': 2, 'a': 1})
        >>> Collection([1, 2, 3]).reverse()
        Collection({0: 3, 1: 2, 2: 1})
        """
        return self._new(reindex(reversed(list(self._items.items()))))


class SortKey:
    """Makes records sortable by multiple fields.

    This implements the rich comparison methods to allow
    sorting records based on the values of the
    fields in the order they are provided, each
    in its own direction.
    """

    def __init__(
        self, item: Any, columns: list[str], descending_orders: list[bool]
    ) -> None:
        """
        :param item: The record to compare.
        :param columns: The fields to use for comparison.
        :param descending_orders: Which of the fields are compared for descending order.
        """
        self.descending_orders = descending_orders
        self.values = [get_field(item, column) for column in columns]

    def __lt__(self, other: Self) -> bool:
        for v1, v2, desc in zip(self.values, other.values, self.descending_orders):
            if v1 == v2:
                continue
            else:
                if desc:
                    return v1 > v2
                else:
                    return v1 < v2
        return False  # All keys are equal
