"""Take, replace or fill windows of a collection.

Implements the operations whose purpose is to work
on a contiguous window of entries, identified
by an ``offset`` and a ``length``.

For example if ``offset=1`` and ``length=2``
only the second and third entries are part of the window::

    0: skip because < offset
    1: in the window
    2: in the window
    3: skip because length=2 entries were already taken.

A negative offset counts from the end of the collection
and a negative length stops that many entries before the end.
"""

from typing import Any, Self

from .base import CollectionBase, reindex


def window(size: int, offset: int, length: int | None) -> tuple[int, int]:
    """Resolve offset and length into the ``[start, end)`` positions of the window.

    >>> window(5, 1, 2)
    (1, 3)
    >>> window(5, -2, None)
    (3, 5)
    >>> window(5, 1, -1)
    (1, 4)
    """
    if offset < 0:
        start = max(size + offset, 0)
    else:
        start = min(offset, size)

    if length is None:
        end = size
    elif length < 0:
        end = max(size + length, start)
    else:
        end = min(start + length, size)
    return start, end


class PaginationMixin(CollectionBase):
    def slice(self, offset: int, length: int | None = None) -> Self:
        """A new collection with the entries in the window.

        Integer keys are renumbered from ``0``,
        string keys are preserved.

        >>> from keyedcollection import Collection
        >>> Collection([1, 2, 3, 4, 5]).slice(-2)
        Collection({0: 4, 1: 5})

        :param offset: From which entry to start, first entry is 0.
        :param length: How many entries to take, by default all the remaining ones.
        """
        start, end = window(len(self._items), offset, length)
        return self._new(reindex(list(self._items.items())[start:end]))

    def splice(self, offset: int, length: int | None = None, *replacements: Any) -> Self:
        """Remove the entries in the window, replacing them with new values.

        This modifies the collection itself, the integer keys are
        renumbered and the replacements are indexed as they were
        appended where the removed entries were.

        >>> from keyedcollection import Collection
        >>> colors = Collection(["red", "green", "yellow", "blue"])
        >>> colors.splice(1, 2, "orange")
        Collection({0: 'green', 1: 'yellow'})
        >>> colors
        Collection({0: 'red', 1: 'orange', 2: 'blue'})

        :param offset: From which entry to start removing, first entry is 0.
        :param length: How many entries to remove, by default all the remaining ones.
        :param replacements: The values to insert in place of the removed entries.
        :returns: A new collection with the removed values.
        """
        entries = list(self._items.items())
        start, end = window(len(entries), offset, length)
        removed = [value for _, value in entries[start:end]]
        self._items = reindex(
            entries[:start]
            + [(None, value) for value in replacements]
            + entries[end:]
        )
        self._changed()
        return self._new(removed)

    def fill(self, start: int, end: int | None = None, value: Any = None) -> Self:
        """A new collection where the positions from ``start`` to ``end`` hold ``value``.

        Both ``start`` and ``end`` are included. The values before
        ``start`` and after ``end`` are copied from this collection and
        when ``end`` goes past the last entry the collection is extended.
        The result is indexed from ``0``.

        >>> from keyedcollection import Collection
        >>> Collection(["foo", "bar", "baz", "qux"]).fill(1, value="x").to_list()
        ['foo', 'x', 'x', 'x']
        >>> Collection().fill(0, 2, "x").to_list()
        ['x', 'x', 'x']

        When ``end`` is not provided it defaults to the last position,
        if the resolved ``end`` is ``0`` or negative, or comes before
        ``start``, nothing is filled and an unchanged copy is returned.
        """
        values = self._values()
        if end is None:
            end = len(values) - 1
        if end <= 0:
            return self.copy()

        start, _ = window(len(values), start, None)
        if start > end:
            return self.copy()
        return self._new(
            values[:start] + [value] * (end - start + 1) + values[end + 1 :]
        )
