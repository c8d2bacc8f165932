"""The Collection object itself.

The :class:`Collection` combines all the capabilities
implemented by the modules of this package in a single class,
and provides the ways to create a collection and to persist it.
"""

import pickle
from collections.abc import Callable, Iterable, Mapping
from typing import Any, Self

import pyarrow as pa

from . import datasources
from .aggregate import AggregateMixin
from .base import CollectionBase
from .filtering import FilteringMixin
from .mutation import MutationMixin
from .navigation import NavigationMixin
from .pagination import PaginationMixin
from .selection import SelectionMixin
from .sorting import SortingMixin
from .transform import TransformMixin
from .utils.inspect import fields_of


class Collection(
    NavigationMixin,
    TransformMixin,
    FilteringMixin,
    SelectionMixin,
    SortingMixin,
    AggregateMixin,
    PaginationMixin,
    MutationMixin,
):
    """Ordered collection of values, each identified by a key.

    The Collection allows to represent in-memory data
    as list-like sequences (integer keys), dict-like
    records (string keys) or a mix of the two,
    and perform transformations over it.

    Transformations never modify the collection,
    they return a new one. Only :meth:`push`, :meth:`pop`,
    :meth:`shift`, :meth:`merge`, :meth:`splice` and item
    assignment modify the collection they are invoked on.

    >>> people = Collection.of(
    ...     {"name": "John", "age": 25},
    ...     {"name": "Jane", "age": 30},
    ... )
    >>> people.filter(lambda p: p["age"] > 26).column("name").values()
    Collection({0: 'Jane'})
    """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._items!r})"

    @classmethod
    def of(cls, *values: Any) -> Self:
        """Create a collection out of the given values.

        >>> Collection.of("foo", "bar")
        Collection({0: 'foo', 1: 'bar'})
        """
        return cls(values)

    @classmethod
    def from_(cls, source: Any, transform: Callable[[Any], Any] | None = None) -> Self:
        """Create a collection out of about anything.

        The entries of the collection depend on the source:

        * ``None`` gives an empty collection.
        * Collections and mappings provide their keys and values.
        * Arrow tables and record batches provide one record per row.
        * Other iterables provide their values, indexed from ``0``.
        * Any other object provides its public fields,
          keyed by the field name.

        >>> Collection.from_(["foo", "bar"], str.upper)
        Collection({0: 'FOO', 1: 'BAR'})

        :param source: The data to create the collection from.
        :param transform: Applied to each value before storing it.
        """
        items: Mapping | Iterable
        if source is None:
            items = {}
        elif isinstance(source, (pa.Table, pa.RecordBatch)):
            items = datasources.arrow_records(source)
        elif isinstance(source, (CollectionBase, Mapping, str, bytes)):
            # str and bytes are rejected when reading their entries.
            items = source
        elif isinstance(source, Iterable):
            items = list(source)
        else:
            items = fields_of(source)

        collection = cls(items)
        if transform is not None:
            collection._items = {
                key: transform(value) for key, value in collection._items.items()
            }
        return collection

    @classmethod
    def from_arrow(cls, table: pa.Table | pa.RecordBatch) -> Self:
        """Create a collection of records, one for each row of the table."""
        return cls(datasources.arrow_records(table))

    @classmethod
    def open_csv(cls, filename: str, block_size: int | None = None) -> Self:
        """Open a CSV file and create a collection of records out of its rows.

        :param filename: The path to a local CSV file.
        :param block_size: How big are the blocks of data read at once.
        """
        return cls(datasources.read_csv(filename, block_size))

    @classmethod
    def open_parquet(cls, filename: str, batch_size: int | None = None) -> Self:
        """Open a Parquet file and create a collection of records out of its rows.

        :param filename: The path to a local Parquet file.
        :param batch_size: How many rows are read at once.
        """
        return cls(datasources.read_parquet(filename, batch_size))

    def to_arrow(self) -> pa.Table:
        """Convert the values of the collection to a ``pyarrow.Table``.

        Keys are discarded.
        """
        return datasources.records_to_arrow(self._values())

    def serialize(self) -> bytes:
        """Persist the entries of the collection.

        The cursor position is not persisted.
        Use :meth:`unserialize` to restore the collection.
        """
        return pickle.dumps(self._items, protocol=pickle.HIGHEST_PROTOCOL)

    @classmethod
    def unserialize(cls, data: bytes) -> Self:
        """Restore a collection persisted with :meth:`serialize`.

        The data is unpickled, so it must come from a trusted source.

        >>> Collection.unserialize(Collection({"foo": "bar"}).serialize())
        Collection({'foo': 'bar'})
        """
        return cls(pickle.loads(data))

    def __getstate__(self) -> dict[str, Any]:
        return {"items": self._items}

    def __setstate__(self, state: dict[str, Any]) -> None:
        self._items = state["items"]
        self._cursor = 0
        self._key_cache = None
