"""Load records from tabular data sources.

The datasources are expected to fetch the data from some source,
and convert it into records, one ``dict`` per row, that can
be used as the entries of a :class:`keyedcollection.Collection`.

Loading is based on Apache Arrow, which provides
fast readers for the most common formats:

>>> import pyarrow as pa
>>> data = pa.table({"animals": ["Flamingo", "Horse"], "n_legs": [2, 4]})
>>> arrow_records(data)
[{'animals': 'Flamingo', 'n_legs': 2}, {'animals': 'Horse', 'n_legs': 4}]

The reverse conversion is available too,
to move records back to Arrow for further processing
or to write them to disk.
"""

import logging
from collections.abc import Mapping
from typing import Any

import pyarrow as pa
import pyarrow.csv
import pyarrow.parquet

from .utils.inspect import fields_of

logger = logging.getLogger(__name__)


def arrow_records(table: pa.Table | pa.RecordBatch) -> list[dict[str, Any]]:
    """Convert an Arrow table or record batch to a list of records."""
    return table.to_pylist()


def read_csv(filename: str, block_size: int | None = None) -> list[dict[str, Any]]:
    """Read the rows of a CSV file.

    :param filename: The path of the local CSV file.
    :param block_size: How big are the blocks of data read at once.
    """
    records: list[dict[str, Any]] = []
    with pa.csv.open_csv(
        filename, read_options=pa.csv.ReadOptions(block_size=block_size)
    ) as reader:
        for batch in reader:
            records.extend(batch.to_pylist())
    logger.debug("Loaded %d records from CSV file %s", len(records), filename)
    return records


def read_parquet(filename: str, batch_size: int | None = None) -> list[dict[str, Any]]:
    """Read the rows of a Parquet file.

    :param filename: The path of the local parquet file.
    :param batch_size: How many rows are read at once.
    """
    records: list[dict[str, Any]] = []
    with pa.parquet.ParquetFile(filename) as reader:
        for batch in reader.iter_batches(batch_size=batch_size or 65536):
            records.extend(batch.to_pylist())
    logger.debug("Loaded %d records from Parquet file %s", len(records), filename)
    return records


def records_to_arrow(values: list[Any]) -> pa.Table:
    """Convert values to an Arrow table.

    When all the values are records (mappings or objects with fields)
    each field becomes a column, otherwise the values are
    stored in a single ``value`` column.

    >>> records_to_arrow([1, 2, 3]).column_names
    ['value']
    >>> records_to_arrow([{"a": 1, "b": 2}]).column_names
    ['a', 'b']
    """
    scalars = (str, bytes, int, float, bool, list, tuple)
    if values and not any(v is None or isinstance(v, scalars) for v in values):
        rows = [v if isinstance(v, Mapping) else fields_of(v) for v in values]
        return pa.Table.from_pylist(rows)
    return pa.table({"value": values})
