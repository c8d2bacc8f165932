"""Format a collection into a text table for print.

the `tabulate` function takes a :class:`keyedcollection.Collection` and formats it into a text table.
It will truncate long strings, format floats to 2 decimal places, and limit the number of rows to display.
The function is used to display the result of the ``kcollection-query`` command.

Each entry of the collection is a row, the first column is the key of the entry.
When the entries are records (mappings or objects) their fields become columns,
otherwise the value is shown in a ``value`` column.

Example:

    >>> from keyedcollection import Collection
    >>> data = Collection([
    ...     {"Product": "Videogame", "Quantity": 8, "Price": 66.5},
    ...     {"Product": "Laptop", "Quantity": 8, "Price": 38.72},
    ...     {"Product": "Laptop", "Quantity": 7, "Price": 77.46},
    ... ])
    >>> print(tabulate(data))
    key | Product   | Quantity | Price
    --- | --------- | -------- | -----
    0   | Videogame | 8        | 66.50
    1   | Laptop    | 8        | 38.72
    2   | Laptop    | 7        | 77.46
"""

from collections.abc import Mapping
from typing import Any

from ..base import CollectionBase
from .inspect import fields_of


def tabulate(collection: CollectionBase, max_rows: int = 20) -> str:
    """Format a Collection into a text table.

    Will produce a string like::

        key | Product   | Quantity | Price
        --- | --------- | -------- | -----
        0   | Videogame | 8        | 66.50
        1   | Laptop    | 8        | 38.72
    """
    records = [
        (key, as_record(value))
        for key, value in list(collection.items())[:max_rows]
    ]
    cols = ["key"]
    for _, record in records:
        cols.extend(name for name in record if name not in cols)

    rows = [
        [format_value(key)] + [format_value(record.get(c, "")) for c in cols[1:]]
        for key, record in records
    ]

    colsizes = compute_max_colsize(cols, rows)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    textrows = [maketablerow(row, colsizes=colsizes) for row in rows]

    table = "\n".join(header + separator + textrows)
    if len(collection) > max_rows:
        table += f"\n... and {len(collection) - max_rows} more rows"
    return table


def as_record(value: Any) -> dict[str, Any]:
    """Get the columns that should be displayed for a value."""
    if isinstance(value, Mapping):
        return {str(k): v for k, v in value.items()}
    if isinstance(value, (str, bytes, int, float, bool, list, tuple)) or value is None:
        return {"value": value}
    return fields_of(value) or {"value": value}


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    )


def format_value(v: Any) -> str:
    """Format a value to be printed in the table.

    This function will format floats to 2 decimal places,
    and truncate long strings.
    """
    if isinstance(v, float):
        return f"{v:.2f}"
    elif isinstance(v, bool):
        return "true" if v else "false"

    v = str(v)
    if len(v) > 30:
        v = v[:27] + "..."
    return v
