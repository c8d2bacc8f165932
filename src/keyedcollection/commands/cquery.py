"""Command line interface for querying files as collections.

This module provides a command line interface that loads
a CSV or Parquet file as a :class:`keyedcollection.Collection`
of records and applies to it deduplication, sorting, pagination
and projection, in that order.

The results are then printed to the console in a tabular format
using the :mod:`keyedcollection.utils.tabulate` module.
"""

import argparse
import logging
import os

import pyarrow as pa

from keyedcollection import Collection
from keyedcollection.utils import tabulate

logger = logging.getLogger(__name__)

LOG_LEVEL_ENVIRON = "KCOLLECTION_LOG_LEVEL"


def build_parser() -> argparse.ArgumentParser:
    """Declare the options accepted by the command."""
    parser = argparse.ArgumentParser(
        description="Query a CSV or Parquet file as a collection of records."
    )
    parser.add_argument("filename", type=str, help="The CSV or Parquet file to load.")
    parser.add_argument(
        "-u",
        "--unique",
        action="append",
        help="Keep only the first record for each value of the column. "
        "Can be provided multiple times to build a composite key.",
    )
    parser.add_argument(
        "-s",
        "--sort",
        action="append",
        help="Sort the records by the column. Can be provided multiple times.",
    )
    parser.add_argument(
        "--desc", action="store_true", help="Sort in descending order."
    )
    parser.add_argument("--offset", type=int, default=0, help="Skip the first rows.")
    parser.add_argument("--limit", type=int, help="How many rows to show at most.")
    parser.add_argument("-c", "--column", help="Show only the values of the column.")
    parser.add_argument("-i", "--index", help="Key the column values by this column.")
    parser.add_argument("--sum", help="Print the sum of the column.")
    parser.add_argument("--average", help="Print the average of the column.")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging."
    )
    return parser


def load(filename: str) -> Collection:
    """Load the file based on its extension, CSV is the default."""
    if filename.endswith((".parquet", ".pq")):
        return Collection.open_parquet(filename)
    return Collection.open_csv(filename)


def query(collection: Collection, args: argparse.Namespace) -> Collection:
    """Apply the operations requested on the command line to the collection."""
    if args.unique:
        collection = collection.unique(args.unique)
    if args.sort:
        collection = collection.sort_by(args.sort, [args.desc] * len(args.sort))
    if args.offset or args.limit is not None:
        collection = collection.slice(args.offset, args.limit)
    if args.column or args.index:
        collection = collection.column(args.column, args.index)
    logger.debug("Query produced %d records", len(collection))
    return collection


def log_level(verbose: bool) -> int:
    """The logging level requested by the command line or the environment.

    Unknown level names in the environment fall back to ``WARNING``.
    """
    if verbose:
        return logging.DEBUG
    name = os.environ.get(LOG_LEVEL_ENVIRON, "WARNING").upper()
    return logging.getLevelNamesMapping().get(name, logging.WARNING)


def main(argv: list[str] | None = None) -> int:
    """Parse the command line arguments and execute the query."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=log_level(args.verbose))

    try:
        collection = query(load(args.filename), args)
        if args.sum:
            print(collection.sum(args.sum))
        elif args.average:
            print(collection.average(args.average))
        else:
            print(tabulate.tabulate(collection))
    except KeyError as e:
        print(f"Unknown column {e}")
        return 1
    except ZeroDivisionError:
        print("Cannot compute the average of an empty column")
        return 1
    except (OSError, pa.ArrowInvalid) as e:
        print(f"Unable to load {args.filename}, {e}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
