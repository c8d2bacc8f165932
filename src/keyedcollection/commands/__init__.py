"""Shell commands exposing keyedcollection functionalities.

This module contains the shell commands that can be used to work with collections.

CQuery (collection query)
=========================

``kcollection-query`` loads a CSV or Parquet file as a collection of records
and applies the collection operations to it::

    kcollection-query users.csv --unique email --sort age --desc --limit 10

It can also compute statistics on a column::

    kcollection-query sales.parquet --average Price

"""
