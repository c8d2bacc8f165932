"""keyedcollection

An ordered collection of values for everyday data manipulation.

A :class:`Collection` wraps an ordered mapping of keys to values,
where keys are integer indexes, like in a list, or strings, like
in a dict. On top of it the collection provides navigation,
transformation, aggregation and set-like operations:

>>> from keyedcollection import Collection
>>> books = Collection([
...     {"title": "Dune", "pages": 412},
...     {"title": "Emma", "pages": 474},
...     {"title": "Dune", "pages": 412},
... ])
>>> books.unique("title").sum("pages")
886
>>> books.sort_desc(lambda b: b["pages"]).first()
{'title': 'Emma', 'pages': 474}

Each capability is isolated within its own module
and each module is self documented:

* :mod:`keyedcollection.base`, storage and key rules.
* :mod:`keyedcollection.navigation`, the cursor.
* :mod:`keyedcollection.transform`, mapping and flattening values.
* :mod:`keyedcollection.filtering`, filtering and differences.
* :mod:`keyedcollection.selection`, projecting fields, keys and values.
* :mod:`keyedcollection.sorting`, sorting and reversing.
* :mod:`keyedcollection.aggregate`, grouping, deduplication and statistics.
* :mod:`keyedcollection.pagination`, slicing, splicing and filling.
* :mod:`keyedcollection.mutation`, in place modifications.
* :mod:`keyedcollection.datasources`, loading records from files.
"""

from .collection import Collection

__all__ = ("Collection",)
