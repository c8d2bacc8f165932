"""Generic utilities and helpers.

This is a collection of utilities and helpers
that are not bound to a specific capability of
the collection, like inspecting objects to
extract their fields or printing collections as tables.
"""

from . import inspect, tabulate

__all__ = ("inspect", "tabulate")
