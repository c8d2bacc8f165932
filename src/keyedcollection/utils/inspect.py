"""Provide insights about Python objects."""

import dataclasses
import inspect
from typing import Any


def fields_of(obj: Any) -> dict[str, Any]:
    """Get the public fields of the given object with their values.

    For dataclasses, their declared fields are returned.
    For any other object its public instance attributes come first,
    followed by its slots and by the public class attributes
    that are not methods or properties.

    Fields whose name begins with an underscore are
    considered private and are skipped.

    >>> class Book:
    ...   kind = "paper"
    ...   def __init__(self, title):
    ...     self.title = title
    ...     self._isbn = None
    ...   def read(self):
    ...     pass
    >>> fields_of(Book("Dune"))
    {'title': 'Dune', 'kind': 'paper'}
    """
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            field.name: getattr(obj, field.name)
            for field in dataclasses.fields(obj)
            if not field.name.startswith("_")
        }

    fields: dict[str, Any] = {}
    for name, value in getattr(obj, "__dict__", {}).items():
        if not name.startswith("_"):
            fields[name] = value

    for cls in inspect.getmro(type(obj)):
        if cls is object:
            continue
        slots = getattr(cls, "__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if not name.startswith("_") and hasattr(obj, name):
                fields.setdefault(name, getattr(obj, name))

    for cls in reversed(inspect.getmro(type(obj))):
        if cls is object:
            continue
        for name, value in vars(cls).items():
            if name.startswith("_") or name in fields:
                continue
            if callable(value) or inspect.isdatadescriptor(value):
                continue
            if isinstance(value, (staticmethod, classmethod)):
                continue
            fields[name] = getattr(obj, name)
    return fields
