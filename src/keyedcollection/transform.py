"""Transform the values of a collection.

Transformations build a new collection out of
the values of the current one, leaving the
current collection untouched.
"""

import math
from collections.abc import Callable
from typing import Any, Self

from .base import CollectionBase, is_nested, nested_values


class TransformMixin(CollectionBase):
    def map(self, fn: Callable[[Any], Any]) -> Self:
        """Apply ``fn`` to every value, keys are preserved.

        >>> from keyedcollection import Collection
        >>> Collection({"a": 1, "b": 2}).map(lambda v: v * 10)
        Collection({'a': 10, 'b': 20})
        """
        return self._new({key: fn(value) for key, value in self._items.items()})

    def flatten(self, depth: int | float = 1) -> Self:
        """Concatenate the nested values into a single sequence.

        Lists, tuples, mappings and collections found among
        the values are unwrapped in place, left to right,
        and the result is indexed from ``0``. Keys of the
        nested mappings are discarded.

        ``depth`` is how many levels of nesting are unwrapped,
        containers that are deeper than that are kept as they are.
        Use ``math.inf`` to flatten everything:

        >>> from keyedcollection import Collection
        >>> nested = Collection([1, 2, 3, [4, 5, [6, 7]]])
        >>> nested.flatten().to_list()
        [1, 2, 3, 4, 5, [6, 7]]
        >>> nested.flatten(math.inf).to_list()
        [1, 2, 3, 4, 5, 6, 7]
        """
        result: list[Any] = []
        # Stack of (value, remaining depth), the top of the stack is the
        # next value in order. Unwrapped containers push their values back
        # on top so that they take the position of the container itself.
        stack: list[tuple[Any, int | float]] = [
            (value, depth) for value in reversed(self._values())
        ]
        while stack:
            value, budget = stack.pop()
            if budget > 0 and is_nested(value):
                stack.extend(
                    (nested, budget - 1) for nested in reversed(nested_values(value))
                )
            else:
                result.append(value)
        return self._new(result)
