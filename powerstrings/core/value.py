"""Value model: a value is a leaf string or an array of values.

Arrays may nest to any depth. Tuples are accepted wherever an array is
expected; everything the engine produces uses plain lists.
"""

from __future__ import annotations

from typing import Any, Union

Value = Union[str, list["Value"]]


def is_leaf(value: Any) -> bool:
    return isinstance(value, str)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_innermost(array: list[Value] | tuple[Value, ...]) -> bool:
    """True when the array's first element is a leaf string.

    An empty array is not innermost: there is no level to act on yet.
    """
    return len(array) > 0 and is_leaf(array[0])


def is_uniform(array: list[Value] | tuple[Value, ...]) -> bool:
    """True when all elements share the first element's kind (leaf or array)."""
    if not array:
        return True
    first_is_leaf = is_leaf(array[0])
    return all(is_leaf(item) == first_is_leaf for item in array)

