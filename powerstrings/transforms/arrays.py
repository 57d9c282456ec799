"""Array-targeted transformer bodies.

Each receives an innermost array (a list of strings) and never mutates it.
"""

from __future__ import annotations

from powerstrings.transforms.indices import parse_index_spec, parse_int


def slice_array(value: list[str], indexes: str) -> list[str]:
    return parse_index_spec(indexes).apply(value)


def reverse(value: list[str]) -> list[str]:
    return list(reversed(value))


def _utf16_key(item: str) -> bytes:
    # Browser default sort compares UTF-16 code units, not code points
    return item.encode("utf-16-be", "surrogatepass")


def sort(value: list[str]) -> list[str]:
    """Numeric ascending if every element starts with an integer, else string order.

    Both orders are stable.
    """
    if all(parse_int(item) is not None for item in value):
        return sorted(value, key=parse_int)
    return sorted(value, key=_utf16_key)


def join(value: list[str], separator: str) -> str:
    return separator.join(value)
