"""String-targeted transformer bodies. Each takes a leaf string first."""

from __future__ import annotations

from powerstrings.transforms.indices import parse_int
from powerstrings.transforms.patterns import (
    PatternMode,
    replace_all,
    split_by,
    translate,
)


def split(value: str, separator: str) -> list[str]:
    return split_by(value, translate(separator, PatternMode.SPLIT))


def replace(value: str, pattern: str, replacement: str) -> str:
    return replace_all(value, translate(pattern, PatternMode.REPLACE), replacement)


def trim(value: str) -> str:
    return value.strip()


def lower_case(value: str) -> str:
    return value.lower()


def upper_case(value: str) -> str:
    return value.upper()


def slice_string(value: str, start: str, end: str) -> str:
    """Substring in [start, end). Unparseable bounds count as 0, negatives
    count from the end.

    Bounds are UTF-16 code unit offsets, the same units ``sort`` compares by,
    so a character outside the BMP takes two positions.
    """
    units = value.encode("utf-16-le", "surrogatepass")
    bounds = slice(parse_int(start) or 0, parse_int(end) or 0)
    first, stop, _ = bounds.indices(len(units) // 2)
    if stop <= first:
        return ""
    return units[2 * first:2 * stop].decode("utf-16-le", "surrogatepass")
