"""Index-selection mini-language used by ``slice_array``.

Grammar (after removing spaces and line breaks):
  ``start-end``   keep the half-open interval [start, end)
  ``i,j,k``       remove the elements at i, j and k
  ``i``           remove the element at i

Malformed input never raises: it selects the whole array unchanged, since
the text is typed interactively and is often incomplete.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Protocol

_LEADING_INT = re.compile(r"[+-]?[0-9]+")
_LINE_BREAKS = re.compile(r"\r\n|\n")


def parse_int(text: str) -> int | None:
    """Parse a decimal integer prefix the way browsers' ``parseInt(text, 10)`` do.

    Leading whitespace is skipped and trailing garbage ignored: ``"12abc"``
    is 12. Returns None (not-a-number) when no digits lead the text.
    """
    match = _LEADING_INT.match(text.lstrip())
    if match is None:
        return None
    return int(match.group())


def _bound(text: str) -> int:
    # A not-a-number slice bound behaves as 0
    parsed = parse_int(text)
    return 0 if parsed is None else parsed


class IndexSelection(Protocol):
    def apply(self, array: list[Any]) -> list[Any]: ...


@dataclass(frozen=True)
class KeepAll:
    """No-op selection produced by malformed input."""

    def apply(self, array: list[Any]) -> list[Any]:
        return list(array)


@dataclass(frozen=True)
class KeepRange:
    """Keep ``array[start:end]`` with Python slice clamping."""

    start: int
    end: int

    def apply(self, array: list[Any]) -> list[Any]:
        return list(array[self.start:self.end])


@dataclass(frozen=True)
class RemoveIndexes:
    """Remove the listed positions, keeping the rest in order.

    Not-a-number, negative and out-of-range entries remove nothing.
    """

    indexes: tuple[int | None, ...]

    def apply(self, array: list[Any]) -> list[Any]:
        doomed = {i for i in self.indexes if i is not None and 0 <= i < len(array)}
        return [item for pos, item in enumerate(array) if pos not in doomed]


def normalize_index_spec(raw: str) -> str:
    return _LINE_BREAKS.sub("", raw.replace(" ", ""))


def parse_index_spec(raw: str) -> IndexSelection:
    """Parse an index spec into a selection. Never raises."""
    text = normalize_index_spec(raw)

    if "-" in text:
        parts = text.split("-")
        if len(parts) != 2:
            return KeepAll()
        return KeepRange(start=_bound(parts[0]), end=_bound(parts[1]))

    if "," in text:
        return RemoveIndexes(indexes=tuple(parse_int(part) for part in text.split(",")))

    index = parse_int(text)
    if index is None:
        return KeepAll()
    return RemoveIndexes(indexes=(index,))
