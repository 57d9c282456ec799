"""Closed catalog of transformer definitions.

The catalog is a fixed table built once at import. Definition ids are the
only identifiers that appear in pipeline tokens, so renaming or removing one
breaks previously issued tokens.
"""

from __future__ import annotations

from typing import Iterable, Iterator

from powerstrings.core.ir import (
    ArgumentSpec,
    Shape,
    TransformerDefinition,
    TransformerInvocation,
)
from powerstrings.transforms import arrays, strings

_WILDCARD_HINT = "Use %w% as wildcard"


class Catalog:
    """Read-only, ordered registry of transformer definitions keyed by id."""

    def __init__(self, definitions: Iterable[TransformerDefinition]) -> None:
        self._by_id: dict[str, TransformerDefinition] = {}
        for definition in definitions:
            if definition.id in self._by_id:
                raise ValueError(f"Duplicate transformer id: {definition.id}")
            self._by_id[definition.id] = definition

    def lookup(self, transformer_id: str) -> TransformerDefinition | None:
        """Definition for ``transformer_id``, or None if the catalog has none."""
        return self._by_id.get(transformer_id)

    def all(self) -> tuple[TransformerDefinition, ...]:
        """All definitions in declaration (display) order."""
        return tuple(self._by_id.values())

    def ids(self) -> list[str]:
        return list(self._by_id)

    def invoke(self, transformer_id: str, *arguments: str) -> TransformerInvocation:
        """Build an invocation of a catalog transformer.

        Raises KeyError for unknown ids.
        """
        definition = self.lookup(transformer_id)
        if definition is None:
            raise KeyError(f"Unknown transformer id: {transformer_id!r}")
        return TransformerInvocation(definition=definition, arguments=arguments)

    def __contains__(self, transformer_id: object) -> bool:
        return transformer_id in self._by_id

    def __iter__(self) -> Iterator[TransformerDefinition]:
        return iter(self.all())

    def __len__(self) -> int:
        return len(self._by_id)


CATALOG = Catalog([
    TransformerDefinition(
        id="split",
        target=Shape.STRING,
        returns=Shape.ARRAY,
        name="Split",
        description="Split the string at the occurrences of the given Separator.",
        icon="cut",
        args=(ArgumentSpec(name="Separator", placeholder=_WILDCARD_HINT),),
        func=strings.split,
    ),
    TransformerDefinition(
        id="replace",
        target=Shape.STRING,
        returns=Shape.STRING,
        name="Replace",
        description="Replace all occurrences of Pattern with the Replacement content.",
        icon="find_replace",
        args=(
            ArgumentSpec(name="Pattern", placeholder=_WILDCARD_HINT),
            ArgumentSpec(
                name="Replacement",
                placeholder=(
                    "Use $& for matched and $n (n = %w% index, starting from 1) "
                    "for wildcarded substrings"
                ),
            ),
        ),
        func=strings.replace,
    ),
    TransformerDefinition(
        id="trim",
        target=Shape.STRING,
        returns=Shape.STRING,
        name="Trim",
        description="Remove leading and trailing spaces.",
        icon="space_bar",
        func=strings.trim,
    ),
    TransformerDefinition(
        id="lower_case",
        target=Shape.STRING,
        returns=Shape.STRING,
        name="Lower Case",
        description="Convert the string to lower case.",
        icon="arrow_downward",
        func=strings.lower_case,
    ),
    TransformerDefinition(
        id="upper_case",
        target=Shape.STRING,
        returns=Shape.STRING,
        name="Upper Case",
        description="Convert the string to upper case.",
        icon="arrow_upward",
        func=strings.upper_case,
    ),
    TransformerDefinition(
        id="slice",
        target=Shape.STRING,
        returns=Shape.STRING,
        name="Slice",
        description="Slice a section of the string, between Start and End indexes.",
        icon="carpenter",
        args=(
            ArgumentSpec(name="Start"),
            ArgumentSpec(name="End (exclusive)"),
        ),
        func=strings.slice_string,
    ),
    TransformerDefinition(
        id="slice_array",
        target=Shape.ARRAY,
        returns=Shape.ARRAY,
        name="Slice Array",
        description="Slice a section of the array, at the given Indexes.",
        icon="carpenter",
        args=(
            ArgumentSpec(
                name="Indexes to slice (use , for lists and - for intervals)",
                placeholder="List e.g.: 0,3,5\nInterval e.g.: 0-5",
            ),
        ),
        func=arrays.slice_array,
    ),
    TransformerDefinition(
        id="reverse",
        target=Shape.ARRAY,
        returns=Shape.ARRAY,
        name="Reverse",
        description="Reverse the array.",
        icon="restart_alt",
        func=arrays.reverse,
    ),
    TransformerDefinition(
        id="sort",
        target=Shape.ARRAY,
        returns=Shape.ARRAY,
        name="Sort",
        description="Sort the array.",
        icon="sort",
        func=arrays.sort,
    ),
    TransformerDefinition(
        id="join",
        target=Shape.ARRAY,
        returns=Shape.STRING,
        name="Join",
        description=(
            "Adds all the elements of the array into a string, separated by "
            "the specified Separator."
        ),
        icon="join",
        args=(ArgumentSpec(name="Separator"),),
        func=arrays.join,
    ),
])
