"""Pipeline: ordered, caller-owned list of transformer invocations."""

from __future__ import annotations

from typing import Iterable, Iterator

from powerstrings.core.ir import TransformerInvocation


class Pipeline:
    """List-backed sequence of invocations applied in insertion order.

    Invocations are immutable, so argument edits swap in a new invocation
    at the same position.
    """

    def __init__(self, invocations: Iterable[TransformerInvocation] = ()) -> None:
        self._invocations: list[TransformerInvocation] = list(invocations)

    def append(self, invocation: TransformerInvocation) -> TransformerInvocation:
        """Add an invocation at the end. Returns the invocation."""
        self._invocations.append(invocation)
        return invocation

    def update_arguments(self, index: int, arguments: list[str] | tuple[str, ...]) -> TransformerInvocation:
        """Replace the whole argument sequence of the invocation at ``index``."""
        updated = self._invocations[index].with_arguments(arguments)
        self._invocations[index] = updated
        return updated

    def remove(self, index: int) -> TransformerInvocation:
        """Remove and return the invocation at ``index``."""
        return self._invocations.pop(index)

    def clear(self) -> None:
        self._invocations.clear()

    def replace(self, invocations: Iterable[TransformerInvocation]) -> None:
        """Swap in a whole new list of invocations (e.g. after decoding a token)."""
        self._invocations = list(invocations)

    def clone(self) -> "Pipeline":
        """Shallow-copy the pipeline. Invocations are immutable so sharing is safe."""
        return Pipeline(self._invocations)

    def ids(self) -> list[str]:
        """Transformer ids in application order."""
        return [inv.transformer_id for inv in self._invocations]

    @property
    def invocations(self) -> list[TransformerInvocation]:
        return list(self._invocations)

    def __getitem__(self, index: int) -> TransformerInvocation:
        return self._invocations[index]

    def __iter__(self) -> Iterator[TransformerInvocation]:
        return iter(list(self._invocations))

    def __len__(self) -> int:
        return len(self._invocations)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pipeline):
            return NotImplemented
        return self._invocations == other._invocations

    def __repr__(self) -> str:
        steps = " | ".join(inv.describe() for inv in self._invocations)
        return f"Pipeline({steps})"
