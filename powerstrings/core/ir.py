"""Core types for the transformation engine.

All objects are frozen Pydantic models — immutable after construction.
Editing an invocation's arguments means building a new invocation.
"""

from __future__ import annotations

import enum
import inspect
from typing import Any, Callable

from pydantic import BaseModel, Field, model_validator


class Shape(str, enum.Enum):
    """Shape of a value at the point a transformer touches it."""

    STRING = "string"
    ARRAY = "array"


class ArgumentSpec(BaseModel):
    """Display-only description of one transformer argument."""

    model_config = {"frozen": True}

    name: str
    placeholder: str = ""


def _positional_arity(func: Callable[..., Any]) -> int:
    params = inspect.signature(func).parameters.values()
    positional = [
        p for p in params
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD)
    ]
    # First parameter is the value being transformed
    return len(positional) - 1


class TransformerDefinition(BaseModel):
    """A named, pure operation from one value shape to another.

    ``func`` is called as ``func(value, *arguments)`` where ``value`` has
    shape ``target`` and the result has shape ``returns``.
    """

    model_config = {"frozen": True}

    id: str
    target: Shape
    returns: Shape
    name: str
    description: str = ""
    icon: str = ""
    args: tuple[ArgumentSpec, ...] = Field(default_factory=tuple)
    func: Callable[..., Any]

    @model_validator(mode="after")
    def _check_arity(self) -> "TransformerDefinition":
        expected = _positional_arity(self.func)
        if expected != len(self.args):
            raise ValueError(
                f"Transformer {self.id!r} declares {len(self.args)} argument(s) "
                f"but its function takes {expected}"
            )
        return self

    @property
    def arity(self) -> int:
        return len(self.args)

    def signature(self) -> str:
        """Short ``target -> returns`` label."""
        return f"{self.target.value} -> {self.returns.value}"


class TransformerInvocation(BaseModel):
    """A transformer paired with concrete argument values."""

    model_config = {"frozen": True}

    definition: TransformerDefinition
    arguments: tuple[str, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _check_argument_count(self) -> "TransformerInvocation":
        if len(self.arguments) != self.definition.arity:
            raise ValueError(
                f"Transformer {self.definition.id!r} expects "
                f"{self.definition.arity} argument(s), got {len(self.arguments)}"
            )
        return self

    @property
    def transformer_id(self) -> str:
        return self.definition.id

    def with_arguments(self, arguments: list[str] | tuple[str, ...]) -> "TransformerInvocation":
        """Return a new invocation of the same transformer with new arguments."""
        return TransformerInvocation(definition=self.definition, arguments=tuple(arguments))

    def describe(self) -> str:
        """Human-readable one-liner, e.g. ``split(',')``."""
        rendered = ", ".join(repr(a) for a in self.arguments)
        return f"{self.definition.id}({rendered})"
