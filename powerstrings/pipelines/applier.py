"""Depth-adaptive application of one invocation to a value.

- string-targeted transformers reach every leaf string, whatever the depth;
- array-targeted transformers walk down to the innermost arrays (rows) and
  act there, never on the outer grouping;
- an array-targeted transformer cannot be applied to a bare string.
"""

from __future__ import annotations

from typing import Any

from powerstrings.core.errors import (
    MixedDepthError,
    PowerStringsError,
    TransformerFailure,
    TypeMismatch,
)
from powerstrings.core.ir import Shape, TransformerInvocation
from powerstrings.core.value import Value, is_array, is_innermost, is_leaf, is_uniform


def _call(value: Any, invocation: TransformerInvocation) -> Value:
    definition = invocation.definition
    try:
        return definition.func(value, *invocation.arguments)
    except PowerStringsError:
        raise
    except Exception as exc:
        raise TransformerFailure(definition.id, exc) from exc


def apply_invocation(value: Value, invocation: TransformerInvocation) -> Value:
    """Apply ``invocation`` to ``value``, returning a new value.

    Raises TypeMismatch for unsupported shapes, MixedDepthError when an
    array-targeted transformer meets a level mixing strings and arrays, and
    TransformerFailure when the transformer body itself fails.
    """
    definition = invocation.definition

    if is_leaf(value):
        if definition.target is Shape.ARRAY:
            raise TypeMismatch(
                definition.id,
                "an array transformer cannot be applied to a string",
            )
        return _call(value, invocation)

    if not is_array(value):
        raise TypeMismatch(
            definition.id,
            f"value must be a string or an array, got {type(value).__name__}",
        )

    if definition.target is Shape.STRING:
        return [apply_invocation(item, invocation) for item in value]

    if not is_uniform(value):
        raise MixedDepthError(definition.id)
    if is_innermost(value):
        return _call(list(value), invocation)
    return [apply_invocation(item, invocation) for item in value]
