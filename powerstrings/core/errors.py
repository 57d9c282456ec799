"""Error kinds raised by the transformation engine."""

from __future__ import annotations

import enum


class PowerStringsError(Exception):
    """Base class for every engine error."""


class TypeMismatch(PowerStringsError, TypeError):
    """Raised when a transformer is applied to a value of the wrong shape."""

    def __init__(self, transformer_id: str, detail: str) -> None:
        self.transformer_id = transformer_id
        self.detail = detail
        super().__init__(f"{transformer_id}: {detail}")


class MixedDepthError(TypeMismatch):
    """Raised when an array-targeted transformer meets an array that mixes
    strings with nested arrays, so no single level can be chosen."""

    def __init__(self, transformer_id: str) -> None:
        super().__init__(
            transformer_id,
            "array mixes strings and nested arrays at the same level",
        )


class TransformerFailure(PowerStringsError):
    """Raised when a transformer body fails on otherwise well-shaped input."""

    def __init__(self, transformer_id: str, cause: Exception) -> None:
        self.transformer_id = transformer_id
        self.cause = cause
        super().__init__(f"{transformer_id}: {type(cause).__name__}: {cause}")


class DecodeReason(str, enum.Enum):
    MALFORMED_STRUCTURE = "malformed-structure"
    MISSING_FIELD = "missing-field"
    NON_STRING_ARGUMENT = "non-string-argument"
    UNKNOWN_ID = "unknown-id"
    ARITY_MISMATCH = "arity-mismatch"


class DecodeError(PowerStringsError, ValueError):
    """Raised when a pipeline token cannot be decoded.

    Decoding is all-or-nothing: no partial pipeline is ever returned.
    """

    def __init__(self, reason: DecodeReason, detail: str, position: int | None = None) -> None:
        self.reason = reason
        self.detail = detail
        self.position = position
        where = f" (record {position})" if position is not None else ""
        super().__init__(f"cannot decode pipeline [{reason.value}]{where}: {detail}")
