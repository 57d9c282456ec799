"""Pipeline token encode/decode and file helpers.

A token is a compact JSON array of ``{"i": <transformer id>, "a": [<arg>, ...]}``
records in application order, small enough to embed in a URL query string.
There is no version field: decoding is strict and fails on anything it
cannot reconstruct exactly.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from powerstrings.core.errors import DecodeError, DecodeReason
from powerstrings.core.ir import TransformerInvocation
from powerstrings.core.pipeline import Pipeline
from powerstrings.transforms.catalog import CATALOG, Catalog

logger = logging.getLogger(__name__)


def encode(pipeline: Pipeline) -> str:
    """Serialize a pipeline to its token string."""
    records = [
        {"i": inv.transformer_id, "a": list(inv.arguments)}
        for inv in pipeline
    ]
    return json.dumps(records, separators=(",", ":"), ensure_ascii=False)


def _decode_record(position: int, record: Any, catalog: Catalog) -> TransformerInvocation:
    if not isinstance(record, dict) or record.get("i") is None:
        raise DecodeError(DecodeReason.MISSING_FIELD, "transformer id missing", position)
    args = record.get("a")
    if not isinstance(args, list):
        raise DecodeError(
            DecodeReason.MISSING_FIELD, "transformer arguments missing or not an array", position,
        )

    transformer_id = record["i"]
    if not all(isinstance(a, str) for a in args):
        raise DecodeError(
            DecodeReason.NON_STRING_ARGUMENT,
            f"transformer {transformer_id!r} has a non-string argument",
            position,
        )

    definition = catalog.lookup(transformer_id) if isinstance(transformer_id, str) else None
    if definition is None:
        raise DecodeError(
            DecodeReason.UNKNOWN_ID, f"transformer {transformer_id!r} not found", position,
        )

    try:
        return TransformerInvocation(definition=definition, arguments=tuple(args))
    except ValidationError as exc:
        raise DecodeError(
            DecodeReason.ARITY_MISMATCH,
            f"transformer {transformer_id!r} expects {definition.arity} "
            f"argument(s), got {len(args)}",
            position,
        ) from exc


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON value")


def decode(token: str, catalog: Catalog = CATALOG) -> Pipeline:
    """Rebuild a pipeline from a token. Raises DecodeError on any defect."""
    try:
        data = json.loads(token, parse_constant=_reject_constant)
    except (ValueError, TypeError, RecursionError) as exc:
        raise DecodeError(DecodeReason.MALFORMED_STRUCTURE, f"not valid JSON ({exc})") from exc

    if not isinstance(data, list):
        raise DecodeError(
            DecodeReason.MALFORMED_STRUCTURE,
            f"top level must be an array, got {type(data).__name__}",
        )

    invocations = [_decode_record(pos, record, catalog) for pos, record in enumerate(data)]
    logger.debug("Decoded pipeline with %d step(s)", len(invocations))
    return Pipeline(invocations)


def export_pipeline(pipeline: Pipeline, path: str | Path) -> None:
    """Write a pipeline token to a file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(encode(pipeline) + "\n", encoding="utf-8")


def import_pipeline(path: str | Path, catalog: Catalog = CATALOG) -> Pipeline:
    """Read a pipeline token file. Surrounding whitespace is ignored."""
    path = Path(path)
    return decode(path.read_text(encoding="utf-8").strip(), catalog)
