from __future__ import annotations

import json
from typing import Any, Dict, List

from .errors import FormatError
from .records import describe_json_type, resolve_records

FlatRow = Dict[str, str]


def render_scalar(value: Any) -> str:
    """Text stored in a cell for a JSON leaf value."""
    if value is None:
        return ''
    if isinstance(value, str):
        return value
    return json.dumps(value)


def render_array(value: List[Any]) -> str:
    return json.dumps(value, ensure_ascii=False, separators=(',', ':'))


def _flatten_into(prefix: str, node: Any, out: FlatRow) -> None:
    if isinstance(node, dict):
        for key, value in node.items():
            child_key = f"{prefix}.{key}" if prefix else key
            _flatten_into(child_key, value, out)
    elif isinstance(node, list):
        # Arrays stay whole, as JSON text in one cell.
        out[prefix] = render_array(node)
    else:
        out[prefix] = render_scalar(node)


def flatten_record(record: Dict[str, Any]) -> FlatRow:
    """Flatten one JSON object into an ordered dotted-path -> text mapping.

    Nested objects contribute ``parent.child`` keys in source order, arrays are
    kept as compact JSON text, null becomes an empty string. An empty object
    contributes no key.
    """
    if not isinstance(record, dict):
        raise FormatError(f"Invalid format: record must be an object, got {describe_json_type(record)}.")
    row: FlatRow = {}
    try:
        _flatten_into('', record, row)
    except RecursionError as exc:
        raise FormatError("Invalid format: record is nested too deeply.") from exc
    return row


def flatten_batch(data: Any) -> List[FlatRow]:
    """Flatten a document root (object or array of objects) into rows."""
    return [flatten_record(record) for record in resolve_records(data)]
