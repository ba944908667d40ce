from __future__ import annotations

from typing import Any, Dict, List

from .errors import FormatError


def describe_json_type(value: Any) -> str:
    if value is None:
        return 'null'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, (int, float)):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, list):
        return 'array'
    if isinstance(value, dict):
        return 'object'
    return type(value).__name__


def resolve_records(data: Any) -> List[Dict[str, Any]]:
    """Resolve a document root into the list of records it holds.

    - dict -> one record
    - list[dict] -> one record per element
    Anything else, including a list element that is not an object, raises
    FormatError.
    """
    if isinstance(data, dict):
        return [data]

    if isinstance(data, list):
        for idx, entry in enumerate(data):
            if not isinstance(entry, dict):
                raise FormatError(
                    f"Invalid format: element at index {idx} is a {describe_json_type(entry)}, expected an object.",
                    index=idx,
                )
        return data

    raise FormatError(
        f"Invalid format: root must be an object or an array of objects, got {describe_json_type(data)}."
    )
