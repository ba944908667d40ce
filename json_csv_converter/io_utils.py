from __future__ import annotations

import json
import logging
import os
from typing import Any, Union

from .errors import ConversionIOError, FormatError, InvalidInputError, JsonSyntaxError

logger = logging.getLogger(__name__)


def _reject_constant(name: str):
    raise JsonSyntaxError(f"Invalid JSON: non-standard constant {name}")


def parse_json_bytes(data: Union[bytes, str]) -> Any:
    """Parse a JSON document into plain Python values.

    Object key order is preserved by ``dict``. NaN and Infinity are rejected,
    they are not part of JSON.
    """
    if isinstance(data, bytes):
        try:
            data = data.decode('utf-8-sig')
        except UnicodeDecodeError as exc:
            raise JsonSyntaxError(f"Invalid JSON: input is not UTF-8 ({exc.reason})") from exc
    elif data.startswith('\ufeff'):
        data = data[1:]

    try:
        return json.loads(data, parse_constant=_reject_constant)
    except JsonSyntaxError:
        raise
    except json.JSONDecodeError as exc:
        raise JsonSyntaxError(f"Invalid JSON: {exc.msg}", exc.lineno, exc.colno) from exc
    except RecursionError as exc:
        raise FormatError("Invalid format: document is nested too deeply.") from exc
    except ValueError as exc:
        # e.g. integers longer than the interpreter's digit limit
        raise FormatError(f"Invalid format: {exc}") from exc


def resolve_input_path(file_obj) -> str:
    """Return the filesystem path behind an upload, a file object or a path."""
    if file_obj is None:
        raise InvalidInputError("No file uploaded.")
    if isinstance(file_obj, (str, bytes, os.PathLike)):
        return os.fsdecode(file_obj)
    return os.fsdecode(file_obj.name)


def read_json_content(file_obj):
    """Read JSON content from an uploaded file or file path."""
    if file_obj is None:
        raise InvalidInputError("No file uploaded.")

    if hasattr(file_obj, 'read'):
        if hasattr(file_obj, 'seek'):
            file_obj.seek(0)
        try:
            content = file_obj.read()
        except OSError as exc:
            raise ConversionIOError(f"Could not read input: {exc}") from exc
        return parse_json_bytes(content)

    path = resolve_input_path(file_obj)
    logger.debug("Reading JSON from %s", path)
    try:
        with open(path, 'rb') as f:
            content = f.read()
    except FileNotFoundError as exc:
        raise ConversionIOError(f"File not found: {path}") from exc
    except OSError as exc:
        raise ConversionIOError(f"Could not read {path}: {exc}") from exc
    return parse_json_bytes(content)
