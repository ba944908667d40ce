"""Pre-checks for JSON input files.

Only validates; nothing here converts or writes.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from .errors import ConversionError, ValidationError
from .io_utils import read_json_content

logger = logging.getLogger(__name__)


def is_valid_json_file(path) -> bool:
    """Quick check: the path exists, is a regular file and ends with .json.

    Does not look at the file contents.
    """
    if path is None or not str(path).strip():
        return False
    path = os.fspath(path)
    return os.path.isfile(path) and path.lower().endswith('.json')


def validate_json_file(path) -> Optional[str]:
    """Run every check on ``path``.

    Returns None when the file is usable, otherwise a message describing the
    first failed check.
    """
    message = _first_failure(path)
    if message is not None:
        logger.warning("Validation error: %s", message)
    return message


def validate_or_raise(path) -> None:
    message = validate_json_file(path)
    if message is not None:
        raise ValidationError(message)


def _first_failure(path) -> Optional[str]:
    if path is None or not str(path).strip():
        return "no file path provided."
    path = os.fspath(path)

    if not os.path.exists(path):
        return f"file not found -> {path}"
    if not os.path.isfile(path):
        return f"path is not a regular file -> {path}"
    if not path.lower().endswith('.json'):
        return f"file does not have a .json extension -> {path}"
    if not os.access(path, os.R_OK):
        return f"file is not readable (permissions?) -> {path}"

    try:
        size = os.path.getsize(path)
    except OSError as exc:
        return f"unable to access file metadata -> {path} ({exc})"
    if size == 0:
        return f"file is empty -> {path}"

    try:
        root = read_json_content(path)
    except ConversionError as exc:
        return f"cannot parse {path}: {exc}"

    if not isinstance(root, (dict, list)):
        return (
            "JSON root is not an object or array. "
            f"Expected a JSON object or an array of objects. -> {path}"
        )
    return None
