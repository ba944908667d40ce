from __future__ import annotations

import logging
from typing import Optional

from . import config
from .errors import InvalidInputError
from .flattening import flatten_batch
from .io_utils import read_json_content
from .writer import check_delimiter, write_csv

logger = logging.getLogger(__name__)

_NAMED_DELIMITERS = {
    '\\t': '\t',
    'tab': '\t',
    'comma': ',',
    'semicolon': ';',
    'pipe': '|',
}


def parse_delimiter(text: Optional[str]) -> str:
    """Turn user-typed delimiter text into a single character.

    Empty input means the default comma. ``\\t`` and ``tab`` mean a tab.
    """
    if text is None or text == '':
        return config.DEFAULT_DELIMITER
    named = _NAMED_DELIMITERS.get(text.lower())
    if named is not None:
        return named
    if len(text) != 1:
        raise InvalidInputError(f"Delimiter must be a single character, got {text!r}.")
    return check_delimiter(text)


def convert(input_path, output_path, delimiter: str = ',') -> int:
    """Convert a JSON file into a new CSV file.

    Returns the number of data rows written.
    """
    logger.debug("Converting %s -> %s (delimiter %r)", input_path, output_path, delimiter)
    data = read_json_content(input_path)
    rows = flatten_batch(data)
    write_csv(rows, output_path, delimiter)
    logger.info("Converted %d records from %s to %s", len(rows), input_path, output_path)
    return len(rows)
