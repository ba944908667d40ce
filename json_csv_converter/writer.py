from __future__ import annotations

import csv
import io
import logging
import os
from pathlib import Path
from typing import Dict, List, Sequence, Union

from .errors import AlreadyExistsError, ConversionIOError, InvalidInputError

logger = logging.getLogger(__name__)

# CRLF on every platform. csv quotes fields holding any terminator character,
# so a bare CR or LF inside a value is always quoted.
LINE_TERMINATOR = '\r\n'
QUOTE_CHAR = '"'


def collect_headers(rows: Sequence[Dict[str, str]]) -> List[str]:
    """Union of the row keys, in the order each key is first seen."""
    headers: List[str] = []
    seen = set()
    for row in rows:
        for key in row:
            if key not in seen:
                seen.add(key)
                headers.append(key)
    return headers


def check_delimiter(delimiter: str) -> str:
    if not isinstance(delimiter, str) or len(delimiter) != 1:
        raise InvalidInputError(f"Delimiter must be a single character, got {delimiter!r}.")
    if delimiter in (QUOTE_CHAR, '\r', '\n'):
        raise InvalidInputError(f"Delimiter {delimiter!r} cannot be used.")
    return delimiter


def render_csv(rows: Sequence[Dict[str, str]], headers: List[str], delimiter: str = ',') -> str:
    """Serialize header and rows to CSV text.

    Fields holding the delimiter, a quote or a line break are quoted, with
    inner quotes doubled. Missing keys are written as empty fields.
    """
    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        delimiter=delimiter,
        quotechar=QUOTE_CHAR,
        doublequote=True,
        quoting=csv.QUOTE_MINIMAL,
        lineterminator=LINE_TERMINATOR,
    )
    writer.writerow(headers)
    for idx, row in enumerate(rows):
        values = []
        for key in headers:
            value = row.get(key, '')
            if not isinstance(value, str):
                raise InvalidInputError(
                    f"Row {idx} has a non-text value for {key!r} ({type(value).__name__})."
                )
            values.append(value)
        writer.writerow(values)
    return buffer.getvalue()


def write_csv(rows: Sequence[Dict[str, str]], destination: Union[str, os.PathLike], delimiter: str = ',') -> None:
    """Write flattened rows to a new CSV file.

    The destination must not exist. The file is either written completely or
    not left behind at all.
    """
    if not rows:
        raise InvalidInputError("No data available to write into CSV.")
    check_delimiter(delimiter)

    headers = collect_headers(rows)
    content = render_csv(rows, headers, delimiter)

    out = Path(destination)
    try:
        out.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ConversionIOError(f"Could not create directory {out.parent}: {exc}") from exc

    try:
        f = open(out, 'x', newline='', encoding='utf-8')
    except FileExistsError as exc:
        raise AlreadyExistsError(
            f"File already exists: {out}. Please choose another name or delete it manually."
        ) from exc
    except OSError as exc:
        raise ConversionIOError(f"Could not create {out}: {exc}") from exc

    try:
        with f:
            f.write(content)
    except (OSError, UnicodeError) as exc:
        logger.warning("Removing partially written file %s", out)
        try:
            out.unlink()
        except FileNotFoundError:
            pass
        raise ConversionIOError(f"Could not write {out}: {exc}") from exc

    logger.debug("Wrote %d rows and %d columns to %s", len(rows), len(headers), out)
