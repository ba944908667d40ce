from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Any, List, Optional

import gradio as gr

from . import config
from .converter import convert, parse_delimiter
from .errors import ConversionError
from .flattening import flatten_batch
from .io_utils import read_json_content, resolve_input_path
from .validation import is_valid_json_file, validate_json_file

logger = logging.getLogger(__name__)


def suggest_output_path(file_obj) -> str:
    stem = Path(resolve_input_path(file_obj)).stem or "output"
    return os.path.join(config.EXPORT_DIR, f"{stem}.csv")


def download_roots() -> List[str]:
    """Folders Gradio will serve files from (see allowed_paths in app.py)."""
    return [os.getcwd(), tempfile.gettempdir(), config.EXPORT_DIR]


def is_downloadable(path) -> bool:
    target = os.path.realpath(path)
    for root in download_roots():
        root = os.path.realpath(root)
        try:
            if os.path.commonpath([target, root]) == root:
                return True
        except ValueError:
            # different drives on Windows
            continue
    return False


def compute_document_count_text(rows: Optional[List[Any]]) -> str:
    if rows is None:
        return ""
    return f"Documents: {len(rows)}"


def append_log(log_text: Optional[str], line: str) -> str:
    if not log_text:
        return line
    return f"{log_text}\n{line}"


def load_json_with_preview(file_obj, current_output: Optional[str] = None):
    """Handle an upload: status, document count, preview and suggested output."""
    if file_obj is None:
        return "No file uploaded.", "", None, gr.update()

    try:
        data = read_json_content(file_obj)
        rows = flatten_batch(data)
    except ConversionError as e:
        return f"Error loading JSON: {e}", "", None, gr.update()

    preview = rows[:max(1, int(config.PREVIEW_LIMIT))]
    columns = len({key for row in rows for key in row})
    message = f"Successfully loaded. Found {columns} columns."

    if current_output and current_output.strip():
        output_update = gr.update()
    else:
        output_update = gr.update(value=suggest_output_path(file_obj))
    return message, compute_document_count_text(rows), preview or None, output_update


def convert_handler(file_obj, output_path, delimiter_text, overwrite, log_text=None):
    """Run a conversion from the web form.

    Returns (download path or None, updated log text).
    """
    if file_obj is None:
        return None, append_log(log_text, "Please provide an input JSON file.")
    if not output_path or not output_path.strip():
        return None, append_log(log_text, "Please provide an output CSV path.")
    output_path = output_path.strip()

    input_path = resolve_input_path(file_obj)
    if not is_valid_json_file(input_path):
        problem = validate_json_file(input_path) or f"not a .json file -> {input_path}"
        return None, append_log(log_text, f"Validation failed: {problem}")

    try:
        delimiter = parse_delimiter(delimiter_text)
    except ConversionError as e:
        return None, append_log(log_text, f"Error: {e}")

    if os.path.exists(output_path):
        if not overwrite:
            return None, append_log(
                log_text,
                f"Output file already exists: {output_path}. Tick 'Overwrite if exists' to replace it.",
            )
        try:
            os.remove(output_path)
        except OSError as e:
            return None, append_log(log_text, f"Could not remove existing output: {e}")
        log_text = append_log(log_text, f"Removed existing output: {output_path}")

    try:
        rows = convert(input_path, output_path, delimiter)
    except ConversionError as e:
        logger.warning("Conversion of %s failed: %s", input_path, e)
        return None, append_log(log_text, f"Error during conversion: {e}")

    log_text = append_log(log_text, f"Conversion complete. Rows processed: {rows}. Generated file: {output_path}")
    if not is_downloadable(output_path):
        return None, append_log(
            log_text,
            f"Download unavailable: {output_path} is outside the working, temp and {config.EXPORT_DIR} folders.",
        )
    return output_path, log_text
