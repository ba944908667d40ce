#!/usr/bin/env python3
"""Command-line front-end for the JSON to CSV converter.

Usage:
    json-csv-converter data.json --output exports/data.csv --delimiter ';'
    json-csv-converter --input=data.json --delimiter='\\t' --no-prompt

With no input argument the defaults from config.py are shown and, unless
--no-prompt is given, the user may type other paths.
"""
from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import config
from .converter import convert, parse_delimiter
from .errors import (
    AlreadyExistsError,
    ConversionError,
    ConversionIOError,
    FormatError,
    InvalidInputError,
    JsonSyntaxError,
    ValidationError,
)
from .validation import validate_or_raise

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='json-csv-converter',
        description='Convert a JSON object or array of objects into a CSV file.',
    )
    parser.add_argument('input_pos', nargs='?', metavar='input', help='Input JSON file')
    parser.add_argument('--input', dest='input', help='Input JSON file (takes precedence over the positional argument)')
    parser.add_argument('-o', '--output', help=f'Output CSV file (default: {config.DEFAULT_OUTPUT})')
    parser.add_argument('-d', '--delimiter', help="Field delimiter, e.g. ',' ';' or '\\t' (default: ',')")
    parser.add_argument('--no-prompt', action='store_true', help='Never ask for paths interactively')
    parser.add_argument('--overwrite', action='store_true', help='Delete the output file first if it exists')
    parser.add_argument('--log-level', default=config.LOG_LEVEL, help='Logging level (default: %(default)s)')
    return parser


def prompt_for_paths(input_path: str, output_path: str, delimiter: str):
    print("Welcome to the JSON -> CSV Converter")
    print("No input given, using default values:")
    print(f"Input:     {input_path}")
    print(f"Output:    {output_path}")
    print(f"Delimiter: {delimiter!r}")
    answer = input("Do you want to use different paths? (y/n) ").strip().lower()
    if answer == 'y':
        entered = input("Input JSON file path: ").strip()
        if entered:
            input_path = entered
        entered = input("Output CSV file path: ").strip()
        if entered:
            output_path = entered
    return input_path, output_path


def describe_error(exc: ConversionError) -> str:
    if isinstance(exc, JsonSyntaxError):
        return f"The input is not valid JSON: {exc}"
    if isinstance(exc, FormatError):
        return f"The JSON cannot be converted to rows: {exc}"
    if isinstance(exc, AlreadyExistsError):
        return f"{exc} Use --overwrite to replace it."
    if isinstance(exc, InvalidInputError):
        return f"Nothing to convert: {exc}"
    if isinstance(exc, ConversionIOError):
        return f"File error: {exc}"
    return str(exc)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format=config.LOG_FORMAT)

    input_path = args.input or args.input_pos
    output_path = args.output or config.DEFAULT_OUTPUT

    try:
        delimiter = parse_delimiter(args.delimiter)
    except InvalidInputError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    if input_path is None:
        input_path = config.DEFAULT_INPUT
        if not args.no_prompt:
            input_path, output_path = prompt_for_paths(input_path, output_path, delimiter)

    try:
        validate_or_raise(input_path)
    except ValidationError as exc:
        print(f"Error: no valid JSON file found at: {input_path}", file=sys.stderr)
        print(f"Validation error: {exc}", file=sys.stderr)
        return 2

    if args.overwrite and os.path.exists(output_path):
        logger.info("Removing existing output %s", output_path)
        try:
            os.remove(output_path)
        except OSError as exc:
            print(f"Error: could not remove {output_path}: {exc}", file=sys.stderr)
            return 1

    try:
        rows = convert(input_path, output_path, delimiter)
    except ConversionError as exc:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error during conversion: {describe_error(exc)}", file=sys.stderr)
        return 1

    print(f"Conversion complete. Rows processed: {rows}")
    print(f"Generated file: {output_path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
