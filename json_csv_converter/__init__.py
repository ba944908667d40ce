"""Core logic for the JSON to CSV Converter.

The Gradio UI lives in `app.py` and the command line in `cli.py`. This package
contains the pieces they share:
- parse JSON inputs
- flatten records into dotted-path rows
- write rows to a new CSV file
"""
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
from .flattening import flatten_batch, flatten_record
from .writer import collect_headers, write_csv

__all__ = [
    'AlreadyExistsError',
    'ConversionError',
    'ConversionIOError',
    'FormatError',
    'InvalidInputError',
    'JsonSyntaxError',
    'ValidationError',
    'collect_headers',
    'convert',
    'flatten_batch',
    'flatten_record',
    'parse_delimiter',
    'write_csv',
]
