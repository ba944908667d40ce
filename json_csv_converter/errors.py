from __future__ import annotations

from typing import Optional


class ConversionError(Exception):
    """Base class for every failure raised by the converter."""


class JsonSyntaxError(ConversionError, ValueError):
    """Input bytes are not well-formed JSON."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
        if line is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)
        self.line = line
        self.column = column


class FormatError(ConversionError, ValueError):
    """JSON is valid but its shape cannot be turned into rows."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index


class InvalidInputError(ConversionError, ValueError):
    pass


class AlreadyExistsError(ConversionError, FileExistsError):
    pass


class ConversionIOError(ConversionError, OSError):
    pass


class ValidationError(ConversionError, ValueError):
    """Raised by validate_or_raise when an input file fails a pre-check."""
