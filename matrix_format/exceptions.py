"""
Custom exception hierarchy for matrix-format.

Callers can catch ``MatrixFormatError`` for anything raised by this
package, or a specific subclass:

- ``MatrixParseError`` is the single parse failure kind.  Every internal
  mismatch (delimiter, malformed number, empty matrix, unterminated
  structure) collapses into it at the throwing entry points.
- ``MatrixDimensionError`` covers non-2-D formatter input and ragged rows.
- ``ConfigValidationError`` covers semantic configuration problems.
"""

from __future__ import annotations


class MatrixFormatError(Exception):
    """Base exception for all matrix-format errors."""


class MatrixParseError(MatrixFormatError):
    """Raised when matrix text cannot be parsed.

    Attributes:
        source: The text that was being parsed.
        index: Offset at which parsing diverged from the expected
            structure, or ``None`` when no offset is known.
    """

    def __init__(self, source: str, index: int | None) -> None:
        self.source = source
        self.index = index
        super().__init__(
            f"Unparseable matrix {source!r} (error at index {index})"
        )


class MatrixDimensionError(MatrixFormatError):
    """Raised when a matrix is not a rectangular 2-D grid of numbers."""


class ConfigValidationError(MatrixFormatError):
    """Raised when a delimiter configuration is semantically invalid.

    This can happen if:
    - The requested locale is unknown.
    - A configuration YAML file is empty.
    """
