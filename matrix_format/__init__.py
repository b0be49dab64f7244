"""
matrix-format: text codec for numeric matrices with configurable delimiters.

Public API surface:

- ``format_matrix(matrix, config=None)`` -- write a matrix (numpy array,
  DataFrame or nested sequence) as text, ``{{1,2,3},{4,5,6}}`` by default.

- ``parse_matrix(text, config=None)`` -- read text back into a list of
  float rows.  Raises ``MatrixParseError`` on failure.

- ``parse_array(text, config=None)`` -- as ``parse_matrix`` but returns a
  rectangular numpy array.

- ``DelimiterConfig`` -- the delimiter/number-format bundle; see
  ``DelimiterConfig.default()`` and ``DelimiterConfig.for_locale()``.

- ``MatrixFormatter`` / ``MatrixParser`` -- reusable objects bound to a
  config; ``MatrixParser.parse_at`` parses a matrix embedded in larger
  text at a ``ParsePosition`` without raising.

Examples::

    import numpy as np
    import matrix_format

    text = matrix_format.format_matrix(np.eye(2))      # "{{1,0},{0,1}}"
    rows = matrix_format.parse_matrix(" { {1 , 2} } ")  # [[1.0, 2.0]]

    cfg = matrix_format.DelimiterConfig(
        prefix="[", suffix="]", row_prefix="", row_suffix="",
        row_separator="; ", column_separator=", ",
    )
"""

from __future__ import annotations

from typing import Any

import numpy as np

from matrix_format.config import DelimiterConfig, load_config, save_config
from matrix_format.exceptions import (
    ConfigValidationError,
    MatrixDimensionError,
    MatrixFormatError,
    MatrixParseError,
)
from matrix_format.formatter import MatrixFormatter
from matrix_format.numbers import NumberFormat, available_locales
from matrix_format.parser import MatrixParser
from matrix_format.position import FieldPosition, ParsePosition

__all__ = [
    "format_matrix",
    "parse_matrix",
    "parse_array",
    "available_locales",
    "load_config",
    "save_config",
    "DelimiterConfig",
    "NumberFormat",
    "MatrixFormatter",
    "MatrixParser",
    "ParsePosition",
    "FieldPosition",
    "MatrixFormatError",
    "MatrixParseError",
    "MatrixDimensionError",
    "ConfigValidationError",
]


def format_matrix(matrix: Any, config: DelimiterConfig | None = None) -> str:
    """Format *matrix* with *config* (default delimiters if ``None``)."""
    return MatrixFormatter(config).format(matrix)


def parse_matrix(text: str, config: DelimiterConfig | None = None) -> list[list[float]]:
    """Parse matrix *text* into rows of floats.

    Raises:
        MatrixParseError: If no matrix can be read from the start of *text*.
    """
    return MatrixParser(config).parse(text)


def parse_array(text: str, config: DelimiterConfig | None = None) -> np.ndarray:
    """Parse matrix *text* into a rectangular numpy array.

    Raises:
        MatrixParseError: If no matrix can be read from the start of *text*.
        MatrixDimensionError: If the parsed rows have unequal lengths.
    """
    return MatrixParser(config).parse_array(text)
