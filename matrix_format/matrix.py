"""
Matrix storage adapters for matrix-format.

The formatter and parser only need a small contract from matrix storage:
row/column counts and element access for formatting, and construction
from a list of rows for parsing.  numpy arrays provide both; pandas
DataFrames and nested sequences are coerced into arrays.

Rectangularity is owned here, not by the parser: ``parse_at`` returns the
rows it read, and ``matrix_from_rows`` rejects ragged results.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np
import pandas as pd

from matrix_format.exceptions import MatrixDimensionError


def as_matrix(matrix: Any) -> np.ndarray:
    """Coerce formatter input into a 2-D float array.

    Accepts numpy arrays, pandas DataFrames and nested sequences.  An
    empty sequence is treated as a matrix with zero rows.

    Raises:
        MatrixDimensionError: If the input is ragged, not 2-D, or holds
            values that are not numbers.
    """
    try:
        if isinstance(matrix, pd.DataFrame):
            return matrix.to_numpy(dtype=float)
        values = np.asarray(matrix, dtype=float)
    except (TypeError, ValueError) as exc:
        raise MatrixDimensionError(
            f"Matrix is not a rectangular grid of numbers: {exc}"
        ) from exc
    if values.ndim == 1 and values.size == 0:
        return values.reshape(0, 0)
    if values.ndim != 2:
        raise MatrixDimensionError(
            f"Expected a 2-D matrix, got an array with {values.ndim} dimension(s)"
        )
    return values


def matrix_from_rows(rows: Sequence[Sequence[float]]) -> np.ndarray:
    """Build a ``(rows, columns)`` float array from parsed rows.

    Raises:
        MatrixDimensionError: If the rows do not all have the same length.
    """
    if not rows:
        return np.empty((0, 0), dtype=float)
    width = len(rows[0])
    ragged = [i for i, row in enumerate(rows) if len(row) != width]
    if ragged:
        raise MatrixDimensionError(
            f"Rows have unequal lengths: row 0 has {width} value(s), "
            f"rows {ragged} differ"
        )
    return np.array(rows, dtype=float)


def rows_to_frame(rows: Sequence[Sequence[float]]) -> pd.DataFrame:
    """Build a DataFrame with default integer labels from parsed rows."""
    return pd.DataFrame(matrix_from_rows(rows))
