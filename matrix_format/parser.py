"""
Matrix parser: reads delimited matrix text back into rows of floats.

The parser is a small state machine over a ``ParsePosition`` cursor:

1. Skip whitespace, expect the (trimmed) prefix.
2. Loop over rows.  An empty in-progress row expects a row prefix; a
   non-empty one expects either a column separator (another value
   follows) or a row suffix, optionally followed by a row separator
   (another row follows).
3. Each value is read by the config's ``NumberFormat``.  A missing value
   at the start of a row ends the matrix; a missing value after a column
   separator is malformed input.
4. Skip whitespace, expect the suffix.  Reject matrices with no rows.

Whitespace is skipped before every token and never required.  Blank
delimiters always match without consuming input.

Failure is all-or-nothing: ``parse_at`` either returns the rows with the
cursor just past the suffix, or returns ``None`` with the cursor back at
its starting index and ``error_index`` set.  Only ``parse`` and its
array/frame variants raise ``MatrixParseError``.
"""

from __future__ import annotations

import logging

import numpy as np
import pandas as pd

from matrix_format.config import DelimiterConfig
from matrix_format.delimiters import skip_whitespace
from matrix_format.exceptions import MatrixParseError
from matrix_format.matrix import matrix_from_rows, rows_to_frame
from matrix_format.position import ParsePosition

logger = logging.getLogger(__name__)


class MatrixParser:
    """Parses matrix text according to a ``DelimiterConfig``."""

    def __init__(self, config: DelimiterConfig | None = None) -> None:
        self.config = config if config is not None else DelimiterConfig.default()

    def parse(self, source: str) -> list[list[float]]:
        """Parse *source* from offset 0.

        Trailing text after the closing suffix is ignored.

        Raises:
            MatrixParseError: If no matrix can be read at offset 0.
        """
        pos = ParsePosition(0)
        rows = self.parse_at(source, pos)
        if rows is None:
            raise MatrixParseError(source, pos.error_index)
        return rows

    def parse_array(self, source: str) -> np.ndarray:
        """Parse *source* into a ``(rows, columns)`` float array.

        Raises:
            MatrixParseError: If no matrix can be read at offset 0.
            MatrixDimensionError: If the rows have unequal lengths.
        """
        return matrix_from_rows(self.parse(source))

    def parse_frame(self, source: str) -> pd.DataFrame:
        """Parse *source* into a DataFrame with integer labels."""
        return rows_to_frame(self.parse(source))

    def parse_at(self, source: str, pos: ParsePosition) -> list[list[float]] | None:
        """Parse a matrix starting at ``pos.index``.

        Args:
            source: Text containing the matrix, possibly embedded in
                surrounding text.
            pos: Cursor.  On success it ends just past the suffix (trailing
                whitespace is not consumed).  On failure its ``index`` is
                restored and ``error_index`` points at the offending offset.

        Returns:
            The parsed rows, each with at least one value, or ``None``.
        """
        start = pos.index
        cfg = self.config
        prefix = cfg.trimmed_prefix
        suffix = cfg.trimmed_suffix
        row_prefix = cfg.trimmed_row_prefix
        row_suffix = cfg.trimmed_row_suffix
        row_separator = cfg.trimmed_row_separator
        column_separator = cfg.trimmed_column_separator
        number_format = cfg.number_format

        skip_whitespace(source, pos)
        if not prefix.match(source, pos):
            return self._fail(pos, start, pos.index, "missing prefix")

        rows: list[list[float]] = []
        row: list[float] = []
        while True:
            skip_whitespace(source, pos)
            if row:
                if not column_separator.match(source, pos):
                    if not row_suffix.match(source, pos):
                        return self._fail(pos, start, pos.index, "unterminated row")
                    skip_whitespace(source, pos)
                    if not row_separator.match(source, pos):
                        break
                    rows.append(row)
                    row = []
                    continue
            elif not row_prefix.match(source, pos):
                return self._fail(pos, start, pos.index, "missing row prefix")

            skip_whitespace(source, pos)
            value = number_format.parse(source, pos)
            if value is None:
                if not row:
                    break
                return self._fail(pos, start, pos.error_index, "invalid component")
            row.append(value)

        if row:
            rows.append(row)

        skip_whitespace(source, pos)
        if not suffix.match(source, pos):
            return self._fail(pos, start, pos.index, "missing suffix")

        if not rows:
            return self._fail(pos, start, start, "empty matrix")

        pos.error_index = None
        return rows

    @staticmethod
    def _fail(
        pos: ParsePosition, start: int, error_index: int | None, reason: str
    ) -> None:
        logger.debug(
            "Matrix parse failed (%s) at index %s; restoring cursor to %d",
            reason, error_index, start,
        )
        pos.fail(start, error_index)
        return None
