"""
Matrix formatter: writes a matrix as delimited text.

Output layout for a config ``c``::

    c.prefix
      c.row_prefix v00 c.column_separator v01 ... c.row_suffix
      c.row_separator
      c.row_prefix v10 ... c.row_suffix
    c.suffix

Delimiters are written verbatim (untrimmed); values go through the
config's ``NumberFormat``.  A matrix with zero rows is written as
``prefix + suffix``, which the parser will reject as an empty matrix.
"""

from __future__ import annotations

import io
from typing import Any

from matrix_format.config import DelimiterConfig
from matrix_format.matrix import as_matrix
from matrix_format.position import FieldPosition


class MatrixFormatter:
    """Formats matrices according to a ``DelimiterConfig``."""

    def __init__(self, config: DelimiterConfig | None = None) -> None:
        self.config = config if config is not None else DelimiterConfig.default()

    def format(self, matrix: Any) -> str:
        """Return the text form of *matrix*.

        Args:
            matrix: numpy array, pandas DataFrame or nested sequence.

        Raises:
            MatrixDimensionError: If *matrix* is not a 2-D rectangular grid.
        """
        buffer = io.StringIO()
        self.format_to(matrix, buffer)
        return buffer.getvalue()

    def format_to(self, matrix: Any, buffer: io.StringIO) -> FieldPosition:
        """Append *matrix* to the end of *buffer*.

        Existing content is kept whatever the buffer's current position.

        Returns:
            The span of *buffer* that was written.
        """
        values = as_matrix(matrix)
        cfg = self.config
        number_format = cfg.number_format
        begin = buffer.seek(0, io.SEEK_END)

        buffer.write(cfg.prefix)
        rows = values.shape[0]
        for i, row in enumerate(values):
            buffer.write(cfg.row_prefix)
            buffer.write(cfg.column_separator.join(number_format.format(v) for v in row))
            buffer.write(cfg.row_suffix)
            if i < rows - 1:
                buffer.write(cfg.row_separator)
        buffer.write(cfg.suffix)

        return FieldPosition(begin, buffer.tell())
