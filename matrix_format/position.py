"""
Cursor and span records shared by the formatter and parser.

``ParsePosition`` is the mutable cursor passed into position-based parse
calls: ``index`` says where the next token is expected and
``error_index`` records where a failed attempt diverged.  ``FieldPosition``
describes the span of a text buffer written by the formatter.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ParsePosition:
    """Mutable parse cursor.

    Attributes:
        index: Offset of the next character to consume.
        error_index: Offset where the last failed attempt diverged, or
            ``None`` if nothing has failed.
    """
    index: int = 0
    error_index: int | None = None

    def fail(self, restore_to: int, error_index: int | None) -> None:
        """Roll the cursor back and record where parsing went wrong."""
        self.index = restore_to
        self.error_index = error_index


@dataclass(frozen=True)
class FieldPosition:
    """Half-open ``[begin_index, end_index)`` span of written text."""
    begin_index: int
    end_index: int

    def __len__(self) -> int:
        return self.end_index - self.begin_index
