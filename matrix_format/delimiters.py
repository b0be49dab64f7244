"""
Delimiter tokens and whitespace handling for the matrix parser.

Configured delimiter strings are matched whitespace-insensitively: the
token itself is trimmed, and the parser skips whitespace in the input
before every attempt.  A configured string that trims to nothing becomes
``NoDelimiter``, which always matches and never consumes input.  Anything
else becomes a ``LiteralDelimiter`` that must appear verbatim at the
cursor.
"""

from __future__ import annotations

from dataclasses import dataclass

from matrix_format.position import ParsePosition


@dataclass(frozen=True)
class NoDelimiter:
    """A delimiter configured as blank: trivially present."""

    def match(self, source: str, pos: ParsePosition) -> bool:
        return True

    def __str__(self) -> str:
        return ""


@dataclass(frozen=True)
class LiteralDelimiter:
    """A non-empty token that must appear exactly at the cursor."""
    token: str

    def match(self, source: str, pos: ParsePosition) -> bool:
        """Consume the token at ``pos.index`` if present.

        The cursor only moves on success; ``error_index`` is left to the
        caller, which knows whether a mismatch is fatal.
        """
        if source.startswith(self.token, pos.index):
            pos.index += len(self.token)
            return True
        return False

    def __str__(self) -> str:
        return self.token


Delimiter = NoDelimiter | LiteralDelimiter

NO_DELIMITER = NoDelimiter()


def trimmed(text: str) -> Delimiter:
    """Turn a configured delimiter string into its trimmed token.

    Example: ``" , "`` -> ``LiteralDelimiter(",")``, ``"  "`` -> ``NO_DELIMITER``.
    """
    token = text.strip()
    if not token:
        return NO_DELIMITER
    return LiteralDelimiter(token)


def skip_whitespace(source: str, pos: ParsePosition) -> None:
    """Advance the cursor past any whitespace characters."""
    index = pos.index
    end = len(source)
    while index < end and source[index].isspace():
        index += 1
    pos.index = index
