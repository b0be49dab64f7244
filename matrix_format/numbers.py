"""
Locale-aware number formatting and cursor-based number parsing.

``NumberFormat`` is the numeric capability the matrix formatter and parser
delegate to.  It is an immutable value: locale symbols are looked up once
(from Babel's CLDR data) when the format is built, and grouping is
disabled by type, so a format shared between configurations can never be
switched into a mode where "1,345" reads as one number.

Formatting rules:
- Fixed-point notation with at most ``max_fraction_digits`` fraction
  digits (round-half-even), trailing zeros removed: ``1.0`` -> ``"1"``.
- Non-finite values render as ``(NaN)``, ``(Infinity)``, ``(-Infinity)``.

Parsing reads the longest number at the cursor and only advances it on
success.  Digits may come from any Unicode decimal script (``"١٢"`` reads
as 12); output always uses ASCII digits.  On failure the cursor is left
untouched and ``error_index`` is set to the offset that was tried.
"""

from __future__ import annotations

import logging
import math
import re
import unicodedata
from functools import lru_cache
from typing import Literal

from babel import Locale, UnknownLocaleError
from babel.core import default_locale
from babel.localedata import locale_identifiers
from babel.numbers import (
    get_decimal_symbol,
    get_exponential_symbol,
    get_minus_sign_symbol,
)
from pydantic import BaseModel, ConfigDict, Field

from matrix_format.exceptions import ConfigValidationError
from matrix_format.position import ParsePosition

logger = logging.getLogger(__name__)

# Used when the process locale cannot be determined
FALLBACK_LOCALE = "en_US"

DEFAULT_MAX_FRACTION_DIGITS = 10

# Textual forms of non-finite values, tried when no plain number matches
_SPECIAL_VALUES: tuple[tuple[str, float], ...] = (
    ("(NaN)", math.nan),
    ("(Infinity)", math.inf),
    ("(-Infinity)", -math.inf),
)


@lru_cache(maxsize=64)
def _number_pattern(
    minus_sign: str, decimal_symbol: str, exponential_symbol: str
) -> re.Pattern[str]:
    """Compile the number regex for one set of locale symbols."""
    signs = "|".join(
        re.escape(s) for s in sorted({minus_sign, "-"}, key=len, reverse=True)
    )
    exponents = "|".join(
        re.escape(s)
        for s in sorted({exponential_symbol, "E", "e"}, key=len, reverse=True)
    )
    return re.compile(
        rf"(?P<sign>{signs})?"
        rf"(?P<int>\d*)"
        rf"(?:{re.escape(decimal_symbol)}(?P<frac>\d*))?"
        rf"(?:(?:{exponents})(?P<exp>[+\-]?\d+))?"
    )


def _ascii_digits(digits: str) -> str:
    """Map Unicode decimal digits (Arabic-Indic, fullwidth, ...) to 0-9."""
    return "".join(
        c if c in "+-" else str(unicodedata.decimal(c)) for c in digits
    )


def resolve_locale(locale: str | None = None) -> str:
    """Normalize a locale identifier, defaulting to the process locale.

    Args:
        locale: A CLDR identifier such as ``"de_DE"``, or ``None`` for the
            locale Babel derives from ``LC_NUMERIC`` / ``LANGUAGE`` /
            ``LC_ALL`` / ``LC_CTYPE`` / ``LANG``.

    Returns:
        The canonical identifier string.

    Raises:
        ConfigValidationError: If the locale is unknown or malformed.
    """
    if locale is None:
        locale = default_locale("LC_NUMERIC") or FALLBACK_LOCALE
    try:
        return str(Locale.parse(locale))
    except (UnknownLocaleError, ValueError) as exc:
        raise ConfigValidationError(f"Unknown locale: {locale!r}") from exc


def available_locales() -> list[str]:
    """Return the locale identifiers number formats can be built for."""
    return sorted(locale_identifiers())


class NumberFormat(BaseModel):
    """Immutable, grouping-free number format for one locale."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    locale: str = Field(FALLBACK_LOCALE, description="CLDR locale identifier")
    decimal_symbol: str = Field(".", min_length=1)
    minus_sign: str = Field("-", min_length=1)
    exponential_symbol: str = Field("E", min_length=1)
    max_fraction_digits: int = Field(DEFAULT_MAX_FRACTION_DIGITS, ge=0, le=340)
    grouping_used: Literal[False] = Field(
        False, description="Grouping is never used; it collides with separators"
    )

    @classmethod
    def for_locale(
        cls,
        locale: str | None = None,
        max_fraction_digits: int = DEFAULT_MAX_FRACTION_DIGITS,
    ) -> NumberFormat:
        """Build a number format from the CLDR symbols of *locale*.

        Raises:
            ConfigValidationError: If the locale is unknown.
        """
        name = resolve_locale(locale)
        fmt = cls(
            locale=name,
            decimal_symbol=get_decimal_symbol(name),
            minus_sign=get_minus_sign_symbol(name),
            exponential_symbol=get_exponential_symbol(name),
            max_fraction_digits=max_fraction_digits,
        )
        logger.debug(
            "Number format for %s: decimal=%r minus=%r exponent=%r",
            name, fmt.decimal_symbol, fmt.minus_sign, fmt.exponential_symbol,
        )
        return fmt

    def format(self, value: float) -> str:
        """Format *value* as locale text without grouping or exponent."""
        value = float(value)
        if math.isnan(value):
            return "(NaN)"
        if math.isinf(value):
            return "(Infinity)" if value > 0 else "(-Infinity)"

        text = f"{abs(value):.{self.max_fraction_digits}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        text = text.replace(".", self.decimal_symbol)
        if math.copysign(1.0, value) < 0:
            return self.minus_sign + text
        return text

    def parse(self, source: str, pos: ParsePosition) -> float | None:
        """Parse a number at ``pos.index``.

        Args:
            source: Text to read from.
            pos: Cursor.  Advanced past the number on success; on failure
                ``index`` is unchanged and ``error_index`` is set to it.

        Returns:
            The parsed value, or ``None`` if no number starts at the cursor.
        """
        start = pos.index
        pattern = _number_pattern(
            self.minus_sign, self.decimal_symbol, self.exponential_symbol
        )
        match = pattern.match(source, start)
        if match is not None and (match.group("int") or match.group("frac")):
            sign = "-" if match.group("sign") else ""
            literal = (
                f"{sign}{_ascii_digits(match.group('int') or '0')}"
                f".{_ascii_digits(match.group('frac') or '0')}"
                f"e{_ascii_digits(match.group('exp') or '0')}"
            )
            pos.index = match.end()
            return float(literal)

        for text, value in _SPECIAL_VALUES:
            if source.startswith(text, start):
                pos.index = start + len(text)
                return value

        pos.error_index = start
        return None
