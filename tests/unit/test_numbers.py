"""
Unit tests for the number format (matrix_format.numbers).

Covers fixed-point formatting, locale symbols, special values and
cursor-based parsing semantics.
"""

from __future__ import annotations

import math

import numpy as np
import pytest
from pydantic import ValidationError

from matrix_format.exceptions import ConfigValidationError
from matrix_format.numbers import (
    NumberFormat,
    available_locales,
    resolve_locale,
)
from matrix_format.position import ParsePosition


@pytest.fixture
def en() -> NumberFormat:
    return NumberFormat.for_locale("en_US")


@pytest.fixture
def de() -> NumberFormat:
    return NumberFormat.for_locale("de_DE")


class TestFormat:
    """Tests for NumberFormat.format()."""

    # -----------------------------------------------------------------
    # Fixed-point output
    # -----------------------------------------------------------------

    @pytest.mark.parametrize(
        "value, expected",
        [
            (1.0, "1"),
            (1.5, "1.5"),
            (-2.25, "-2.25"),
            (0.1, "0.1"),
            (1 / 3, "0.3333333333"),
            (2 / 3, "0.6666666667"),
            (0.0, "0"),
        ],
    )
    def test_trailing_zeros_removed(self, en, value, expected):
        assert en.format(value) == expected

    def test_no_grouping(self, en):
        """Large values must not contain thousand separators."""
        assert en.format(1234567.0) == "1234567"

    def test_no_exponent_notation(self, en):
        assert en.format(1e20) == "100000000000000000000"

    def test_tiny_values_round_to_zero(self, en):
        assert en.format(1e-11) == "0"

    def test_negative_zero_keeps_sign(self, en):
        assert en.format(-0.0) == "-0"

    def test_round_half_even(self):
        fmt = NumberFormat(max_fraction_digits=0)
        assert fmt.format(2.5) == "2"
        assert fmt.format(3.5) == "4"

    def test_numpy_scalars_accepted(self, en):
        assert en.format(np.float64(4.5)) == "4.5"
        assert en.format(np.int64(7)) == "7"

    # -----------------------------------------------------------------
    # Special values
    # -----------------------------------------------------------------

    def test_nan(self, en):
        assert en.format(math.nan) == "(NaN)"

    def test_infinities(self, en):
        assert en.format(math.inf) == "(Infinity)"
        assert en.format(-math.inf) == "(-Infinity)"

    # -----------------------------------------------------------------
    # Locale symbols
    # -----------------------------------------------------------------

    def test_german_decimal_comma(self, de):
        assert de.decimal_symbol == ","
        assert de.format(1.5) == "1,5"
        assert de.format(-0.25) == "-0,25"

    def test_custom_minus_sign(self):
        fmt = NumberFormat(minus_sign="−")
        assert fmt.format(-3.0) == "−3"


class TestParse:
    """Tests for NumberFormat.parse()."""

    def _parse(self, fmt: NumberFormat, text: str, index: int = 0):
        pos = ParsePosition(index)
        return fmt.parse(text, pos), pos

    @pytest.mark.parametrize(
        "text, expected, end",
        [
            ("42", 42.0, 2),
            ("-1.5,", -1.5, 4),
            (".5}", 0.5, 2),
            ("1.", 1.0, 2),
            ("1E3", 1000.0, 3),
            ("1e-2", 0.01, 4),
            ("2.5E+1", 25.0, 6),
        ],
    )
    def test_numbers(self, en, text, expected, end):
        value, pos = self._parse(en, text)
        assert value == pytest.approx(expected)
        assert pos.index == end
        assert pos.error_index is None

    def test_incomplete_exponent_not_consumed(self, en):
        value, pos = self._parse(en, "1E}")
        assert value == 1.0
        assert pos.index == 1

    def test_grouping_never_accepted(self, en):
        """'1,345' is the number 1 followed by a separator."""
        value, pos = self._parse(en, "1,345")
        assert value == 1.0
        assert pos.index == 1

    def test_parse_from_offset(self, en):
        value, pos = self._parse(en, "ab12cd", index=2)
        assert value == 12.0
        assert pos.index == 4

    def test_german_decimal_comma(self, de):
        value, pos = self._parse(de, "1,5;")
        assert value == 1.5
        assert pos.index == 3

    def test_ascii_minus_accepted_with_custom_minus_sign(self):
        fmt = NumberFormat(minus_sign="−")
        assert self._parse(fmt, "−2")[0] == -2.0
        assert self._parse(fmt, "-2")[0] == -2.0

    @pytest.mark.parametrize(
        "text, expected, end",
        [
            ("١٢,", 12.0, 2),  # Arabic-Indic
            ("１.５}", 1.5, 3),  # fullwidth
            ("-٣e٢", -300.0, 4),
        ],
    )
    def test_unicode_digits(self, en, text, expected, end):
        value, pos = self._parse(en, text)
        assert value == pytest.approx(expected)
        assert pos.index == end

    @pytest.mark.parametrize("text", ["x", "-", ".", "", " 1", "+1", "}"])
    def test_failure_leaves_cursor(self, en, text):
        value, pos = self._parse(en, text)
        assert value is None
        assert pos.index == 0
        assert pos.error_index == 0

    def test_failure_error_index_is_cursor(self, en):
        value, pos = self._parse(en, "1,x", index=2)
        assert value is None
        assert pos.index == 2
        assert pos.error_index == 2

    # -----------------------------------------------------------------
    # Special values
    # -----------------------------------------------------------------

    def test_nan(self, en):
        value, pos = self._parse(en, "(NaN)}")
        assert math.isnan(value)
        assert pos.index == 5

    def test_infinities(self, en):
        assert self._parse(en, "(Infinity)")[0] == math.inf
        value, pos = self._parse(en, "(-Infinity),")
        assert value == -math.inf
        assert pos.index == 11


class TestConstruction:
    """Tests for building number formats."""

    def test_grouping_cannot_be_enabled(self):
        with pytest.raises(ValidationError, match="grouping_used"):
            NumberFormat(grouping_used=True)

    def test_immutable(self, en):
        with pytest.raises(ValidationError):
            en.decimal_symbol = ","

    def test_defaults(self):
        fmt = NumberFormat()
        assert fmt.decimal_symbol == "."
        assert fmt.max_fraction_digits == 10
        assert fmt.grouping_used is False

    def test_for_locale_records_locale(self, de):
        assert de.locale == "de_DE"

    def test_unknown_locale(self):
        with pytest.raises(ConfigValidationError, match="zz"):
            NumberFormat.for_locale("zz")

    def test_malformed_locale(self):
        with pytest.raises(ConfigValidationError):
            NumberFormat.for_locale("not a locale")

    def test_default_locale_from_environment(self):
        assert resolve_locale(None) == "en_US"

    def test_available_locales(self):
        locales = available_locales()
        assert "en" in locales
        assert "de" in locales
        assert locales == sorted(locales)
