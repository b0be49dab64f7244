"""
Delimiter configuration model and YAML I/O for matrix-format.

``DelimiterConfig`` bundles the six delimiter strings that frame matrix
text with the ``NumberFormat`` used for components.  It is a frozen
Pydantic model: built once, then shared read-only by any number of
formatters and parsers.

Key pieces:
- DelimiterConfig: prefix/suffix, row prefix/suffix, row/column separators
  plus number format, with trimmed ``Delimiter`` accessors for parsing.
- DelimiterConfig.default() / DelimiterConfig.for_locale(locale): presets.
- load_config(path) / save_config(config, path): YAML round-trip.

Empty strings are allowed and mean "no delimiter expected here" (useful
for row prefix/suffix).  ``None`` is rejected by validation.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from matrix_format.delimiters import Delimiter, NoDelimiter, trimmed
from matrix_format.exceptions import ConfigValidationError
from matrix_format.numbers import DEFAULT_MAX_FRACTION_DIGITS, NumberFormat

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "{"
DEFAULT_SUFFIX = "}"
DEFAULT_ROW_PREFIX = "{"
DEFAULT_ROW_SUFFIX = "}"
DEFAULT_ROW_SEPARATOR = ","
DEFAULT_COLUMN_SEPARATOR = ","

# Keys accepted in the short ``number_format`` mapping
_SHORTHAND_KEYS = frozenset({"locale", "max_fraction_digits"})


def _default_number_format() -> NumberFormat:
    return NumberFormat.for_locale()


class DelimiterConfig(BaseModel):
    """Immutable delimiter set plus component number format.

    The default instance produces and reads ``{{1,2,3},{4,5,6}}``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    prefix: str = Field(DEFAULT_PREFIX, description="Text before the first row")
    suffix: str = Field(DEFAULT_SUFFIX, description="Text after the last row")
    row_prefix: str = Field(DEFAULT_ROW_PREFIX, description="Text opening each row")
    row_suffix: str = Field(DEFAULT_ROW_SUFFIX, description="Text closing each row")
    row_separator: str = Field(DEFAULT_ROW_SEPARATOR, description="Text between rows")
    column_separator: str = Field(
        DEFAULT_COLUMN_SEPARATOR, description="Text between values of a row"
    )
    number_format: NumberFormat = Field(default_factory=_default_number_format)

    @field_validator("number_format", mode="before")
    @classmethod
    def _resolve_locale_shorthand(cls, value: Any) -> Any:
        """Accept a bare locale name or a ``{locale, max_fraction_digits}`` mapping.

        Hand-written YAML usually only names the locale; the symbols are
        then looked up rather than defaulted.
        """
        if isinstance(value, str):
            return NumberFormat.for_locale(value)
        if isinstance(value, dict) and "decimal_symbol" not in value:
            unknown = sorted(set(value) - _SHORTHAND_KEYS)
            if unknown:
                raise ValueError(
                    f"Unknown number_format key(s) {unknown}; "
                    f"expected a subset of {sorted(_SHORTHAND_KEYS)}"
                )
            return NumberFormat.for_locale(
                value.get("locale"),
                value.get("max_fraction_digits", DEFAULT_MAX_FRACTION_DIGITS),
            )
        return value

    @model_validator(mode="after")
    def _check_separators(self) -> DelimiterConfig:
        """Warn on separators the parser cannot use to split values."""
        if isinstance(self.trimmed_column_separator, NoDelimiter):
            logger.warning(
                "column_separator %r is blank; values of a row run together "
                "and such text cannot be parsed back",
                self.column_separator,
            )
        decimal = self.number_format.decimal_symbol
        for name in ("column_separator", "row_separator"):
            if getattr(self, name).strip() == decimal:
                logger.warning(
                    "%s %r equals the decimal symbol of locale %s; "
                    "numbers will absorb the separator when parsing",
                    name, decimal, self.number_format.locale,
                )
        return self

    # -----------------------------------------------------------------
    # Presets
    # -----------------------------------------------------------------

    @classmethod
    def default(cls) -> DelimiterConfig:
        """Default delimiters with the process-locale number format."""
        return cls()

    @classmethod
    def for_locale(cls, locale: str) -> DelimiterConfig:
        """Default delimiters with the number format of *locale*.

        Raises:
            ConfigValidationError: If the locale is unknown.
        """
        return cls(number_format=NumberFormat.for_locale(locale))

    # -----------------------------------------------------------------
    # Trimmed tokens used for whitespace-insensitive matching
    # -----------------------------------------------------------------

    @property
    def trimmed_prefix(self) -> Delimiter:
        return trimmed(self.prefix)

    @property
    def trimmed_suffix(self) -> Delimiter:
        return trimmed(self.suffix)

    @property
    def trimmed_row_prefix(self) -> Delimiter:
        return trimmed(self.row_prefix)

    @property
    def trimmed_row_suffix(self) -> Delimiter:
        return trimmed(self.row_suffix)

    @property
    def trimmed_row_separator(self) -> Delimiter:
        return trimmed(self.row_separator)

    @property
    def trimmed_column_separator(self) -> Delimiter:
        return trimmed(self.column_separator)


def load_config(path: str | Path) -> DelimiterConfig:
    """Load and validate a delimiter configuration YAML file.

    The ``number_format`` entry may be a full mapping (as written by
    ``save_config``), a ``{locale, max_fraction_digits}`` mapping, or a
    bare locale name.  Omitted keys take their defaults.

    Raises:
        FileNotFoundError: If the file does not exist.
        ConfigValidationError: If the file is empty.
        pydantic.ValidationError: If the content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    logger.info("Loaded delimiter config from %s", path)
    return DelimiterConfig.model_validate(raw)


def save_config(config: DelimiterConfig, path: str | Path) -> None:
    """Serialize a DelimiterConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# matrix-format delimiter configuration\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved delimiter config to %s", path)
