# -*- coding: utf-8 -*-
"""Validation and tokenizing utilities shared by both grammars.

Number conversion is locale agnostic: ``.`` is always the decimal
separator. Tokens that are not numbers convert to ``nan`` instead of
raising, callers decide whether to report them.
"""

import math
import re
from re import Pattern

from ies_lib.constants import CSV_SEPARATOR
from ies_lib.constants import CUSTOM_KEYWORD_PREFIX
from ies_lib.constants import NAN_STRING
from ies_lib.constants import NEGATIVE_INFINITY_STRING
from ies_lib.constants import POSITIVE_INFINITY_STRING
from ies_lib.constants import STANDARD_KEYWORDS
from ies_lib.constants import SUPPORTED_VERSIONS

NUMBER_PATTERN: Pattern[str] = re.compile(
    r"^[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?$"
)

_SPECIAL_VALUES: dict[str, float] = {
    NAN_STRING: math.nan,
    POSITIVE_INFINITY_STRING: math.inf,
    "+" + POSITIVE_INFINITY_STRING: math.inf,
    NEGATIVE_INFINITY_STRING: -math.inf,
}

_TRAILING_SEPARATORS: Pattern[str] = re.compile(r"[,\s]+$")

# Integral floats at or above this magnitude are written as repr() does
_MAX_PLAIN_INTEGER: float = 1e16


def is_number(text: str) -> bool:
    """Check if a token is a decimal number or a rendered special value.

    Args:
        text: Token to check

    Returns:
        True if :func:`parse_number` converts it without falling back to nan
    """
    token = text.strip()
    return bool(NUMBER_PATTERN.match(token)) or token in _SPECIAL_VALUES


def parse_number(text: str) -> float:
    """Convert a token to a float.

    Args:
        text: Numeric token

    Returns:
        The value, or ``nan`` if the token is not a number
    """
    token = text.strip()
    if NUMBER_PATTERN.match(token):
        return float(token)
    return _SPECIAL_VALUES.get(token, math.nan)


def format_number(value: float) -> str:
    """Render a number the shortest way that reads back to the same value.

    Integral values are written without a decimal point (``1``, ``10000``),
    very large or small magnitudes in exponent form (``1e+300``).
    """
    if math.isnan(value):
        return NAN_STRING
    if math.isinf(value):
        return POSITIVE_INFINITY_STRING if value > 0 else NEGATIVE_INFINITY_STRING
    if value == int(value) and abs(value) < _MAX_PLAIN_INTEGER:
        return str(int(value))
    return repr(float(value))


def as_count(value: float) -> int:
    """Convert a declared count to a usable integer (invalid counts are 0)."""
    if not math.isfinite(value) or value < 0:
        return 0
    return int(value)


def split_ies_tokens(line: str) -> list[str]:
    """Split an IES data line on runs of whitespace."""
    return line.split()


def trim_csv_line(line: str) -> str:
    """Remove trailing runs of separators, as left by spreadsheet exports."""
    return _TRAILING_SEPARATORS.sub("", line)


def split_csv_cells(line: str) -> list[str]:
    """Split a CSV line into cells, after :func:`trim_csv_line`."""
    trimmed = trim_csv_line(line)
    if not trimmed:
        return []
    return [cell.strip() for cell in trimmed.split(CSV_SEPARATOR)]


def is_supported_version(version: str) -> bool:
    return version in SUPPORTED_VERSIONS


def is_standard_keyword(name: str) -> bool:
    return name in STANDARD_KEYWORDS


def is_custom_keyword(name: str) -> bool:
    return name.startswith(CUSTOM_KEYWORD_PREFIX)


def is_valid_keyword(name: str) -> bool:
    """Check if a keyword name is allowed by LM-63-2002.

    Valid keywords are either one of the standard keywords or user defined
    keywords starting with ``_``.
    """
    return is_standard_keyword(name) or is_custom_keyword(name)
