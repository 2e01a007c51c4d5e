from __future__ import annotations

import re

from .errors import ParseError
from .types import DateParts

# Any one of - / : . or a space separates tokens; runs are not collapsed.
DELIMITER_RE = re.compile(r"[-/ :.]")


def split_date(text: str) -> list[str]:
    if not isinstance(text, str):
        raise ParseError(f"Expected date text, got {text!r}")
    return DELIMITER_RE.split(text.strip())


def _three_tokens(text: str, *, expected: str) -> list[str]:
    parts = split_date(text)
    if len(parts) != 3:
        raise ParseError(f"Expected a date as {expected}, got {text!r}")
    return parts


def _require_four_digit_year(token: str, text: str) -> None:
    if len(token) != 4:
        raise ParseError(f"Expected a 4-digit year, got {token!r} in {text!r}")


def parse_mdy(text: str) -> DateParts:
    """Month-first: MM/DD/YYYY (also MM-DD-YYYY, MM.DD.YYYY, MM DD YYYY, MM:DD:YYYY)."""
    month, day, year = _three_tokens(text, expected="MM/DD/YYYY")
    _require_four_digit_year(year, text)
    return DateParts(year=year, month=month, day=day, source=text)


def parse_dmy(text: str) -> DateParts:
    """Day-first: DD/MM/YYYY with the same delimiters as parse_mdy."""
    day, month, year = _three_tokens(text, expected="DD/MM/YYYY")
    _require_four_digit_year(year, text)
    return DateParts(year=year, month=month, day=day, source=text)


def parse_storage(text: str) -> DateParts:
    """Storage order: YYYY-MM-DD.

    Unlike the other two forms the year may have any number of digits.
    """
    year, month, day = _three_tokens(text, expected="YYYY-MM-DD")
    return DateParts(year=year, month=month, day=day, source=text)
