from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

FormatToken = Literal[
    "mdy",
    "mdy0",
    "dmy",
    "dmy0",
    "mysql",
    "fullyear",
    "year",
    "month",
    "month0",
    "monthname",
    "monthabbr",
    "day",
    "day0",
    "dayordinal",
    "dayname",
    "dayabbr",
]


@dataclass(frozen=True)
class DateParts:
    """An unvalidated (year, month, day) triple pulled from text.

    Tokens stay as strings; CalendarDate.set_date does the numeric and
    calendar checks.
    """

    year: str
    month: str
    day: str
    source: str  # the text the tokens were split from
