"""Controlled calendar dates.

A CalendarDate is validated on every change: setters reject non-existent
dates, and month/year arithmetic clamps to the end of the target month
instead of rolling over (Aug 31 + 1 month is Sep 30).
"""

from .caldate import CalendarDate
from .compare import date_diff
from .errors import (
    DateError,
    DisabledOperation,
    InvalidDate,
    InvalidTime,
    NonNumericInput,
    NonPositiveInput,
    ParseError,
    UnknownTimezone,
)
from .formatting import INVALID_TOKEN, format_token
from .gregorian import days_in_month, is_leap, is_valid_date
from .types import DateParts, FormatToken
