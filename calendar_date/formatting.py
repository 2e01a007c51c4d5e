"""Read-only string/number projections of a CalendarDate.

Names are fixed English; nothing here depends on the process locale.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .caldate import CalendarDate

INVALID_TOKEN = "Invalid token"

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Monday first, matching datetime.weekday()
DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def full_year(d: CalendarDate) -> int:
    return d.year


def two_digit_year(d: CalendarDate) -> str:
    return f"{d.year % 100:02d}"


def month_number(d: CalendarDate, leading_zero: bool = False) -> int | str:
    return f"{d.month:02d}" if leading_zero else d.month


def month_name(d: CalendarDate) -> str:
    return MONTH_NAMES[d.month - 1]


def month_abbr(d: CalendarDate) -> str:
    return month_name(d)[:3]


def day_number(d: CalendarDate, leading_zero: bool = False) -> int | str:
    return f"{d.day:02d}" if leading_zero else d.day


def ordinal_suffix(n: int) -> str:
    if 10 <= n % 100 <= 20:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")


def day_ordinal(d: CalendarDate) -> str:
    """1st, 2nd, 3rd, 4th ... 11th, 12th, 13th ... 21st."""
    return f"{d.day}{ordinal_suffix(d.day)}"


def day_name(d: CalendarDate) -> str:
    return DAY_NAMES[d.weekday]


def day_abbr(d: CalendarDate) -> str:
    return day_name(d)[:3]


def storage(d: CalendarDate) -> str:
    """YYYY-MM-DD."""
    return f"{d.year:04d}-{d.month:02d}-{d.day:02d}"


def mdy(d: CalendarDate, leading_zeros: bool = False) -> str:
    """M/D/YYYY, or MM/DD/YYYY with leading_zeros."""
    if leading_zeros:
        return f"{d.month:02d}/{d.day:02d}/{d.year:04d}"
    return f"{d.month}/{d.day}/{d.year:04d}"


def dmy(d: CalendarDate, leading_zeros: bool = False) -> str:
    """D/M/YYYY, or DD/MM/YYYY with leading_zeros."""
    if leading_zeros:
        return f"{d.day:02d}/{d.month:02d}/{d.year:04d}"
    return f"{d.day}/{d.month}/{d.year:04d}"


def default_text(d: CalendarDate) -> str:
    """e.g. "Thursday, 3rd March, 2011"."""
    return f"{day_name(d)}, {day_ordinal(d)} {month_name(d)}, {d.year:04d}"


_TOKENS: dict[str, Callable[[CalendarDate], int | str]] = {
    "mdy": mdy,
    "mdy0": lambda d: mdy(d, leading_zeros=True),
    "dmy": dmy,
    "dmy0": lambda d: dmy(d, leading_zeros=True),
    "mysql": storage,
    "fullyear": full_year,
    "year": two_digit_year,
    "month": month_number,
    "month0": lambda d: month_number(d, leading_zero=True),
    "monthname": month_name,
    "monthabbr": month_abbr,
    "day": day_number,
    "day0": lambda d: day_number(d, leading_zero=True),
    "dayordinal": day_ordinal,
    "dayname": day_name,
    "dayabbr": day_abbr,
}

TOKENS = frozenset(_TOKENS)


def format_token(d: CalendarDate, token: str) -> int | str:
    """Project d through one named token (case-insensitive).

    Unknown tokens give INVALID_TOKEN rather than a fallback format.
    """
    fn = _TOKENS.get(str(token).lower())
    if fn is None:
        return INVALID_TOKEN
    return fn(d)
