"""Calendar arithmetic on plain (year, month, day) integers.

Month and year shifts never go through a continuous-time delta: the target
month is computed directly and the day is clamped to that month's last day
when it would overflow (Aug 31 + 1 month is Sep 30, not Oct 1).
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

THIRTY_DAY_MONTHS = frozenset({4, 6, 9, 11})

_DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def is_leap(year: int) -> bool:
    """Gregorian rule: every 4th year, except centuries, except every 4th century."""
    if year % 400 == 0:
        return True
    if year % 100 == 0:
        return False
    return year % 4 == 0


def days_in_month(year: int, month: int) -> int:
    if not 1 <= month <= 12:
        raise ValueError(f"month must be 1..12, got {month}")
    if month == 2 and is_leap(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def is_valid_date(year: int, month: int, day: int) -> bool:
    """Proleptic Gregorian validity check; the year itself is unbounded."""
    if not 1 <= month <= 12:
        return False
    return 1 <= day <= days_in_month(year, month)


def normalize_month(raw_month: int) -> tuple[int, int]:
    """Fold a signed month count into (year_offset, month) with month in 1..12.

    raw_month is relative to the start of the current year: 13 is January of
    next year, 0 is December of last year, -10 is February of last year.
    """
    if 0 < raw_month <= 12:
        return 0, raw_month

    # floor division makes the negative direction symmetric with the positive one
    years, month = divmod(raw_month, 12)
    if month == 0:
        # exact multiple of 12 is December of the year before, not January
        return years - 1, 12
    return years, month


def clamp_day(year: int, month: int, day: int) -> int:
    """Return day, or the last day of (year, month) if day overflows it."""
    if is_valid_date(year, month, day):
        return day

    if month in THIRTY_DAY_MONTHS:
        clamped = 30
    else:
        # only February can still be short here
        clamped = 29 if is_leap(year) else 28

    logger.debug(
        "day_clamped",
        extra={"year": year, "month": month, "day": day, "clamped_day": clamped},
    )
    return clamped


def shift_months(year: int, month: int, day: int, delta: int) -> tuple[int, int, int]:
    """Move (year, month, day) by a signed number of months."""
    year_offset, new_month = normalize_month(month + delta)
    new_year = year + year_offset
    return new_year, new_month, clamp_day(new_year, new_month, day)


def shift_years(year: int, month: int, day: int, delta: int) -> tuple[int, int, int]:
    """Move (year, month, day) by a signed number of years (Feb 29 may become Feb 28)."""
    new_year = year + delta
    return new_year, month, clamp_day(new_year, month, day)
