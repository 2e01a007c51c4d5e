from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .caldate import CalendarDate


def day_number(year: int, month: int, day: int) -> int:
    """Days since 1970-01-01 in the proleptic Gregorian calendar.

    Works on calendar fields only, so time of day and UTC offset never enter.
    """
    # shift so the year starts in March and Feb 29 is the last day of the year
    y = year - 1 if month <= 2 else year
    era = y // 400
    yoe = y - era * 400
    mp = (month + 9) % 12
    doy = (153 * mp + 2) // 5 + day - 1
    doe = yoe * 365 + yoe // 4 - yoe // 100 + doy
    return era * 146097 + doe - 719468


def date_diff(start: CalendarDate, end: CalendarDate) -> int:
    """Whole days from start to end: positive if start is earlier, negative if later."""
    return day_number(end.year, end.month, end.day) - day_number(start.year, start.month, start.day)
