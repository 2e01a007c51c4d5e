"""CalendarDate: a validated calendar date with time of day and a fixed timezone.

Working with dates in a controlled way: every mutation goes through a named
operation that validates the complete candidate before committing it. The
wrapped datetime is never handed out, so there is no way to bypass the checks.
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, tzinfo

from . import gregorian
from .compare import date_diff
from .config import resolve_timezone
from .errors import DisabledOperation, InvalidDate, InvalidTime
from .formatting import default_text, format_token, storage
from .numeric import as_number, as_positive_count, as_whole
from .parsers import parse_dmy, parse_mdy, parse_storage
from .types import FormatToken

logger = logging.getLogger(__name__)


class CalendarDate:
    def __init__(self, timezone: str | tzinfo | None = None) -> None:
        """Start at the current instant in timezone (default: the configured zone)."""
        self._dt = datetime.now(tz=resolve_timezone(timezone))

    @classmethod
    def now(cls, timezone: str | tzinfo | None = None) -> CalendarDate:
        return cls(timezone)

    @classmethod
    def from_parts(
        cls,
        year: object,
        month: object,
        day: object,
        hour: object = 0,
        minute: object = 0,
        second: object = 0,
        *,
        timezone: str | tzinfo | None = None,
    ) -> CalendarDate:
        d = cls(timezone)
        d.set_date(year, month, day)
        d.set_time(hour, minute, second)
        return d

    @property
    def year(self) -> int:
        return self._dt.year

    @property
    def month(self) -> int:
        return self._dt.month

    @property
    def day(self) -> int:
        return self._dt.day

    @property
    def hour(self) -> int:
        return self._dt.hour

    @property
    def minute(self) -> int:
        return self._dt.minute

    @property
    def second(self) -> int:
        return self._dt.second

    @property
    def timezone(self) -> tzinfo:
        return self._dt.tzinfo  # type: ignore[return-value]

    @property
    def weekday(self) -> int:
        """0 = Monday ... 6 = Sunday."""
        return self._dt.weekday()

    def to_date(self) -> date:
        return self._dt.date()

    def is_leap(self) -> bool:
        return gregorian.is_leap(self.year)

    def copy(self) -> CalendarDate:
        clone = self.__class__.__new__(self.__class__)
        clone._dt = self._dt
        return clone

    def get(self, token: FormatToken) -> int | str:
        """Formatted part by name: mdy, mdy0, dmy, dmy0, mysql, fullyear, year,
        month, month0, monthname, monthabbr, day, day0, dayordinal, dayname, dayabbr.
        """
        return format_token(self, token)

    def set_date(self, year: object, month: object, day: object) -> None:
        """Set year, month and day together.

        Raises NonNumericInput if a part is not a number and InvalidDate if
        the triple is not a real date (Feb 30, month 13, 2.5 ...).
        """
        y = as_number(year, op="set_date")
        m = as_number(month, op="set_date")
        d = as_number(day, op="set_date")

        yi, mi, di = as_whole(y), as_whole(m), as_whole(d)
        if yi is None or mi is None or di is None or not gregorian.is_valid_date(yi, mi, di):
            raise InvalidDate(f"Non-existent date: year={year!r} month={month!r} day={day!r}")

        self._dt = self._replaced("set_date", year=yi, month=mi, day=di)

    def set_time(self, hour: object, minute: object, second: object = 0) -> None:
        h = as_number(hour, op="set_time")
        mi = as_number(minute, op="set_time")
        s = as_number(second, op="set_time")

        hi, mii, si = as_whole(h), as_whole(mi), as_whole(s)
        if (
            hi is None
            or mii is None
            or si is None
            or not 0 <= hi <= 23
            or not 0 <= mii <= 59
            or not 0 <= si <= 59
        ):
            raise InvalidTime(f"Invalid time: hour={hour!r} minute={minute!r} second={second!r}")

        self._dt = self._dt.replace(hour=hi, minute=mii, second=si, microsecond=0)

    def set_mdy(self, text: str) -> None:
        """Set from MM/DD/YYYY; any of - / : . or space may separate the parts."""
        parts = parse_mdy(text)
        self.set_date(parts.year, parts.month, parts.day)

    def set_dmy(self, text: str) -> None:
        """Set from DD/MM/YYYY; any of - / : . or space may separate the parts."""
        parts = parse_dmy(text)
        self.set_date(parts.year, parts.month, parts.day)

    def set_from_storage(self, text: str) -> None:
        """Set from YYYY-MM-DD (year digit count not enforced)."""
        parts = parse_storage(text)
        self.set_date(parts.year, parts.month, parts.day)

    def modify(self, *args: object, **kwargs: object) -> None:
        """Free-form relative modification is not supported.

        Use add_days/add_weeks/add_months/add_years and their sub_ variants.
        """
        logger.warning("modify_disabled", extra={"modify_args": args})
        raise DisabledOperation("modify() has been disabled")

    def add_days(self, num_days: object) -> None:
        n = as_positive_count(num_days, op="add_days")
        self._dt = self._advanced("add_days", n)

    def sub_days(self, num_days: object) -> None:
        n = as_positive_count(num_days, op="sub_days")
        self._dt = self._advanced("sub_days", -n)

    def add_weeks(self, num_weeks: object) -> None:
        n = as_positive_count(num_weeks, op="add_weeks")
        self._dt = self._advanced("add_weeks", 7 * n)

    def sub_weeks(self, num_weeks: object) -> None:
        n = as_positive_count(num_weeks, op="sub_weeks")
        self._dt = self._advanced("sub_weeks", -7 * n)

    def add_months(self, num_months: object) -> None:
        """Add months, clamping to the month's last day: Aug 31 + 1 month is Sep 30."""
        n = as_positive_count(num_months, op="add_months")
        y, m, d = gregorian.shift_months(self.year, self.month, self.day, n)
        self._dt = self._replaced("add_months", year=y, month=m, day=d)

    def sub_months(self, num_months: object) -> None:
        """Subtract months, clamping: Aug 31, 2008 - 18 months is Feb 28, 2007."""
        n = as_positive_count(num_months, op="sub_months")
        y, m, d = gregorian.shift_months(self.year, self.month, self.day, -n)
        self._dt = self._replaced("sub_months", year=y, month=m, day=d)

    def add_years(self, num_years: object) -> None:
        n = as_positive_count(num_years, op="add_years")
        y, m, d = gregorian.shift_years(self.year, self.month, self.day, n)
        self._dt = self._replaced("add_years", year=y, month=m, day=d)

    def sub_years(self, num_years: object) -> None:
        n = as_positive_count(num_years, op="sub_years")
        y, m, d = gregorian.shift_years(self.year, self.month, self.day, -n)
        self._dt = self._replaced("sub_years", year=y, month=m, day=d)

    date_diff = staticmethod(date_diff)

    def _replaced(self, op: str, *, year: int, month: int, day: int) -> datetime:
        try:
            return self._dt.replace(year=year, month=month, day=day)
        except (ValueError, OverflowError) as e:
            raise InvalidDate(f"{op}(): {year:04d}-{month:02d}-{day:02d} is outside the supported range") from e

    def _advanced(self, op: str, days: int) -> datetime:
        # wall-clock advance; the day count is exact across DST changes
        try:
            return self._dt + timedelta(days=days)
        except OverflowError as e:
            raise InvalidDate(f"{op}(): result is outside the supported range") from e

    def __str__(self) -> str:
        return default_text(self)

    def __repr__(self) -> str:
        return (
            f"CalendarDate({storage(self)} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}, {self.timezone})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarDate):
            return NotImplemented
        return self._key() == other._key()

    def _key(self) -> tuple:
        return (self.year, self.month, self.day, self.hour, self.minute, self.second, self.timezone)

    __hash__ = None  # type: ignore[assignment]
