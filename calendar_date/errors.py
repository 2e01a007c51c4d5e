from __future__ import annotations


class DateError(ValueError):
    """Base class for every failed calendar-date operation."""


class ParseError(DateError):
    """Input text does not split into the expected date tokens."""


class InvalidDate(DateError):
    """Year/month/day do not name a real Gregorian date."""


class InvalidTime(DateError):
    """Hour/minute/second outside 0-23 / 0-59 / 0-59."""


class NonNumericInput(DateError):
    """A number was required but something else was given."""


class NonPositiveInput(NonNumericInput):
    """A shift amount was numeric but below 1."""


class DisabledOperation(DateError):
    """Free-form modification is not supported."""


class UnknownTimezone(DateError):
    """A timezone name could not be resolved."""
