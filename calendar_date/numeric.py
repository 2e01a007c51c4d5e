from __future__ import annotations

import math
import numbers
import re

from .errors import NonNumericInput, NonPositiveInput

Number = numbers.Real

# Plain decimal text: no underscores, no hex/octal prefixes, optional exponent.
NUMERIC_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")
INTEGER_RE = re.compile(r"[+-]?\d+")


def as_number(value: object, *, op: str) -> Number:
    """Return value as a real number, accepting numeric strings like " 12 " or "3.5".

    bool is rejected even though it is an int subclass.
    """
    if isinstance(value, bool):
        raise NonNumericInput(f"{op}() expects numbers, got {value!r}")
    if isinstance(value, numbers.Integral):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            raise NonNumericInput(f"{op}() expects finite numbers, got {value!r}")
        return value
    if isinstance(value, numbers.Real):
        # other Real types (Fraction) are exact and always finite
        return value
    if isinstance(value, str):
        s = value.strip()
        if INTEGER_RE.fullmatch(s):
            try:
                return int(s)
            except ValueError:
                # beyond the interpreter's int string-conversion digit limit
                raise NonNumericInput(f"{op}() expects numbers, got a {len(s)}-digit string") from None
        if not NUMERIC_RE.fullmatch(s):
            raise NonNumericInput(f"{op}() expects numbers, got {value!r}")
        f = float(s)
        if not math.isfinite(f):
            raise NonNumericInput(f"{op}() expects finite numbers, got {value!r}")
        return f
    raise NonNumericInput(f"{op}() expects numbers, got {value!r}")


def as_whole(value: Number) -> int | None:
    """Return value as an int if it has no fractional part, else None."""
    n = int(value)
    return n if n == value else None


def as_positive_count(value: object, *, op: str) -> int:
    """Validate a shift amount: numeric, at least 1, truncated toward zero."""
    n = as_number(value, op=op)
    if n < 1:
        raise NonPositiveInput(f"{op}() expects a positive integer, got {value!r}")
    return int(n)
