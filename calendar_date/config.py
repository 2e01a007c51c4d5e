from __future__ import annotations

import os
from datetime import tzinfo
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import find_dotenv, load_dotenv

from .errors import UnknownTimezone

DEFAULT_TIMEZONE = "Europe/Berlin"
TIMEZONE_ENV_VAR = "CALENDAR_DATE_TZ"


def _zone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as e:
        raise UnknownTimezone(f"Unknown timezone: {name!r}") from e


@lru_cache(maxsize=None)
def _load_env() -> None:
    """Load a .env from the working directory (or a parent) once per process."""
    env_path = find_dotenv(usecwd=True)
    if env_path:
        load_dotenv(env_path)


def default_timezone() -> ZoneInfo:
    """Return the configured default zone.

    Reads CALENDAR_DATE_TZ (env vars or a .env in the working directory;
    see .env.example), falling back to DEFAULT_TIMEZONE.
    """
    _load_env()
    name = os.environ.get(TIMEZONE_ENV_VAR, "").strip()
    return _zone(name or DEFAULT_TIMEZONE)


def resolve_timezone(value: str | tzinfo | None) -> tzinfo:
    if value is None:
        return default_timezone()
    if isinstance(value, tzinfo):
        return value
    if isinstance(value, str) and value.strip():
        return _zone(value.strip())
    raise UnknownTimezone(f"Expected a timezone name or tzinfo, got {value!r}")
