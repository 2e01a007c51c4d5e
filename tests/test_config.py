from __future__ import annotations

from datetime import timezone as dt_timezone
from pathlib import Path
from typing import Iterator
from zoneinfo import ZoneInfo

import pytest

from calendar_date import CalendarDate, config
from calendar_date.config import DEFAULT_TIMEZONE, TIMEZONE_ENV_VAR, default_timezone, resolve_timezone
from calendar_date.errors import UnknownTimezone


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    # setenv first so teardown also removes anything load_dotenv writes
    monkeypatch.setenv(TIMEZONE_ENV_VAR, "UTC")
    monkeypatch.delenv(TIMEZONE_ENV_VAR)
    monkeypatch.chdir(tmp_path)
    config._load_env.cache_clear()
    yield
    config._load_env.cache_clear()


def test_default_timezone_falls_back_to_constant() -> None:
    assert default_timezone() == ZoneInfo(DEFAULT_TIMEZONE)
    assert CalendarDate().timezone == ZoneInfo("Europe/Berlin")


def test_default_timezone_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(TIMEZONE_ENV_VAR, "America/New_York")
    assert CalendarDate().timezone == ZoneInfo("America/New_York")


def test_default_timezone_from_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(f"{TIMEZONE_ENV_VAR}=Asia/Tokyo\n", encoding="utf-8")
    assert default_timezone() == ZoneInfo("Asia/Tokyo")


def test_unknown_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    with pytest.raises(UnknownTimezone):
        CalendarDate("Mars/Olympus_Mons")
    monkeypatch.setenv(TIMEZONE_ENV_VAR, "Nowhere/Special")
    with pytest.raises(UnknownTimezone):
        default_timezone()


def test_resolve_timezone_passthrough() -> None:
    assert resolve_timezone(dt_timezone.utc) is dt_timezone.utc
    assert resolve_timezone(" UTC ") == ZoneInfo("UTC")
    with pytest.raises(UnknownTimezone):
        resolve_timezone(42)  # type: ignore[arg-type]


def test_dotenv_is_looked_up_once(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / ".env").write_text(f"{TIMEZONE_ENV_VAR}=Asia/Tokyo\n", encoding="utf-8")
    calls: list[bool] = []

    def counting_find_dotenv(*, usecwd: bool = False) -> str:
        calls.append(usecwd)
        return str(tmp_path / ".env")

    monkeypatch.setattr(config, "find_dotenv", counting_find_dotenv)

    zones = {CalendarDate().timezone, CalendarDate.now().timezone, CalendarDate.from_parts(2024, 1, 1).timezone}

    assert zones == {ZoneInfo("Asia/Tokyo")}
    assert calls == [True]


def test_env_var_still_read_per_call_after_dotenv_load(monkeypatch: pytest.MonkeyPatch) -> None:
    assert CalendarDate().timezone == ZoneInfo(DEFAULT_TIMEZONE)
    monkeypatch.setenv(TIMEZONE_ENV_VAR, "America/Chicago")
    assert CalendarDate().timezone == ZoneInfo("America/Chicago")
