from __future__ import annotations

import pytest

from calendar_date.errors import ParseError
from calendar_date.parsers import parse_dmy, parse_mdy, parse_storage, split_date


@pytest.mark.parametrize("text", ["12/25/2023", "12-25-2023", "12:25:2023", "12.25.2023", "12 25 2023"])
def test_split_date_accepts_every_delimiter(text: str) -> None:
    assert split_date(text) == ["12", "25", "2023"]


def test_split_date_does_not_collapse_delimiter_runs() -> None:
    assert split_date("12//25/2023") == ["12", "", "25", "2023"]


def test_parse_mdy_orders_tokens() -> None:
    parts = parse_mdy("12/25/2023")
    assert (parts.year, parts.month, parts.day) == ("2023", "12", "25")
    assert parts.source == "12/25/2023"


def test_parse_dmy_orders_tokens() -> None:
    parts = parse_dmy("25.12.2023")
    assert (parts.year, parts.month, parts.day) == ("2023", "12", "25")


def test_parse_storage_orders_tokens() -> None:
    parts = parse_storage("2023-12-25")
    assert (parts.year, parts.month, parts.day) == ("2023", "12", "25")


@pytest.mark.parametrize("parse", [parse_mdy, parse_dmy, parse_storage])
@pytest.mark.parametrize("text", ["2023-12", "1/2/3/2023", "", "12//25/2023"])
def test_wrong_token_count_is_parse_error(parse, text: str) -> None:
    with pytest.raises(ParseError):
        parse(text)


@pytest.mark.parametrize("parse", [parse_mdy, parse_dmy])
@pytest.mark.parametrize("text", ["1/2/23", "1/2/02023"])
def test_day_and_month_first_require_four_digit_year(parse, text: str) -> None:
    with pytest.raises(ParseError):
        parse(text)


def test_storage_form_does_not_require_four_digit_year() -> None:
    assert parse_storage("99-1-2").year == "99"
    assert parse_storage("987-6-5").year == "987"


def test_non_string_input_is_parse_error() -> None:
    with pytest.raises(ParseError):
        parse_mdy(20231225)  # type: ignore[arg-type]
