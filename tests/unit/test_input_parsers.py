from __future__ import annotations

from datetime import datetime

import pytest

from daily_planner.domain.input_parsers import InputParseError, parse_due_date, parse_task_id


def test_due_date_parses_plain_calendar_date() -> None:
    assert parse_due_date("2024-01-01") == datetime(2024, 1, 1)


def test_due_date_accepts_iso_date_time_and_surrounding_whitespace() -> None:
    assert parse_due_date("  2024-03-05T14:30  ") == datetime(2024, 3, 5, 14, 30)


@pytest.mark.parametrize(
    ("raw", "reason"),
    [
        ("", "empty_due_date"),
        ("   ", "empty_due_date"),
        ("tomorrow", "invalid_due_date"),
        ("2024-13-01", "invalid_due_date"),
        ("01/02/2024", "invalid_due_date"),
    ],
)
def test_due_date_rejects_unparseable_values(raw: str, reason: str) -> None:
    with pytest.raises(InputParseError) as exc_info:
        parse_due_date(raw)

    assert exc_info.value.reason == reason


def test_task_id_parses_decimal_integers() -> None:
    assert parse_task_id("42") == 42
    assert parse_task_id(" 7 ") == 7
    assert parse_task_id("-3") == -3


@pytest.mark.parametrize("raw", ["", "abc", "4.2", "1_000", "0x10", "12 3"])
def test_task_id_rejects_non_integers(raw: str) -> None:
    with pytest.raises(InputParseError) as exc_info:
        parse_task_id(raw)

    assert str(exc_info.value) == "invalid_task_id"


@pytest.mark.parametrize(
    "raw",
    ["99999999999999999999", "9223372036854775808", "-9223372036854775809"],
)
def test_task_id_rejects_values_outside_signed_64_bit_range(raw: str) -> None:
    with pytest.raises(InputParseError) as exc_info:
        parse_task_id(raw)

    assert exc_info.value.reason == "invalid_task_id"


def test_task_id_accepts_signed_64_bit_bounds() -> None:
    assert parse_task_id("9223372036854775807") == 2**63 - 1
    assert parse_task_id("-9223372036854775808") == -(2**63)


@pytest.mark.parametrize("raw", ["2024-01-01T10:00+02:00", "2024-01-01T10:00:00Z"])
def test_due_date_rejects_offset_aware_values(raw: str) -> None:
    with pytest.raises(InputParseError) as exc_info:
        parse_due_date(raw)

    assert exc_info.value.reason == "timezone_not_supported"
