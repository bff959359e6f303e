"""Tests for natural-language date resolution and fiscal years."""

import logging
from datetime import date

import pytest

from usaspending_research.dates import (
    get_current_fiscal_year,
    get_fiscal_year_range,
    parse_date_range,
    parse_natural_date,
    subtract_months,
    subtract_years,
)

TODAY = date(2024, 3, 15)


# ---------------------------------------------------------------------------
# Single dates
# ---------------------------------------------------------------------------
@pytest.mark.parametrize(
    "text,expected",
    [
        ("today", "2024-03-15"),
        ("yesterday", "2024-03-14"),
        ("  Yesterday ", "2024-03-14"),
        ("30 days ago", "2024-02-14"),
        ("1 day ago", "2024-03-14"),
        ("last 7 days", "2024-03-08"),
        ("last week", "2024-03-08"),
        ("last month", "2024-02-15"),
        ("last 6 months", "2023-09-15"),
        ("last quarter", "2023-12-15"),
        ("last year", "2023-03-15"),
        ("2 years ago", "2022-03-15"),
    ],
)
def test_phrases_resolve_against_today(text, expected):
    resolved = parse_natural_date(text, today=TODAY)
    assert resolved.value == expected
    assert resolved.warning is None
    assert not resolved.is_fallback


def test_iso_literal_returned_unchanged():
    assert parse_natural_date("2023-07-04", today=TODAY).value == "2023-07-04"


@pytest.mark.parametrize(
    "text",
    ["2024-03-05T10:00:00Z", "03/05/2024", "2024/03/05", "March 5, 2024", "Mar 5, 2024", "5 March 2024"],
)
def test_generic_calendar_formats(text):
    assert parse_natural_date(text, today=TODAY).value == "2024-03-05"


def test_unparseable_date_falls_back_to_today_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        resolved = parse_natural_date("next blue moon", today=TODAY)

    assert resolved.value == "2024-03-15"
    assert resolved.is_fallback
    assert "next blue moon" in resolved.warning
    assert any("date_fallback" in record.message for record in caplog.records)


def test_empty_date_is_a_fallback():
    assert parse_natural_date("", today=TODAY).is_fallback


@pytest.mark.parametrize("text", ["999999 days ago", "last 99999 months", "5000 years ago"])
def test_offsets_past_the_calendar_fall_back_to_today(text, caplog):
    with caplog.at_level(logging.WARNING):
        resolved = parse_natural_date(text, today=TODAY)

    assert resolved.value == "2024-03-15"
    assert resolved.is_fallback
    assert text in resolved.warning
    assert any("date_out_of_range" in record.message for record in caplog.records)


# ---------------------------------------------------------------------------
# Ranges
# ---------------------------------------------------------------------------
def test_last_30_days_range():
    resolved = parse_date_range("last 30 days", today=TODAY)
    assert (resolved.start_date, resolved.end_date) == ("2024-02-14", "2024-03-15")
    assert not resolved.is_fallback


@pytest.mark.parametrize(
    "text,start",
    [
        ("last week", "2024-03-08"),
        ("last month", "2024-02-15"),
        ("last 3 months", "2023-12-15"),
        ("last quarter", "2023-12-15"),
        ("last year", "2023-03-15"),
    ],
)
def test_last_phrases_end_today(text, start):
    resolved = parse_date_range(text, today=TODAY)
    assert resolved.start_date == start
    assert resolved.end_date == "2024-03-15"


def test_today_and_yesterday_collapse_to_one_day():
    today = parse_date_range("today", today=TODAY)
    yesterday = parse_date_range("Yesterday", today=TODAY)
    assert today.start_date == today.end_date == "2024-03-15"
    assert yesterday.start_date == yesterday.end_date == "2024-03-14"


def test_unparseable_range_falls_back_to_last_30_days(caplog):
    with caplog.at_level(logging.WARNING):
        resolved = parse_date_range("sometime soon", today=TODAY)

    assert (resolved.start_date, resolved.end_date) == ("2024-02-14", "2024-03-15")
    assert resolved.is_fallback
    assert "sometime soon" in resolved.warning
    assert any(record.levelno == logging.WARNING for record in caplog.records)


@pytest.mark.parametrize("text", ["last 99999 months", "last 999999 days"])
def test_range_past_the_calendar_falls_back_to_last_30_days(text):
    resolved = parse_date_range(text, today=TODAY)

    assert (resolved.start_date, resolved.end_date) == ("2024-02-14", "2024-03-15")
    assert resolved.is_fallback
    assert text in resolved.warning


# ---------------------------------------------------------------------------
# Calendar arithmetic (clamped to the last day of the target month)
# ---------------------------------------------------------------------------
def test_month_subtraction_clamps_in_leap_year():
    assert subtract_months(date(2024, 3, 31), 1) == date(2024, 2, 29)


def test_month_subtraction_clamps_in_common_year():
    assert subtract_months(date(2023, 3, 31), 1) == date(2023, 2, 28)


def test_month_subtraction_crosses_year_boundary():
    assert subtract_months(date(2024, 1, 31), 2) == date(2023, 11, 30)


def test_leap_day_minus_one_year():
    assert subtract_years(date(2024, 2, 29), 1) == date(2023, 2, 28)
    assert parse_natural_date("last year", today=date(2024, 2, 29)).value == "2023-02-28"


def test_last_month_from_month_end():
    assert parse_natural_date("last month", today=date(2024, 3, 31)).value == "2024-02-29"


# ---------------------------------------------------------------------------
# Fiscal years
# ---------------------------------------------------------------------------
def test_fiscal_year_range():
    fy = get_fiscal_year_range(2024)
    assert fy.start_date == "2023-10-01"
    assert fy.end_date == "2024-09-30"


@pytest.mark.parametrize(
    "today,expected",
    [
        (date(2024, 9, 30), 2024),
        (date(2024, 10, 1), 2025),
        (date(2024, 12, 31), 2025),
        (date(2025, 1, 1), 2025),
    ],
)
def test_current_fiscal_year(today, expected):
    assert get_current_fiscal_year(today) == expected
