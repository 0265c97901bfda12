# tests/unit/domain/services/test_calendar.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Tests for calendar helpers."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from fbc_dashboard.domain.enums.period import RevenuePeriod, StatisticsPeriod
from fbc_dashboard.domain.services.calendar import (
    end_of_month,
    filter_by_date_range,
    get_months_in_range,
    parse_iso_datetime,
    period_bounds,
    period_key,
    start_of_month,
    to_iso_string,
    validate_date_range,
)


def test_parse_iso_datetime_normalizes_to_utc() -> None:
    assert parse_iso_datetime("2025-01-15T10:00:00Z") == datetime(2025, 1, 15, 10, tzinfo=UTC)
    assert parse_iso_datetime("2025-01-15") == datetime(2025, 1, 15, tzinfo=UTC)
    shifted = parse_iso_datetime("2025-01-15T10:00:00+02:00")
    assert shifted == datetime(2025, 1, 15, 8, tzinfo=UTC)
    assert shifted.tzinfo == UTC


def test_parse_iso_datetime_rejects_garbage() -> None:
    with pytest.raises(ValueError):
        parse_iso_datetime("not a date")


def test_to_iso_string_uses_milliseconds_and_z_suffix() -> None:
    moment = datetime(2025, 3, 1, 9, 5, 7, 123456, tzinfo=UTC)
    assert to_iso_string(moment) == "2025-03-01T09:05:07.123Z"
    paris = datetime(2025, 3, 1, 10, 0, tzinfo=timezone(timedelta(hours=1)))
    assert to_iso_string(paris) == "2025-03-01T09:00:00.000Z"


def test_months_in_range_starting_on_the_31st_does_not_skip_february() -> None:
    assert get_months_in_range("2025-01-31", "2025-03-15") == ["2025-01", "2025-02", "2025-03"]


def test_months_in_range_crosses_year_boundary() -> None:
    assert get_months_in_range(date(2024, 11, 30), date(2025, 2, 1)) == [
        "2024-11",
        "2024-12",
        "2025-01",
        "2025-02",
    ]


def test_months_in_range_single_month_and_reversed_bounds() -> None:
    assert get_months_in_range("2025-05-10T00:00:00Z", "2025-05-20T00:00:00Z") == ["2025-05"]
    assert get_months_in_range("2025-06-01", "2025-05-01") == []


@pytest.mark.parametrize(
    ("period", "expected"),
    [
        (StatisticsPeriod.DAILY, "2025-01-05"),
        (StatisticsPeriod.MONTHLY, "2025-01"),
        (StatisticsPeriod.YEARLY, "2025"),
    ],
)
def test_period_key(period: StatisticsPeriod, expected: str) -> None:
    assert period_key(datetime(2025, 1, 5, 23, 30, tzinfo=UTC), period) == expected


def test_period_key_uses_utc_day() -> None:
    late_evening_in_new_york = datetime(2025, 1, 5, 22, 0, tzinfo=timezone(timedelta(hours=-5)))
    assert period_key(late_evening_in_new_york, StatisticsPeriod.DAILY) == "2025-01-06"


def test_filter_by_date_range_is_inclusive_and_open_ended(make_activity) -> None:
    early = make_activity(date="2025-01-01T00:00:00Z")
    mid = make_activity(date="2025-01-15T00:00:00Z")
    late = make_activity(date="2025-01-31T23:59:59Z")
    items = [early, mid, late]

    start = datetime(2025, 1, 1, tzinfo=UTC)
    end = datetime(2025, 1, 15, tzinfo=UTC)
    assert filter_by_date_range(items, start, end) == [early, mid]
    assert filter_by_date_range(items, start=end) == [mid, late]
    assert filter_by_date_range(items, end=start) == [early]
    assert filter_by_date_range(items) == items


def test_month_boundaries() -> None:
    assert start_of_month(date(2024, 2, 17)) == datetime(2024, 2, 1, tzinfo=UTC)
    assert end_of_month(date(2024, 2, 17)) == datetime(2024, 2, 29, 23, 59, 59, 999000, tzinfo=UTC)
    assert end_of_month(date(2025, 12, 3)).day == 31


def test_period_bounds_month_quarter_year() -> None:
    today = date(2025, 5, 20)
    assert period_bounds(RevenuePeriod.MONTH, today) == (
        datetime(2025, 5, 1, tzinfo=UTC),
        datetime(2025, 5, 31, 23, 59, 59, 999000, tzinfo=UTC),
    )
    assert period_bounds(RevenuePeriod.QUARTER, today) == (
        datetime(2025, 4, 1, tzinfo=UTC),
        datetime(2025, 6, 30, 23, 59, 59, 999000, tzinfo=UTC),
    )
    assert period_bounds(RevenuePeriod.YEAR, today) == (
        datetime(2025, 1, 1, tzinfo=UTC),
        datetime(2025, 12, 31, 23, 59, 59, 999000, tzinfo=UTC),
    )


def test_period_bounds_q4_ends_in_december() -> None:
    _, end = period_bounds(RevenuePeriod.QUARTER, date(2025, 11, 2))
    assert end.date() == date(2025, 12, 31)


def test_period_bounds_custom_is_rejected() -> None:
    with pytest.raises(ValueError):
        period_bounds(RevenuePeriod.CUSTOM, date(2025, 1, 1))


def test_validate_date_range() -> None:
    a = datetime(2025, 1, 1, tzinfo=UTC)
    b = datetime(2025, 2, 1, tzinfo=UTC)
    assert validate_date_range(a, b)
    assert validate_date_range(a, a)
    assert not validate_date_range(b, a)
