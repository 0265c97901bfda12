# src/fbc_dashboard/domain/services/calendar.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Calendar helpers for reporting.

Purpose:
    Parse and render ISO 8601 timestamps, enumerate the calendar months of a
    date range, derive period bucket keys and compute the bounds of the
    current month, quarter or year.

Layer:
    domain/services

Notes:
    - Pure domain logic:
        * No logging.
        * No persistence or gateways.
    - All computations happen in UTC.
    - Month enumeration moves the cursor to the first day of the month
      before stepping, so a range starting on the 31st never skips a
      shorter month.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import UTC, date, datetime, timedelta
from typing import TypeVar

from fbc_dashboard.domain.entities.activity import Activity
from fbc_dashboard.domain.enums.period import RevenuePeriod, StatisticsPeriod

_A = TypeVar("_A", bound=Activity)


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO 8601 string into an aware UTC datetime.

    Date-only strings resolve to midnight UTC; naive timestamps are taken as
    UTC.

    Args:
        value: ISO 8601 date or timestamp.

    Returns:
        Timezone-aware datetime in UTC.

    Raises:
        ValueError: If ``value`` is not parseable.
    """
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def to_iso_string(moment: datetime) -> str:
    """Render ``moment`` as ``YYYY-MM-DDTHH:MM:SS.sssZ`` in UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    rendered = moment.astimezone(UTC).replace(tzinfo=None).isoformat(timespec="milliseconds")
    return f"{rendered}Z"


def _as_utc_date(value: str | date | datetime) -> date:
    if isinstance(value, datetime):
        return (value if value.tzinfo else value.replace(tzinfo=UTC)).astimezone(UTC).date()
    if isinstance(value, date):
        return value
    return parse_iso_datetime(value).date()


def iter_months(start: str | date | datetime, end: str | date | datetime) -> Iterator[date]:
    """Yield the first day of every calendar month touched by ``[start, end]``.

    Args:
        start: Inclusive lower bound.
        end: Inclusive upper bound.

    Yields:
        First-of-month dates in ascending order. Nothing when ``start`` is
        after ``end``.
    """
    cursor = _as_utc_date(start).replace(day=1)
    last = _as_utc_date(end).replace(day=1)
    while cursor <= last:
        yield cursor
        if cursor.month == 12:
            cursor = cursor.replace(year=cursor.year + 1, month=1)
        else:
            cursor = cursor.replace(month=cursor.month + 1)


def get_months_in_range(start: str | date | datetime, end: str | date | datetime) -> list[str]:
    """Return the ``YYYY-MM`` keys of every month in ``[start, end]``.

    Example:
        ``get_months_in_range("2025-01-31", "2025-03-15")`` returns
        ``["2025-01", "2025-02", "2025-03"]``.
    """
    return [f"{month.year:04d}-{month.month:02d}" for month in iter_months(start, end)]


def period_key(moment: datetime, period: StatisticsPeriod) -> str:
    """Return the bucket key of ``moment`` for the given granularity.

    Args:
        moment: Timestamp to bucket (naive values are taken as UTC).
        period: DAILY (``YYYY-MM-DD``), MONTHLY (``YYYY-MM``) or YEARLY
            (``YYYY``).

    Returns:
        Bucket key string.
    """
    utc = (moment if moment.tzinfo else moment.replace(tzinfo=UTC)).astimezone(UTC)
    if period is StatisticsPeriod.DAILY:
        return f"{utc.year:04d}-{utc.month:02d}-{utc.day:02d}"
    if period is StatisticsPeriod.MONTHLY:
        return f"{utc.year:04d}-{utc.month:02d}"
    return f"{utc.year:04d}"


def filter_by_date_range(
    activities: Iterable[_A],
    start: datetime | None = None,
    end: datetime | None = None,
) -> list[_A]:
    """Keep activities whose date lies in ``[start, end]``.

    Args:
        activities: Activities to filter.
        start: Inclusive lower bound, or ``None`` for unbounded.
        end: Inclusive upper bound, or ``None`` for unbounded.

    Returns:
        Matching activities in input order.
    """
    return [
        a
        for a in activities
        if (start is None or a.date >= start) and (end is None or a.date <= end)
    ]


def _end_of_day(day: date) -> datetime:
    return datetime(day.year, day.month, day.day, 23, 59, 59, 999000, tzinfo=UTC)


def _start_of_day(day: date) -> datetime:
    return datetime(day.year, day.month, day.day, tzinfo=UTC)


def _last_day_of_month(year: int, month: int) -> date:
    if month == 12:
        return date(year, 12, 31)
    return date(year, month + 1, 1) - timedelta(days=1)


def start_of_month(day: date) -> datetime:
    """Return midnight UTC on the first day of the month containing ``day``."""
    return _start_of_day(day.replace(day=1))


def end_of_month(day: date) -> datetime:
    """Return ``23:59:59.999`` UTC on the last day of the month containing ``day``."""
    return _end_of_day(_last_day_of_month(day.year, day.month))


def validate_date_range(start: datetime, end: datetime) -> bool:
    """Return True iff ``start`` is not after ``end``."""
    return start <= end


def period_bounds(period: RevenuePeriod, today: date) -> tuple[datetime, datetime]:
    """Return the UTC bounds of the month, quarter or year containing ``today``.

    Args:
        period: MONTH, QUARTER or YEAR.
        today: Reference day.

    Returns:
        ``(start, end)`` where ``start`` is midnight on the first day and
        ``end`` is ``23:59:59.999`` on the last day.

    Raises:
        ValueError: For :attr:`RevenuePeriod.CUSTOM`, whose bounds are chosen
            by the caller.
    """
    if period is RevenuePeriod.MONTH:
        return start_of_month(today), end_of_month(today)
    if period is RevenuePeriod.QUARTER:
        first_month = 3 * ((today.month - 1) // 3) + 1
        first = date(today.year, first_month, 1)
        last = _last_day_of_month(today.year, first_month + 2)
    elif period is RevenuePeriod.YEAR:
        first = date(today.year, 1, 1)
        last = date(today.year, 12, 31)
    else:
        raise ValueError("CUSTOM periods have no implicit bounds")
    return _start_of_day(first), _end_of_day(last)


__all__ = [
    "end_of_month",
    "filter_by_date_range",
    "get_months_in_range",
    "iter_months",
    "parse_iso_datetime",
    "period_bounds",
    "period_key",
    "start_of_month",
    "to_iso_string",
    "validate_date_range",
]
