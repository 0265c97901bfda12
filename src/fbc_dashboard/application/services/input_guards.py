# src/fbc_dashboard/application/services/input_guards.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use case input guards (application layer).

Purpose:
    Shared argument checks for use cases: ISO 8601 bounds, month keys and
    non-negative amounts. Each guard returns the checked value or raises a
    domain exception naming the offending field.

Layer:
    application/services
"""

from __future__ import annotations

from fbc_dashboard.domain.exceptions.validation import BusinessValidationError
from fbc_dashboard.domain.services.calendar import parse_iso_datetime, validate_date_range
from fbc_dashboard.domain.services.numbers import validate_number
from fbc_dashboard.domain.services.validation import is_valid_iso8601, is_valid_month_format


def require_iso_date(value: str, field_name: str) -> str:
    """Return ``value`` if it is a valid ISO 8601 timestamp.

    Raises:
        BusinessValidationError: If the value is malformed.
    """
    if not is_valid_iso8601(value):
        raise BusinessValidationError(
            f"{field_name} must be a valid ISO 8601 string",
            details={"field": field_name, "value": value},
        )
    return value


def require_optional_iso_date(value: str | None, field_name: str) -> str | None:
    """Like :func:`require_iso_date` but let ``None`` through."""
    if value is None:
        return None
    return require_iso_date(value, field_name)


def require_date_range(start_date: str | None, end_date: str | None) -> None:
    """Validate optional ISO bounds and their order.

    Raises:
        BusinessValidationError: If a bound is malformed or ``start_date``
            is after ``end_date``.
    """
    require_optional_iso_date(start_date, "startDate")
    require_optional_iso_date(end_date, "endDate")
    if start_date is not None and end_date is not None:
        if not validate_date_range(parse_iso_datetime(start_date), parse_iso_datetime(end_date)):
            raise BusinessValidationError(
                "startDate must be before or equal to endDate",
                details={"start_date": start_date, "end_date": end_date},
            )


def require_month(month: str) -> str:
    """Return ``month`` if it is a ``YYYY-MM`` key.

    Raises:
        BusinessValidationError: If the key is malformed.
    """
    if not is_valid_month_format(month):
        raise BusinessValidationError(
            "month must be in YYYY-MM format",
            details={"field": "month", "value": month},
        )
    return month


def require_non_negative(value: float, field_name: str) -> float:
    """Return ``value`` if it is finite and >= 0.

    Raises:
        InvalidNumber: If the value is NaN.
        NonFiniteNumber: If the value is infinite.
        BusinessValidationError: If the value is negative.
    """
    validate_number(value, field_name)
    if value < 0:
        raise BusinessValidationError(
            f"{field_name} must be >= 0",
            details={"field": field_name, "value": value},
        )
    return float(value)


__all__ = [
    "require_date_range",
    "require_iso_date",
    "require_month",
    "require_non_negative",
    "require_optional_iso_date",
]
