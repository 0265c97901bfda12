# src/fbc_dashboard/domain/services/numbers.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Numeric parsing helpers.

Purpose:
    Turn user-supplied values into finite floats. Parsing happens first and
    finiteness is checked afterwards: ``float("Infinity")`` and
    ``float("NaN")`` succeed at the parser level and are rejected by the
    validation step, so scientific notation such as ``"1e3"`` stays valid.

Layer:
    domain/services

Notes:
    - Raising helpers embed the field name and the raw value in the message.
    - ``bool`` is not accepted as a number.
    - Digit-group underscores (``"1_000"``), which :func:`float` would
      accept, are rejected.
"""

from __future__ import annotations

import math
from typing import Any

from fbc_dashboard.domain.exceptions.numbers import (
    InvalidNumber,
    NonFiniteNumber,
    NumberParseError,
    NumberValidationError,
)


def validate_number(value: float, field_name: str) -> None:
    """Reject NaN and infinities.

    Zero and negative values are valid here; sign rules belong to callers.

    Args:
        value: Number to check.
        field_name: Field name used in the error message.

    Raises:
        InvalidNumber: If ``value`` is NaN.
        NonFiniteNumber: If ``value`` is +/-infinity.
    """
    if math.isnan(value):
        raise InvalidNumber(
            f"{field_name} must be a valid number", field_name=field_name, raw_value=value
        )
    if math.isinf(value):
        raise NonFiniteNumber(
            f"{field_name} must be a finite number", field_name=field_name, raw_value=value
        )


def is_valid_number(value: Any) -> bool:
    """Return True iff ``value`` is a real, finite number (0 and negatives included)."""
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)


def parse_valid_number(value: Any, field_name: str) -> float:
    """Parse a number or numeric string into a finite float.

    Args:
        value: ``int``, ``float`` or ``str``. Strings may carry surrounding
            whitespace and use scientific notation.
        field_name: Field name used in error messages.

    Returns:
        The parsed finite value.

    Raises:
        NumberParseError: If the value is not a number, is an empty or
            non-numeric string, or parses to NaN.
        NonFiniteNumber: If the value is or parses to +/-infinity.
        InvalidNumber: If a numeric (non-string) value is NaN.
    """
    if isinstance(value, bool):
        raise NumberParseError(
            f"Invalid {field_name} value: {value}", field_name=field_name, raw_value=value
        )
    if isinstance(value, int | float):
        validate_number(value, field_name)
        return float(value)
    if not isinstance(value, str):
        raise NumberParseError(
            f"Invalid {field_name} value: {value}", field_name=field_name, raw_value=value
        )

    text = value.strip()
    if not text or "_" in text:
        raise NumberParseError(
            f"Invalid {field_name} value: {value}", field_name=field_name, raw_value=value
        )
    try:
        parsed = float(text)
    except ValueError as exc:
        raise NumberParseError(
            f"Invalid {field_name} value: {value}", field_name=field_name, raw_value=value
        ) from exc

    if math.isnan(parsed):
        raise NumberParseError(
            f"Invalid {field_name} value: {value}", field_name=field_name, raw_value=value
        )
    if math.isinf(parsed):
        raise NonFiniteNumber(
            f"{field_name} must be a finite number: {value}",
            field_name=field_name,
            raw_value=value,
        )
    return parsed


def try_parse_number(value: Any) -> float | None:
    """Return the parsed finite value, or ``None`` if it is not a valid number."""
    try:
        return parse_valid_number(value, "value")
    except NumberValidationError:
        return None


def is_valid_number_string(value: Any) -> bool:
    """Return True iff ``value`` is a string holding a finite number."""
    return isinstance(value, str) and try_parse_number(value) is not None


def is_valid_positive_number_string(value: Any) -> bool:
    """Return True iff ``value`` is a string holding a number > 0."""
    if not isinstance(value, str):
        return False
    parsed = try_parse_number(value)
    return parsed is not None and parsed > 0


def is_valid_non_negative_number_string(value: Any) -> bool:
    """Return True iff ``value`` is a string holding a number >= 0."""
    if not isinstance(value, str):
        return False
    parsed = try_parse_number(value)
    return parsed is not None and parsed >= 0


def is_valid_optional_positive_number_string(value: Any) -> bool:
    """Return True if ``value`` is absent or blank, else defer to the positive check."""
    if value is None:
        return True
    if isinstance(value, str) and not value.strip():
        return True
    return is_valid_positive_number_string(value)


__all__ = [
    "is_valid_non_negative_number_string",
    "is_valid_number",
    "is_valid_number_string",
    "is_valid_optional_positive_number_string",
    "is_valid_positive_number_string",
    "parse_valid_number",
    "try_parse_number",
    "validate_number",
]
