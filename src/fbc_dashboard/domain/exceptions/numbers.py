# src/fbc_dashboard/domain/exceptions/numbers.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Numeric Validation Exceptions.

Synopsis:
    Raised by the numeric parsing helpers when a user-supplied value is not a
    usable number. Each error carries the offending field name and raw value
    in both the message and ``details``.

Layer:
    domain/exceptions
"""

from __future__ import annotations

from typing import Any

from fbc_dashboard.domain.exceptions.base import DomainError


class NumberValidationError(DomainError):
    """Common parent of all numeric validation failures.

    Attributes:
        code: Stable, machine-readable error code.
        field_name: Name of the field being validated.
        raw_value: Value as received from the caller.
    """

    code = "NUMBER_VALIDATION_ERROR"

    def __init__(self, message: str, *, field_name: str, raw_value: Any) -> None:
        super().__init__(message, details={"field": field_name, "value": repr(raw_value)})
        self.field_name = field_name
        self.raw_value = raw_value


class InvalidNumber(NumberValidationError):
    """A numeric field holds NaN.

    Attributes:
        code: Stable, machine-readable error code.
    """

    code = "INVALID_NUMBER"


class NonFiniteNumber(NumberValidationError):
    """A numeric field holds +Infinity or -Infinity.

    Attributes:
        code: Stable, machine-readable error code.
    """

    code = "NON_FINITE"


class NumberParseError(NumberValidationError):
    """A string could not be parsed as a number (includes the empty string).

    Attributes:
        code: Stable, machine-readable error code.
    """

    code = "PARSE_ERROR"
