# src/fbc_dashboard/domain/services/validation.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Business rule predicates.

Purpose:
    Boolean checks over already-constructed entities and raw strings. Callers
    branch on the returned value; these functions never raise for invalid
    input.

Layer:
    domain/services

Notes:
    - Pure domain logic:
        * No logging.
        * No persistence or gateways.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from fbc_dashboard.domain.entities.activity import Activity, StockMovement
from fbc_dashboard.domain.entities.product import Product
from fbc_dashboard.domain.enums.activity_type import (
    PRODUCT_REQUIRED_ACTIVITY_TYPES,
    ActivityType,
    StockMovementSource,
)

MIN_PASSWORD_LENGTH = 8

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_UUID_V4_RE = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)
_ISO8601_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(\.\d{3})?Z?$")
_MONTH_RE = re.compile(r"^(\d{4})-(\d{2})$")

_ACTIVITY_TYPE_VALUES = frozenset(t.value for t in ActivityType)
_MOVEMENT_SOURCE_VALUES = frozenset(s.value for s in StockMovementSource)


# ---------------------------------------------------------------------------
# Entity predicates
# ---------------------------------------------------------------------------


def is_valid_product(product: Product) -> bool:
    """Return True iff pricing is positive and stock is non-negative."""
    return product.unit_cost > 0 and product.sale_price > 0 and product.stock >= 0


def is_valid_activity(activity: Activity) -> bool:
    """Return True unless a SALE or STOCK_CORRECTION lacks a product.

    Args:
        activity: Activity to check.

    Returns:
        ``False`` when the activity type requires a product and
        ``product_id`` is missing or empty, ``True`` otherwise.
    """
    if activity.type in PRODUCT_REQUIRED_ACTIVITY_TYPES:
        return bool(activity.product_id)
    return True


def is_negative_for_sale(activity: Activity) -> bool:
    """Return True iff the activity is a SALE carrying a negative quantity.

    This checks the sign convention only; it does not block anything.
    """
    return activity.type == ActivityType.SALE and activity.quantity < 0


def is_valid_quantity_for_source(quantity: float, source: StockMovementSource | str) -> bool:
    """Check the sign of a stock movement quantity against its source.

    Args:
        quantity: Signed movement quantity.
        source: Movement source. Values outside the closed set are rejected.

    Returns:
        ``quantity > 0`` for CREATION, ``quantity < 0`` for SALE,
        ``quantity != 0`` for INVENTORY_ADJUSTMENT, ``False`` otherwise.
    """
    if not is_valid_stock_movement_source(source):
        return False
    resolved = StockMovementSource(source)
    if resolved is StockMovementSource.CREATION:
        return quantity > 0
    if resolved is StockMovementSource.SALE:
        return quantity < 0
    return quantity != 0


def is_valid_stock_movement(movement: StockMovement) -> bool:
    """Return True iff the movement has a product and a correctly signed quantity."""
    if not movement.product_id or not movement.product_id.strip():
        return False
    return is_valid_quantity_for_source(movement.quantity, movement.source)


def is_valid_activity_type(value: Any) -> bool:
    """Return True iff ``value`` is one of the :class:`ActivityType` values."""
    if isinstance(value, ActivityType):
        return True
    return isinstance(value, str) and value in _ACTIVITY_TYPE_VALUES


def is_valid_stock_movement_source(value: Any) -> bool:
    """Return True iff ``value`` is one of the :class:`StockMovementSource` values."""
    if isinstance(value, StockMovementSource):
        return True
    return isinstance(value, str) and value in _MOVEMENT_SOURCE_VALUES


# ---------------------------------------------------------------------------
# String shape predicates
# ---------------------------------------------------------------------------


def is_valid_email(email: str, *, trim: bool = True) -> bool:
    """Return True iff ``email`` looks like ``local@domain.tld``.

    Args:
        email: Candidate address.
        trim: Strip surrounding whitespace before matching.
    """
    if not isinstance(email, str):
        return False
    candidate = email.strip() if trim else email
    return bool(_EMAIL_RE.match(candidate))


def is_valid_password(password: str) -> bool:
    """Return True iff the password has at least eight characters."""
    return isinstance(password, str) and len(password) >= MIN_PASSWORD_LENGTH


def is_valid_uuid(value: str) -> bool:
    """Return True iff ``value`` is a version 4 UUID (case-insensitive)."""
    return isinstance(value, str) and bool(_UUID_V4_RE.match(value))


def is_valid_iso8601(value: str) -> bool:
    """Return True iff ``value`` is a calendar-valid ISO 8601 timestamp.

    Accepted shape: ``YYYY-MM-DDTHH:MM:SS`` optionally followed by
    milliseconds (``.sss``) and a ``Z`` suffix. The value must also denote a
    real instant whose canonical rendering reproduces the first 19
    characters, which rejects overflowing parts such as ``2025-02-30`` or
    ``T24:00:00``.

    Args:
        value: Candidate timestamp.

    Returns:
        ``True`` if the value is well formed and calendar-valid.
    """
    if not isinstance(value, str):
        return False
    match = _ISO8601_RE.match(value)
    if match is None:
        return False
    year, month, day, hour, minute, second = (int(part) for part in match.groups()[:6])
    try:
        parsed = datetime(year, month, day, hour, minute, second)
    except ValueError:
        return False
    return parsed.isoformat()[:19] == value[:19]


def is_valid_month_format(value: str) -> bool:
    """Return True iff ``value`` is a ``YYYY-MM`` key with a real month."""
    if not isinstance(value, str):
        return False
    match = _MONTH_RE.match(value)
    if match is None:
        return False
    year, month = int(match.group(1)), int(match.group(2))
    return year >= 1 and 1 <= month <= 12


__all__ = [
    "MIN_PASSWORD_LENGTH",
    "is_negative_for_sale",
    "is_valid_activity",
    "is_valid_activity_type",
    "is_valid_email",
    "is_valid_iso8601",
    "is_valid_month_format",
    "is_valid_password",
    "is_valid_product",
    "is_valid_quantity_for_source",
    "is_valid_stock_movement",
    "is_valid_stock_movement_source",
    "is_valid_uuid",
]
