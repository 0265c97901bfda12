# tests/unit/domain/services/test_validation.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Tests for the business rule predicates."""

from __future__ import annotations

import pytest

from fbc_dashboard.domain.entities.activity import StockMovement
from fbc_dashboard.domain.enums.activity_type import ActivityType, StockMovementSource
from fbc_dashboard.domain.services.validation import (
    is_negative_for_sale,
    is_valid_activity,
    is_valid_activity_type,
    is_valid_email,
    is_valid_iso8601,
    is_valid_month_format,
    is_valid_password,
    is_valid_product,
    is_valid_quantity_for_source,
    is_valid_stock_movement,
    is_valid_stock_movement_source,
    is_valid_uuid,
)
from fbc_dashboard.domain.value_objects.identifiers import ProductId, StockMovementId


def test_product_requires_positive_prices_and_non_negative_stock(make_product) -> None:
    assert is_valid_product(make_product(stock=0))
    assert not is_valid_product(make_product(unit_cost=0))
    assert not is_valid_product(make_product(sale_price=-1))
    assert not is_valid_product(make_product(stock=-0.5))


@pytest.mark.parametrize("activity_type", [ActivityType.SALE, ActivityType.STOCK_CORRECTION])
def test_product_required_activity_types(make_activity, activity_type: ActivityType) -> None:
    assert is_valid_activity(make_activity(activity_type, product_id="P1"))
    assert not is_valid_activity(make_activity(activity_type, product_id=None))


@pytest.mark.parametrize("activity_type", [ActivityType.CREATION, ActivityType.OTHER])
def test_product_optional_activity_types(make_activity, activity_type: ActivityType) -> None:
    assert is_valid_activity(make_activity(activity_type, quantity=1, product_id=None))


def test_is_negative_for_sale_only_flags_negative_sales(make_activity) -> None:
    assert is_negative_for_sale(make_activity(ActivityType.SALE, quantity=-2))
    assert not is_negative_for_sale(make_activity(ActivityType.SALE, quantity=2))
    assert not is_negative_for_sale(make_activity(ActivityType.CREATION, quantity=-2))


@pytest.mark.parametrize(
    ("quantity", "source", "expected"),
    [
        (3, StockMovementSource.CREATION, True),
        (-3, StockMovementSource.CREATION, False),
        (0, StockMovementSource.CREATION, False),
        (-3, StockMovementSource.SALE, True),
        (3, StockMovementSource.SALE, False),
        (-1, StockMovementSource.INVENTORY_ADJUSTMENT, True),
        (1, StockMovementSource.INVENTORY_ADJUSTMENT, True),
        (0, StockMovementSource.INVENTORY_ADJUSTMENT, False),
        (5, "SALE", False),
        (5, "CREATION", True),
        (5, "GIFT", False),
    ],
)
def test_quantity_sign_rules(quantity: float, source: object, expected: bool) -> None:
    assert is_valid_quantity_for_source(quantity, source) is expected  # type: ignore[arg-type]


def test_stock_movement_requires_non_blank_product() -> None:
    ok = StockMovement(
        id=StockMovementId("M1"),
        product_id=ProductId("P1"),
        quantity=-1,
        source=StockMovementSource.SALE,
    )
    blank = StockMovement(
        id=StockMovementId("M2"),
        product_id=ProductId("   "),
        quantity=-1,
        source=StockMovementSource.SALE,
    )
    assert is_valid_stock_movement(ok)
    assert not is_valid_stock_movement(blank)


def test_enum_membership_accepts_members_and_values_only() -> None:
    assert is_valid_activity_type(ActivityType.OTHER)
    assert is_valid_activity_type("STOCK_CORRECTION")
    assert not is_valid_activity_type("sale")
    assert not is_valid_activity_type(None)
    assert is_valid_stock_movement_source("INVENTORY_ADJUSTMENT")
    assert not is_valid_stock_movement_source("RETURN")


@pytest.mark.parametrize(
    ("email", "expected"),
    [
        ("atelier@example.com", True),
        ("  atelier@example.com  ", True),
        ("atelier@example", False),
        ("atelier example@site.fr", False),
        ("", False),
    ],
)
def test_email_shape(email: str, expected: bool) -> None:
    assert is_valid_email(email) is expected


def test_email_without_trim_rejects_surrounding_whitespace() -> None:
    assert not is_valid_email(" a@b.co ", trim=False)


def test_password_minimum_length() -> None:
    assert is_valid_password("12345678")
    assert not is_valid_password("1234567")


def test_uuid_v4_only() -> None:
    assert is_valid_uuid("3F2504E0-4F89-41D3-9A0C-0305E82C3301")
    assert not is_valid_uuid("3f2504e0-4f89-11d3-9a0c-0305e82c3301")  # version 1
    assert not is_valid_uuid("not-a-uuid")


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2025-01-15T10:30:00.000Z", True),
        ("2025-01-15T10:30:00Z", True),
        ("2025-01-15T10:30:00", True),
        ("2024-02-29T00:00:00.000Z", True),
        ("2025-02-29T00:00:00.000Z", False),
        ("2025-02-30T10:00:00Z", False),
        ("2025-01-15T24:00:00Z", False),
        ("2025-13-01T00:00:00Z", False),
        ("2025-01-15", False),
        ("2025-01-15 10:30:00", False),
        ("garbage", False),
    ],
)
def test_iso8601_shape_and_calendar(value: str, expected: bool) -> None:
    assert is_valid_iso8601(value) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [("2025-01", True), ("2025-12", True), ("2025-13", False), ("2025-00", False), ("2025-1", False)],
)
def test_month_format(value: str, expected: bool) -> None:
    assert is_valid_month_format(value) is expected
