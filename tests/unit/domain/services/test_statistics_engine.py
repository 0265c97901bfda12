# tests/unit/domain/services/test_statistics_engine.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Tests for period statistics, margins and activity totals."""

from __future__ import annotations

import pytest

from fbc_dashboard.domain.enums.activity_type import ActivityType
from fbc_dashboard.domain.enums.period import StatisticsPeriod
from fbc_dashboard.domain.services.statistics_engine import (
    compute_business_statistics,
    compute_product_margins,
    compute_profit,
    compute_profits_by_period,
    compute_stock_from_activities,
    compute_total_creations,
    compute_total_sales,
)


@pytest.fixture
def products(make_product):
    return [
        make_product("P1", unit_cost=10, sale_price=20),
        make_product("P2", unit_cost=5, sale_price=30),
    ]


def test_profits_by_month_are_sorted_and_include_creation_only_buckets(
    make_activity, products
) -> None:
    activities = [
        make_activity(product_id="P1", quantity=-2, amount=40, date="2025-03-02T00:00:00Z"),
        make_activity(ActivityType.CREATION, quantity=3, amount=0, date="2025-01-20T00:00:00Z"),
        make_activity(product_id="P2", quantity=-1, amount=30, date="2025-03-20T00:00:00Z"),
    ]
    rows = compute_profits_by_period(activities, products, StatisticsPeriod.MONTHLY)

    assert [r.period for r in rows] == ["2025-01", "2025-03"]
    assert (rows[0].profit, rows[0].total_sales, rows[0].total_creations) == (0, 0, 1)
    assert rows[1].profit == 2 * 10 + 1 * 25
    assert rows[1].total_sales == 70


def test_profits_by_period_with_no_sales_still_counts_creations(make_activity) -> None:
    activities = [make_activity(ActivityType.CREATION, quantity=1, amount=0, product_id=None)]
    rows = compute_profits_by_period(activities, [], StatisticsPeriod.YEARLY)
    assert len(rows) == 1
    assert rows[0].period == "2025"
    assert rows[0].total_creations == 1


def test_profits_by_period_skips_sales_of_unknown_products(make_activity, products) -> None:
    activities = [make_activity(product_id="ghost", quantity=-4, amount=80)]
    assert compute_profits_by_period(activities, products, StatisticsPeriod.DAILY) == []


def test_profits_by_period_respects_bounds(make_activity, products) -> None:
    activities = [
        make_activity(product_id="P1", date="2025-01-01T00:00:00Z"),
        make_activity(product_id="P1", date="2025-02-01T00:00:00Z"),
    ]
    rows = compute_profits_by_period(
        activities, products, StatisticsPeriod.DAILY, "2025-01-15T00:00:00Z", None
    )
    assert [r.period for r in rows] == ["2025-02-01"]


def test_product_margins_sorted_by_profit_descending(make_activity, products) -> None:
    activities = [
        make_activity(product_id="P1", quantity=-1, amount=20),
        make_activity(product_id="P2", quantity=-2, amount=60),
        make_activity(product_id="P1", quantity=-1, amount=20),
        make_activity(ActivityType.CREATION, quantity=5, amount=0, product_id="P1"),
    ]
    margins = compute_product_margins(activities, products)

    assert [m.product_id for m in margins] == ["P2", "P1"]
    p2, p1 = margins
    assert (p2.sales_count, p2.total_revenue, p2.total_cost, p2.profit) == (1, 60, 10, 50)
    assert p2.margin_percentage == pytest.approx(50 / 60 * 100)
    assert (p1.sales_count, p1.total_revenue, p1.total_cost, p1.profit) == (2, 40, 20, 20)


def test_business_statistics_rollup(make_activity, products) -> None:
    activities = [
        make_activity(product_id="P1", quantity=-3, amount=60),
        make_activity(product_id="ghost", quantity=-1, amount=99),
        make_activity(ActivityType.CREATION, quantity=2, amount=0, product_id=None),
        make_activity(ActivityType.CREATION, quantity=1, amount=0, product_id="ghost"),
    ]
    stats = compute_business_statistics(activities, products)

    assert stats.total_profit == 3 * 10
    assert stats.total_sales == 60
    assert stats.total_creations == 2
    assert len(stats.product_margins) == 1
    assert stats.start_date is None and stats.end_date is None


def test_total_creations_with_bounds(make_activity) -> None:
    activities = [
        make_activity(ActivityType.CREATION, quantity=1, amount=0, date="2025-01-01T00:00:00Z"),
        make_activity(ActivityType.CREATION, quantity=1, amount=0, date="2025-06-01T00:00:00Z"),
        make_activity(date="2025-06-02T00:00:00Z"),
    ]
    assert compute_total_creations(activities) == 2
    assert compute_total_creations(activities, "2025-05-01T00:00:00Z") == 1
    assert compute_total_creations(activities, None, "2025-05-01T00:00:00Z") == 1


def test_profit_and_sales_totals(make_activity, products) -> None:
    activities = [
        make_activity(product_id="P1", quantity=-1, amount=20),
        make_activity(product_id="ghost", quantity=-1, amount=5),
        make_activity(ActivityType.OTHER, quantity=1, amount=12, product_id=None),
    ]
    assert compute_profit(activities, products) == 10
    assert compute_total_sales(activities) == 25


def test_stock_from_activities_sums_signed_quantities(make_activity) -> None:
    activities = [
        make_activity(ActivityType.CREATION, quantity=10, amount=0, product_id="P1"),
        make_activity(product_id="P1", quantity=-3),
        make_activity(ActivityType.STOCK_CORRECTION, quantity=-1, amount=0, product_id="P2"),
        make_activity(ActivityType.OTHER, quantity=4, amount=1, product_id=None),
    ]
    assert compute_stock_from_activities(activities) == {"P1": 7, "P2": -1}
