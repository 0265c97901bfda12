# src/fbc_dashboard/domain/services/statistics_engine.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Statistics engine.

Purpose:
    Period-bucketed profit statistics, per-product margins, whole-business
    rollups and simple activity totals (creations, profit, sales, stock).

Layer:
    domain/services

Notes:
    - Pure domain logic:
        * No logging.
        * No persistence or gateways.
    - A sale whose product does not resolve is skipped entirely: it adds
      neither profit nor sales to any bucket or rollup.
    - Optional date bounds are inclusive; ``None`` means unbounded.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime

from fbc_dashboard.domain.entities.activity import Activity
from fbc_dashboard.domain.entities.product import Product
from fbc_dashboard.domain.entities.reporting import (
    BusinessStatistics,
    PeriodStatistics,
    ProductMargin,
)
from fbc_dashboard.domain.enums.activity_type import ActivityType
from fbc_dashboard.domain.enums.period import StatisticsPeriod
from fbc_dashboard.domain.services.calendar import (
    filter_by_date_range,
    parse_iso_datetime,
    period_key,
)
from fbc_dashboard.domain.services.catalog_index import ProductCatalogIndex
from fbc_dashboard.domain.services.revenue_engine import rate
from fbc_dashboard.domain.value_objects.identifiers import ProductId


@dataclass(slots=True)
class _Bucket:
    profit: float = 0.0
    total_sales: float = 0.0
    total_creations: int = 0


@dataclass(slots=True)
class _MarginAccumulator:
    sales_count: int = 0
    total_revenue: float = 0.0
    total_cost: float = 0.0


def _in_range(
    activities: Iterable[Activity], start_date: str | None, end_date: str | None
) -> list[Activity]:
    start: datetime | None = parse_iso_datetime(start_date) if start_date else None
    end: datetime | None = parse_iso_datetime(end_date) if end_date else None
    return filter_by_date_range(activities, start, end)


def _unit_profit(product: Product) -> float:
    return product.sale_price - product.unit_cost


def compute_profits_by_period(
    activities: Sequence[Activity],
    products: Sequence[Product],
    period: StatisticsPeriod,
    start_date: str | None = None,
    end_date: str | None = None,
) -> list[PeriodStatistics]:
    """Bucket sales and creations by period.

    Args:
        activities: Activities to bucket.
        products: Products used to price each sale.
        period: Bucket granularity.
        start_date: Optional inclusive ISO 8601 lower bound.
        end_date: Optional inclusive ISO 8601 upper bound.

    Returns:
        One entry per non-empty bucket, sorted by key ascending. Buckets
        holding only creations are included.
    """
    index = ProductCatalogIndex(products)
    buckets: dict[str, _Bucket] = {}
    for activity in _in_range(activities, start_date, end_date):
        if activity.type == ActivityType.CREATION:
            buckets.setdefault(period_key(activity.date, period), _Bucket()).total_creations += 1
        elif activity.type == ActivityType.SALE:
            product = index.product(activity.product_id)
            if product is None:
                continue
            bucket = buckets.setdefault(period_key(activity.date, period), _Bucket())
            bucket.profit += _unit_profit(product) * abs(activity.quantity)
            bucket.total_sales += activity.amount
    return [
        PeriodStatistics(
            period=key,
            profit=bucket.profit,
            total_sales=bucket.total_sales,
            total_creations=bucket.total_creations,
        )
        for key, bucket in sorted(buckets.items())
    ]


def _margins(activities: Iterable[Activity], index: ProductCatalogIndex) -> list[ProductMargin]:
    acc: dict[ProductId, _MarginAccumulator] = {}
    for activity in activities:
        if activity.type != ActivityType.SALE:
            continue
        product = index.product(activity.product_id)
        if product is None:
            continue
        entry = acc.setdefault(product.id, _MarginAccumulator())
        entry.sales_count += 1
        entry.total_revenue += activity.amount
        entry.total_cost += product.unit_cost * abs(activity.quantity)

    margins = [
        ProductMargin(
            product_id=product_id,
            sales_count=entry.sales_count,
            total_revenue=entry.total_revenue,
            total_cost=entry.total_cost,
            profit=entry.total_revenue - entry.total_cost,
            margin_percentage=rate(entry.total_revenue - entry.total_cost, entry.total_revenue),
        )
        for product_id, entry in acc.items()
    ]
    return sorted(margins, key=lambda m: m.profit, reverse=True)


def compute_product_margins(
    activities: Sequence[Activity],
    products: Sequence[Product],
    start_date: str | None = None,
    end_date: str | None = None,
) -> list[ProductMargin]:
    """Per-product margin rollup, highest profit first.

    Args:
        activities: Activities to consider (non-sales are ignored).
        products: Products used to cost each sale.
        start_date: Optional inclusive ISO 8601 lower bound.
        end_date: Optional inclusive ISO 8601 upper bound.

    Returns:
        Product margins sorted by profit descending.
    """
    return _margins(_in_range(activities, start_date, end_date), ProductCatalogIndex(products))


def compute_business_statistics(
    activities: Sequence[Activity],
    products: Sequence[Product],
    start_date: str | None = None,
    end_date: str | None = None,
) -> BusinessStatistics:
    """Whole-business rollup.

    ``total_profit`` prices each resolvable sale at
    ``(sale_price - unit_cost) * |quantity|``; ``total_sales`` sums their
    amounts. Creations are counted regardless of product resolution.
    """
    index = ProductCatalogIndex(products)
    in_range = _in_range(activities, start_date, end_date)
    total_profit = 0.0
    total_sales = 0.0
    for activity in in_range:
        if activity.type != ActivityType.SALE:
            continue
        product = index.product(activity.product_id)
        if product is None:
            continue
        total_profit += _unit_profit(product) * abs(activity.quantity)
        total_sales += activity.amount
    return BusinessStatistics(
        total_profit=total_profit,
        total_sales=total_sales,
        total_creations=count_creations(in_range),
        product_margins=tuple(_margins(in_range, index)),
        start_date=start_date,
        end_date=end_date,
    )


def count_creations(activities: Iterable[Activity]) -> int:
    """Count CREATION activities."""
    return sum(1 for a in activities if a.type == ActivityType.CREATION)


def compute_total_creations(
    activities: Sequence[Activity],
    start_date: str | None = None,
    end_date: str | None = None,
) -> int:
    """Count CREATION activities within the optional inclusive bounds."""
    return count_creations(_in_range(activities, start_date, end_date))


def compute_profit(activities: Iterable[Activity], products: Sequence[Product]) -> float:
    """Sum ``(sale_price - unit_cost) * |quantity|`` over resolvable sales."""
    index = ProductCatalogIndex(products)
    total = 0.0
    for activity in activities:
        if activity.type != ActivityType.SALE:
            continue
        product = index.product(activity.product_id)
        if product is None:
            continue
        total += _unit_profit(product) * abs(activity.quantity)
    return total


def compute_total_sales(activities: Iterable[Activity]) -> float:
    """Sum the amounts of all SALE activities."""
    return sum((a.amount for a in activities if a.type == ActivityType.SALE), 0.0)


def compute_stock_from_activities(activities: Iterable[Activity]) -> dict[ProductId, float]:
    """Sum signed quantities per product over every activity carrying a product.

    Returns:
        Mapping of product id to derived stock, in first-seen order.
    """
    stock: dict[ProductId, float] = {}
    for activity in activities:
        if not activity.product_id:
            continue
        stock[activity.product_id] = stock.get(activity.product_id, 0.0) + activity.quantity
    return stock


__all__ = [
    "compute_business_statistics",
    "compute_product_margins",
    "compute_profit",
    "compute_profits_by_period",
    "compute_stock_from_activities",
    "compute_total_creations",
    "compute_total_sales",
    "count_creations",
]
