# src/fbc_dashboard/domain/services/revenue_engine.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Revenue engine.

Purpose:
    Compute revenue, material costs, margins and net result for a date range
    from already-fetched activities, products and monthly costs, plus
    revenue breakdowns by product category and by product.

Layer:
    domain/services

Notes:
    - Pure domain logic:
        * No logging.
        * No persistence or gateways.
    - Missing joins are skipped, never fatal:
        * A sale always counts towards revenue; its material cost is only
          added when its product resolves.
        * Breakdowns skip sales whose product (or catalog entry) does not
          resolve.
        * A month without a cost row contributes zero.
    - Rates are ``0`` whenever revenue is not strictly positive.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from fbc_dashboard.domain.entities.activity import Activity
from fbc_dashboard.domain.entities.monthly_cost import MonthlyCost
from fbc_dashboard.domain.entities.product import Product, ProductColoris, ProductModel
from fbc_dashboard.domain.entities.reporting import (
    IndirectCosts,
    ProductRevenue,
    ProductTypeRevenue,
    RevenueData,
)
from fbc_dashboard.domain.enums.activity_type import ActivityType
from fbc_dashboard.domain.enums.period import RevenuePeriod
from fbc_dashboard.domain.enums.product_type import ProductType
from fbc_dashboard.domain.services.calendar import (
    filter_by_date_range,
    get_months_in_range,
    parse_iso_datetime,
)
from fbc_dashboard.domain.services.catalog_index import ProductCatalogIndex
from fbc_dashboard.domain.value_objects.identifiers import ProductId


def rate(numerator: float, revenue: float) -> float:
    """Return ``numerator / revenue * 100``, or ``0`` when revenue <= 0."""
    if revenue > 0:
        return numerator / revenue * 100
    return 0.0


def sales_in_range(activities: Iterable[Activity], start_date: str, end_date: str) -> list[Activity]:
    """Return SALE activities dated within the inclusive ISO bounds."""
    in_range = filter_by_date_range(
        activities, parse_iso_datetime(start_date), parse_iso_datetime(end_date)
    )
    return [a for a in in_range if a.type == ActivityType.SALE]


def compute_revenue(
    activities: Sequence[Activity],
    products: Sequence[Product],
    monthly_costs: Sequence[MonthlyCost],
    period: RevenuePeriod,
    start_date: str,
    end_date: str,
) -> RevenueData:
    """Compute the revenue report for ``[start_date, end_date]``.

    Args:
        activities: Activities to consider (any type; non-sales are ignored).
        products: Products used to resolve material costs.
        monthly_costs: Cost rows; rows for months outside the range are
            ignored.
        period: Period selector echoed in the result.
        start_date: Inclusive ISO 8601 lower bound.
        end_date: Inclusive ISO 8601 upper bound.

    Returns:
        The revenue report.

    Raises:
        ValueError: If a bound is not parseable as ISO 8601.
    """
    index = ProductCatalogIndex(products)
    total_revenue = 0.0
    material_costs = 0.0
    for sale in sales_in_range(activities, start_date, end_date):
        total_revenue += sale.amount
        product = index.product(sale.product_id)
        if product is None:
            continue
        material_costs += product.unit_cost * abs(sale.quantity)

    costs_by_month = {cost.month: cost for cost in monthly_costs}
    shipping = marketing = overhead = 0.0
    for month in get_months_in_range(start_date, end_date):
        cost = costs_by_month.get(month)
        if cost is None:
            continue
        shipping += cost.shipping_cost
        marketing += cost.marketing_cost
        overhead += cost.overhead_cost

    indirect = IndirectCosts(marketing=marketing, overhead=overhead)
    gross_margin = total_revenue - material_costs
    net_result = gross_margin - shipping - indirect.total
    return RevenueData(
        period=period,
        start_date=start_date,
        end_date=end_date,
        total_revenue=total_revenue,
        material_costs=material_costs,
        gross_margin=gross_margin,
        gross_margin_rate=rate(gross_margin, total_revenue),
        shipping_costs=shipping,
        indirect_costs=indirect,
        net_result=net_result,
        net_margin_rate=rate(net_result, total_revenue),
    )


def compute_revenue_by_product_type(
    activities: Sequence[Activity],
    products: Sequence[Product],
    start_date: str,
    end_date: str,
    models: Sequence[ProductModel] = (),
    coloris: Sequence[ProductColoris] = (),
) -> list[ProductTypeRevenue]:
    """Group in-range sales by product category.

    Args:
        activities: Activities to consider.
        products: Products used to resolve each sale.
        start_date: Inclusive ISO 8601 lower bound.
        end_date: Inclusive ISO 8601 upper bound.
        models: Catalog models resolving catalog-referenced products.
        coloris: Catalog coloris resolving catalog-referenced products.

    Returns:
        One entry per category, in first-seen order.
    """
    index = ProductCatalogIndex(products, models, coloris)
    totals: dict[ProductType, list[float]] = {}
    for sale in sales_in_range(activities, start_date, end_date):
        descriptor = index.describe_id(sale.product_id)
        if descriptor is None:
            continue
        bucket = totals.setdefault(descriptor.product_type, [0.0, 0])
        bucket[0] += sale.amount
        bucket[1] += 1
    return [
        ProductTypeRevenue(product_type=product_type, revenue=revenue, count=int(count))
        for product_type, (revenue, count) in totals.items()
    ]


def compute_revenue_by_product(
    activities: Sequence[Activity],
    products: Sequence[Product],
    start_date: str,
    end_date: str,
    models: Sequence[ProductModel] = (),
    coloris: Sequence[ProductColoris] = (),
) -> list[ProductRevenue]:
    """Group in-range sales by individual product.

    Args:
        activities: Activities to consider.
        products: Products used to resolve each sale.
        start_date: Inclusive ISO 8601 lower bound.
        end_date: Inclusive ISO 8601 upper bound.
        models: Catalog models resolving catalog-referenced products.
        coloris: Catalog coloris resolving catalog-referenced products.

    Returns:
        One entry per product, in first-seen order.
    """
    index = ProductCatalogIndex(products, models, coloris)
    rows: dict[ProductId, ProductRevenue] = {}
    for sale in sales_in_range(activities, start_date, end_date):
        descriptor = index.describe_id(sale.product_id)
        if descriptor is None:
            continue
        current = rows.get(descriptor.product_id)
        rows[descriptor.product_id] = ProductRevenue(
            product_id=descriptor.product_id,
            model_name=descriptor.model_name,
            coloris=descriptor.coloris,
            revenue=(current.revenue if current else 0.0) + sale.amount,
            count=(current.count if current else 0) + 1,
        )
    return list(rows.values())


__all__ = [
    "compute_revenue",
    "compute_revenue_by_product",
    "compute_revenue_by_product_type",
    "rate",
    "sales_in_range",
]
