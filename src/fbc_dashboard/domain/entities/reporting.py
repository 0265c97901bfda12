# src/fbc_dashboard/domain/entities/reporting.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Reporting Entities.

Purpose:
    Derived, never-persisted results of the revenue and statistics engines.

Layer:
    domain/entities

Notes:
    Every rate in this module follows the same policy: it is ``0`` when the
    revenue it is divided by is not strictly positive.
"""

from __future__ import annotations

from dataclasses import dataclass

from fbc_dashboard.domain.entities.base import BaseEntity
from fbc_dashboard.domain.enums.period import RevenuePeriod
from fbc_dashboard.domain.enums.product_type import ProductType
from fbc_dashboard.domain.value_objects.identifiers import ProductId


@dataclass(frozen=True, slots=True)
class IndirectCosts(BaseEntity):
    """Indirect costs summed over a range of months.

    Attributes:
        marketing:
            Marketing cost total.
        overhead:
            Overhead cost total.
    """

    marketing: float
    overhead: float

    def __post_init__(self) -> None:
        """No invariants beyond the declared types."""
        return

    @property
    def total(self) -> float:
        """Sum of marketing and overhead."""
        return self.marketing + self.overhead


@dataclass(frozen=True, slots=True)
class RevenueData(BaseEntity):
    """Revenue and margin report for a date range.

    Attributes:
        period:
            Period selector the report was requested for.
        start_date:
            Inclusive ISO 8601 lower bound.
        end_date:
            Inclusive ISO 8601 upper bound.
        total_revenue:
            Sum of sale amounts.
        material_costs:
            Sum of ``unit_cost * |quantity|`` over resolvable sales.
        gross_margin:
            ``total_revenue - material_costs``.
        gross_margin_rate:
            Gross margin as a percentage of revenue.
        shipping_costs:
            Shipping costs over every month in range.
        indirect_costs:
            Marketing and overhead over every month in range.
        net_result:
            ``gross_margin - shipping_costs - indirect_costs.total``.
        net_margin_rate:
            Net result as a percentage of revenue.
    """

    period: RevenuePeriod
    start_date: str
    end_date: str
    total_revenue: float
    material_costs: float
    gross_margin: float
    gross_margin_rate: float
    shipping_costs: float
    indirect_costs: IndirectCosts
    net_result: float
    net_margin_rate: float

    def __post_init__(self) -> None:
        """No invariants beyond the declared types."""
        return


@dataclass(frozen=True, slots=True)
class PeriodStatistics(BaseEntity):
    """Statistics for one period bucket.

    Attributes:
        period:
            Bucket key (``YYYY-MM-DD``, ``YYYY-MM`` or ``YYYY``).
        profit:
            Sum of ``(sale_price - unit_cost) * |quantity|`` over sales.
        total_sales:
            Sum of sale amounts.
        total_creations:
            Number of creation activities.
    """

    period: str
    profit: float
    total_sales: float
    total_creations: int

    def __post_init__(self) -> None:
        """Validate invariants for the PeriodStatistics entity."""
        if self.total_creations < 0:
            raise ValueError("total_creations must be >= 0")


@dataclass(frozen=True, slots=True)
class ProductMargin(BaseEntity):
    """Margin rollup for one product.

    Attributes:
        product_id:
            Product identifier.
        sales_count:
            Number of sale activities.
        total_revenue:
            Sum of sale amounts.
        total_cost:
            Sum of ``unit_cost * |quantity|``.
        profit:
            ``total_revenue - total_cost``.
        margin_percentage:
            Profit as a percentage of revenue.
    """

    product_id: ProductId
    sales_count: int
    total_revenue: float
    total_cost: float
    profit: float
    margin_percentage: float

    def __post_init__(self) -> None:
        """Validate invariants for the ProductMargin entity."""
        if self.sales_count < 0:
            raise ValueError("sales_count must be >= 0")


@dataclass(frozen=True, slots=True)
class BusinessStatistics(BaseEntity):
    """Whole-business rollup over an optional date range.

    Attributes:
        total_profit:
            Sum of ``(sale_price - unit_cost) * |quantity|`` over sales whose
            product resolves.
        total_sales:
            Sum of the amounts of those sales.
        total_creations:
            Number of creation activities in range.
        product_margins:
            Per-product margins, highest profit first.
        start_date:
            Optional inclusive lower bound.
        end_date:
            Optional inclusive upper bound.
    """

    total_profit: float
    total_sales: float
    total_creations: int
    product_margins: tuple[ProductMargin, ...]
    start_date: str | None = None
    end_date: str | None = None

    def __post_init__(self) -> None:
        """No invariants beyond the declared types."""
        return


@dataclass(frozen=True, slots=True)
class ProductTypeRevenue(BaseEntity):
    """Revenue for one product category.

    Attributes:
        product_type:
            Product category.
        revenue:
            Sum of sale amounts.
        count:
            Number of sale activities.
    """

    product_type: ProductType
    revenue: float
    count: int

    def __post_init__(self) -> None:
        """No invariants beyond the declared types."""
        return


@dataclass(frozen=True, slots=True)
class ProductRevenue(BaseEntity):
    """Revenue for one product.

    Attributes:
        product_id:
            Product identifier.
        model_name:
            Resolved model name (legacy name for legacy products).
        coloris:
            Resolved coloris label.
        revenue:
            Sum of sale amounts.
        count:
            Number of sale activities.
    """

    product_id: ProductId
    model_name: str
    coloris: str
    revenue: float
    count: int

    def __post_init__(self) -> None:
        """No invariants beyond the declared types."""
        return
