# src/fbc_dashboard/application/schemas/dto/statistics.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Application DTOs for business statistics.

Layer:
    application/schemas/dto
"""

from __future__ import annotations

from fbc_dashboard.application.schemas.dto.base import BaseDTO
from fbc_dashboard.domain.entities.reporting import (
    BusinessStatistics,
    PeriodStatistics,
    ProductMargin,
)


class PeriodStatisticsDTO(BaseDTO):
    """Statistics for one period bucket.

    Attributes:
        period: Bucket key.
        profit: Profit of resolvable sales.
        total_sales: Sum of sale amounts.
        total_creations: Number of creations.
    """

    period: str
    profit: float
    total_sales: float
    total_creations: int

    @classmethod
    def from_entity(cls, row: PeriodStatistics) -> PeriodStatisticsDTO:
        """Build the DTO from a :class:`PeriodStatistics` entity."""
        return cls(
            period=row.period,
            profit=row.profit,
            total_sales=row.total_sales,
            total_creations=row.total_creations,
        )


class ProductMarginDTO(BaseDTO):
    """Margin rollup for one product.

    Attributes:
        product_id: Product identifier.
        sales_count: Number of sales.
        total_revenue: Sum of sale amounts.
        total_cost: Material cost.
        profit: Revenue minus cost.
        margin_percentage: Profit percentage (0 without revenue).
    """

    product_id: str
    sales_count: int
    total_revenue: float
    total_cost: float
    profit: float
    margin_percentage: float

    @classmethod
    def from_entity(cls, row: ProductMargin) -> ProductMarginDTO:
        """Build the DTO from a :class:`ProductMargin` entity."""
        return cls(
            product_id=row.product_id,
            sales_count=row.sales_count,
            total_revenue=row.total_revenue,
            total_cost=row.total_cost,
            profit=row.profit,
            margin_percentage=row.margin_percentage,
        )


class BusinessStatisticsDTO(BaseDTO):
    """Whole-business rollup.

    Attributes:
        start_date: Optional inclusive lower bound.
        end_date: Optional inclusive upper bound.
        total_profit: Profit of resolvable sales.
        total_sales: Sum of resolvable sale amounts.
        total_creations: Number of creations.
        product_margins: Per-product margins, highest profit first.
    """

    start_date: str | None = None
    end_date: str | None = None
    total_profit: float
    total_sales: float
    total_creations: int
    product_margins: list[ProductMarginDTO]

    @classmethod
    def from_entity(cls, stats: BusinessStatistics) -> BusinessStatisticsDTO:
        """Build the DTO from a :class:`BusinessStatistics` entity."""
        return cls(
            start_date=stats.start_date,
            end_date=stats.end_date,
            total_profit=stats.total_profit,
            total_sales=stats.total_sales,
            total_creations=stats.total_creations,
            product_margins=[ProductMarginDTO.from_entity(m) for m in stats.product_margins],
        )


__all__ = ["BusinessStatisticsDTO", "PeriodStatisticsDTO", "ProductMarginDTO"]
