# src/fbc_dashboard/application/schemas/dto/revenue.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Application DTOs for revenue reports.

Purpose:
    Pydantic DTOs for the revenue report and its breakdowns, built from the
    reporting entities produced by the revenue engine.

Layer:
    application/schemas/dto
"""

from __future__ import annotations

from fbc_dashboard.application.schemas.dto.base import BaseDTO
from fbc_dashboard.domain.entities.reporting import (
    ProductRevenue,
    ProductTypeRevenue,
    RevenueData,
)
from fbc_dashboard.domain.enums.period import RevenuePeriod
from fbc_dashboard.domain.enums.product_type import ProductType


class IndirectCostsDTO(BaseDTO):
    """Indirect costs over the report range.

    Attributes:
        marketing: Marketing cost total.
        overhead: Overhead cost total.
        total: Marketing plus overhead.
    """

    marketing: float
    overhead: float
    total: float


class RevenueDataDTO(BaseDTO):
    """Revenue report.

    Attributes:
        period: Period selector.
        start_date: Inclusive ISO 8601 lower bound.
        end_date: Inclusive ISO 8601 upper bound.
        total_revenue: Sum of sale amounts.
        material_costs: Material cost of resolvable sales.
        gross_margin: Revenue minus material costs.
        gross_margin_rate: Gross margin percentage (0 without revenue).
        shipping_costs: Shipping costs over the months in range.
        indirect_costs: Marketing and overhead over the months in range.
        net_result: Gross margin minus shipping and indirect costs.
        net_margin_rate: Net result percentage (0 without revenue).
    """

    period: RevenuePeriod
    start_date: str
    end_date: str
    total_revenue: float
    material_costs: float
    gross_margin: float
    gross_margin_rate: float
    shipping_costs: float
    indirect_costs: IndirectCostsDTO
    net_result: float
    net_margin_rate: float

    @classmethod
    def from_entity(cls, data: RevenueData) -> RevenueDataDTO:
        """Build the DTO from a :class:`RevenueData` entity."""
        return cls(
            period=data.period,
            start_date=data.start_date,
            end_date=data.end_date,
            total_revenue=data.total_revenue,
            material_costs=data.material_costs,
            gross_margin=data.gross_margin,
            gross_margin_rate=data.gross_margin_rate,
            shipping_costs=data.shipping_costs,
            indirect_costs=IndirectCostsDTO(
                marketing=data.indirect_costs.marketing,
                overhead=data.indirect_costs.overhead,
                total=data.indirect_costs.total,
            ),
            net_result=data.net_result,
            net_margin_rate=data.net_margin_rate,
        )


class ProductTypeRevenueDTO(BaseDTO):
    """Revenue of one product category.

    Attributes:
        product_type: Product category.
        revenue: Sum of sale amounts.
        count: Number of sales.
    """

    product_type: ProductType
    revenue: float
    count: int

    @classmethod
    def from_entity(cls, row: ProductTypeRevenue) -> ProductTypeRevenueDTO:
        """Build the DTO from a :class:`ProductTypeRevenue` entity."""
        return cls(product_type=row.product_type, revenue=row.revenue, count=row.count)


class ProductRevenueDTO(BaseDTO):
    """Revenue of one product.

    Attributes:
        product_id: Product identifier.
        model_name: Model (or legacy) name.
        coloris: Coloris label.
        revenue: Sum of sale amounts.
        count: Number of sales.
    """

    product_id: str
    model_name: str
    coloris: str
    revenue: float
    count: int

    @classmethod
    def from_entity(cls, row: ProductRevenue) -> ProductRevenueDTO:
        """Build the DTO from a :class:`ProductRevenue` entity."""
        return cls(
            product_id=row.product_id,
            model_name=row.model_name,
            coloris=row.coloris,
            revenue=row.revenue,
            count=row.count,
        )


class RevenueBreakdownDTO(BaseDTO):
    """Revenue breakdown for a date range.

    Attributes:
        start_date: Inclusive ISO 8601 lower bound.
        end_date: Inclusive ISO 8601 upper bound.
        by_product_type: Revenue per product category.
        by_product: Revenue per product.
    """

    start_date: str
    end_date: str
    by_product_type: list[ProductTypeRevenueDTO]
    by_product: list[ProductRevenueDTO]


__all__ = [
    "IndirectCostsDTO",
    "ProductRevenueDTO",
    "ProductTypeRevenueDTO",
    "RevenueBreakdownDTO",
    "RevenueDataDTO",
]
