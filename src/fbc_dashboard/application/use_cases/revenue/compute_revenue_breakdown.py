# src/fbc_dashboard/application/use_cases/revenue/compute_revenue_breakdown.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: Compute Revenue Breakdown.

Purpose:
    Break down the revenue of a date range by product category and by
    product.

Layer:
    application/use_cases
"""

from __future__ import annotations

import logging

from fbc_dashboard.application.schemas.dto.revenue import (
    ProductRevenueDTO,
    ProductTypeRevenueDTO,
    RevenueBreakdownDTO,
)
from fbc_dashboard.application.services.input_guards import require_date_range
from fbc_dashboard.domain.interfaces.repositories.activity_repository import ActivityRepository
from fbc_dashboard.domain.interfaces.repositories.product_catalog_repository import (
    ProductCatalogRepository,
)
from fbc_dashboard.domain.interfaces.repositories.product_repository import ProductRepository
from fbc_dashboard.domain.services.revenue_engine import (
    compute_revenue_by_product,
    compute_revenue_by_product_type,
    sales_in_range,
)

logger = logging.getLogger(__name__)


class ComputeRevenueBreakdownUseCase:
    """Compute revenue per product category and per product.

    Args:
        activity_repo: Source of activities.
        product_repo: Source of products.
        catalog_repo: Source of product models and coloris.

    Returns:
        :class:`RevenueBreakdownDTO` from :meth:`execute`.

    Raises:
        BusinessValidationError: If the bounds are invalid.
    """

    def __init__(
        self,
        activity_repo: ActivityRepository,
        product_repo: ProductRepository,
        catalog_repo: ProductCatalogRepository,
    ) -> None:
        self._activities = activity_repo
        self._products = product_repo
        self._catalog = catalog_repo

    async def execute(self, start_date: str, end_date: str) -> RevenueBreakdownDTO:
        """Compute both breakdowns for ``[start_date, end_date]``.

        Args:
            start_date: Inclusive ISO 8601 lower bound.
            end_date: Inclusive ISO 8601 upper bound.

        Returns:
            Breakdown DTO. Sales whose product or catalog entry cannot be
            resolved are left out of both lists.

        Raises:
            BusinessValidationError: If the bounds are invalid.
        """
        require_date_range(start_date, end_date)

        activities = list(await self._activities.list())
        if not sales_in_range(activities, start_date, end_date):
            return RevenueBreakdownDTO(
                start_date=start_date, end_date=end_date, by_product_type=[], by_product=[]
            )

        products = list(await self._products.list())
        models = list(await self._catalog.list_models())
        coloris = list(await self._catalog.list_coloris())

        by_type = compute_revenue_by_product_type(
            activities, products, start_date, end_date, models, coloris
        )
        by_product = compute_revenue_by_product(
            activities, products, start_date, end_date, models, coloris
        )
        logger.debug(
            "revenue.breakdown.computed",
            extra={"product_types": len(by_type), "products": len(by_product)},
        )
        return RevenueBreakdownDTO(
            start_date=start_date,
            end_date=end_date,
            by_product_type=[ProductTypeRevenueDTO.from_entity(r) for r in by_type],
            by_product=[ProductRevenueDTO.from_entity(r) for r in by_product],
        )
