# src/fbc_dashboard/application/use_cases/statistics/compute_business_statistics.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: Compute Business Statistics.

Purpose:
    Whole-business rollup for the dashboard: total profit, total sales,
    number of creations and per-product margins.

Layer:
    application/use_cases
"""

from __future__ import annotations

import logging

from fbc_dashboard.application.schemas.dto.statistics import BusinessStatisticsDTO
from fbc_dashboard.application.services.input_guards import require_date_range
from fbc_dashboard.domain.interfaces.repositories.activity_repository import ActivityRepository
from fbc_dashboard.domain.interfaces.repositories.product_repository import ProductRepository
from fbc_dashboard.domain.services.statistics_engine import compute_business_statistics

logger = logging.getLogger(__name__)


class ComputeBusinessStatisticsUseCase:
    """Compute the whole-business rollup.

    Args:
        activity_repo: Source of activities.
        product_repo: Source of products.

    Returns:
        :class:`BusinessStatisticsDTO` from :meth:`execute`.

    Raises:
        BusinessValidationError: If a provided bound is invalid.
    """

    def __init__(self, activity_repo: ActivityRepository, product_repo: ProductRepository) -> None:
        self._activities = activity_repo
        self._products = product_repo

    async def execute(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> BusinessStatisticsDTO:
        """Compute the rollup over the optional inclusive range.

        Args:
            start_date: Optional inclusive ISO 8601 lower bound.
            end_date: Optional inclusive ISO 8601 upper bound.

        Returns:
            Business statistics DTO.

        Raises:
            BusinessValidationError: If a provided bound is invalid.
        """
        require_date_range(start_date, end_date)
        activities = list(await self._activities.list())
        products = list(await self._products.list())
        stats = compute_business_statistics(activities, products, start_date, end_date)
        logger.info(
            "statistics.business.computed",
            extra={
                "start_date": start_date,
                "end_date": end_date,
                "total_sales": stats.total_sales,
                "products": len(stats.product_margins),
            },
        )
        return BusinessStatisticsDTO.from_entity(stats)
