# src/fbc_dashboard/application/use_cases/statistics/compute_profits_by_period.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: Compute Profits by Period.

Purpose:
    Bucket sales and creations by day, month or year for the statistics
    charts.

Layer:
    application/use_cases
"""

from __future__ import annotations

import logging

from fbc_dashboard.application.schemas.dto.statistics import PeriodStatisticsDTO
from fbc_dashboard.application.services.input_guards import require_date_range
from fbc_dashboard.domain.enums.activity_type import ActivityType
from fbc_dashboard.domain.enums.period import StatisticsPeriod
from fbc_dashboard.domain.interfaces.repositories.activity_repository import ActivityRepository
from fbc_dashboard.domain.interfaces.repositories.product_repository import ProductRepository
from fbc_dashboard.domain.services.statistics_engine import compute_profits_by_period

logger = logging.getLogger(__name__)


class ComputeProfitsByPeriodUseCase:
    """Compute period-bucketed profit statistics.

    Args:
        activity_repo: Source of activities.
        product_repo: Source of products, used to price each sale.

    Returns:
        List of :class:`PeriodStatisticsDTO` from :meth:`execute`, sorted by
        period key ascending.

    Raises:
        BusinessValidationError: If a provided bound is invalid.
    """

    def __init__(self, activity_repo: ActivityRepository, product_repo: ProductRepository) -> None:
        self._activities = activity_repo
        self._products = product_repo

    async def execute(
        self,
        period: StatisticsPeriod,
        start_date: str | None = None,
        end_date: str | None = None,
    ) -> list[PeriodStatisticsDTO]:
        """Compute statistics per bucket.

        Args:
            period: Bucket granularity.
            start_date: Optional inclusive ISO 8601 lower bound.
            end_date: Optional inclusive ISO 8601 upper bound.

        Returns:
            One DTO per non-empty bucket.

        Raises:
            BusinessValidationError: If a provided bound is invalid.
        """
        require_date_range(start_date, end_date)

        activities = list(await self._activities.list())
        has_sales = any(a.type == ActivityType.SALE for a in activities)
        products = list(await self._products.list()) if has_sales else []

        rows = compute_profits_by_period(activities, products, period, start_date, end_date)
        logger.debug(
            "statistics.profits_by_period.computed",
            extra={"period": period.value, "buckets": len(rows)},
        )
        return [PeriodStatisticsDTO.from_entity(r) for r in rows]
