# src/fbc_dashboard/application/use_cases/revenue/compute_revenue.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: Compute Revenue.

Purpose:
    Fetch activities, products and monthly costs for a date range and return
    the revenue report (revenue, material costs, margins and net result).

Layer:
    application/use_cases
"""

from __future__ import annotations

import logging
from datetime import date

from fbc_dashboard.application.schemas.dto.revenue import RevenueDataDTO
from fbc_dashboard.application.services.input_guards import require_date_range
from fbc_dashboard.domain.entities.monthly_cost import MonthlyCost
from fbc_dashboard.domain.entities.product import Product
from fbc_dashboard.domain.enums.period import RevenuePeriod
from fbc_dashboard.domain.interfaces.repositories.activity_repository import ActivityRepository
from fbc_dashboard.domain.interfaces.repositories.cost_repository import CostRepository
from fbc_dashboard.domain.interfaces.repositories.product_repository import ProductRepository
from fbc_dashboard.domain.services.calendar import get_months_in_range, period_bounds, to_iso_string
from fbc_dashboard.domain.services.revenue_engine import compute_revenue, sales_in_range

logger = logging.getLogger(__name__)


class ComputeRevenueUseCase:
    """Compute the revenue report for a period.

    Args:
        activity_repo: Source of activities.
        product_repo: Source of products, used to cost each sale.
        cost_repo: Source of monthly costs.

    Returns:
        :class:`RevenueDataDTO` from :meth:`execute`.

    Raises:
        BusinessValidationError: If a bound is not a valid ISO 8601 string or
            the range is inverted.
    """

    def __init__(
        self,
        activity_repo: ActivityRepository,
        product_repo: ProductRepository,
        cost_repo: CostRepository,
    ) -> None:
        self._activities = activity_repo
        self._products = product_repo
        self._costs = cost_repo

    async def execute(
        self, period: RevenuePeriod, start_date: str, end_date: str
    ) -> RevenueDataDTO:
        """Compute the report for ``[start_date, end_date]``.

        Args:
            period: Period selector echoed in the report.
            start_date: Inclusive ISO 8601 lower bound.
            end_date: Inclusive ISO 8601 upper bound.

        Returns:
            The revenue report.

        Raises:
            BusinessValidationError: If the bounds are invalid.
        """
        require_date_range(start_date, end_date)

        logger.info(
            "revenue.compute.start",
            extra={"period": period.value, "start_date": start_date, "end_date": end_date},
        )

        activities = list(await self._activities.list())
        products: list[Product] = []
        if sales_in_range(activities, start_date, end_date):
            products = list(await self._products.list())

        costs: list[MonthlyCost] = []
        for month in get_months_in_range(start_date, end_date):
            cost = await self._costs.get_monthly_cost(month)
            if cost is not None:
                costs.append(cost)

        data = compute_revenue(activities, products, costs, period, start_date, end_date)

        logger.info(
            "revenue.compute.success",
            extra={
                "period": period.value,
                "total_revenue": data.total_revenue,
                "months_with_costs": len(costs),
            },
        )
        return RevenueDataDTO.from_entity(data)

    async def execute_for_current(self, period: RevenuePeriod, today: date) -> RevenueDataDTO:
        """Compute the report for the month, quarter or year containing ``today``.

        Args:
            period: MONTH, QUARTER or YEAR.
            today: Reference day.

        Returns:
            The revenue report.

        Raises:
            ValueError: For :attr:`RevenuePeriod.CUSTOM`.
        """
        start, end = period_bounds(period, today)
        return await self.execute(period, to_iso_string(start), to_iso_string(end))
