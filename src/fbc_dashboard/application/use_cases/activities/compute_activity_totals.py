# src/fbc_dashboard/application/use_cases/activities/compute_activity_totals.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Cases: Activity Totals.

Purpose:
    Profit, sales total and per-product stock derived directly from the
    activity history.

Layer:
    application/use_cases
"""

from __future__ import annotations

from fbc_dashboard.application.schemas.dto.activities import ActivityTotalsDTO
from fbc_dashboard.application.services.input_guards import require_date_range
from fbc_dashboard.domain.enums.activity_type import ActivityType
from fbc_dashboard.domain.interfaces.repositories.activity_repository import ActivityRepository
from fbc_dashboard.domain.interfaces.repositories.product_repository import ProductRepository
from fbc_dashboard.domain.services.calendar import filter_by_date_range, parse_iso_datetime
from fbc_dashboard.domain.services.statistics_engine import (
    compute_profit,
    compute_stock_from_activities,
    compute_total_sales,
)
from fbc_dashboard.domain.value_objects.identifiers import ProductId


class ComputeActivityTotalsUseCase:
    """Compute profit and total sales over an optional range.

    Args:
        activity_repo: Source of activities.
        product_repo: Source of products, used to price each sale.

    Returns:
        :class:`ActivityTotalsDTO` from :meth:`execute`.

    Raises:
        BusinessValidationError: If a bound is invalid or start > end.
    """

    def __init__(self, activity_repo: ActivityRepository, product_repo: ProductRepository) -> None:
        self._activities = activity_repo
        self._products = product_repo

    async def execute(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> ActivityTotalsDTO:
        """Compute totals within the optional inclusive bounds.

        Args:
            start_date: Optional inclusive ISO 8601 lower bound.
            end_date: Optional inclusive ISO 8601 upper bound.

        Returns:
            Profit and total sales.

        Raises:
            BusinessValidationError: If a bound is invalid or start > end.
        """
        require_date_range(start_date, end_date)
        activities = filter_by_date_range(
            await self._activities.list(),
            parse_iso_datetime(start_date) if start_date else None,
            parse_iso_datetime(end_date) if end_date else None,
        )
        has_sales = any(a.type == ActivityType.SALE for a in activities)
        products = list(await self._products.list()) if has_sales else []
        return ActivityTotalsDTO(
            profit=compute_profit(activities, products),
            total_sales=compute_total_sales(activities),
            start_date=start_date,
            end_date=end_date,
        )


class ComputeStockFromActivitiesUseCase:
    """Derive stock per product by summing activity quantities.

    Args:
        activity_repo: Source of activities.

    Returns:
        Mapping of product id to derived stock from :meth:`execute`.
    """

    def __init__(self, activity_repo: ActivityRepository) -> None:
        self._activities = activity_repo

    async def execute(self, product_id: ProductId | None = None) -> dict[ProductId, float]:
        """Derive stock for every product, or for ``product_id`` only."""
        activities = await self._activities.list()
        if product_id is not None:
            activities = [a for a in activities if a.product_id == product_id]
        return compute_stock_from_activities(activities)
