# src/fbc_dashboard/application/use_cases/statistics/compute_product_margins.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: Compute Product Margins.

Layer:
    application/use_cases
"""

from __future__ import annotations

from fbc_dashboard.application.schemas.dto.statistics import ProductMarginDTO
from fbc_dashboard.application.services.input_guards import require_date_range
from fbc_dashboard.domain.interfaces.repositories.activity_repository import ActivityRepository
from fbc_dashboard.domain.interfaces.repositories.product_repository import ProductRepository
from fbc_dashboard.domain.services.statistics_engine import compute_product_margins


class ComputeProductMarginsUseCase:
    """Compute per-product margins, highest profit first.

    Args:
        activity_repo: Source of activities.
        product_repo: Source of products.

    Returns:
        List of :class:`ProductMarginDTO` from :meth:`execute`.

    Raises:
        BusinessValidationError: If a provided bound is invalid.
    """

    def __init__(self, activity_repo: ActivityRepository, product_repo: ProductRepository) -> None:
        self._activities = activity_repo
        self._products = product_repo

    async def execute(
        self, start_date: str | None = None, end_date: str | None = None
    ) -> list[ProductMarginDTO]:
        """Compute margins over the optional inclusive range.

        Args:
            start_date: Optional inclusive ISO 8601 lower bound.
            end_date: Optional inclusive ISO 8601 upper bound.

        Returns:
            Margins sorted by profit descending.

        Raises:
            BusinessValidationError: If a provided bound is invalid.
        """
        require_date_range(start_date, end_date)
        activities = list(await self._activities.list())
        products = list(await self._products.list())
        margins = compute_product_margins(activities, products, start_date, end_date)
        return [ProductMarginDTO.from_entity(m) for m in margins]
