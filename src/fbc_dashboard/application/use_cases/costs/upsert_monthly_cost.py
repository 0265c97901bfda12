# src/fbc_dashboard/application/use_cases/costs/upsert_monthly_cost.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: Upsert Monthly Cost.

Purpose:
    Record all three indirect costs of a month in one step, replacing any
    previous values.

Layer:
    application/use_cases
"""

from __future__ import annotations

import logging

from fbc_dashboard.application.services.input_guards import require_month, require_non_negative
from fbc_dashboard.domain.entities.monthly_cost import MonthlyCost
from fbc_dashboard.domain.interfaces.repositories.cost_repository import CostRepository

logger = logging.getLogger(__name__)


class UpsertMonthlyCostUseCase:
    """Create or replace the cost row of a month.

    Args:
        cost_repo: Monthly cost persistence port.

    Returns:
        The stored :class:`MonthlyCost` from :meth:`execute`.

    Raises:
        BusinessValidationError: If the month is malformed or a cost negative.
        InvalidNumber: If a cost is NaN.
        NonFiniteNumber: If a cost is infinite.
    """

    def __init__(self, cost_repo: CostRepository) -> None:
        self._costs = cost_repo

    async def execute(
        self,
        month: str,
        *,
        shipping_cost: float = 0.0,
        marketing_cost: float = 0.0,
        overhead_cost: float = 0.0,
    ) -> MonthlyCost:
        """Validate and upsert the row.

        Args:
            month: Month key (``YYYY-MM``).
            shipping_cost: Shipping costs (>= 0).
            marketing_cost: Marketing costs (>= 0).
            overhead_cost: Overhead costs (>= 0).

        Returns:
            The stored row.

        Raises:
            BusinessValidationError: If a value is invalid.
        """
        require_month(month)
        stored = await self._costs.create_or_update_monthly_cost(
            month,
            require_non_negative(shipping_cost, "shippingCost"),
            require_non_negative(marketing_cost, "marketingCost"),
            require_non_negative(overhead_cost, "overheadCost"),
        )
        logger.info("costs.monthly.upserted", extra={"month": month})
        return stored
