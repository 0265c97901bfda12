# src/fbc_dashboard/application/use_cases/costs/get_monthly_cost.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: Get Monthly Cost.

Layer:
    application/use_cases
"""

from __future__ import annotations

from fbc_dashboard.application.services.input_guards import require_month
from fbc_dashboard.domain.entities.monthly_cost import MonthlyCost
from fbc_dashboard.domain.interfaces.repositories.cost_repository import CostRepository


class GetMonthlyCostUseCase:
    """Fetch the cost row of one month.

    Args:
        cost_repo: Monthly cost persistence port.

    Returns:
        The :class:`MonthlyCost`, or ``None`` when nothing was recorded,
        from :meth:`execute`.

    Raises:
        BusinessValidationError: If the month key is malformed.
    """

    def __init__(self, cost_repo: CostRepository) -> None:
        self._costs = cost_repo

    async def execute(self, month: str) -> MonthlyCost | None:
        """Return the row for ``month`` (``YYYY-MM``) or ``None``."""
        return await self._costs.get_monthly_cost(require_month(month))
