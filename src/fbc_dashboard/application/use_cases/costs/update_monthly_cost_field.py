# src/fbc_dashboard/application/use_cases/costs/update_monthly_cost_field.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: Update Monthly Cost Field.

Purpose:
    Change one cost of a month without touching the other two. A month
    without a row gets one with the remaining costs at zero.

Layer:
    application/use_cases
"""

from __future__ import annotations

import logging

from fbc_dashboard.application.services.input_guards import require_month, require_non_negative
from fbc_dashboard.domain.entities.monthly_cost import MonthlyCost
from fbc_dashboard.domain.enums.period import CostField
from fbc_dashboard.domain.exceptions.validation import BusinessValidationError
from fbc_dashboard.domain.interfaces.repositories.cost_repository import CostRepository

logger = logging.getLogger(__name__)


class UpdateMonthlyCostFieldUseCase:
    """Set one cost field of a month.

    Args:
        cost_repo: Monthly cost persistence port.

    Returns:
        The stored :class:`MonthlyCost` from :meth:`execute`.

    Raises:
        BusinessValidationError: If the month, field or value is invalid.
        InvalidNumber: If the value is NaN.
        NonFiniteNumber: If the value is infinite.
    """

    def __init__(self, cost_repo: CostRepository) -> None:
        self._costs = cost_repo

    async def execute(self, month: str, field: CostField | str, value: float) -> MonthlyCost:
        """Validate and store one field.

        Args:
            month: Month key (``YYYY-MM``).
            field: ``shipping``, ``marketing`` or ``overhead``.
            value: New cost (>= 0).

        Returns:
            The stored row.

        Raises:
            BusinessValidationError: If the month, field or value is invalid.
        """
        require_month(month)
        try:
            cost_field = CostField(field)
        except ValueError as exc:
            raise BusinessValidationError(
                f"Invalid cost field: {field}. Must be one of shipping, marketing, overhead",
                details={"field": str(field)},
            ) from exc
        stored = await self._costs.update_monthly_cost_field(
            month, cost_field, require_non_negative(value, "value")
        )
        logger.info(
            "costs.monthly.field_updated",
            extra={"month": month, "field": cost_field.value},
        )
        return stored
