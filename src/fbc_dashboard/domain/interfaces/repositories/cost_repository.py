# src/fbc_dashboard/domain/interfaces/repositories/cost_repository.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Monthly cost repository interface.

Purpose:
    Persistence for monthly cost rows, keyed by ``YYYY-MM``.

Layer:
    domain
"""

from __future__ import annotations

from typing import Protocol

from fbc_dashboard.domain.entities.monthly_cost import MonthlyCost
from fbc_dashboard.domain.enums.period import CostField


class CostRepository(Protocol):
    """Protocol for repositories managing monthly costs."""

    async def get_monthly_cost(self, month: str) -> MonthlyCost | None:
        """Return the cost row for ``month``, or ``None`` if none was recorded."""

    async def create_or_update_monthly_cost(
        self,
        month: str,
        shipping_cost: float,
        marketing_cost: float,
        overhead_cost: float,
    ) -> MonthlyCost:
        """Insert or replace the cost row for ``month``.

        Returns:
            The stored row.
        """

    async def update_monthly_cost_field(
        self, month: str, field: CostField, value: float
    ) -> MonthlyCost:
        """Set one cost field for ``month``, creating the row with zeros if absent.

        Returns:
            The stored row.
        """
