# src/fbc_dashboard/application/use_cases/statistics/compute_total_creations.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: Compute Total Creations.

Layer:
    application/use_cases
"""

from __future__ import annotations

from fbc_dashboard.application.services.input_guards import require_date_range
from fbc_dashboard.domain.interfaces.repositories.activity_repository import ActivityRepository
from fbc_dashboard.domain.services.statistics_engine import compute_total_creations


class ComputeTotalCreationsUseCase:
    """Count CREATION activities.

    Args:
        activity_repo: Source of activities.

    Returns:
        Number of creations from :meth:`execute`.

    Raises:
        BusinessValidationError: If a provided bound is invalid.
    """

    def __init__(self, activity_repo: ActivityRepository) -> None:
        self._activities = activity_repo

    async def execute(self, start_date: str | None = None, end_date: str | None = None) -> int:
        """Count creations in the optional inclusive range.

        Args:
            start_date: Optional inclusive ISO 8601 lower bound.
            end_date: Optional inclusive ISO 8601 upper bound.

        Returns:
            Number of creations.

        Raises:
            BusinessValidationError: If a provided bound is invalid.
        """
        require_date_range(start_date, end_date)
        return compute_total_creations(list(await self._activities.list()), start_date, end_date)
