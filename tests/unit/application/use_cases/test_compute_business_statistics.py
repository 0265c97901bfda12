# tests/unit/application/use_cases/test_compute_business_statistics.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Unit tests for ComputeBusinessStatisticsUseCase."""

from __future__ import annotations

import pytest

from fbc_dashboard.adapters.repositories.in_memory import (
    InMemoryActivityRepository,
    InMemoryProductRepository,
)
from fbc_dashboard.application.use_cases.statistics.compute_business_statistics import (
    ComputeBusinessStatisticsUseCase,
)
from fbc_dashboard.domain.enums.activity_type import ActivityType
from fbc_dashboard.domain.exceptions.validation import BusinessValidationError


@pytest.mark.asyncio
async def test_rollup(make_activity, make_product) -> None:
    activities = InMemoryActivityRepository(
        [
            make_activity(quantity=-2, amount=40),
            make_activity(ActivityType.CREATION, quantity=6, amount=0),
            make_activity(ActivityType.OTHER, quantity=1, amount=15, product_id=None),
        ]
    )
    products = InMemoryProductRepository([make_product(unit_cost=10, sale_price=20)])

    stats = await ComputeBusinessStatisticsUseCase(activities, products).execute(
        start_date="2025-01-01T00:00:00Z", end_date="2025-01-31T23:59:59Z"
    )

    assert stats.total_profit == 20
    assert stats.total_sales == 40
    assert stats.total_creations == 1
    assert [m.product_id for m in stats.product_margins] == ["P1"]
    assert stats.start_date == "2025-01-01T00:00:00Z"


@pytest.mark.asyncio
async def test_inverted_bounds(activity_repo, product_repo) -> None:
    with pytest.raises(BusinessValidationError):
        await ComputeBusinessStatisticsUseCase(activity_repo, product_repo).execute(
            start_date="2025-02-01T00:00:00Z", end_date="2025-01-01T00:00:00Z"
        )
