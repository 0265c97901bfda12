# tests/unit/application/use_cases/test_upsert_monthly_cost.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Unit tests for UpsertMonthlyCostUseCase."""

from __future__ import annotations

import pytest

from fbc_dashboard.application.use_cases.costs.upsert_monthly_cost import (
    UpsertMonthlyCostUseCase,
)
from fbc_dashboard.domain.exceptions.numbers import NonFiniteNumber
from fbc_dashboard.domain.exceptions.validation import BusinessValidationError


@pytest.mark.asyncio
async def test_upsert_creates_then_replaces(cost_repo) -> None:
    uc = UpsertMonthlyCostUseCase(cost_repo)

    first = await uc.execute("2025-03", shipping_cost=10, marketing_cost=5)
    second = await uc.execute("2025-03", overhead_cost=30)

    assert (first.shipping_cost, first.marketing_cost, first.overhead_cost) == (10, 5, 0)
    assert (second.shipping_cost, second.marketing_cost, second.overhead_cost) == (0, 0, 30)
    assert second.id == first.id
    assert await cost_repo.get_monthly_cost("2025-03") == second


@pytest.mark.asyncio
async def test_negative_cost_names_the_field(cost_repo) -> None:
    with pytest.raises(BusinessValidationError, match="marketingCost") as excinfo:
        await UpsertMonthlyCostUseCase(cost_repo).execute("2025-03", marketing_cost=-1)

    assert excinfo.value.details["field"] == "marketingCost"
    assert await cost_repo.get_monthly_cost("2025-03") is None


@pytest.mark.asyncio
async def test_infinite_cost_and_bad_month(cost_repo) -> None:
    uc = UpsertMonthlyCostUseCase(cost_repo)

    with pytest.raises(NonFiniteNumber):
        await uc.execute("2025-03", overhead_cost=float("inf"))
    with pytest.raises(BusinessValidationError):
        await uc.execute("03-2025")
