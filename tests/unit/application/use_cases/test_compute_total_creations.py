# tests/unit/application/use_cases/test_compute_total_creations.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Unit tests for ComputeTotalCreationsUseCase."""

from __future__ import annotations

import pytest

from fbc_dashboard.adapters.repositories.in_memory import InMemoryActivityRepository
from fbc_dashboard.application.use_cases.statistics.compute_total_creations import (
    ComputeTotalCreationsUseCase,
)
from fbc_dashboard.domain.enums.activity_type import ActivityType


@pytest.mark.asyncio
async def test_counts_creation_activities(make_activity) -> None:
    repo = InMemoryActivityRepository(
        [
            make_activity(ActivityType.CREATION, quantity=3, amount=0, date="2025-01-02T00:00:00Z"),
            make_activity(ActivityType.CREATION, quantity=1, amount=0, date="2025-03-02T00:00:00Z"),
            make_activity(date="2025-03-03T00:00:00Z"),
        ]
    )
    uc = ComputeTotalCreationsUseCase(repo)

    assert await uc.execute() == 2
    assert await uc.execute(start_date="2025-02-01T00:00:00Z") == 1


@pytest.mark.asyncio
async def test_empty_journal(activity_repo) -> None:
    assert await ComputeTotalCreationsUseCase(activity_repo).execute() == 0
