# tests/unit/application/use_cases/test_list_activities.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Unit tests for the activity journal listing use cases."""

from __future__ import annotations

import pytest

from fbc_dashboard.adapters.repositories.in_memory import InMemoryActivityRepository
from fbc_dashboard.application.use_cases.activities.list_activities import (
    ListActivitiesUseCase,
    ListRecentActivitiesUseCase,
)
from fbc_dashboard.domain.enums.activity_type import ActivityType
from fbc_dashboard.domain.exceptions.validation import BusinessValidationError


@pytest.fixture
def journal(make_activity) -> InMemoryActivityRepository:
    return InMemoryActivityRepository(
        [
            make_activity(activity_id="S1", date="2025-01-05T10:00:00Z"),
            make_activity(
                ActivityType.CREATION,
                quantity=3,
                amount=0,
                activity_id="C1",
                date="2025-01-10T10:00:00Z",
            ),
            make_activity(activity_id="S2", product_id="P2", date="2025-02-01T10:00:00Z"),
            make_activity(
                ActivityType.OTHER,
                quantity=1,
                amount=12,
                product_id=None,
                activity_id="O1",
                date="2025-02-20T10:00:00Z",
            ),
        ]
    )


@pytest.mark.asyncio
async def test_pages_are_newest_first(journal) -> None:
    uc = ListActivitiesUseCase(journal, default_page_size=3)

    first = await uc.execute()
    second = await uc.execute(page=2)

    assert [a.id for a in first.items] == ["O1", "S2", "C1"]
    assert [a.id for a in second.items] == ["S1"]
    assert first.total == 4
    assert first.total_pages == 2
    assert first.page_size == 3


@pytest.mark.asyncio
async def test_filters_combine(journal) -> None:
    uc = ListActivitiesUseCase(journal)

    page = await uc.execute(
        start_date="2025-01-01T00:00:00Z",
        end_date="2025-01-31T23:59:59Z",
        activity_type=ActivityType.SALE,
    )
    by_product = await uc.execute(product_id="P2")

    assert [a.id for a in page.items] == ["S1"]
    assert [a.id for a in by_product.items] == ["S2"]


@pytest.mark.asyncio
async def test_page_past_the_end_is_empty(journal) -> None:
    page = await ListActivitiesUseCase(journal).execute(page=9, page_size=2)

    assert page.items == []
    assert page.total == 4


@pytest.mark.asyncio
async def test_reversed_range_is_rejected(journal) -> None:
    with pytest.raises(BusinessValidationError, match="startDate"):
        await ListActivitiesUseCase(journal).execute(
            start_date="2025-03-01T00:00:00Z", end_date="2025-01-01T00:00:00Z"
        )


@pytest.mark.asyncio
async def test_recent_activities_respects_limit(journal) -> None:
    uc = ListRecentActivitiesUseCase(journal, limit=2)

    assert [a.id for a in await uc.execute()] == ["O1", "S2"]
    assert [a.id for a in await uc.execute(limit=1)] == ["O1"]
    assert await uc.execute(limit=0) == []
