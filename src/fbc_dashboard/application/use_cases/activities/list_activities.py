# src/fbc_dashboard/application/use_cases/activities/list_activities.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Cases: List Activities.

Purpose:
    Journal views: a filtered, paginated list and a short "recent
    activity" feed for the dashboard.

Layer:
    application/use_cases
"""

from __future__ import annotations

from fbc_dashboard.application.schemas.dto.activities import ActivityDTO, ActivityPageDTO
from fbc_dashboard.application.services.input_guards import require_date_range
from fbc_dashboard.domain.enums.activity_type import ActivityType
from fbc_dashboard.domain.interfaces.repositories.activity_repository import ActivityRepository
from fbc_dashboard.domain.services.activity_queries import (
    ActivityFilters,
    apply_filters,
    newest_first,
    paginate,
)
from fbc_dashboard.domain.services.calendar import parse_iso_datetime
from fbc_dashboard.domain.value_objects.identifiers import ProductId


class ListActivitiesUseCase:
    """List activities matching optional filters, one page at a time.

    Args:
        activity_repo: Source of activities.
        default_page_size: Page size used when the caller passes none.

    Returns:
        :class:`ActivityPageDTO` from :meth:`execute`.

    Raises:
        BusinessValidationError: If a date bound is invalid or start > end.
    """

    def __init__(self, activity_repo: ActivityRepository, default_page_size: int = 20) -> None:
        self._activities = activity_repo
        self._default_page_size = default_page_size

    async def execute(
        self,
        *,
        start_date: str | None = None,
        end_date: str | None = None,
        activity_type: ActivityType | None = None,
        product_id: ProductId | None = None,
        page: int = 1,
        page_size: int | None = None,
    ) -> ActivityPageDTO:
        """Filter, sort newest first and paginate.

        Args:
            start_date: Optional inclusive ISO 8601 lower bound.
            end_date: Optional inclusive ISO 8601 upper bound.
            activity_type: Optional type filter.
            product_id: Optional product filter.
            page: 1-based page number; values below 1 mean 1.
            page_size: Items per page; defaults to the configured size.

        Returns:
            The requested page. A page past the end has no items.

        Raises:
            BusinessValidationError: If a date bound is invalid or start > end.
        """
        require_date_range(start_date, end_date)
        filters = ActivityFilters(
            start=parse_iso_datetime(start_date) if start_date else None,
            end=parse_iso_datetime(end_date) if end_date else None,
            type=ActivityType(activity_type) if activity_type is not None else None,
            product_id=product_id,
        )
        matching = newest_first(apply_filters(await self._activities.list(), filters))
        result = paginate(matching, page, page_size or self._default_page_size)
        return ActivityPageDTO(
            items=[ActivityDTO.from_entity(a) for a in result.items],
            total=result.total,
            page=result.page,
            page_size=result.page_size,
            total_pages=result.total_pages,
        )


class ListRecentActivitiesUseCase:
    """Return the most recent activities.

    Args:
        activity_repo: Source of activities.
        limit: Default number of activities to return.

    Returns:
        List of :class:`ActivityDTO` from :meth:`execute`, newest first.
    """

    def __init__(self, activity_repo: ActivityRepository, limit: int = 10) -> None:
        self._activities = activity_repo
        self._limit = limit

    async def execute(self, limit: int | None = None) -> list[ActivityDTO]:
        """Return at most ``limit`` activities, newest first."""
        count = max(0, self._limit if limit is None else limit)
        recent = newest_first(await self._activities.list())[:count]
        return [ActivityDTO.from_entity(a) for a in recent]
