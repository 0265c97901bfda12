# src/fbc_dashboard/domain/services/activity_queries.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Activity journal queries.

Purpose:
    Filter, sort and paginate activity lists for the journal views.

Layer:
    domain/services
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime

from fbc_dashboard.domain.entities.activity import Activity
from fbc_dashboard.domain.enums.activity_type import ActivityType
from fbc_dashboard.domain.services.calendar import filter_by_date_range
from fbc_dashboard.domain.value_objects.identifiers import ProductId


@dataclass(frozen=True, slots=True)
class ActivityFilters:
    """Optional criteria combined with AND.

    Attributes:
        start:
            Inclusive lower date bound.
        end:
            Inclusive upper date bound.
        type:
            Activity type to keep.
        product_id:
            Product to keep.
    """

    start: datetime | None = None
    end: datetime | None = None
    type: ActivityType | None = None
    product_id: ProductId | None = None


@dataclass(frozen=True, slots=True)
class ActivityPage:
    """One page of activities, newest first.

    Attributes:
        items:
            Activities on this page.
        total:
            Number of activities matching the filters.
        page:
            1-based page number.
        page_size:
            Maximum number of items per page.
        total_pages:
            ``ceil(total / page_size)``.
    """

    items: tuple[Activity, ...]
    total: int
    page: int
    page_size: int
    total_pages: int


def apply_filters(activities: Iterable[Activity], filters: ActivityFilters) -> list[Activity]:
    """Keep activities matching every criterion set on ``filters``."""
    kept = filter_by_date_range(activities, filters.start, filters.end)
    if filters.type is not None:
        kept = [a for a in kept if a.type == filters.type]
    if filters.product_id is not None:
        kept = [a for a in kept if a.product_id == filters.product_id]
    return kept


def newest_first(activities: Iterable[Activity]) -> list[Activity]:
    """Sort activities by date, most recent first."""
    return sorted(activities, key=lambda a: a.date, reverse=True)


def paginate(activities: Sequence[Activity], page: int, page_size: int) -> ActivityPage:
    """Slice ``activities`` (already sorted) into a page.

    Args:
        activities: Sorted activities.
        page: 1-based page number; values below 1 are treated as 1.
        page_size: Items per page; values below 1 are treated as 1.

    Returns:
        The requested page. A page past the end has no items.
    """
    page = max(1, page)
    page_size = max(1, page_size)
    total = len(activities)
    offset = (page - 1) * page_size
    return ActivityPage(
        items=tuple(activities[offset : offset + page_size]),
        total=total,
        page=page,
        page_size=page_size,
        total_pages=math.ceil(total / page_size),
    )


__all__ = ["ActivityFilters", "ActivityPage", "apply_filters", "newest_first", "paginate"]
