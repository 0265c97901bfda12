# src/fbc_dashboard/application/schemas/dto/activities.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Application DTOs for the activity journal.

Layer:
    application/schemas/dto
"""

from __future__ import annotations

from datetime import datetime

from fbc_dashboard.application.schemas.dto.base import BaseDTO
from fbc_dashboard.domain.entities.activity import Activity
from fbc_dashboard.domain.enums.activity_type import ActivityType


class ActivityDTO(BaseDTO):
    """One journal entry.

    Attributes:
        id: Activity identifier.
        date: Timestamp (UTC).
        type: Activity type.
        product_id: Optional product.
        quantity: Signed quantity.
        amount: Amount.
        note: Optional note.
    """

    id: str
    date: datetime
    type: ActivityType
    product_id: str | None = None
    quantity: float
    amount: float
    note: str | None = None

    @classmethod
    def from_entity(cls, activity: Activity) -> ActivityDTO:
        """Build the DTO from an :class:`Activity` entity."""
        return cls(
            id=activity.id,
            date=activity.date,
            type=activity.type,
            product_id=activity.product_id,
            quantity=activity.quantity,
            amount=activity.amount,
            note=activity.note,
        )


class ActivityPageDTO(BaseDTO):
    """One page of the journal, newest first.

    Attributes:
        items: Activities on the page.
        total: Number of matching activities.
        page: 1-based page number.
        page_size: Maximum items per page.
        total_pages: Number of pages.
    """

    items: list[ActivityDTO]
    total: int
    page: int
    page_size: int
    total_pages: int


class ActivityTotalsDTO(BaseDTO):
    """Totals derived from the activity history.

    Attributes:
        profit: Profit of resolvable sales.
        total_sales: Sum of sale amounts.
        start_date: Optional inclusive lower bound.
        end_date: Optional inclusive upper bound.
    """

    profit: float
    total_sales: float
    start_date: str | None = None
    end_date: str | None = None


__all__ = ["ActivityDTO", "ActivityPageDTO", "ActivityTotalsDTO"]
