# src/fbc_dashboard/domain/entities/activity.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Activity and Stock Movement Entities.

Purpose:
    Append-only journal records: activities describe what happened in the
    workshop, stock movements record how product stock changed as a result.

Layer:
    domain/entities
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import UTC, datetime

from fbc_dashboard.domain.entities.base import BaseEntity
from fbc_dashboard.domain.enums.activity_type import ActivityType, StockMovementSource
from fbc_dashboard.domain.value_objects.identifiers import (
    ActivityId,
    ProductId,
    StockMovementId,
)


@dataclass(frozen=True, slots=True)
class Activity(BaseEntity):
    """A dated journal entry.

    Attributes:
        id:
            Activity identifier.
        date:
            When the activity happened (timezone-aware; naive datetimes are
            normalized to UTC inside :meth:`__post_init__`).
        type:
            Activity kind.
        quantity:
            Signed quantity. Sales carry a negative quantity, creations a
            positive one.
        amount:
            Monetary amount (unsigned magnitude).
        product_id:
            Referenced product. Required for SALE and STOCK_CORRECTION by
            business rule.
        note:
            Optional free-text note.
    """

    id: ActivityId
    date: datetime
    type: ActivityType
    quantity: float
    amount: float
    product_id: ProductId | None = None
    note: str | None = None

    def __post_init__(self) -> None:
        """Normalize the activity date to UTC."""
        if self.date.tzinfo is None:
            object.__setattr__(self, "date", self.date.replace(tzinfo=UTC))


@dataclass(frozen=True, slots=True)
class StockMovement(BaseEntity):
    """A signed change of a product's stock.

    Attributes:
        id:
            Movement identifier.
        product_id:
            Product whose stock moved.
        quantity:
            Signed, non-zero quantity. Its sign must match ``source`` (see
            :func:`fbc_dashboard.domain.services.validation.is_valid_quantity_for_source`).
        source:
            Why the stock moved.

    Raises:
        ValueError:
            If ``quantity`` is zero or not finite.
    """

    id: StockMovementId
    product_id: ProductId
    quantity: float
    source: StockMovementSource

    def __post_init__(self) -> None:
        """Validate invariants for the StockMovement entity."""
        if not math.isfinite(self.quantity) or self.quantity == 0:
            raise ValueError("quantity must be a finite, non-zero number")
