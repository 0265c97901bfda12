# src/fbc_dashboard/domain/services/stock_rules.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Stock quantity rules.

Purpose:
    Derive the stock movement an activity implies and check that its sign
    matches its source. A CREATION, SALE or STOCK_CORRECTION activity with a
    product and a non-zero quantity implies exactly one movement:

        CREATION          -> CREATION              (quantity > 0)
        SALE              -> SALE                  (quantity < 0)
        STOCK_CORRECTION  -> INVENTORY_ADJUSTMENT  (quantity != 0)

Layer:
    domain/services

Notes:
    - Pure domain logic:
        * No logging.
        * No persistence or gateways.
    - Persisting the movement and applying the stock delta atomically is the
      job of the calling use case and the repository ports.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from fbc_dashboard.domain.entities.activity import Activity
from fbc_dashboard.domain.enums.activity_type import ActivityType, StockMovementSource
from fbc_dashboard.domain.exceptions.validation import BusinessValidationError
from fbc_dashboard.domain.services.validation import is_valid_quantity_for_source
from fbc_dashboard.domain.value_objects.identifiers import ProductId

ACTIVITY_MOVEMENT_SOURCES = MappingProxyType(
    {
        ActivityType.CREATION: StockMovementSource.CREATION,
        ActivityType.SALE: StockMovementSource.SALE,
        ActivityType.STOCK_CORRECTION: StockMovementSource.INVENTORY_ADJUSTMENT,
    }
)


@dataclass(frozen=True, slots=True)
class StockMovementDraft:
    """Movement implied by an activity, before it gets an id.

    Attributes:
        product_id:
            Product whose stock moves.
        quantity:
            Signed quantity copied from the activity.
        source:
            Source derived from the activity type.
    """

    product_id: ProductId
    quantity: float
    source: StockMovementSource

    @property
    def is_consistent(self) -> bool:
        """Whether the quantity sign matches the source."""
        return is_valid_quantity_for_source(self.quantity, self.source)


def source_for_activity_type(activity_type: ActivityType) -> StockMovementSource | None:
    """Return the movement source for ``activity_type``; ``None`` for OTHER."""
    return ACTIVITY_MOVEMENT_SOURCES.get(activity_type)


def movement_for_activity(activity: Activity) -> StockMovementDraft | None:
    """Return the movement implied by ``activity``, if any.

    Args:
        activity: Activity about to be persisted.

    Returns:
        A draft movement, or ``None`` for OTHER activities, activities
        without a product and zero quantities.
    """
    source = source_for_activity_type(activity.type)
    if source is None or not activity.product_id or activity.quantity == 0:
        return None
    return StockMovementDraft(
        product_id=activity.product_id, quantity=activity.quantity, source=source
    )


def ensure_movement_matches_activity(activity: Activity) -> StockMovementDraft | None:
    """Like :func:`movement_for_activity` but reject inconsistent signs.

    Raises:
        BusinessValidationError: If the implied movement's quantity sign does
            not match its source (for example a SALE with a positive
            quantity).
    """
    draft = movement_for_activity(activity)
    if draft is not None and not draft.is_consistent:
        raise BusinessValidationError(
            f"quantity {activity.quantity} is not valid for a {draft.source.value} stock movement",
            details={
                "activity_type": activity.type.value,
                "quantity": activity.quantity,
                "source": draft.source.value,
            },
        )
    return draft


def clamp_stock(current: float, delta: float) -> float:
    """Apply ``delta`` to ``current`` and clamp the result at zero."""
    return max(0.0, current + delta)


def would_go_negative(current: float, delta: float) -> bool:
    """Return True iff applying ``delta`` without clamping would go below zero."""
    return current + delta < 0


__all__ = [
    "ACTIVITY_MOVEMENT_SOURCES",
    "StockMovementDraft",
    "clamp_stock",
    "ensure_movement_matches_activity",
    "movement_for_activity",
    "source_for_activity_type",
    "would_go_negative",
]
