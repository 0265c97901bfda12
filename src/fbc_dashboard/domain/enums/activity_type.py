# src/fbc_dashboard/domain/enums/activity_type.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Activity and stock movement enums.

Purpose:
    Closed sets describing what happened in the workshop (an activity) and
    why stock moved (a stock movement source).

Layer:
    domain/enums

Notes:
    - Pure domain types:
        * No logging.
        * No persistence or gateways.
"""

from __future__ import annotations

from enum import Enum


class ActivityType(str, Enum):
    """Kind of activity recorded in the journal."""

    CREATION = "CREATION"
    SALE = "SALE"
    STOCK_CORRECTION = "STOCK_CORRECTION"
    OTHER = "OTHER"


class StockMovementSource(str, Enum):
    """Origin of a stock movement.

    The sign of the movement quantity depends on the source: creations add
    stock, sales remove it, inventory adjustments may go either way.
    """

    CREATION = "CREATION"
    SALE = "SALE"
    INVENTORY_ADJUSTMENT = "INVENTORY_ADJUSTMENT"


# Activity types that require a product reference.
PRODUCT_REQUIRED_ACTIVITY_TYPES: frozenset[ActivityType] = frozenset(
    {ActivityType.SALE, ActivityType.STOCK_CORRECTION}
)

__all__ = [
    "PRODUCT_REQUIRED_ACTIVITY_TYPES",
    "ActivityType",
    "StockMovementSource",
]
