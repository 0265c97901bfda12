# src/fbc_dashboard/domain/interfaces/repositories/stock_movement_repository.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Stock movement repository interface.

Purpose:
    Append-only persistence for stock movements.

Layer:
    domain
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from fbc_dashboard.domain.entities.activity import StockMovement
from fbc_dashboard.domain.value_objects.identifiers import ProductId, StockMovementId


class StockMovementRepository(Protocol):
    """Protocol for repositories managing stock movements."""

    async def list(self) -> Sequence[StockMovement]:
        """Return every stock movement."""

    async def get_by_id(self, movement_id: StockMovementId) -> StockMovement | None:
        """Return the movement with ``movement_id``, or ``None``."""

    async def list_by_product(self, product_id: ProductId) -> Sequence[StockMovement]:
        """Return the movements of one product."""

    async def create(self, movement: StockMovement) -> StockMovement:
        """Persist a new movement and return it as stored."""
