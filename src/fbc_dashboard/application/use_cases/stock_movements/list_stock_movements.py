# src/fbc_dashboard/application/use_cases/stock_movements/list_stock_movements.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: List Stock Movements.

Layer:
    application/use_cases
"""

from __future__ import annotations

from fbc_dashboard.domain.entities.activity import StockMovement
from fbc_dashboard.domain.interfaces.repositories.stock_movement_repository import (
    StockMovementRepository,
)
from fbc_dashboard.domain.value_objects.identifiers import ProductId


class ListStockMovementsUseCase:
    """List stock movements, optionally for one product.

    Args:
        stock_movement_repo: Stock movement persistence port.

    Returns:
        List of :class:`StockMovement` from :meth:`execute`.
    """

    def __init__(self, stock_movement_repo: StockMovementRepository) -> None:
        self._movements = stock_movement_repo

    async def execute(self, product_id: ProductId | None = None) -> list[StockMovement]:
        """Return every movement, or the movements of ``product_id``."""
        if product_id is None:
            return list(await self._movements.list())
        return list(await self._movements.list_by_product(product_id))
