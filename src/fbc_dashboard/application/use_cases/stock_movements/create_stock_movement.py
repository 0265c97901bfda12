# src/fbc_dashboard/application/use_cases/stock_movements/create_stock_movement.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: Create Stock Movement.

Purpose:
    Record a stock movement directly (outside the activity flow), after
    checking that its quantity sign matches its source.

Layer:
    application/use_cases

Notes:
    Recording a movement does not change product stock; stock is updated by
    the activity use cases.
"""

from __future__ import annotations

from fbc_dashboard.application.services.id_factory import IdFactory, new_id
from fbc_dashboard.domain.entities.activity import StockMovement
from fbc_dashboard.domain.enums.activity_type import StockMovementSource
from fbc_dashboard.domain.exceptions.validation import (
    BusinessValidationError,
    UnknownMovementSource,
)
from fbc_dashboard.domain.interfaces.repositories.stock_movement_repository import (
    StockMovementRepository,
)
from fbc_dashboard.domain.services.numbers import validate_number
from fbc_dashboard.domain.services.validation import (
    is_valid_stock_movement,
    is_valid_stock_movement_source,
)
from fbc_dashboard.domain.value_objects.identifiers import ProductId, StockMovementId


class CreateStockMovementUseCase:
    """Validate and persist a stock movement.

    Args:
        stock_movement_repo: Stock movement persistence port.
        id_factory: Callable returning new identifiers; UUID4 by default.

    Returns:
        The stored :class:`StockMovement` from :meth:`execute`.

    Raises:
        BusinessValidationError: If the product is missing, the quantity is
            zero or its sign does not match the source.
        UnknownMovementSource: If the source is outside the closed set.
        InvalidNumber: If the quantity is NaN.
        NonFiniteNumber: If the quantity is infinite.
    """

    def __init__(
        self, stock_movement_repo: StockMovementRepository, id_factory: IdFactory = new_id
    ) -> None:
        self._movements = stock_movement_repo
        self._new_id = id_factory

    async def execute(
        self, *, product_id: ProductId, quantity: float, source: StockMovementSource | str
    ) -> StockMovement:
        """Validate and persist one movement.

        Args:
            product_id: Product whose stock moved.
            quantity: Signed, non-zero quantity.
            source: Movement source.

        Returns:
            The stored movement.

        Raises:
            BusinessValidationError: If a rule fails.
            UnknownMovementSource: If ``source`` is unknown.
        """
        if not product_id or not str(product_id).strip():
            raise BusinessValidationError(
                "productId is required for stock movement", details={"field": "productId"}
            )
        validate_number(quantity, "quantity")
        if quantity == 0:
            raise BusinessValidationError(
                "quantity must be non-zero", details={"field": "quantity"}
            )
        if not is_valid_stock_movement_source(source):
            raise UnknownMovementSource(
                f"Invalid source value: {source}", details={"source": str(source)}
            )

        movement = StockMovement(
            id=StockMovementId(self._new_id()),
            product_id=product_id,
            quantity=float(quantity),
            source=StockMovementSource(source),
        )
        if not is_valid_stock_movement(movement):
            raise BusinessValidationError(
                "Stock movement validation failed",
                details={"quantity": quantity, "source": movement.source.value},
            )
        return await self._movements.create(movement)
