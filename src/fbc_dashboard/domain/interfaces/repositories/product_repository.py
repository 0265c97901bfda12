# src/fbc_dashboard/domain/interfaces/repositories/product_repository.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Product repository interface.

Purpose:
    Persistence operations for products, including the atomic stock update
    every stock-changing use case relies on.

Layer:
    domain
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from fbc_dashboard.domain.entities.product import Product
from fbc_dashboard.domain.value_objects.identifiers import ProductId


class ProductRepository(Protocol):
    """Protocol for repositories managing products."""

    async def list(self) -> Sequence[Product]:
        """Return every product."""

    async def get_by_id(self, product_id: ProductId) -> Product | None:
        """Return the product with ``product_id``, or ``None``."""

    async def create(self, product: Product) -> Product:
        """Persist a new product and return it as stored."""

    async def update(self, product: Product) -> Product:
        """Replace the stored product sharing ``product.id``.

        Raises:
            ProductNotFound: If no product has that id.
        """

    async def update_stock_atomically(self, product_id: ProductId, delta: float) -> float:
        """Add ``delta`` to the product's stock as one atomic step.

        Implementations must:
            - Serialize concurrent updates to the same product.
            - Clamp the resulting stock at zero.

        Args:
            product_id: Product whose stock changes.
            delta: Signed quantity to add.

        Returns:
            The new stock value.

        Raises:
            ProductNotFound: If no product has that id.
        """
