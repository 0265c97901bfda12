# src/fbc_dashboard/application/use_cases/products/list_products.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Cases: List Products.

Layer:
    application/use_cases
"""

from __future__ import annotations

from fbc_dashboard.domain.entities.product import Product
from fbc_dashboard.domain.interfaces.repositories.product_repository import ProductRepository


class ListProductsUseCase:
    """Return every product.

    Args:
        product_repo: Product persistence port.

    Returns:
        List of :class:`Product` from :meth:`execute`.
    """

    def __init__(self, product_repo: ProductRepository) -> None:
        self._products = product_repo

    async def execute(self) -> list[Product]:
        """Return every product, in storage order."""
        return list(await self._products.list())


class ListLowStockProductsUseCase:
    """Return products whose stock is strictly below a threshold.

    Args:
        product_repo: Product persistence port.
        threshold: Default threshold; products with ``stock < threshold``
            are returned.

    Returns:
        List of :class:`Product` from :meth:`execute`.
    """

    def __init__(self, product_repo: ProductRepository, threshold: float = 5) -> None:
        self._products = product_repo
        self._threshold = threshold

    async def execute(self, threshold: float | None = None) -> list[Product]:
        """Return low-stock products, using ``threshold`` when given."""
        limit = self._threshold if threshold is None else threshold
        return [p for p in await self._products.list() if p.stock < limit]
