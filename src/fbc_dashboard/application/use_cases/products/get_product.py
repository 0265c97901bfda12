# src/fbc_dashboard/application/use_cases/products/get_product.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: Get Product.

Layer:
    application/use_cases
"""

from __future__ import annotations

from fbc_dashboard.domain.entities.product import Product
from fbc_dashboard.domain.exceptions.validation import ProductNotFound
from fbc_dashboard.domain.interfaces.repositories.product_repository import ProductRepository
from fbc_dashboard.domain.value_objects.identifiers import ProductId


class GetProductUseCase:
    """Fetch one product by id.

    Args:
        product_repo: Product persistence port.

    Returns:
        The :class:`Product` from :meth:`execute`.

    Raises:
        ProductNotFound: If no product has the id.
    """

    def __init__(self, product_repo: ProductRepository) -> None:
        self._products = product_repo

    async def execute(self, product_id: ProductId) -> Product:
        """Return the product or raise :class:`ProductNotFound`."""
        product = await self._products.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(
                f"Product with id {product_id} not found", details={"product_id": product_id}
            )
        return product
