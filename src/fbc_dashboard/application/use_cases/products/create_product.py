# src/fbc_dashboard/application/use_cases/products/create_product.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: Create Product.

Purpose:
    Validate pricing and stock, then persist a new product.

Layer:
    application/use_cases
"""

from __future__ import annotations

import logging

from fbc_dashboard.application.services.id_factory import IdFactory, new_id
from fbc_dashboard.domain.entities.product import Product, ProductDescription
from fbc_dashboard.domain.exceptions.validation import BusinessValidationError
from fbc_dashboard.domain.interfaces.repositories.product_repository import ProductRepository
from fbc_dashboard.domain.services.validation import is_valid_product
from fbc_dashboard.domain.value_objects.identifiers import ProductId

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Create a product.

    Args:
        product_repo: Product persistence port.
        id_factory: Callable returning new identifiers; UUID4 by default.

    Returns:
        The stored :class:`Product` from :meth:`execute`.

    Raises:
        BusinessValidationError: If pricing, stock or weight is invalid.
    """

    def __init__(self, product_repo: ProductRepository, id_factory: IdFactory = new_id) -> None:
        self._products = product_repo
        self._new_id = id_factory

    async def execute(
        self,
        *,
        description: ProductDescription,
        unit_cost: float,
        sale_price: float,
        stock: float,
        weight: int | None = None,
    ) -> Product:
        """Validate and persist a new product.

        Args:
            description: Catalog reference or legacy descriptor.
            unit_cost: Unit material cost (> 0).
            sale_price: Unit sale price (> 0).
            stock: Units on hand (>= 0).
            weight: Optional weight in grams.

        Returns:
            The stored product.

        Raises:
            BusinessValidationError: If a value breaks a product rule.
        """
        try:
            product = Product(
                id=ProductId(self._new_id()),
                description=description,
                unit_cost=float(unit_cost),
                sale_price=float(sale_price),
                stock=float(stock),
                weight=weight,
            )
        except ValueError as exc:
            raise BusinessValidationError(str(exc)) from exc
        if not is_valid_product(product):
            raise BusinessValidationError(
                "Product validation failed",
                details={"unit_cost": unit_cost, "sale_price": sale_price, "stock": stock},
            )
        created = await self._products.create(product)
        logger.info("product.create.success", extra={"product_id": created.id})
        return created
