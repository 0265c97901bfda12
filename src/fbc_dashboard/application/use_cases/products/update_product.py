# src/fbc_dashboard/application/use_cases/products/update_product.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: Update Product.

Purpose:
    Merge a partial update into a stored product and validate the result
    before persisting it.

Layer:
    application/use_cases
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from fbc_dashboard.domain.entities.product import Product, ProductDescription
from fbc_dashboard.domain.exceptions.validation import BusinessValidationError, ProductNotFound
from fbc_dashboard.domain.interfaces.repositories.product_repository import ProductRepository
from fbc_dashboard.domain.services.validation import is_valid_product
from fbc_dashboard.domain.value_objects.identifiers import ProductId

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProductChanges:
    """Fields to change on a product; ``None`` leaves a field unchanged.

    Attributes:
        description: New catalog reference or legacy descriptor.
        unit_cost: New unit cost.
        sale_price: New sale price.
        stock: New stock.
        weight: New weight in grams.
        clear_weight: Remove the weight. Ignored when ``weight`` is set.
    """

    description: ProductDescription | None = None
    unit_cost: float | None = None
    sale_price: float | None = None
    stock: float | None = None
    weight: int | None = None
    clear_weight: bool = False


class UpdateProductUseCase:
    """Update a product.

    Args:
        product_repo: Product persistence port.

    Returns:
        The stored :class:`Product` from :meth:`execute`.

    Raises:
        ProductNotFound: If the product does not exist.
        BusinessValidationError: If the merged product is invalid.
    """

    def __init__(self, product_repo: ProductRepository) -> None:
        self._products = product_repo

    async def execute(self, product_id: ProductId, changes: ProductChanges) -> Product:
        """Merge ``changes`` then validate and persist.

        Args:
            product_id: Product to update.
            changes: Fields to change.

        Returns:
            The stored, updated product.

        Raises:
            ProductNotFound: If the product does not exist.
            BusinessValidationError: If the merged product is invalid.
        """
        existing = await self._products.get_by_id(product_id)
        if existing is None:
            raise ProductNotFound(
                f"Product with id {product_id} not found", details={"product_id": product_id}
            )

        fields: dict[str, object] = {}
        if changes.description is not None:
            fields["description"] = changes.description
        for name in ("unit_cost", "sale_price", "stock"):
            value = getattr(changes, name)
            if value is not None:
                fields[name] = float(value)
        if changes.weight is not None:
            fields["weight"] = changes.weight
        elif changes.clear_weight:
            fields["weight"] = None

        try:
            merged = replace(existing, **fields)
        except ValueError as exc:
            raise BusinessValidationError(str(exc), details={"product_id": product_id}) from exc
        if not is_valid_product(merged):
            raise BusinessValidationError(
                "Product validation failed", details={"product_id": product_id}
            )
        updated = await self._products.update(merged)
        logger.info(
            "product.update.success",
            extra={"product_id": product_id, "fields": sorted(fields)},
        )
        return updated
