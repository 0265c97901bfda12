# src/fbc_dashboard/domain/services/catalog_index.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Product lookup index.

Purpose:
    Resolve product ids found on activities into products and display
    descriptors. Lookups return ``None`` when a join cannot be resolved so
    aggregation code can skip the row explicitly instead of failing.

Layer:
    domain/services
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from fbc_dashboard.domain.entities.product import (
    LegacyDescriptor,
    Product,
    ProductColoris,
    ProductModel,
)
from fbc_dashboard.domain.enums.product_type import ProductType
from fbc_dashboard.domain.value_objects.identifiers import (
    ProductColorisId,
    ProductId,
    ProductModelId,
)


@dataclass(frozen=True, slots=True)
class ProductDescriptor:
    """Display information resolved for a product.

    Attributes:
        product_id:
            Product identifier.
        product_type:
            Resolved product category.
        model_name:
            Model name, or the legacy product name.
        coloris:
            Coloris label.
    """

    product_id: ProductId
    product_type: ProductType
    model_name: str
    coloris: str


class ProductCatalogIndex:
    """In-memory index over products and their catalog entries.

    Args:
        products: Products to index by id.
        models: Product models used to resolve catalog references.
        coloris: Coloris entries used to resolve catalog references.
    """

    def __init__(
        self,
        products: Iterable[Product],
        models: Iterable[ProductModel] = (),
        coloris: Iterable[ProductColoris] = (),
    ) -> None:
        self._products: dict[ProductId, Product] = {p.id: p for p in products}
        self._models: dict[ProductModelId, ProductModel] = {m.id: m for m in models}
        self._coloris: dict[ProductColorisId, ProductColoris] = {c.id: c for c in coloris}

    def product(self, product_id: ProductId | None) -> Product | None:
        """Return the product for ``product_id``, or ``None`` if absent or unknown."""
        if not product_id:
            return None
        return self._products.get(product_id)

    def describe(self, product: Product) -> ProductDescriptor | None:
        """Resolve display information for ``product``.

        Args:
            product: Product to describe.

        Returns:
            Descriptor built from the legacy fields, or from the referenced
            model and coloris. ``None`` when a catalog reference points to a
            missing model or coloris.
        """
        desc = product.description
        if isinstance(desc, LegacyDescriptor):
            return ProductDescriptor(
                product_id=product.id,
                product_type=desc.type,
                model_name=desc.name,
                coloris=desc.coloris,
            )
        model = self._models.get(desc.model_id)
        coloris = self._coloris.get(desc.coloris_id)
        if model is None or coloris is None:
            return None
        return ProductDescriptor(
            product_id=product.id,
            product_type=model.type,
            model_name=model.name,
            coloris=coloris.coloris,
        )

    def describe_id(self, product_id: ProductId | None) -> ProductDescriptor | None:
        """Resolve ``product_id`` and describe it; ``None`` if either step fails."""
        product = self.product(product_id)
        if product is None:
            return None
        return self.describe(product)


__all__ = ["ProductCatalogIndex", "ProductDescriptor"]
