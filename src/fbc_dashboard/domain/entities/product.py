# src/fbc_dashboard/domain/entities/product.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Catalog Entities.

Purpose:
    Immutable representations of products and their catalog references
    (product models and coloris variants).

Layer:
    domain/entities

Notes:
    A product is described either by a reference into the catalog
    (model + coloris) or, for rows created before the catalog existed, by a
    legacy free-text descriptor. The two shapes are modelled as distinct
    types so exactly one of them is always present.
"""

from __future__ import annotations

from dataclasses import dataclass

from fbc_dashboard.domain.entities.base import BaseEntity
from fbc_dashboard.domain.enums.product_type import ProductType
from fbc_dashboard.domain.value_objects.identifiers import (
    ProductColorisId,
    ProductId,
    ProductModelId,
)


@dataclass(frozen=True, slots=True)
class ProductModel(BaseEntity):
    """A named model within a product category.

    Attributes:
        id:
            Model identifier.
        type:
            Product category the model belongs to.
        name:
            Display name, unique within ``type``.

    Raises:
        ValueError:
            If ``name`` is blank.
    """

    id: ProductModelId
    type: ProductType
    name: str

    def __post_init__(self) -> None:
        """Validate invariants for the ProductModel entity."""
        if not self.name or not self.name.strip():
            raise ValueError("name must be non-empty")


@dataclass(frozen=True, slots=True)
class ProductColoris(BaseEntity):
    """A coloris (color/fabric variant) available for a product model.

    Attributes:
        id:
            Coloris identifier.
        model_id:
            Owning product model.
        coloris:
            Coloris label, unique within ``model_id``.

    Raises:
        ValueError:
            If ``coloris`` is blank.
    """

    id: ProductColorisId
    model_id: ProductModelId
    coloris: str

    def __post_init__(self) -> None:
        """Validate invariants for the ProductColoris entity."""
        if not self.coloris or not self.coloris.strip():
            raise ValueError("coloris must be non-empty")


@dataclass(frozen=True, slots=True)
class CatalogReference(BaseEntity):
    """Product description by reference into the catalog.

    Attributes:
        model_id:
            Referenced product model.
        coloris_id:
            Referenced coloris of that model.
    """

    model_id: ProductModelId
    coloris_id: ProductColorisId

    def __post_init__(self) -> None:
        """Validate invariants for the CatalogReference value."""
        if not self.model_id or not self.coloris_id:
            raise ValueError("model_id and coloris_id must be non-empty")


@dataclass(frozen=True, slots=True)
class LegacyDescriptor(BaseEntity):
    """Free-text product description kept for rows that predate the catalog.

    Attributes:
        name:
            Product name.
        type:
            Product category.
        coloris:
            Coloris label.
    """

    name: str
    type: ProductType
    coloris: str

    def __post_init__(self) -> None:
        """Validate invariants for the LegacyDescriptor value."""
        if not self.name:
            raise ValueError("name must be non-empty")


ProductDescription = CatalogReference | LegacyDescriptor


@dataclass(frozen=True, slots=True)
class Product(BaseEntity):
    """A sellable product with pricing and current stock.

    Attributes:
        id:
            Product identifier.
        description:
            Either a :class:`CatalogReference` or a :class:`LegacyDescriptor`.
        unit_cost:
            Material cost of one unit (business rule: > 0).
        sale_price:
            Selling price of one unit (business rule: > 0).
        stock:
            Units on hand (business rule: >= 0).
        weight:
            Optional weight in grams; a positive integer when present.

    Raises:
        ValueError:
            If ``weight`` is present and not a positive integer, or if
            ``description`` is not one of the two supported shapes.
    """

    id: ProductId
    description: ProductDescription
    unit_cost: float
    sale_price: float
    stock: float
    weight: int | None = None

    def __post_init__(self) -> None:
        """Validate invariants for the Product entity."""
        if not isinstance(self.description, CatalogReference | LegacyDescriptor):
            raise ValueError("description must be a CatalogReference or a LegacyDescriptor")
        if self.weight is not None:
            if isinstance(self.weight, bool) or not isinstance(self.weight, int):
                raise ValueError("weight must be an integer number of grams")
            if self.weight <= 0:
                raise ValueError("weight must be > 0 when provided")

    @property
    def model_id(self) -> ProductModelId | None:
        """Catalog model id, or ``None`` for legacy products."""
        if isinstance(self.description, CatalogReference):
            return self.description.model_id
        return None

    @property
    def coloris_id(self) -> ProductColorisId | None:
        """Catalog coloris id, or ``None`` for legacy products."""
        if isinstance(self.description, CatalogReference):
            return self.description.coloris_id
        return None
