# src/fbc_dashboard/domain/interfaces/repositories/product_catalog_repository.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Product catalog repository interface.

Purpose:
    Persistence operations for product models and their coloris.

Layer:
    domain
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from fbc_dashboard.domain.entities.product import ProductColoris, ProductModel
from fbc_dashboard.domain.enums.product_type import ProductType
from fbc_dashboard.domain.value_objects.identifiers import ProductModelId


class ProductCatalogRepository(Protocol):
    """Protocol for repositories managing the product catalog."""

    async def list_models(self) -> Sequence[ProductModel]:
        """Return every product model."""

    async def list_models_by_type(self, product_type: ProductType) -> Sequence[ProductModel]:
        """Return the models of one product category."""

    async def get_model_by_id(self, model_id: ProductModelId) -> ProductModel | None:
        """Return the model with ``model_id``, or ``None``."""

    async def create_model(self, model: ProductModel) -> ProductModel:
        """Persist a new product model and return it as stored."""

    async def list_coloris(self) -> Sequence[ProductColoris]:
        """Return every coloris."""

    async def list_coloris_by_model(self, model_id: ProductModelId) -> Sequence[ProductColoris]:
        """Return the coloris of one product model."""

    async def create_coloris(self, coloris: ProductColoris) -> ProductColoris:
        """Persist a new coloris and return it as stored."""
