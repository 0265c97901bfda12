# tests/unit/application/use_cases/test_create_product.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Unit tests for CreateProductUseCase."""

from __future__ import annotations

import pytest

from fbc_dashboard.application.use_cases.products.create_product import CreateProductUseCase
from fbc_dashboard.domain.entities.product import CatalogReference, LegacyDescriptor
from fbc_dashboard.domain.enums.product_type import ProductType
from fbc_dashboard.domain.exceptions.validation import BusinessValidationError
from fbc_dashboard.domain.value_objects.identifiers import ProductColorisId, ProductModelId

REFERENCE = CatalogReference(model_id=ProductModelId("M1"), coloris_id=ProductColorisId("C1"))


@pytest.mark.asyncio
async def test_creates_catalog_product(product_repo) -> None:
    uc = CreateProductUseCase(product_repo, id_factory=lambda: "P-new")

    product = await uc.execute(
        description=REFERENCE, unit_cost=12, sale_price=30, stock=3, weight=180
    )

    assert product.id == "P-new"
    assert product.model_id == "M1"
    assert product.coloris_id == "C1"
    assert product.weight == 180
    assert await product_repo.get_by_id(product.id) == product


@pytest.mark.asyncio
async def test_creates_legacy_product_without_weight(product_repo) -> None:
    legacy = LegacyDescriptor(name="Trousse", type=ProductType.TROUSSE_ZIPPEE, coloris="Rouge")

    product = await CreateProductUseCase(product_repo).execute(
        description=legacy, unit_cost=5, sale_price=12, stock=0
    )

    assert product.weight is None
    assert product.model_id is None
    assert len(product.id) == 36


@pytest.mark.parametrize(
    ("unit_cost", "sale_price", "stock"),
    [(0, 10, 1), (5, -1, 1), (5, 10, -1)],
)
@pytest.mark.asyncio
async def test_rejects_invalid_pricing_and_stock(
    product_repo, unit_cost: float, sale_price: float, stock: float
) -> None:
    with pytest.raises(BusinessValidationError, match="Product validation failed"):
        await CreateProductUseCase(product_repo).execute(
            description=REFERENCE, unit_cost=unit_cost, sale_price=sale_price, stock=stock
        )
    assert await product_repo.list() == []


@pytest.mark.asyncio
async def test_rejects_non_positive_weight(product_repo) -> None:
    with pytest.raises(BusinessValidationError, match="weight"):
        await CreateProductUseCase(product_repo).execute(
            description=REFERENCE, unit_cost=5, sale_price=10, stock=1, weight=0
        )
