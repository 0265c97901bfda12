# tests/unit/adapters/test_in_memory_repositories.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""In-memory repository adapters."""

from __future__ import annotations

import asyncio

import pytest

from fbc_dashboard.adapters.repositories.in_memory import InMemoryProductRepository
from fbc_dashboard.domain.entities.product import ProductModel
from fbc_dashboard.domain.enums.period import CostField
from fbc_dashboard.domain.enums.product_type import ProductType
from fbc_dashboard.domain.exceptions.validation import (
    ActivityNotFound,
    BusinessValidationError,
    ProductNotFound,
)
from fbc_dashboard.domain.value_objects.identifiers import ActivityId, ProductId, ProductModelId


@pytest.mark.asyncio
async def test_activity_crud(activity_repo, make_activity) -> None:
    activity = make_activity(activity_id="A1")
    await activity_repo.create(activity)

    with pytest.raises(BusinessValidationError):
        await activity_repo.create(activity)

    await activity_repo.delete(ActivityId("A1"))
    assert await activity_repo.get_by_id(ActivityId("A1")) is None
    with pytest.raises(ActivityNotFound):
        await activity_repo.delete(ActivityId("A1"))
    with pytest.raises(ActivityNotFound):
        await activity_repo.update(activity)


@pytest.mark.asyncio
async def test_stock_updates_clamp_at_zero(make_product) -> None:
    repo = InMemoryProductRepository([make_product("P1", stock=3)])

    assert await repo.update_stock_atomically(ProductId("P1"), 2) == 5
    assert await repo.update_stock_atomically(ProductId("P1"), -9) == 0
    with pytest.raises(ProductNotFound):
        await repo.update_stock_atomically(ProductId("nope"), 1)


@pytest.mark.asyncio
async def test_concurrent_stock_updates_are_serialised(make_product) -> None:
    repo = InMemoryProductRepository([make_product("P1", stock=0)])

    await asyncio.gather(*(repo.update_stock_atomically(ProductId("P1"), 1) for _ in range(50)))

    assert (await repo.get_by_id(ProductId("P1"))).stock == 50


@pytest.mark.asyncio
async def test_product_update_requires_existing_row(product_repo, make_product) -> None:
    with pytest.raises(ProductNotFound):
        await product_repo.update(make_product("P1"))


@pytest.mark.asyncio
async def test_catalog_filters(catalog_repo) -> None:
    await catalog_repo.create_model(
        ProductModel(id=ProductModelId("M1"), type=ProductType.SAC_BANANE, name="Classique")
    )

    assert len(await catalog_repo.list_models_by_type(ProductType.SAC_BANANE)) == 1
    assert await catalog_repo.list_models_by_type(ProductType.TROUSSE_ZIPPEE) == []
    assert await catalog_repo.get_model_by_id(ProductModelId("M2")) is None


@pytest.mark.asyncio
async def test_cost_rows_are_keyed_by_month(cost_repo) -> None:
    row = await cost_repo.update_monthly_cost_field("2025-05", CostField.MARKETING, 12)
    replaced = await cost_repo.create_or_update_monthly_cost("2025-05", 1, 2, 3)

    assert row.id == "2025-05"
    assert row.marketing_cost == 12
    assert (replaced.shipping_cost, replaced.marketing_cost, replaced.overhead_cost) == (1, 2, 3)
    assert await cost_repo.get_monthly_cost("2025-05") == replaced
