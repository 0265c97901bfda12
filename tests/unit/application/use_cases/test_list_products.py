# tests/unit/application/use_cases/test_list_products.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Unit tests for product listing and the low-stock report."""

from __future__ import annotations

import pytest

from fbc_dashboard.adapters.repositories.in_memory import InMemoryProductRepository
from fbc_dashboard.application.use_cases.products.list_products import (
    ListLowStockProductsUseCase,
    ListProductsUseCase,
)


@pytest.fixture
def products(make_product) -> InMemoryProductRepository:
    return InMemoryProductRepository(
        [
            make_product("P1", stock=0),
            make_product("P2", stock=4.5),
            make_product("P3", stock=5),
            make_product("P4", stock=30),
        ]
    )


@pytest.mark.asyncio
async def test_lists_every_product(products) -> None:
    listed = await ListProductsUseCase(products).execute()
    assert [p.id for p in listed] == ["P1", "P2", "P3", "P4"]


@pytest.mark.asyncio
async def test_low_stock_is_strictly_below_threshold(products) -> None:
    uc = ListLowStockProductsUseCase(products, threshold=5)

    assert [p.id for p in await uc.execute()] == ["P1", "P2"]
    assert [p.id for p in await uc.execute(threshold=31)] == ["P1", "P2", "P3", "P4"]
    assert await uc.execute(threshold=0) == []
