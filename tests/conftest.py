# tests/conftest.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Shared fixtures: entity factories and in-memory repositories."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime

import pytest

from fbc_dashboard.adapters.repositories.in_memory import (
    InMemoryActivityRepository,
    InMemoryCostRepository,
    InMemoryProductCatalogRepository,
    InMemoryProductRepository,
    InMemoryStockMovementRepository,
)
from fbc_dashboard.domain.entities.activity import Activity
from fbc_dashboard.domain.entities.product import (
    CatalogReference,
    LegacyDescriptor,
    Product,
    ProductDescription,
)
from fbc_dashboard.domain.enums.activity_type import ActivityType
from fbc_dashboard.domain.enums.product_type import ProductType
from fbc_dashboard.domain.services.calendar import parse_iso_datetime
from fbc_dashboard.domain.value_objects.identifiers import (
    ActivityId,
    ProductColorisId,
    ProductId,
    ProductModelId,
)

ProductFactory = Callable[..., Product]
ActivityFactory = Callable[..., Activity]


@pytest.fixture
def make_product() -> ProductFactory:
    """Build products with sensible defaults (legacy descriptor unless told otherwise)."""

    def _make(
        product_id: str = "P1",
        *,
        unit_cost: float = 10.0,
        sale_price: float = 19.99,
        stock: float = 50.0,
        weight: int | None = None,
        description: ProductDescription | None = None,
        name: str = "Banane Classique",
        product_type: ProductType = ProductType.SAC_BANANE,
        coloris: str = "Bleu",
        model_id: str | None = None,
        coloris_id: str | None = None,
    ) -> Product:
        if description is None:
            if model_id and coloris_id:
                description = CatalogReference(
                    model_id=ProductModelId(model_id), coloris_id=ProductColorisId(coloris_id)
                )
            else:
                description = LegacyDescriptor(name=name, type=product_type, coloris=coloris)
        return Product(
            id=ProductId(product_id),
            description=description,
            unit_cost=unit_cost,
            sale_price=sale_price,
            stock=stock,
            weight=weight,
        )

    return _make


@pytest.fixture
def make_activity() -> ActivityFactory:
    """Build activities; ``date`` accepts ISO strings or datetimes."""
    counter = iter(range(1, 10_000))

    def _make(
        activity_type: ActivityType = ActivityType.SALE,
        *,
        quantity: float = -1.0,
        amount: float = 19.99,
        product_id: str | None = "P1",
        date: str | datetime = "2025-01-15T10:00:00.000Z",
        activity_id: str | None = None,
        note: str | None = None,
    ) -> Activity:
        moment = parse_iso_datetime(date) if isinstance(date, str) else date
        return Activity(
            id=ActivityId(activity_id or f"A{next(counter)}"),
            date=moment,
            type=activity_type,
            quantity=quantity,
            amount=amount,
            product_id=ProductId(product_id) if product_id else None,
            note=note,
        )

    return _make


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 15, 12, 0, tzinfo=UTC)


@pytest.fixture
def activity_repo() -> InMemoryActivityRepository:
    return InMemoryActivityRepository()


@pytest.fixture
def product_repo() -> InMemoryProductRepository:
    return InMemoryProductRepository()


@pytest.fixture
def catalog_repo() -> InMemoryProductCatalogRepository:
    return InMemoryProductCatalogRepository()


@pytest.fixture
def stock_movement_repo() -> InMemoryStockMovementRepository:
    return InMemoryStockMovementRepository()


@pytest.fixture
def cost_repo() -> InMemoryCostRepository:
    return InMemoryCostRepository()
