# src/fbc_dashboard/adapters/repositories/in_memory.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""In-memory repositories.

Purpose:
    Process-local implementations of every repository port. They back the
    default container, local runs and the use case tests.

Layer:
    adapters/repositories

Notes:
    - Rows are stored in insertion-ordered dicts keyed by id, so ``list()``
      returns storage order.
    - Entities are frozen; updates replace the stored instance.
    - ``update_stock_atomically`` serializes updates through one
      ``asyncio.Lock`` per repository and clamps the result at zero.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable, Sequence
from dataclasses import replace

from fbc_dashboard.domain.entities.activity import Activity, StockMovement
from fbc_dashboard.domain.entities.monthly_cost import MonthlyCost
from fbc_dashboard.domain.entities.product import Product, ProductColoris, ProductModel
from fbc_dashboard.domain.enums.period import CostField
from fbc_dashboard.domain.enums.product_type import ProductType
from fbc_dashboard.domain.exceptions.validation import (
    ActivityNotFound,
    BusinessValidationError,
    ProductNotFound,
)
from fbc_dashboard.domain.services.stock_rules import clamp_stock
from fbc_dashboard.domain.value_objects.identifiers import (
    ActivityId,
    MonthlyCostId,
    ProductId,
    ProductModelId,
    StockMovementId,
)

__all__ = [
    "InMemoryActivityRepository",
    "InMemoryCostRepository",
    "InMemoryProductCatalogRepository",
    "InMemoryProductRepository",
    "InMemoryStockMovementRepository",
]

_COST_ATTRIBUTES = {
    CostField.SHIPPING: "shipping_cost",
    CostField.MARKETING: "marketing_cost",
    CostField.OVERHEAD: "overhead_cost",
}


class InMemoryActivityRepository:
    """Activity journal held in a dict."""

    def __init__(self, activities: Iterable[Activity] = ()) -> None:
        self._rows: dict[ActivityId, Activity] = {a.id: a for a in activities}

    async def list(self) -> Sequence[Activity]:
        return list(self._rows.values())

    async def get_by_id(self, activity_id: ActivityId) -> Activity | None:
        return self._rows.get(activity_id)

    async def create(self, activity: Activity) -> Activity:
        if activity.id in self._rows:
            raise BusinessValidationError(
                f"Activity with id {activity.id} already exists",
                details={"activity_id": activity.id},
            )
        self._rows[activity.id] = activity
        return activity

    async def update(self, activity: Activity) -> Activity:
        if activity.id not in self._rows:
            raise ActivityNotFound(
                f"Activity with id {activity.id} not found",
                details={"activity_id": activity.id},
            )
        self._rows[activity.id] = activity
        return activity

    async def delete(self, activity_id: ActivityId) -> None:
        if self._rows.pop(activity_id, None) is None:
            raise ActivityNotFound(
                f"Activity with id {activity_id} not found",
                details={"activity_id": activity_id},
            )


class InMemoryProductRepository:
    """Products held in a dict, with lock-guarded stock updates."""

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._rows: dict[ProductId, Product] = {p.id: p for p in products}
        self._stock_lock = asyncio.Lock()

    async def list(self) -> Sequence[Product]:
        return list(self._rows.values())

    async def get_by_id(self, product_id: ProductId) -> Product | None:
        return self._rows.get(product_id)

    async def create(self, product: Product) -> Product:
        if product.id in self._rows:
            raise BusinessValidationError(
                f"Product with id {product.id} already exists",
                details={"product_id": product.id},
            )
        self._rows[product.id] = product
        return product

    async def update(self, product: Product) -> Product:
        if product.id not in self._rows:
            raise ProductNotFound(
                f"Product with id {product.id} not found", details={"product_id": product.id}
            )
        self._rows[product.id] = product
        return product

    async def update_stock_atomically(self, product_id: ProductId, delta: float) -> float:
        """Add ``delta`` to the stock under the lock and clamp at zero."""
        async with self._stock_lock:
            product = self._rows.get(product_id)
            if product is None:
                raise ProductNotFound(
                    f"Product with id {product_id} not found",
                    details={"product_id": product_id},
                )
            stock = clamp_stock(product.stock, delta)
            self._rows[product_id] = replace(product, stock=stock)
            return stock


class InMemoryProductCatalogRepository:
    """Product models and coloris held in dicts."""

    def __init__(
        self,
        models: Iterable[ProductModel] = (),
        coloris: Iterable[ProductColoris] = (),
    ) -> None:
        self._models: dict[ProductModelId, ProductModel] = {m.id: m for m in models}
        self._coloris: dict[str, ProductColoris] = {c.id: c for c in coloris}

    async def list_models(self) -> Sequence[ProductModel]:
        return list(self._models.values())

    async def list_models_by_type(self, product_type: ProductType) -> Sequence[ProductModel]:
        return [m for m in self._models.values() if m.type == product_type]

    async def get_model_by_id(self, model_id: ProductModelId) -> ProductModel | None:
        return self._models.get(model_id)

    async def create_model(self, model: ProductModel) -> ProductModel:
        self._models[model.id] = model
        return model

    async def list_coloris(self) -> Sequence[ProductColoris]:
        return list(self._coloris.values())

    async def list_coloris_by_model(self, model_id: ProductModelId) -> Sequence[ProductColoris]:
        return [c for c in self._coloris.values() if c.model_id == model_id]

    async def create_coloris(self, coloris: ProductColoris) -> ProductColoris:
        self._coloris[coloris.id] = coloris
        return coloris


class InMemoryStockMovementRepository:
    """Append-only stock movement log."""

    def __init__(self, movements: Iterable[StockMovement] = ()) -> None:
        self._rows: dict[StockMovementId, StockMovement] = {m.id: m for m in movements}

    async def list(self) -> Sequence[StockMovement]:
        return list(self._rows.values())

    async def get_by_id(self, movement_id: StockMovementId) -> StockMovement | None:
        return self._rows.get(movement_id)

    async def list_by_product(self, product_id: ProductId) -> Sequence[StockMovement]:
        return [m for m in self._rows.values() if m.product_id == product_id]

    async def create(self, movement: StockMovement) -> StockMovement:
        self._rows[movement.id] = movement
        return movement


class InMemoryCostRepository:
    """Monthly cost rows keyed by ``YYYY-MM``."""

    def __init__(self, costs: Iterable[MonthlyCost] = ()) -> None:
        self._rows: dict[str, MonthlyCost] = {c.month: c for c in costs}
        self._lock = asyncio.Lock()

    async def get_monthly_cost(self, month: str) -> MonthlyCost | None:
        return self._rows.get(month)

    async def create_or_update_monthly_cost(
        self,
        month: str,
        shipping_cost: float,
        marketing_cost: float,
        overhead_cost: float,
    ) -> MonthlyCost:
        async with self._lock:
            existing = self._rows.get(month)
            row = MonthlyCost(
                id=existing.id if existing else MonthlyCostId(month),
                month=month,
                shipping_cost=shipping_cost,
                marketing_cost=marketing_cost,
                overhead_cost=overhead_cost,
            )
            self._rows[month] = row
            return row

    async def update_monthly_cost_field(
        self, month: str, field: CostField, value: float
    ) -> MonthlyCost:
        async with self._lock:
            existing = self._rows.get(month) or MonthlyCost(id=MonthlyCostId(month), month=month)
            row = replace(existing, **{_COST_ATTRIBUTES[CostField(field)]: value})
            self._rows[month] = row
            return row
