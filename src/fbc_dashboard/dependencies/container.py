# src/fbc_dashboard/dependencies/container.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Dependency wiring for the dashboard use cases.

Overview:
    Builds every use case from one set of repository ports and the typed
    settings. Presentation code resolves use cases from the returned
    :class:`Container` and never instantiates adapters itself.

Layer:
    dependencies

Design:
    * Always return the real use case types (no fake UCs).
    * Repositories are grouped in :class:`Repositories` so another storage
      backend only has to provide the five ports.
    * :func:`build_in_memory_container` wires the in-memory adapters for
      local runs and tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fbc_dashboard.adapters.repositories.in_memory import (
    InMemoryActivityRepository,
    InMemoryCostRepository,
    InMemoryProductCatalogRepository,
    InMemoryProductRepository,
    InMemoryStockMovementRepository,
)
from fbc_dashboard.application.use_cases.activities.add_activity import AddActivityUseCase
from fbc_dashboard.application.use_cases.activities.compute_activity_totals import (
    ComputeActivityTotalsUseCase,
    ComputeStockFromActivitiesUseCase,
)
from fbc_dashboard.application.use_cases.activities.list_activities import (
    ListActivitiesUseCase,
    ListRecentActivitiesUseCase,
)
from fbc_dashboard.application.use_cases.activities.update_activity import UpdateActivityUseCase
from fbc_dashboard.application.use_cases.costs.get_monthly_cost import GetMonthlyCostUseCase
from fbc_dashboard.application.use_cases.costs.update_monthly_cost_field import (
    UpdateMonthlyCostFieldUseCase,
)
from fbc_dashboard.application.use_cases.costs.upsert_monthly_cost import (
    UpsertMonthlyCostUseCase,
)
from fbc_dashboard.application.use_cases.products.create_product import CreateProductUseCase
from fbc_dashboard.application.use_cases.products.get_product import GetProductUseCase
from fbc_dashboard.application.use_cases.products.list_products import (
    ListLowStockProductsUseCase,
    ListProductsUseCase,
)
from fbc_dashboard.application.use_cases.products.manage_catalog import (
    CreateProductColorisUseCase,
    CreateProductModelUseCase,
    ListProductColorisUseCase,
    ListProductModelsUseCase,
)
from fbc_dashboard.application.use_cases.products.update_product import UpdateProductUseCase
from fbc_dashboard.application.use_cases.revenue.compute_revenue import ComputeRevenueUseCase
from fbc_dashboard.application.use_cases.revenue.compute_revenue_breakdown import (
    ComputeRevenueBreakdownUseCase,
)
from fbc_dashboard.application.use_cases.statistics.compute_business_statistics import (
    ComputeBusinessStatisticsUseCase,
)
from fbc_dashboard.application.use_cases.statistics.compute_product_margins import (
    ComputeProductMarginsUseCase,
)
from fbc_dashboard.application.use_cases.statistics.compute_profits_by_period import (
    ComputeProfitsByPeriodUseCase,
)
from fbc_dashboard.application.use_cases.statistics.compute_total_creations import (
    ComputeTotalCreationsUseCase,
)
from fbc_dashboard.application.use_cases.stock_movements.create_stock_movement import (
    CreateStockMovementUseCase,
)
from fbc_dashboard.application.use_cases.stock_movements.list_stock_movements import (
    ListStockMovementsUseCase,
)
from fbc_dashboard.config.settings import Settings, get_settings
from fbc_dashboard.domain.interfaces.repositories.activity_repository import ActivityRepository
from fbc_dashboard.domain.interfaces.repositories.cost_repository import CostRepository
from fbc_dashboard.domain.interfaces.repositories.product_catalog_repository import (
    ProductCatalogRepository,
)
from fbc_dashboard.domain.interfaces.repositories.product_repository import ProductRepository
from fbc_dashboard.domain.interfaces.repositories.stock_movement_repository import (
    StockMovementRepository,
)
from fbc_dashboard.infrastructure.logging.logger import configure_root_logging

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Repositories:
    """The five repository ports backing the use cases."""

    activities: ActivityRepository
    products: ProductRepository
    catalog: ProductCatalogRepository
    stock_movements: StockMovementRepository
    costs: CostRepository


@dataclass(frozen=True, slots=True)
class Container:
    """Every use case, wired to one set of repositories."""

    settings: Settings
    repositories: Repositories

    add_activity: AddActivityUseCase
    update_activity: UpdateActivityUseCase
    list_activities: ListActivitiesUseCase
    list_recent_activities: ListRecentActivitiesUseCase
    compute_activity_totals: ComputeActivityTotalsUseCase
    compute_stock_from_activities: ComputeStockFromActivitiesUseCase

    list_products: ListProductsUseCase
    list_low_stock_products: ListLowStockProductsUseCase
    get_product: GetProductUseCase
    create_product: CreateProductUseCase
    update_product: UpdateProductUseCase
    list_product_models: ListProductModelsUseCase
    list_product_coloris: ListProductColorisUseCase
    create_product_model: CreateProductModelUseCase
    create_product_coloris: CreateProductColorisUseCase

    create_stock_movement: CreateStockMovementUseCase
    list_stock_movements: ListStockMovementsUseCase

    get_monthly_cost: GetMonthlyCostUseCase
    upsert_monthly_cost: UpsertMonthlyCostUseCase
    update_monthly_cost_field: UpdateMonthlyCostFieldUseCase

    compute_revenue: ComputeRevenueUseCase
    compute_revenue_breakdown: ComputeRevenueBreakdownUseCase
    compute_profits_by_period: ComputeProfitsByPeriodUseCase
    compute_product_margins: ComputeProductMarginsUseCase
    compute_business_statistics: ComputeBusinessStatisticsUseCase
    compute_total_creations: ComputeTotalCreationsUseCase


def build_container(repositories: Repositories, settings: Settings | None = None) -> Container:
    """Wire every use case to ``repositories``.

    Args:
        repositories: Repository ports to use.
        settings: Settings to apply; defaults to :func:`get_settings`.

    Returns:
        The wired container.
    """
    settings = settings or get_settings()
    configure_root_logging(settings.log_level)

    r = repositories
    container = Container(
        settings=settings,
        repositories=r,
        add_activity=AddActivityUseCase(r.activities, r.products, r.stock_movements),
        update_activity=UpdateActivityUseCase(r.activities, r.products),
        list_activities=ListActivitiesUseCase(r.activities, settings.activities_page_size),
        list_recent_activities=ListRecentActivitiesUseCase(
            r.activities, settings.recent_activities_limit
        ),
        compute_activity_totals=ComputeActivityTotalsUseCase(r.activities, r.products),
        compute_stock_from_activities=ComputeStockFromActivitiesUseCase(r.activities),
        list_products=ListProductsUseCase(r.products),
        list_low_stock_products=ListLowStockProductsUseCase(
            r.products, settings.low_stock_threshold
        ),
        get_product=GetProductUseCase(r.products),
        create_product=CreateProductUseCase(r.products),
        update_product=UpdateProductUseCase(r.products),
        list_product_models=ListProductModelsUseCase(r.catalog),
        list_product_coloris=ListProductColorisUseCase(r.catalog),
        create_product_model=CreateProductModelUseCase(r.catalog),
        create_product_coloris=CreateProductColorisUseCase(r.catalog),
        create_stock_movement=CreateStockMovementUseCase(r.stock_movements),
        list_stock_movements=ListStockMovementsUseCase(r.stock_movements),
        get_monthly_cost=GetMonthlyCostUseCase(r.costs),
        upsert_monthly_cost=UpsertMonthlyCostUseCase(r.costs),
        update_monthly_cost_field=UpdateMonthlyCostFieldUseCase(r.costs),
        compute_revenue=ComputeRevenueUseCase(r.activities, r.products, r.costs),
        compute_revenue_breakdown=ComputeRevenueBreakdownUseCase(
            r.activities, r.products, r.catalog
        ),
        compute_profits_by_period=ComputeProfitsByPeriodUseCase(r.activities, r.products),
        compute_product_margins=ComputeProductMarginsUseCase(r.activities, r.products),
        compute_business_statistics=ComputeBusinessStatisticsUseCase(r.activities, r.products),
        compute_total_creations=ComputeTotalCreationsUseCase(r.activities),
    )
    logger.info("container.built", extra={"environment": settings.environment.value})
    return container


def build_in_memory_container(settings: Settings | None = None) -> Container:
    """Return a container backed by fresh in-memory repositories."""
    return build_container(
        Repositories(
            activities=InMemoryActivityRepository(),
            products=InMemoryProductRepository(),
            catalog=InMemoryProductCatalogRepository(),
            stock_movements=InMemoryStockMovementRepository(),
            costs=InMemoryCostRepository(),
        ),
        settings,
    )
