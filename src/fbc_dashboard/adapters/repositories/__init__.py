# src/fbc_dashboard/adapters/repositories/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""
Repository implementations (Adapters Layer)

Purpose:
    In-memory repositories satisfying the domain repository protocols. They
    back the default container and the test suite.

Exports:
    - InMemoryActivityRepository
    - InMemoryCostRepository
    - InMemoryProductCatalogRepository
    - InMemoryProductRepository
    - InMemoryStockMovementRepository
"""

from __future__ import annotations

from .in_memory import (
    InMemoryActivityRepository,
    InMemoryCostRepository,
    InMemoryProductCatalogRepository,
    InMemoryProductRepository,
    InMemoryStockMovementRepository,
)

__all__ = [
    "InMemoryActivityRepository",
    "InMemoryCostRepository",
    "InMemoryProductCatalogRepository",
    "InMemoryProductRepository",
    "InMemoryStockMovementRepository",
]
