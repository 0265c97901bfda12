# src/fbc_dashboard/domain/value_objects/identifiers.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Typed identifiers.

Purpose:
    Distinct identifier types for each persisted entity so that a product id
    cannot be passed where an activity id is expected. At runtime every
    identifier is a plain ``str``; the distinction exists for type checkers.

Layer:
    domain/value_objects
"""

from __future__ import annotations

from typing import NewType

ProductId = NewType("ProductId", str)
ProductModelId = NewType("ProductModelId", str)
ProductColorisId = NewType("ProductColorisId", str)
ActivityId = NewType("ActivityId", str)
StockMovementId = NewType("StockMovementId", str)
MonthlyCostId = NewType("MonthlyCostId", str)

__all__ = [
    "ActivityId",
    "MonthlyCostId",
    "ProductColorisId",
    "ProductId",
    "ProductModelId",
    "StockMovementId",
]
