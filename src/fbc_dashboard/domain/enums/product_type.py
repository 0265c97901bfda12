# src/fbc_dashboard/domain/enums/product_type.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Product categories.

Layer:
    domain/enums
"""

from __future__ import annotations

from enum import Enum


class ProductType(str, Enum):
    """Closed set of product categories sold by the workshop."""

    SAC_BANANE = "SAC_BANANE"
    POCHETTE_ORDINATEUR = "POCHETTE_ORDINATEUR"
    TROUSSE_TOILETTE = "TROUSSE_TOILETTE"
    POCHETTE_VOLANTS = "POCHETTE_VOLANTS"
    TROUSSE_ZIPPEE = "TROUSSE_ZIPPEE"
    ACCESSOIRES_DIVERS = "ACCESSOIRES_DIVERS"


__all__ = ["ProductType"]
