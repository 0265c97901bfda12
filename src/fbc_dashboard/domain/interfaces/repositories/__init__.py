# src/fbc_dashboard/domain/interfaces/repositories/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Repository protocols.

Purpose:
    Async persistence contracts for activities, products, the catalog, stock
    movements and monthly costs. Use cases depend on these protocols only.
"""
