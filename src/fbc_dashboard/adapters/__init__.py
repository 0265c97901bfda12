# src/fbc_dashboard/adapters/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Adapters layer.

Purpose:
    Concrete implementations of the domain repository protocols.

Layer:
    adapters
"""
