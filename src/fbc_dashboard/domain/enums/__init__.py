# src/fbc_dashboard/domain/enums/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Domain enumerations."""
