# src/fbc_dashboard/application/use_cases/products/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Product and catalog use cases."""
