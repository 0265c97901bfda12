# src/fbc_dashboard/application/use_cases/stock_movements/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Stock movement use cases."""
