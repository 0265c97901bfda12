# src/fbc_dashboard/application/use_cases/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use cases, one class per operation, grouped by aggregate."""
