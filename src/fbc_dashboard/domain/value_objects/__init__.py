# src/fbc_dashboard/domain/value_objects/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Domain value objects."""
