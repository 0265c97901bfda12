# src/fbc_dashboard/infrastructure/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Infrastructure layer: cross-cutting technical services."""
