# src/fbc_dashboard/application/schemas/dto/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Output DTOs built from domain entities."""
