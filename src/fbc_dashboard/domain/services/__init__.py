# src/fbc_dashboard/domain/services/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Pure domain services: number parsing, validation, stock rules and reports."""
