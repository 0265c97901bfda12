# src/fbc_dashboard/infrastructure/logging/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""JSON logging with correlation ids."""
