# src/fbc_dashboard/domain/interfaces/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Ports implemented by outer layers."""
