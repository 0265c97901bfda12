# src/fbc_dashboard/application/services/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Application services shared by use cases."""
