# src/fbc_dashboard/application/use_cases/statistics/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Business statistics use cases."""
