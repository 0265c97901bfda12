# src/fbc_dashboard/application/use_cases/revenue/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Revenue report use cases."""
