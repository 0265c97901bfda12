# src/fbc_dashboard/application/use_cases/costs/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Monthly cost use cases."""
