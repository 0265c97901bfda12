# src/fbc_dashboard/application/use_cases/activities/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Activity journal use cases."""
