# src/fbc_dashboard/dependencies/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Object wiring: builds use cases over configured repositories."""
