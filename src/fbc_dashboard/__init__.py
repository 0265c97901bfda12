# src/fbc_dashboard/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""FBC Dashboard: back office for a small craft workshop.

Purpose:
    Product catalog, activity journal, stock movements, monthly costs and
    the revenue and statistics reports computed from them.

Layout:
    - domain: entities, enums, exceptions, repository protocols and pure
      business rules.
    - application: use cases, form schemas and DTOs.
    - adapters: repository implementations.
    - infrastructure: logging.
    - config and dependencies: settings and object wiring.
"""
