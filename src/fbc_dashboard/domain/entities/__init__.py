# src/fbc_dashboard/domain/entities/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Domain entities (frozen dataclasses validated in ``__post_init__``)."""
