# src/fbc_dashboard/domain/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Domain layer.

Purpose:
    Pure business model of the workshop. Nothing here logs, performs I/O or
    imports pydantic; outer layers depend on this package, never the reverse.
"""
