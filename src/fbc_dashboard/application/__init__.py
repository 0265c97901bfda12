# src/fbc_dashboard/application/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Application layer.

Purpose:
    Use cases orchestrating the domain through repository protocols, plus the
    pydantic form schemas and DTOs exchanged with callers.

Layer:
    application
"""
