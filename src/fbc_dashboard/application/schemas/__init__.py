# src/fbc_dashboard/application/schemas/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Pydantic schemas: input forms and output DTOs."""
