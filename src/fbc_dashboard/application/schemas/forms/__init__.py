# src/fbc_dashboard/application/schemas/forms/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Form schemas.

Purpose:
    Validate raw form payloads and report failures as per-field error keys.
"""
