# src/fbc_dashboard/domain/exceptions/__init__.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Domain exception hierarchy rooted at ``DomainError``."""
