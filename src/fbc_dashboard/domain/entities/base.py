# src/fbc_dashboard/domain/entities/base.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Base entity.

Purpose:
    Shared root for immutable domain entities.

Layer:
    domain/entities
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BaseEntity:
    """Base mixin for domain entities.

    Attributes:
        None. Subclasses declare their own fields.

    Notes:
        Entities check structural invariants only (types, shapes, formats).
        Business rules such as "sale price must be positive" are expressed as
        boolean predicates in :mod:`fbc_dashboard.domain.services.validation`
        so that rule-breaking rows loaded from storage can still be inspected.
    """

    def __post_init__(self) -> None:  # noqa: D401
        """Hook for subclasses to extend with invariant checks."""
        return
