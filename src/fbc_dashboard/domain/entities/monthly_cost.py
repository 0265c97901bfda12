# src/fbc_dashboard/domain/entities/monthly_cost.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Monthly Cost Entity.

Layer:
    domain/entities
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass

from fbc_dashboard.domain.entities.base import BaseEntity
from fbc_dashboard.domain.value_objects.identifiers import MonthlyCostId

_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


@dataclass(frozen=True, slots=True)
class MonthlyCost(BaseEntity):
    """Indirect costs booked for one calendar month.

    Attributes:
        id:
            Row identifier.
        month:
            Month key in ``YYYY-MM`` form; unique across rows.
        shipping_cost:
            Shipping costs for the month (>= 0).
        marketing_cost:
            Marketing costs for the month (>= 0).
        overhead_cost:
            Overhead costs for the month (>= 0).

    Raises:
        ValueError:
            If ``month`` is malformed or a cost is negative or non-finite.
    """

    id: MonthlyCostId
    month: str
    shipping_cost: float = 0.0
    marketing_cost: float = 0.0
    overhead_cost: float = 0.0

    def __post_init__(self) -> None:
        """Validate invariants for the MonthlyCost entity."""
        if not _MONTH_RE.match(self.month):
            raise ValueError("month must use the YYYY-MM format")
        for name in ("shipping_cost", "marketing_cost", "overhead_cost"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"{name} must be a finite number >= 0")
