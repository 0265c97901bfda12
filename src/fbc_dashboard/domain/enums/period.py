# src/fbc_dashboard/domain/enums/period.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Reporting period enums.

Purpose:
    Period selectors used by revenue reporting and period-bucketed
    statistics, plus the closed set of monthly cost fields.

Layer:
    domain/enums
"""

from __future__ import annotations

from enum import Enum


class RevenuePeriod(str, Enum):
    """Period selector for revenue reports."""

    MONTH = "MONTH"
    QUARTER = "QUARTER"
    YEAR = "YEAR"
    CUSTOM = "CUSTOM"


class StatisticsPeriod(str, Enum):
    """Bucket granularity for period statistics."""

    DAILY = "DAILY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


class CostField(str, Enum):
    """Editable fields of a monthly cost row."""

    SHIPPING = "shipping"
    MARKETING = "marketing"
    OVERHEAD = "overhead"


__all__ = ["CostField", "RevenuePeriod", "StatisticsPeriod"]
