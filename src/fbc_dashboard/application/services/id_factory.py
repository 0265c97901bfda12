# src/fbc_dashboard/application/services/id_factory.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Identifier factory.

Purpose:
    Default generator for new entity identifiers. Use cases take an
    ``id_factory`` callable so tests can inject deterministic ids.

Layer:
    application/services
"""

from __future__ import annotations

import uuid
from collections.abc import Callable

IdFactory = Callable[[], str]


def new_id() -> str:
    """Return a new random UUID4 string."""
    return str(uuid.uuid4())


__all__ = ["IdFactory", "new_id"]
