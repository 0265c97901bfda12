# src/fbc_dashboard/domain/interfaces/repositories/activity_repository.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Activity repository interface.

Purpose:
    Persistence operations for the activity journal.

Layer:
    domain

Notes:
    Implementations live in the adapters layer and must translate driver
    errors into domain exceptions.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from fbc_dashboard.domain.entities.activity import Activity
from fbc_dashboard.domain.value_objects.identifiers import ActivityId


class ActivityRepository(Protocol):
    """Protocol for repositories managing activities."""

    async def list(self) -> Sequence[Activity]:
        """Return every activity, in storage order."""

    async def get_by_id(self, activity_id: ActivityId) -> Activity | None:
        """Return the activity with ``activity_id``, or ``None``."""

    async def create(self, activity: Activity) -> Activity:
        """Persist a new activity and return it as stored.

        Args:
            activity: Activity to insert. Its id must not exist yet.

        Returns:
            The stored activity.
        """

    async def update(self, activity: Activity) -> Activity:
        """Replace the stored activity sharing ``activity.id``.

        Raises:
            ActivityNotFound: If no activity has that id.
        """

    async def delete(self, activity_id: ActivityId) -> None:
        """Delete the activity with ``activity_id``.

        Raises:
            ActivityNotFound: If no activity has that id.
        """
