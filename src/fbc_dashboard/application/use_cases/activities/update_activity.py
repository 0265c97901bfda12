# src/fbc_dashboard/application/use_cases/activities/update_activity.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: Update Activity.

Purpose:
    Apply a partial update to an existing activity and keep product stock
    aligned with the activity history.

Layer:
    application/use_cases

Notes:
    - Partial updates use :class:`ActivityChanges`. A ``None`` field means
      "unchanged"; removing the product reference is explicit through
      ``clear_product``.
    - When quantity, product or type changes, stock is recomputed from the
      full activity history of every affected product (old and new) and the
      difference with the stored stock is applied atomically.
    - If the stock step fails, the activity is reverted to its previous
      state before :class:`StockUpdateFailed` is raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace

from fbc_dashboard.application.services.input_guards import require_iso_date
from fbc_dashboard.domain.entities.activity import Activity
from fbc_dashboard.domain.enums.activity_type import PRODUCT_REQUIRED_ACTIVITY_TYPES, ActivityType
from fbc_dashboard.domain.exceptions.validation import (
    ActivityNotFound,
    BusinessValidationError,
    ProductNotFound,
    StockUpdateFailed,
)
from fbc_dashboard.domain.interfaces.repositories.activity_repository import ActivityRepository
from fbc_dashboard.domain.interfaces.repositories.product_repository import ProductRepository
from fbc_dashboard.domain.services.calendar import parse_iso_datetime
from fbc_dashboard.domain.services.numbers import validate_number
from fbc_dashboard.domain.services.statistics_engine import compute_stock_from_activities
from fbc_dashboard.domain.services.validation import is_valid_activity, is_valid_activity_type
from fbc_dashboard.domain.value_objects.identifiers import ActivityId, ProductId

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ActivityChanges:
    """Fields to change on an activity.

    Attributes:
        date: New ISO 8601 timestamp.
        type: New activity type.
        quantity: New signed quantity.
        amount: New amount.
        product_id: New product reference.
        note: New note.
        clear_product: Remove the product reference. Ignored when
            ``product_id`` is also set.
    """

    date: str | None = None
    type: ActivityType | None = None
    quantity: float | None = None
    amount: float | None = None
    product_id: ProductId | None = None
    note: str | None = None
    clear_product: bool = False


class UpdateActivityUseCase:
    """Update an activity and recompute the stock it affects.

    Args:
        activity_repo: Activity persistence port.
        product_repo: Product persistence port.

    Returns:
        The updated :class:`Activity` from :meth:`execute`.

    Raises:
        ActivityNotFound: If the activity does not exist.
        BusinessValidationError: If the merged activity breaks a rule.
        StockUpdateFailed: If stock recomputation fails.
    """

    def __init__(self, activity_repo: ActivityRepository, product_repo: ProductRepository) -> None:
        self._activities = activity_repo
        self._products = product_repo

    async def execute(self, activity_id: ActivityId, changes: ActivityChanges) -> Activity:
        """Merge ``changes`` into the stored activity.

        Args:
            activity_id: Activity to update.
            changes: Fields to change.

        Returns:
            The stored, updated activity.

        Raises:
            ActivityNotFound: If the activity does not exist.
            BusinessValidationError: If the merged activity breaks a rule.
            InvalidNumber: If a new quantity or amount is NaN.
            NonFiniteNumber: If a new quantity or amount is infinite.
            StockUpdateFailed: If stock recomputation fails.
        """
        existing = await self._activities.get_by_id(activity_id)
        if existing is None:
            raise ActivityNotFound(
                f"Activity with id {activity_id} not found",
                details={"activity_id": activity_id},
            )

        removes_product = changes.clear_product and changes.product_id is None
        if removes_product and existing.type in PRODUCT_REQUIRED_ACTIVITY_TYPES:
            raise BusinessValidationError(
                f"Cannot remove productId from {existing.type.value} activity type",
                details={"activity_id": activity_id},
            )

        merged = self._merge(existing, changes, removes_product)
        if merged.type in PRODUCT_REQUIRED_ACTIVITY_TYPES and not merged.product_id:
            raise BusinessValidationError(
                f"productId is required for {merged.type.value} activity type",
                details={"activity_id": activity_id},
            )
        if not is_valid_activity(merged):
            raise BusinessValidationError("Activity validation failed")

        affects_stock = (
            merged.quantity != existing.quantity
            or merged.product_id != existing.product_id
            or merged.type != existing.type
        )

        updated = await self._activities.update(merged)
        if not affects_stock:
            logger.info("activity.update.success", extra={"activity_id": activity_id})
            return updated

        affected = [pid for pid in dict.fromkeys((existing.product_id, updated.product_id)) if pid]
        try:
            for product_id in affected:
                await self._resync_stock(product_id)
        except Exception as exc:
            try:
                await self._activities.update(existing)
            except Exception:
                logger.error(
                    "activity.update.rollback_failed",
                    extra={"activity_id": activity_id},
                    exc_info=True,
                )
            raise StockUpdateFailed(
                f"Failed to update product stock for activity: {exc}",
                details={"activity_id": activity_id, "product_ids": affected},
            ) from exc

        logger.info(
            "activity.update.success",
            extra={"activity_id": activity_id, "resynced_products": affected},
        )
        return updated

    @staticmethod
    def _merge(existing: Activity, changes: ActivityChanges, removes_product: bool) -> Activity:
        fields: dict[str, object] = {}
        if changes.date is not None:
            fields["date"] = parse_iso_datetime(require_iso_date(changes.date, "date"))
        if changes.type is not None:
            if not is_valid_activity_type(changes.type):
                raise BusinessValidationError(
                    f"Invalid activity type: {changes.type}", details={"type": str(changes.type)}
                )
            fields["type"] = ActivityType(changes.type)
        if changes.quantity is not None:
            validate_number(changes.quantity, "quantity")
            fields["quantity"] = float(changes.quantity)
        if changes.amount is not None:
            validate_number(changes.amount, "amount")
            fields["amount"] = float(changes.amount)
        if changes.product_id is not None:
            fields["product_id"] = changes.product_id
        elif removes_product:
            fields["product_id"] = None
        if changes.note is not None:
            fields["note"] = changes.note
        return replace(existing, **fields)

    async def _resync_stock(self, product_id: ProductId) -> None:
        history = [a for a in await self._activities.list() if a.product_id == product_id]
        derived = compute_stock_from_activities(history).get(product_id, 0.0)
        product = await self._products.get_by_id(product_id)
        if product is None:
            raise ProductNotFound(
                f"Product with id {product_id} not found", details={"product_id": product_id}
            )
        if derived < 0:
            logger.warning(
                "activity.update.stock_negative",
                extra={
                    "product_id": product_id,
                    "current_stock": product.stock,
                    "derived_stock": derived,
                },
            )
        delta = derived - product.stock
        if delta != 0:
            await self._products.update_stock_atomically(product_id, delta)
