# src/fbc_dashboard/application/use_cases/activities/add_activity.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Case: Add Activity.

Purpose:
    Validate and record a journal entry together with its stock side
    effects. An activity that moves stock (CREATION, SALE or
    STOCK_CORRECTION with a product and a non-zero quantity) also updates
    the product stock atomically and records exactly one matching stock
    movement.

Layer:
    application/use_cases

Notes:
    The activity, the stock update and the movement are three separate
    repository calls. When a later call fails, earlier effects are
    compensated (activity deleted, stock delta reverted) before
    :class:`StockUpdateFailed` is raised. A failed compensation is logged
    and does not mask the original error.
"""

from __future__ import annotations

import logging

from fbc_dashboard.application.services.id_factory import IdFactory, new_id
from fbc_dashboard.application.services.input_guards import require_iso_date
from fbc_dashboard.domain.entities.activity import Activity, StockMovement
from fbc_dashboard.domain.enums.activity_type import PRODUCT_REQUIRED_ACTIVITY_TYPES, ActivityType
from fbc_dashboard.domain.exceptions.validation import (
    BusinessValidationError,
    ProductNotFound,
    StockUpdateFailed,
)
from fbc_dashboard.domain.interfaces.repositories.activity_repository import ActivityRepository
from fbc_dashboard.domain.interfaces.repositories.product_repository import ProductRepository
from fbc_dashboard.domain.interfaces.repositories.stock_movement_repository import (
    StockMovementRepository,
)
from fbc_dashboard.domain.services.calendar import parse_iso_datetime
from fbc_dashboard.domain.services.numbers import validate_number
from fbc_dashboard.domain.services.stock_rules import (
    StockMovementDraft,
    ensure_movement_matches_activity,
    would_go_negative,
)
from fbc_dashboard.domain.services.validation import is_valid_activity, is_valid_activity_type
from fbc_dashboard.domain.value_objects.identifiers import (
    ActivityId,
    ProductId,
    StockMovementId,
)

logger = logging.getLogger(__name__)


class AddActivityUseCase:
    """Record an activity and its stock side effects.

    Args:
        activity_repo: Activity persistence port.
        product_repo: Product persistence port (atomic stock updates).
        stock_movement_repo: Stock movement persistence port.
        id_factory: Callable returning new identifiers; UUID4 by default.

    Returns:
        The stored :class:`Activity` from :meth:`execute`.

    Raises:
        BusinessValidationError: If the activity breaks a business rule.
        InvalidNumber: If quantity or amount is NaN.
        NonFiniteNumber: If quantity or amount is infinite.
        ProductNotFound: If the referenced product does not exist.
        StockUpdateFailed: If the stock side effects could not be persisted.
    """

    def __init__(
        self,
        activity_repo: ActivityRepository,
        product_repo: ProductRepository,
        stock_movement_repo: StockMovementRepository,
        id_factory: IdFactory = new_id,
    ) -> None:
        self._activities = activity_repo
        self._products = product_repo
        self._movements = stock_movement_repo
        self._new_id = id_factory

    async def execute(
        self,
        *,
        date: str,
        activity_type: ActivityType,
        quantity: float,
        amount: float,
        product_id: ProductId | None = None,
        note: str | None = None,
    ) -> Activity:
        """Validate and persist a new activity.

        Args:
            date: ISO 8601 timestamp.
            activity_type: Activity type.
            quantity: Signed quantity (negative for sales).
            amount: Amount.
            product_id: Product reference; required for SALE and
                STOCK_CORRECTION.
            note: Optional note.

        Returns:
            The stored activity.

        Raises:
            BusinessValidationError: If the activity breaks a business rule.
            ProductNotFound: If the referenced product does not exist.
            StockUpdateFailed: If the stock side effects could not be
                persisted.
        """
        if not is_valid_activity_type(activity_type):
            raise BusinessValidationError(
                f"Invalid activity type: {activity_type}", details={"type": str(activity_type)}
            )
        activity_type = ActivityType(activity_type)
        if activity_type in PRODUCT_REQUIRED_ACTIVITY_TYPES and not product_id:
            raise BusinessValidationError(
                "productId is required for SALE and STOCK_CORRECTION activities",
                details={"type": activity_type.value},
            )
        require_iso_date(date, "date")
        validate_number(quantity, "quantity")
        validate_number(amount, "amount")

        activity = Activity(
            id=ActivityId(self._new_id()),
            date=parse_iso_datetime(date),
            type=activity_type,
            quantity=float(quantity),
            amount=float(amount),
            product_id=product_id or None,
            note=note,
        )
        if not is_valid_activity(activity):
            raise BusinessValidationError("Activity validation failed")
        draft = ensure_movement_matches_activity(activity)

        if draft is not None:
            await self._warn_if_stock_goes_negative(draft)

        created = await self._activities.create(activity)
        if draft is None:
            logger.info(
                "activity.add.success",
                extra={"activity_id": created.id, "type": created.type.value, "stock_moved": False},
            )
            return created

        await self._apply_stock_effects(created, draft)
        logger.info(
            "activity.add.success",
            extra={"activity_id": created.id, "type": created.type.value, "stock_moved": True},
        )
        return created

    async def _warn_if_stock_goes_negative(self, draft: StockMovementDraft) -> None:
        product = await self._products.get_by_id(draft.product_id)
        if product is None:
            raise ProductNotFound(
                f"Product with id {draft.product_id} not found",
                details={"product_id": draft.product_id},
            )
        if would_go_negative(product.stock, draft.quantity):
            logger.warning(
                "activity.add.stock_negative",
                extra={
                    "product_id": draft.product_id,
                    "current_stock": product.stock,
                    "quantity": draft.quantity,
                    "expected_stock": product.stock + draft.quantity,
                },
            )

    async def _apply_stock_effects(self, created: Activity, draft: StockMovementDraft) -> None:
        stock_applied = False
        try:
            await self._products.update_stock_atomically(draft.product_id, draft.quantity)
            stock_applied = True
            await self._movements.create(
                StockMovement(
                    id=StockMovementId(self._new_id()),
                    product_id=draft.product_id,
                    quantity=draft.quantity,
                    source=draft.source,
                )
            )
        except Exception as exc:
            await self._compensate(created, draft, stock_applied)
            raise StockUpdateFailed(
                f"Failed to update product stock for activity: {exc}",
                details={"activity_id": created.id, "product_id": draft.product_id},
            ) from exc

    async def _compensate(
        self, created: Activity, draft: StockMovementDraft, stock_applied: bool
    ) -> None:
        if stock_applied:
            try:
                await self._products.update_stock_atomically(draft.product_id, -draft.quantity)
            except Exception:
                logger.error(
                    "activity.add.stock_revert_failed",
                    extra={"activity_id": created.id, "product_id": draft.product_id},
                    exc_info=True,
                )
        try:
            await self._activities.delete(created.id)
        except Exception:
            logger.error(
                "activity.add.rollback_failed",
                extra={"activity_id": created.id},
                exc_info=True,
            )
