# src/fbc_dashboard/application/schemas/forms/activity_input.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Activity Form Schemas (Application Layer).

Purpose:
    Validate a submitted activity form. The ``type`` field selects one of
    four variants, each with its own required fields:

        CREATION          product selection, quantity > 0, amount == 0
        SALE              product selection, quantity > 0, amount > 0
        STOCK_CORRECTION  product selection, addToStock and/or
                          reduceFromStock (each > 0), amount == 0
        OTHER             optional product selection (all or nothing),
                          quantity != 0, amount > 0

    A product selection is the four fields ``productId``, ``productType``,
    ``modelId`` and ``colorisId``.

Layer:
    application/schemas/forms
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Annotated, Any, Literal

from pydantic import Field, TypeAdapter, model_validator

from fbc_dashboard.application.schemas.forms.common import (
    REQUIRED,
    BaseForm,
    IsoDateString,
    NonZeroNumber,
    OptionalPositiveNumber,
    OptionalProductTypeField,
    OptionalText,
    PositiveNumber,
    ProductTypeField,
    RequiredText,
    ZeroAmount,
    form_error,
)
from fbc_dashboard.domain.enums.activity_type import ActivityType

PRODUCT_SELECTION_FIELDS: tuple[str, ...] = ("productId", "productType", "modelId", "colorisId")
STOCK_CORRECTION_FIELDS: tuple[str, ...] = ("addToStock", "reduceFromStock")


class _ActivityFormBase(BaseForm, ABC):
    """Fields shared by every activity variant.

    Attributes:
        date: ISO 8601 timestamp of the activity.
        note: Optional free text.
    """

    date: IsoDateString
    note: OptionalText = None

    @property
    def activity_type(self) -> ActivityType:
        """Activity type selected by the form."""
        return ActivityType(getattr(self, "type"))

    @property
    @abstractmethod
    def signed_quantity(self) -> float:
        """Quantity to store on the activity, with the journal sign convention."""

    def as_activity_fields(self) -> dict[str, Any]:
        """Return keyword arguments for :class:`AddActivityUseCase.execute`."""
        return {
            "date": self.date,
            "activity_type": self.activity_type,
            "quantity": self.signed_quantity,
            "amount": getattr(self, "amount"),
            "product_id": getattr(self, "product_id", None),
            "note": self.note,
        }


class _RequiredSelection(BaseForm):
    product_id: RequiredText
    product_type: ProductTypeField
    model_id: RequiredText
    coloris_id: RequiredText


class CreationActivityForm(_ActivityFormBase, _RequiredSelection):
    """Creation of new units in the workshop.

    Attributes:
        quantity: Units created (> 0).
        amount: Always ``0``.
    """

    type: Literal["CREATION"]
    quantity: PositiveNumber
    amount: ZeroAmount

    @property
    def signed_quantity(self) -> float:
        """Created units are added to stock."""
        return self.quantity


class SaleActivityForm(_ActivityFormBase, _RequiredSelection):
    """Sale of units.

    Attributes:
        quantity: Units sold, entered as a positive number.
        amount: Sale amount (> 0).
    """

    type: Literal["SALE"]
    quantity: PositiveNumber
    amount: PositiveNumber

    @property
    def signed_quantity(self) -> float:
        """Sold units leave stock, so the entered quantity is negated."""
        return -self.quantity


class StockCorrectionActivityForm(_ActivityFormBase, _RequiredSelection):
    """Manual stock correction.

    Attributes:
        add_to_stock: Units to add (> 0), optional.
        reduce_from_stock: Units to remove (> 0), optional.
        amount: Always ``0``.

    At least one of ``add_to_stock`` and ``reduce_from_stock`` is required.
    """

    type: Literal["STOCK_CORRECTION"]
    add_to_stock: OptionalPositiveNumber = None
    reduce_from_stock: OptionalPositiveNumber = None
    amount: ZeroAmount

    @model_validator(mode="after")
    def _require_a_correction(self) -> StockCorrectionActivityForm:
        if self.add_to_stock is None and self.reduce_from_stock is None:
            raise form_error(REQUIRED, fields=STOCK_CORRECTION_FIELDS)
        return self

    @property
    def signed_quantity(self) -> float:
        """Net correction: units added minus units removed."""
        return (self.add_to_stock or 0.0) - (self.reduce_from_stock or 0.0)


class OtherActivityForm(_ActivityFormBase):
    """Any other journal entry.

    Attributes:
        product_id: Optional product.
        product_type: Optional product category.
        model_id: Optional model.
        coloris_id: Optional coloris.
        quantity: Any non-zero number.
        amount: Amount (> 0).
    """

    type: Literal["OTHER"]
    product_id: OptionalText = None
    product_type: OptionalProductTypeField = None
    model_id: OptionalText = None
    coloris_id: OptionalText = None
    quantity: NonZeroNumber
    amount: PositiveNumber

    @model_validator(mode="after")
    def _selection_all_or_nothing(self) -> OtherActivityForm:
        selection = (self.product_id, self.product_type, self.model_id, self.coloris_id)
        provided = sum(1 for value in selection if value is not None)
        if 0 < provided < len(selection):
            raise form_error(REQUIRED, fields=("productId",))
        return self

    @property
    def signed_quantity(self) -> float:
        """Quantity as entered."""
        return self.quantity


ActivityForm = Annotated[
    CreationActivityForm | SaleActivityForm | StockCorrectionActivityForm | OtherActivityForm,
    Field(discriminator="type"),
]

_ACTIVITY_FORM_ADAPTER: TypeAdapter[ActivityForm] = TypeAdapter(ActivityForm)

ACTIVITY_FORM_TAGS: frozenset[str] = frozenset(t.value for t in ActivityType)


def parse_activity_form(payload: dict[str, Any]) -> ActivityForm:
    """Validate a raw activity form payload.

    Args:
        payload: Form values keyed by camelCase field names.

    Returns:
        The variant matching ``payload["type"]``.

    Raises:
        pydantic.ValidationError: If any rule fails. Use
            :func:`fbc_dashboard.application.schemas.forms.error_mapper.map_validation_error_to_form_errors`
            to obtain ``{field: error_key}``.
    """
    return _ACTIVITY_FORM_ADAPTER.validate_python(payload)


__all__ = [
    "ACTIVITY_FORM_TAGS",
    "PRODUCT_SELECTION_FIELDS",
    "STOCK_CORRECTION_FIELDS",
    "ActivityForm",
    "CreationActivityForm",
    "OtherActivityForm",
    "SaleActivityForm",
    "StockCorrectionActivityForm",
    "parse_activity_form",
]
