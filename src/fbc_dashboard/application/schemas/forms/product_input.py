# src/fbc_dashboard/application/schemas/forms/product_input.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Product Form Schema (Application Layer).

Purpose:
    Validate a submitted product form.

Layer:
    application/schemas/forms
"""

from __future__ import annotations

from typing import Any

from fbc_dashboard.application.schemas.forms.common import (
    BaseForm,
    NonNegativeNumber,
    PositiveNumber,
    ProductTypeField,
    RequiredText,
    WeightGrams,
)


class ProductForm(BaseForm):
    """Product creation/edition form.

    Attributes:
        type: Product category.
        model_id: Catalog model.
        coloris_id: Catalog coloris.
        unit_cost: Unit material cost (> 0).
        sale_price: Unit sale price (> 0).
        stock: Units on hand (>= 0).
        weight: Optional weight in grams. Blank means absent; otherwise the
            value must be a positive whole number written with digits only.
    """

    type: ProductTypeField
    model_id: RequiredText
    coloris_id: RequiredText
    unit_cost: PositiveNumber
    sale_price: PositiveNumber
    stock: NonNegativeNumber
    weight: WeightGrams = None


def parse_product_form(payload: dict[str, Any]) -> ProductForm:
    """Validate a raw product form payload.

    Raises:
        pydantic.ValidationError: If any rule fails.
    """
    return ProductForm.model_validate(payload)


__all__ = ["ProductForm", "parse_product_form"]
