# src/fbc_dashboard/application/schemas/forms/common.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Form field types (Application Layer).

Purpose:
    Reusable annotated field types for form schemas. Each type accepts the
    raw form value (usually a string), validates it and converts it. Failures
    are raised as :class:`pydantic_core.PydanticCustomError` whose error type
    is one of the stable form error keys below, so callers can translate
    errors without parsing messages.

Layer:
    application/schemas/forms
"""

from __future__ import annotations

import re
from typing import Annotated, Any, Final

from pydantic import BaseModel, BeforeValidator, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from fbc_dashboard.domain.enums.product_type import ProductType
from fbc_dashboard.domain.services.numbers import try_parse_number
from fbc_dashboard.domain.services.validation import is_valid_iso8601

# ---------------------------------------------------------------------------
# Error keys
# ---------------------------------------------------------------------------

REQUIRED: Final[str] = "required"
INVALID: Final[str] = "invalid"
MUST_BE_POSITIVE: Final[str] = "must_be_positive"
MUST_BE_NON_NEGATIVE: Final[str] = "must_be_non_negative"
MUST_BE_ZERO: Final[str] = "must_be_zero"

FORM_ERROR_KEYS: Final[frozenset[str]] = frozenset(
    {REQUIRED, INVALID, MUST_BE_POSITIVE, MUST_BE_NON_NEGATIVE, MUST_BE_ZERO}
)

_DIGITS_RE = re.compile(r"^\d+$")


def form_error(key: str, **context: Any) -> PydanticCustomError:
    """Build a custom error whose type and message are both ``key``."""
    return PydanticCustomError(key, key, context or None)


def is_blank(value: Any) -> bool:
    """Return True for ``None`` and whitespace-only strings."""
    return value is None or (isinstance(value, str) and not value.strip())


# ---------------------------------------------------------------------------
# Validators
# ---------------------------------------------------------------------------


def _required_text(value: Any) -> str:
    if is_blank(value):
        raise form_error(REQUIRED)
    if not isinstance(value, str):
        raise form_error(INVALID)
    return value.strip()


def _optional_text(value: Any) -> str | None:
    if is_blank(value):
        return None
    if not isinstance(value, str):
        raise form_error(INVALID)
    return value.strip()


def _number(value: Any) -> float:
    if is_blank(value):
        raise form_error(REQUIRED)
    parsed = try_parse_number(value)
    if parsed is None:
        raise form_error(INVALID)
    return parsed


def _positive_number(value: Any) -> float:
    parsed = _number(value)
    if parsed <= 0:
        raise form_error(MUST_BE_POSITIVE)
    return parsed


def _optional_positive_number(value: Any) -> float | None:
    if is_blank(value):
        return None
    return _positive_number(value)


def _non_negative_number(value: Any) -> float:
    parsed = _number(value)
    if parsed < 0:
        raise form_error(MUST_BE_NON_NEGATIVE)
    return parsed


def _non_zero_number(value: Any) -> float:
    parsed = _number(value)
    if parsed == 0:
        raise form_error(INVALID)
    return parsed


def _zero_amount(value: Any) -> float:
    parsed = _number(value)
    if parsed != 0:
        raise form_error(MUST_BE_ZERO)
    return 0.0


def _iso_date(value: Any) -> str:
    text = _required_text(value)
    if not is_valid_iso8601(text):
        raise form_error(INVALID)
    return text


def _product_type(value: Any) -> ProductType:
    if isinstance(value, ProductType):
        return value
    text = _required_text(value)
    try:
        return ProductType(text)
    except ValueError as exc:
        raise form_error(INVALID) from exc


def _optional_product_type(value: Any) -> ProductType | None:
    if is_blank(value):
        return None
    return _product_type(value)


def _weight(value: Any) -> int | None:
    if is_blank(value):
        return None
    if isinstance(value, bool):
        raise form_error(INVALID)
    if isinstance(value, int):
        grams = value
    elif isinstance(value, str) and _DIGITS_RE.match(value.strip()):
        grams = int(value.strip())
    else:
        raise form_error(INVALID)
    if grams <= 0:
        raise form_error(MUST_BE_POSITIVE)
    return grams


# ---------------------------------------------------------------------------
# Annotated field types
# ---------------------------------------------------------------------------

RequiredText = Annotated[str, BeforeValidator(_required_text)]
OptionalText = Annotated[str | None, BeforeValidator(_optional_text)]
NumberField = Annotated[float, BeforeValidator(_number)]
PositiveNumber = Annotated[float, BeforeValidator(_positive_number)]
OptionalPositiveNumber = Annotated[float | None, BeforeValidator(_optional_positive_number)]
NonNegativeNumber = Annotated[float, BeforeValidator(_non_negative_number)]
NonZeroNumber = Annotated[float, BeforeValidator(_non_zero_number)]
ZeroAmount = Annotated[float, BeforeValidator(_zero_amount)]
IsoDateString = Annotated[str, BeforeValidator(_iso_date)]
ProductTypeField = Annotated[ProductType, BeforeValidator(_product_type)]
OptionalProductTypeField = Annotated[ProductType | None, BeforeValidator(_optional_product_type)]
WeightGrams = Annotated[int | None, BeforeValidator(_weight)]


class BaseForm(BaseModel):
    """Base class for form schemas.

    Notes:
        - Field names are snake_case in Python and camelCase on the wire.
        - Unknown keys are ignored; forms often submit fields belonging to
          other activity types.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
        protected_namespaces=(),
    )


__all__ = [
    "FORM_ERROR_KEYS",
    "INVALID",
    "MUST_BE_NON_NEGATIVE",
    "MUST_BE_POSITIVE",
    "MUST_BE_ZERO",
    "REQUIRED",
    "BaseForm",
    "IsoDateString",
    "NonNegativeNumber",
    "NonZeroNumber",
    "NumberField",
    "OptionalPositiveNumber",
    "OptionalProductTypeField",
    "OptionalText",
    "PositiveNumber",
    "ProductTypeField",
    "RequiredText",
    "WeightGrams",
    "ZeroAmount",
    "form_error",
    "is_blank",
]
