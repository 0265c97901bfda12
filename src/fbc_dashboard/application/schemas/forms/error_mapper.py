# src/fbc_dashboard/application/schemas/forms/error_mapper.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Form error mapping (Application Layer).

Purpose:
    Translate a :class:`pydantic.ValidationError` raised by a form schema
    into ``{field: error_key}`` so the presentation layer can look up a
    translated message per field.

Layer:
    application/schemas/forms

Notes:
    - Field paths use the camelCase wire names, joined with ``.``.
    - The leading variant tag that discriminated unions add to error
      locations (``("SALE", "quantity")``) is dropped.
    - Cross-field errors carry their target fields in ``ctx["fields"]``.
    - Errors with no field go under ``"_general"``.
    - When a field has several errors, ``"required"`` wins; otherwise the
      first error is kept.
"""

from __future__ import annotations

from collections.abc import Collection

from pydantic import ValidationError
from pydantic_core import ErrorDetails

from fbc_dashboard.application.schemas.forms.activity_input import ACTIVITY_FORM_TAGS
from fbc_dashboard.application.schemas.forms.common import FORM_ERROR_KEYS, INVALID, REQUIRED

GENERAL_ERROR_FIELD = "_general"

_REQUIRED_TYPES = frozenset({"missing", "union_tag_not_found"})
_TAG_TYPES = frozenset({"union_tag_invalid", "union_tag_not_found"})


def map_error_to_key(error: ErrorDetails) -> str:
    """Return the form error key for one pydantic error.

    Custom form errors keep their key; missing fields map to
    ``"required"``; every other pydantic error maps to ``"invalid"``.
    """
    error_type = error["type"]
    if error_type in FORM_ERROR_KEYS:
        return error_type
    if error_type in _REQUIRED_TYPES:
        return REQUIRED
    return INVALID


def _field_paths(error: ErrorDetails, strip_prefixes: Collection[str]) -> list[str]:
    loc = list(error.get("loc", ()))
    if loc and isinstance(loc[0], str) and loc[0] in strip_prefixes:
        loc = loc[1:]
    if loc:
        return [".".join(str(part) for part in loc)]
    if error["type"] in _TAG_TYPES:
        return ["type"]
    fields = (error.get("ctx") or {}).get("fields")
    if fields:
        return [str(f) for f in fields]
    return [GENERAL_ERROR_FIELD]


def map_validation_error_to_form_errors(
    exc: ValidationError,
    *,
    strip_prefixes: Collection[str] = ACTIVITY_FORM_TAGS,
) -> dict[str, str]:
    """Flatten a validation error into ``{field: error_key}``.

    Args:
        exc: Error raised by a form schema.
        strip_prefixes: Variant tags to drop from the start of error
            locations.

    Returns:
        One error key per failing field.
    """
    result: dict[str, str] = {}
    for error in exc.errors():
        key = map_error_to_key(error)
        for path in _field_paths(error, strip_prefixes):
            current = result.get(path)
            if current is None or (key == REQUIRED and current != REQUIRED):
                result[path] = key
    return result


def get_field_error(exc: ValidationError, path: str) -> str | None:
    """Return the error key for ``path``, or ``None`` if that field passed."""
    return map_validation_error_to_form_errors(exc).get(path)


__all__ = [
    "GENERAL_ERROR_FIELD",
    "get_field_error",
    "map_error_to_key",
    "map_validation_error_to_form_errors",
]
