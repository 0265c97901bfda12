# src/fbc_dashboard/domain/exceptions/validation.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Business Rule and Lookup Exceptions.

Synopsis:
    Exceptions raised by use cases when a business rule fails, when a
    referenced row does not exist, or when persisting the stock side effects
    of an activity fails.

Layer:
    domain/exceptions
"""

from __future__ import annotations

from fbc_dashboard.domain.exceptions.base import DomainError


class BusinessValidationError(DomainError):
    """A business rule rejected the requested operation.

    Typical causes:
        * SALE or STOCK_CORRECTION activity without a product
        * Malformed ISO 8601 date or ``YYYY-MM`` month
        * Negative or non-finite cost values
        * Stock movement whose sign does not match its source

    Attributes:
        code: Stable, machine-readable error code.
    """

    code = "VALIDATION_ERROR"


class UnknownMovementSource(BusinessValidationError):
    """A stock movement source outside the closed set was supplied.

    Attributes:
        code: Stable, machine-readable error code.
    """

    code = "UNKNOWN_SOURCE"


class DuplicateCatalogEntry(BusinessValidationError):
    """A product model or coloris with the same natural key already exists.

    Attributes:
        code: Stable, machine-readable error code.
    """

    code = "DUPLICATE_CATALOG_ENTRY"


class NotFound(DomainError):
    """Base for missing-row errors.

    Attributes:
        code: Stable, machine-readable error code.
    """

    code = "NOT_FOUND"


class ProductNotFound(NotFound):
    """Referenced product does not exist.

    Attributes:
        code: Stable, machine-readable error code.
    """

    code = "PRODUCT_NOT_FOUND"


class ProductModelNotFound(NotFound):
    """Referenced product model does not exist.

    Attributes:
        code: Stable, machine-readable error code.
    """

    code = "PRODUCT_MODEL_NOT_FOUND"


class ActivityNotFound(NotFound):
    """Referenced activity does not exist.

    Attributes:
        code: Stable, machine-readable error code.
    """

    code = "ACTIVITY_NOT_FOUND"


class StockUpdateFailed(DomainError):
    """Stock side effects of an activity could not be persisted.

    Raised after the compensating rollback has been attempted. The original
    failure is chained as ``__cause__``.

    Attributes:
        code: Stable, machine-readable error code.
    """

    code = "STOCK_UPDATE_FAILED"
