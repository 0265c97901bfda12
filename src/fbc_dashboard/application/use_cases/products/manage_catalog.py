# src/fbc_dashboard/application/use_cases/products/manage_catalog.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use Cases: Product Catalog.

Purpose:
    Manage the product catalog: product models (unique name per product
    type) and their coloris (unique label per model).

Layer:
    application/use_cases

Notes:
    Uniqueness is compared on trimmed, case-insensitive labels.
"""

from __future__ import annotations

import logging

from fbc_dashboard.application.services.id_factory import IdFactory, new_id
from fbc_dashboard.domain.entities.product import ProductColoris, ProductModel
from fbc_dashboard.domain.enums.product_type import ProductType
from fbc_dashboard.domain.exceptions.validation import (
    BusinessValidationError,
    DuplicateCatalogEntry,
    ProductModelNotFound,
)
from fbc_dashboard.domain.interfaces.repositories.product_catalog_repository import (
    ProductCatalogRepository,
)
from fbc_dashboard.domain.value_objects.identifiers import ProductColorisId, ProductModelId

logger = logging.getLogger(__name__)


def _label_key(label: str) -> str:
    return label.strip().casefold()


class ListProductModelsUseCase:
    """List product models, optionally for one product type.

    Args:
        catalog_repo: Catalog persistence port.

    Returns:
        List of :class:`ProductModel` from :meth:`execute`.
    """

    def __init__(self, catalog_repo: ProductCatalogRepository) -> None:
        self._catalog = catalog_repo

    async def execute(self, product_type: ProductType | None = None) -> list[ProductModel]:
        """Return every model, or the models of ``product_type``."""
        if product_type is None:
            return list(await self._catalog.list_models())
        return list(await self._catalog.list_models_by_type(ProductType(product_type)))


class ListProductColorisUseCase:
    """List coloris, optionally for one product model.

    Args:
        catalog_repo: Catalog persistence port.

    Returns:
        List of :class:`ProductColoris` from :meth:`execute`.
    """

    def __init__(self, catalog_repo: ProductCatalogRepository) -> None:
        self._catalog = catalog_repo

    async def execute(self, model_id: ProductModelId | None = None) -> list[ProductColoris]:
        """Return every coloris, or the coloris of ``model_id``."""
        if model_id is None:
            return list(await self._catalog.list_coloris())
        return list(await self._catalog.list_coloris_by_model(model_id))


class CreateProductModelUseCase:
    """Add a product model to the catalog.

    Args:
        catalog_repo: Catalog persistence port.
        id_factory: Callable returning new identifiers; UUID4 by default.

    Returns:
        The stored :class:`ProductModel` from :meth:`execute`.

    Raises:
        BusinessValidationError: If the name is blank or the type unknown.
        DuplicateCatalogEntry: If the type already has a model with that name.
    """

    def __init__(
        self, catalog_repo: ProductCatalogRepository, id_factory: IdFactory = new_id
    ) -> None:
        self._catalog = catalog_repo
        self._new_id = id_factory

    async def execute(self, product_type: ProductType, name: str) -> ProductModel:
        """Validate and persist a new model.

        Args:
            product_type: Category of the model.
            name: Display name.

        Returns:
            The stored model.

        Raises:
            BusinessValidationError: If the name is blank or the type unknown.
            DuplicateCatalogEntry: If the name is taken within the type.
        """
        try:
            resolved_type = ProductType(product_type)
        except ValueError as exc:
            raise BusinessValidationError(
                f"Invalid product type: {product_type}", details={"type": str(product_type)}
            ) from exc
        if not name or not name.strip():
            raise BusinessValidationError("name must be non-empty", details={"field": "name"})

        existing = await self._catalog.list_models_by_type(resolved_type)
        if any(_label_key(m.name) == _label_key(name) for m in existing):
            raise DuplicateCatalogEntry(
                f"A {resolved_type.value} model named {name.strip()!r} already exists",
                details={"type": resolved_type.value, "name": name.strip()},
            )
        created = await self._catalog.create_model(
            ProductModel(id=ProductModelId(self._new_id()), type=resolved_type, name=name.strip())
        )
        logger.info(
            "catalog.model.created",
            extra={"model_id": created.id, "type": resolved_type.value},
        )
        return created


class CreateProductColorisUseCase:
    """Add a coloris to an existing product model.

    Args:
        catalog_repo: Catalog persistence port.
        id_factory: Callable returning new identifiers; UUID4 by default.

    Returns:
        The stored :class:`ProductColoris` from :meth:`execute`.

    Raises:
        BusinessValidationError: If the label is blank.
        ProductModelNotFound: If the model does not exist.
        DuplicateCatalogEntry: If the model already has that coloris.
    """

    def __init__(
        self, catalog_repo: ProductCatalogRepository, id_factory: IdFactory = new_id
    ) -> None:
        self._catalog = catalog_repo
        self._new_id = id_factory

    async def execute(self, model_id: ProductModelId, coloris: str) -> ProductColoris:
        """Validate and persist a new coloris.

        Args:
            model_id: Owning model.
            coloris: Coloris label.

        Returns:
            The stored coloris.

        Raises:
            BusinessValidationError: If the label is blank.
            ProductModelNotFound: If the model does not exist.
            DuplicateCatalogEntry: If the label is taken within the model.
        """
        if not coloris or not coloris.strip():
            raise BusinessValidationError(
                "coloris must be non-empty", details={"field": "coloris"}
            )
        if await self._catalog.get_model_by_id(model_id) is None:
            raise ProductModelNotFound(
                f"Product model with id {model_id} not found", details={"model_id": model_id}
            )
        existing = await self._catalog.list_coloris_by_model(model_id)
        if any(_label_key(c.coloris) == _label_key(coloris) for c in existing):
            raise DuplicateCatalogEntry(
                f"Coloris {coloris.strip()!r} already exists for this model",
                details={"model_id": model_id, "coloris": coloris.strip()},
            )
        created = await self._catalog.create_coloris(
            ProductColoris(
                id=ProductColorisId(self._new_id()), model_id=model_id, coloris=coloris.strip()
            )
        )
        logger.info(
            "catalog.coloris.created",
            extra={"coloris_id": created.id, "model_id": model_id},
        )
        return created
