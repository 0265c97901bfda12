# tests/unit/application/use_cases/test_manage_catalog.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Unit tests for product model and coloris management."""

from __future__ import annotations

import itertools

import pytest

from fbc_dashboard.application.services.id_factory import IdFactory
from fbc_dashboard.application.use_cases.products.manage_catalog import (
    CreateProductColorisUseCase,
    CreateProductModelUseCase,
    ListProductColorisUseCase,
    ListProductModelsUseCase,
)
from fbc_dashboard.domain.enums.product_type import ProductType
from fbc_dashboard.domain.exceptions.validation import (
    BusinessValidationError,
    DuplicateCatalogEntry,
    ProductModelNotFound,
)
from fbc_dashboard.domain.value_objects.identifiers import ProductModelId


def _ids(prefix: str) -> IdFactory:
    counter = itertools.count(1)
    return lambda: f"{prefix}{next(counter)}"


@pytest.mark.asyncio
async def test_models_are_listed_by_type(catalog_repo) -> None:
    create = CreateProductModelUseCase(catalog_repo, id_factory=_ids("M"))
    await create.execute(ProductType.SAC_BANANE, "  Classique ")
    await create.execute(ProductType.TROUSSE_ZIPPEE, "Mini")

    models = await ListProductModelsUseCase(catalog_repo).execute(ProductType.SAC_BANANE)
    every = await ListProductModelsUseCase(catalog_repo).execute()

    assert [(m.id, m.name) for m in models] == [("M1", "Classique")]
    assert len(every) == 2


@pytest.mark.asyncio
async def test_model_names_are_unique_per_type_ignoring_case(catalog_repo) -> None:
    create = CreateProductModelUseCase(catalog_repo)
    await create.execute(ProductType.SAC_BANANE, "Classique")

    with pytest.raises(DuplicateCatalogEntry):
        await create.execute(ProductType.SAC_BANANE, " classique")
    # Same name under another type is fine.
    await create.execute(ProductType.POCHETTE_VOLANTS, "Classique")


@pytest.mark.asyncio
async def test_model_rejects_blank_name_and_unknown_type(catalog_repo) -> None:
    create = CreateProductModelUseCase(catalog_repo)

    with pytest.raises(BusinessValidationError, match="name"):
        await create.execute(ProductType.SAC_BANANE, "   ")
    with pytest.raises(BusinessValidationError, match="Invalid product type"):
        await create.execute("CHAPEAU", "Feutre")  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_coloris_lifecycle(catalog_repo) -> None:
    model = await CreateProductModelUseCase(catalog_repo, id_factory=lambda: "M1").execute(
        ProductType.SAC_BANANE, "Classique"
    )
    create = CreateProductColorisUseCase(catalog_repo, id_factory=_ids("C"))

    bleu = await create.execute(model.id, "Bleu ")
    await create.execute(model.id, "Rouge")

    assert bleu.coloris == "Bleu"
    listed = await ListProductColorisUseCase(catalog_repo).execute(model.id)
    assert [c.coloris for c in listed] == ["Bleu", "Rouge"]
    assert await ListProductColorisUseCase(catalog_repo).execute(ProductModelId("other")) == []

    with pytest.raises(DuplicateCatalogEntry):
        await create.execute(model.id, "BLEU")


@pytest.mark.asyncio
async def test_coloris_requires_existing_model_and_label(catalog_repo) -> None:
    create = CreateProductColorisUseCase(catalog_repo)

    with pytest.raises(BusinessValidationError, match="coloris"):
        await create.execute(ProductModelId("M1"), "")
    with pytest.raises(ProductModelNotFound):
        await create.execute(ProductModelId("M404"), "Vert")
