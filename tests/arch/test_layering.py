# tests/arch/test_layering.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Clean Architecture layering guardrail using grimp import graph.

Layer policy for ``fbc_dashboard``:

    domain         -> domain (and the standard library only)
    application    -> domain, application
    adapters       -> domain, application, adapters
    infrastructure -> domain, application, adapters, infrastructure

``config`` and ``dependencies`` sit outside the matrix: they wire the layers
together and may import anything.
"""

from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Final

import grimp
import pytest
from grimp import ImportGraph

ROOT_PACKAGE: Final[str] = "fbc_dashboard"

LAYERS: Final[tuple[str, ...]] = ("domain", "application", "adapters", "infrastructure")

ALLOWED_DEPENDENCIES: Mapping[str, frozenset[str]] = {
    "domain": frozenset({"domain"}),
    "application": frozenset({"domain", "application"}),
    "adapters": frozenset({"domain", "application", "adapters"}),
    "infrastructure": frozenset({"domain", "application", "adapters", "infrastructure"}),
}

# Third-party packages the pure domain must never reach for.
DOMAIN_FORBIDDEN_EXTERNALS: Final[frozenset[str]] = frozenset({"pydantic", "pydantic_settings"})


@lru_cache(maxsize=1)
def _graph() -> ImportGraph:
    return grimp.build_graph(ROOT_PACKAGE, include_external_packages=True)


def _layer_of(module_name: str) -> str | None:
    parts = module_name.split(".")
    if len(parts) < 2 or parts[0] != ROOT_PACKAGE:
        return None
    return parts[1] if parts[1] in LAYERS else None


def _modules_in(layer: str) -> list[str]:
    return sorted(m for m in _graph().modules if _layer_of(m) == layer)


@pytest.mark.parametrize("layer", LAYERS)
def test_layer_imports_only_allowed_layers(layer: str) -> None:
    graph = _graph()
    allowed = ALLOWED_DEPENDENCIES[layer]
    violations = []
    for importer in _modules_in(layer):
        for imported in graph.find_modules_directly_imported_by(importer):
            target = _layer_of(imported)
            if target is not None and target not in allowed:
                violations.append(f"{importer} -> {imported}")
    assert not violations, "Layering violations:\n" + "\n".join(sorted(violations))


def test_domain_does_not_import_third_party_validation_stack() -> None:
    graph = _graph()
    violations = [
        f"{importer} -> {imported}"
        for importer in _modules_in("domain")
        for imported in graph.find_modules_directly_imported_by(importer)
        if imported.split(".")[0] in DOMAIN_FORBIDDEN_EXTERNALS
    ]
    assert not violations, "Domain imports third-party packages:\n" + "\n".join(violations)


def test_every_layer_is_populated() -> None:
    for layer in LAYERS:
        assert _modules_in(layer), f"no modules found for layer {layer!r}"
