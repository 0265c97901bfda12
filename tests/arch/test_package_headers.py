# tests/arch/test_package_headers.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Package header conventions.

Every ``__init__.py`` under ``src/fbc_dashboard`` starts with its path
comment and the license lines, followed by a module docstring.
"""

from __future__ import annotations

import ast
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[2]
SRC_ROOT = PROJECT_ROOT / "src" / "fbc_dashboard"

PACKAGE_INITS = sorted(SRC_ROOT.rglob("__init__.py"))


def test_package_inits_exist() -> None:
    assert PACKAGE_INITS


@pytest.mark.parametrize("path", PACKAGE_INITS, ids=lambda p: str(p.relative_to(SRC_ROOT)))
def test_package_init_has_header_and_docstring(path: Path) -> None:
    source = path.read_text(encoding="utf-8")
    rel = path.relative_to(PROJECT_ROOT).as_posix()

    assert source.splitlines()[:3] == [
        f"# {rel}",
        "# Copyright (c) FBC.",
        "# SPDX-License-Identifier: MIT",
    ]
    assert ast.get_docstring(ast.parse(source))


def test_config_package_reexports_settings() -> None:
    from fbc_dashboard.config import Settings, get_settings
    from fbc_dashboard.config.settings import Settings as ModuleSettings

    assert Settings is ModuleSettings
    assert callable(get_settings)
