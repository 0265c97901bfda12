# tests/arch/test_use_case_conventions.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Use case conventions.

Every module under ``application/use_cases`` must:
    * have a unit test module ``tests/unit/application/use_cases/test_<name>.py``;
    * expose ``*UseCase`` classes with Google-style docstrings and an async
      ``execute`` method.
"""

from __future__ import annotations

import importlib
import inspect
import re
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]
SRC_ROOT = PROJECT_ROOT / "src" / "fbc_dashboard"
USE_CASES_ROOT = SRC_ROOT / "application" / "use_cases"
USE_CASE_TESTS_ROOT = PROJECT_ROOT / "tests" / "unit" / "application" / "use_cases"

GOOGLE_STYLE_RE = re.compile(r"\b(Args|Returns|Raises):", re.MULTILINE)


def _use_case_modules() -> list[tuple[str, Path]]:
    modules = []
    for path in sorted(USE_CASES_ROOT.rglob("*.py")):
        if path.name == "__init__.py":
            continue
        rel = path.relative_to(SRC_ROOT)
        modules.append(("fbc_dashboard." + ".".join(rel.with_suffix("").parts), path))
    return modules


def test_use_case_modules_exist() -> None:
    assert _use_case_modules()


def test_use_cases_have_execute_and_tests_and_docstrings() -> None:
    violations: list[str] = []

    for module_name, path in _use_case_modules():
        module = importlib.import_module(module_name)

        expected_test = USE_CASE_TESTS_ROOT / f"test_{path.stem}.py"
        if not expected_test.exists():
            violations.append(f"{module_name}: missing unit test module {expected_test.name}")

        use_cases = [
            (name, obj)
            for name, obj in inspect.getmembers(module, inspect.isclass)
            if obj.__module__ == module.__name__ and name.endswith("UseCase")
        ]
        if not use_cases:
            violations.append(f"{module_name}: defines no *UseCase class")

        for name, obj in use_cases:
            if not GOOGLE_STYLE_RE.search(inspect.getdoc(obj) or ""):
                violations.append(f"{module_name}.{name}: missing Args/Returns/Raises docstring")
            execute = getattr(obj, "execute", None)
            if execute is None or not inspect.iscoroutinefunction(execute):
                violations.append(f"{module_name}.{name}: execute(...) must be async")

    assert not violations, "Use case convention violations:\n" + "\n".join(violations)
