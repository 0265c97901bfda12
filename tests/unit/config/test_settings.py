# tests/unit/config/test_settings.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""Settings loading from the environment."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from pydantic import ValidationError

from fbc_dashboard.config.settings import Environment, Settings, get_settings


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    monkeypatch.chdir(tmp_path)
    for key in (
        "FBC_ENVIRONMENT",
        "FBC_LOG_LEVEL",
        "FBC_LOW_STOCK_THRESHOLD",
        "FBC_CURRENCY",
    ):
        monkeypatch.delenv(key, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults() -> None:
    settings = Settings()

    assert settings.environment is Environment.DEVELOPMENT
    assert settings.log_level == "INFO"
    assert settings.low_stock_threshold == 5
    assert settings.recent_activities_limit == 10
    assert settings.activities_page_size == 20
    assert settings.currency == "EUR"


def test_environment_variables_use_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("FBC_ENVIRONMENT", "production")
    monkeypatch.setenv("FBC_LOG_LEVEL", "debug")
    monkeypatch.setenv("FBC_LOW_STOCK_THRESHOLD", "2.5")
    monkeypatch.setenv("FBC_CURRENCY", " usd ")

    settings = Settings()

    assert settings.environment is Environment.PRODUCTION
    assert settings.log_level == "DEBUG"
    assert settings.low_stock_threshold == 2.5
    assert settings.currency == "USD"


@pytest.mark.parametrize(
    "overrides",
    [
        {"currency": "EURO"},
        {"low_stock_threshold": -1},
        {"activities_page_size": 0},
        {"log_level": "LOUD"},
        {"unknown_key": 1},
    ],
)
def test_invalid_values_are_rejected(overrides: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        Settings(**overrides)


def test_get_settings_is_cached_and_wraps_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    assert get_settings() is get_settings()

    get_settings.cache_clear()
    monkeypatch.setenv("FBC_CURRENCY", "12")
    with pytest.raises(RuntimeError, match="Invalid configuration"):
        get_settings()
