# src/fbc_dashboard/config/settings.py
# Copyright (c) FBC.
# SPDX-License-Identifier: MIT
"""FBC Dashboard Configuration (Pydantic Settings, v2)

Summary:
    Typed, validated configuration for the dashboard back office. Only the
    dependency wiring reads it; use cases receive plain values (thresholds,
    page sizes) through their constructors.

Design:
    - Pydantic v2 BaseSettings with ``extra='forbid'`` to catch unknown keys.
    - Environment variables use the ``FBC_`` prefix (``FBC_LOG_LEVEL``...).
    - Explicit field declarations with constrained types and ranges.
    - Singleton accessor ``get_settings()`` with LRU cache.
"""

from __future__ import annotations

import logging
from enum import Enum
from functools import lru_cache
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Environment(str, Enum):
    """Logical deployment environment."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Typed configuration for the dashboard.

    Attributes:
        environment: Logical deployment environment.
        log_level: Root log level applied by ``configure_root_logging``.
        low_stock_threshold: Products with ``stock`` strictly below this
            value are reported as low stock.
        recent_activities_limit: Size of the "recent activity" feed.
        activities_page_size: Default page size of the activity journal.
        currency: ISO 4217 code used to display amounts.
    """

    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Logical deployment environment.",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Root log level.",
    )
    low_stock_threshold: float = Field(
        default=5,
        ge=0,
        description="Stock level under which a product is reported as low stock.",
    )
    recent_activities_limit: int = Field(
        default=10,
        ge=1,
        le=500,
        description="Number of activities in the recent activity feed.",
    )
    activities_page_size: int = Field(
        default=20,
        ge=1,
        le=500,
        description="Default page size of the activity journal.",
    )
    currency: str = Field(
        default="EUR",
        description="ISO 4217 currency code used to display amounts.",
    )

    model_config = SettingsConfigDict(
        env_prefix="FBC_",
        env_file=".env",
        extra="forbid",
        case_sensitive=False,
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value

    @field_validator("currency")
    @classmethod
    def _validate_currency(cls, value: str) -> str:
        """Require a three-letter upper-case code.

        Raises:
            ValueError: If the code is not three ASCII letters.
        """
        code = value.strip().upper()
        if len(code) != 3 or not code.isascii() or not code.isalpha():
            raise ValueError("currency must be a three-letter ISO 4217 code")
        return code


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return a cached singleton `Settings` instance.

    Returns:
        Settings: Validated application settings.

    Raises:
        RuntimeError: If configuration is invalid.
    """
    try:
        settings = Settings()
    except ValidationError as exc:
        logger.exception("Invalid application configuration")
        raise RuntimeError(f"Invalid configuration: {exc}") from exc
    logger.info(
        "Settings initialized",
        extra={
            "environment": settings.environment.value,
            "log_level": settings.log_level,
            "low_stock_threshold": settings.low_stock_threshold,
            "currency": settings.currency,
        },
    )
    return settings
