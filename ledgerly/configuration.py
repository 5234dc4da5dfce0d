"""Mini README: Centralised configuration models and helpers for Ledgerly.

Structure:
    * LedgerlySettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``LEDGERLY_*`` environment variables (or a
    local ``.env`` file), pick the service port, and choose the default
    income goal shown when the dashboard first loads.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class LedgerlySettings(BaseSettings):
    """Runtime configuration for the Ledgerly dashboard."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    interface_host: str = Field(
        "0.0.0.0",
        description="Network interface for the dashboard service to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Default port the dashboard service exposes.",
        ge=1,
        le=65535,
    )
    log_level: str = Field(
        "INFO",
        description="Root logging level used by the CLI when starting the server.",
    )
    currency_symbol: str = Field(
        "$",
        description="Symbol prefixed to formatted amounts in the dashboard.",
    )
    default_income_goal: Decimal = Field(
        Decimal("0"),
        description="Monthly income goal applied to fresh sessions. Zero means unset.",
        ge=0,
    )
    load_demo_data: bool = Field(
        False,
        description="Seed new sessions with the sample transactions.",
    )

    class Config:
        env_prefix = "LEDGERLY_"
        env_file = ".env"
        case_sensitive = False

    @validator("log_level", pre=True)
    def _normalise_level(cls, value: str) -> str:
        """Store log levels upper-cased so they map onto logging constants."""

        return str(value).strip().upper()


@lru_cache()
def get_settings() -> LedgerlySettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return LedgerlySettings()
