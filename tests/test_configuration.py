"""Mini README: Tests for environment-driven settings."""

from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

from ledgerly.configuration import LedgerlySettings, get_settings


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LEDGERLY_INTERFACE_PORT", "9100")
    monkeypatch.setenv("LEDGERLY_DEFAULT_INCOME_GOAL", "1500.50")
    monkeypatch.setenv("LEDGERLY_LOG_LEVEL", "debug")
    get_settings.cache_clear()
    try:
        settings = get_settings()
        assert settings.interface_port == 9100
        assert settings.default_income_goal == Decimal("1500.50")
        assert settings.log_level == "DEBUG"
    finally:
        get_settings.cache_clear()


def test_negative_goal_is_invalid() -> None:
    with pytest.raises(ValidationError):
        LedgerlySettings(default_income_goal=Decimal("-1"))
