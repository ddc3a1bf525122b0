"""
Unit Tests for Settings
"""

import pytest
from pydantic import ValidationError

from printflow.config.settings import Settings, get_settings, reset_settings


class TestSettings:
    """Tests for environment-driven configuration"""

    def test_defaults(self):
        settings = Settings()

        assert settings.FALLBACK_MARGIN_PCT == 35.0
        assert settings.PRICING_DEBOUNCE_MS == 300
        assert settings.pricing_debounce_seconds == 0.3
        assert settings.AUTH_BYPASS_ENABLED is False

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("ORDER_API_URL", "http://orders.internal/")
        monkeypatch.setenv("PRICING_DEBOUNCE_MS", "0")

        settings = Settings()

        assert settings.ORDER_API_URL == "http://orders.internal"
        assert settings.pricing_debounce_seconds == 0

    @pytest.mark.parametrize(
        "overrides",
        [
            {"PRICING_DEBOUNCE_MS": -1},
            {"FALLBACK_MARGIN_PCT": 120},
            {"LOG_LEVEL": "chatty"},
            {"CURRENCY": "DOLLARS"},
        ],
    )
    def test_rejects_invalid_values(self, overrides):
        with pytest.raises(ValidationError):
            Settings(**overrides)

    def test_auth_bypass_requires_owner(self):
        with pytest.raises(ValidationError):
            Settings(AUTH_BYPASS_ENABLED=True)

        settings = Settings(AUTH_BYPASS_ENABLED=True, DEV_OWNER_ID="owner-1")
        assert settings.DEV_OWNER_ID == "owner-1"

    def test_normalizes_case(self):
        settings = Settings(LOG_LEVEL="debug", CURRENCY="eur")

        assert settings.LOG_LEVEL == "DEBUG"
        assert settings.CURRENCY == "EUR"

    @pytest.mark.parametrize(
        ("environment", "debug", "expected"),
        [("development", False, True), ("production", False, False), ("production", True, True)],
    )
    def test_is_development(self, environment, debug, expected):
        assert Settings(ENVIRONMENT=environment, DEBUG=debug).is_development is expected

    def test_singleton_and_reset(self):
        first = get_settings()
        assert get_settings() is first

        reset_settings()
        assert get_settings() is not first
