"""Unit tests that do not require a running API or external services."""
import pytest
from app.config import settings


def test_settings_load():
    """Settings load from environment (e.g. CI env vars)."""
    assert settings.API_V1_PREFIX == "/api/v1"
    assert settings.APP_NAME == "Domain Learning Backend"


def test_environment_flag():
    """Environment flags reflect ENVIRONMENT value."""
    # In CI we set ENVIRONMENT=test
    assert settings.ENVIRONMENT.lower() in ("development", "test", "production")
    assert settings.is_development == (settings.ENVIRONMENT.lower() == "development")
    assert settings.is_production == (settings.ENVIRONMENT.lower() == "production")


def test_feed_and_leaderboard_defaults():
    assert settings.NOTIFICATION_FEED_LIMIT == 20
    assert settings.LEADERBOARD_NA_DOMAIN == "N/A"


def test_cors_lists_parsed():
    assert isinstance(settings.ALLOWED_ORIGINS, list)
    assert "PUT" in settings.ALLOWED_METHODS
