import pytest
from pydantic import ValidationError

from lru_service.config import Settings
from lru_service.main import _allowed_origins


def test_defaults():
    settings = Settings(ENV="development")

    assert settings.cache_capacity >= 1
    assert settings.debug is True


def test_capacity_from_environment(monkeypatch):
    monkeypatch.setenv("CACHE_CAPACITY", "17")

    assert Settings().cache_capacity == 17


def test_zero_capacity_is_rejected():
    with pytest.raises(ValidationError):
        Settings(CACHE_CAPACITY=0)


def test_log_level_is_normalized():
    assert Settings(LOG_LEVEL=" debug ").log_level == "DEBUG"


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        Settings(LOG_LEVEL="chatty")


def test_base_url_trailing_slash_stripped():
    assert Settings(APP_BASE_URL="https://cache.example.com/").app_base_url == "https://cache.example.com"


def test_production_origins_fall_back_to_base_url():
    settings = Settings(ENV="production", APP_BASE_URL="https://cache.example.com")

    assert _allowed_origins(settings) == ["https://cache.example.com"]


def test_configured_origins_are_deduplicated():
    settings = Settings(
        ENV="production",
        CORS_ALLOW_ORIGINS="https://a.example.com, https://a.example.com,https://b.example.com",
    )

    assert _allowed_origins(settings) == ["https://a.example.com", "https://b.example.com"]
