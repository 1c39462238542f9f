"""Unit tests for Settings validation and get_settings caching."""

import pytest
from pydantic import ValidationError

from assignment_cache.core.config import Settings, get_settings


def test_defaults_are_valid(settings: Settings) -> None:
    assert settings.redis_port == 6379
    assert settings.cache_ttl_seconds is None
    assert settings.telemetry_enabled is False


@pytest.mark.parametrize(
    "overrides",
    [
        {"redis_port": 0},
        {"redis_port": 70000},
        {"redis_db": -1},
        {"redis_max_connections": 0},
        {"cache_ttl_seconds": 0},
        {"telemetry_sample_rate": 1.5},
        {"telemetry_exporter": "zipkin"},
        {"telemetry_exporter": "otlp"},
    ],
)
def test_invalid_values_are_rejected(overrides: dict) -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **overrides)


def test_otlp_with_endpoint_is_accepted() -> None:
    settings = Settings(
        _env_file=None,
        telemetry_exporter="otlp",
        telemetry_otlp_endpoint="http://localhost:4317",
    )
    assert settings.telemetry_otlp_endpoint == "http://localhost:4317"


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("REDIS_HOST", "cache.internal")
    monkeypatch.setenv("CACHE_TTL_SECONDS", "300")
    monkeypatch.setenv("REDIS_PASSWORD", "s3cret")
    settings = Settings(_env_file=None)
    assert settings.redis_host == "cache.internal"
    assert settings.cache_ttl_seconds == 300
    assert settings.redis_password.get_secret_value() == "s3cret"
    assert "s3cret" not in repr(settings)


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
