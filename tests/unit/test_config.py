"""Unit tests for Settings."""

import pytest

from agencyrbac.config import Settings, get_settings


def test_defaults(monkeypatch) -> None:
    monkeypatch.delenv("GOD_MODE_EMAILS", raising=False)
    monkeypatch.delenv("STRICT_PERMISSION_KEYS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.strict_permission_keys is True
    assert settings.keycloak_realm == "agency"
    assert settings.god_mode_policy().emails == frozenset()


def test_reads_environment(monkeypatch) -> None:
    monkeypatch.setenv("GOD_MODE_EMAILS", "Root@Agency.Example, ops@agency.example")
    monkeypatch.setenv("STRICT_PERMISSION_KEYS", "false")
    monkeypatch.setenv("ENVIRONMENT", "production")
    settings = Settings(_env_file=None)
    assert settings.god_mode_policy().matches("root@agency.example")
    assert settings.god_mode_policy().matches("ops@agency.example")
    assert settings.strict_permission_keys is False
    assert settings.environment == "production"


def test_cors_origin_list() -> None:
    settings = Settings(_env_file=None, cors_origins="https://a.io, https://b.io,")
    assert settings.cors_origin_list() == ["https://a.io", "https://b.io"]


def test_rejects_unknown_environment() -> None:
    with pytest.raises(ValueError):
        Settings(_env_file=None, environment="qa")


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    assert get_settings() is get_settings()
    get_settings.cache_clear()
