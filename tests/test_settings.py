"""Tests for Accountkit settings."""

import pydantic
import pytest

from accountkit import settings as settings_module
from accountkit.settings import AccountkitSettings, get_settings, reload_settings


def test_defaults():
    settings = AccountkitSettings(_env_file=None)

    assert settings.log_level == "INFO"
    assert settings.fallback_group == "users"
    assert settings.missing_group_policy == "fallback"


def test_environment_overrides(monkeypatch):
    """Test AK_ prefixed environment variables are picked up."""
    monkeypatch.setenv("AK_FALLBACK_GROUP", "staff")
    monkeypatch.setenv("AK_MISSING_GROUP_POLICY", "strict")

    settings = AccountkitSettings(_env_file=None)

    assert settings.fallback_group == "staff"
    assert settings.missing_group_policy == "strict"


def test_invalid_policy(monkeypatch):
    monkeypatch.setenv("AK_MISSING_GROUP_POLICY", "lenient")

    with pytest.raises(pydantic.ValidationError):
        AccountkitSettings(_env_file=None)


def test_empty_fallback_group_rejected():
    with pytest.raises(pydantic.ValidationError):
        AccountkitSettings(_env_file=None, fallback_group="")


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setattr(settings_module, "_settings", None)

    assert get_settings() is get_settings()


def test_reload_settings(monkeypatch):
    monkeypatch.setattr(settings_module, "_settings", None)
    first = get_settings()

    monkeypatch.setenv("AK_FALLBACK_GROUP", "nogroup")
    reloaded = reload_settings()

    assert reloaded is not first
    assert reloaded.fallback_group == "nogroup"
    assert get_settings() is reloaded
